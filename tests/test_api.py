from urllib.parse import parse_qs, urlsplit

import pytest
from fastapi.testclient import TestClient

from backend.app.dependencies import get_data_source, get_geocoder
from backend.main import app
from recruit360.datasource import SnapshotDataSource, StaticDataSource
from recruit360.exceptions import GeocodeError, LocationNotFoundError
from recruit360.geocode import GeocodeResult
from recruit360.models import Contact

from conftest import make_program


class StubGeocoder:
    def geocode(self, query):
        if query == "Atlantis":
            raise LocationNotFoundError("Location not found")
        if query == "offline":
            raise GeocodeError("Geocoding failed")
        return GeocodeResult(lat=34.05, lng=-118.24, label="Los Angeles, Los Angeles County")


@pytest.fixture
def programs(sample_programs):
    club = make_program(
        "Surf SC",
        division="ECNL",
        state="CA",
        conference="California (South & North)",
        region="West",
        lat=32.9,
        lng=-117.1,
        coaches=(Contact("Contact", "Club Contact", "info@surf.example"),),
    )
    return sample_programs + [club]


@pytest.fixture
def client(programs):
    app.dependency_overrides[get_data_source] = lambda: StaticDataSource(programs)
    app.dependency_overrides[get_geocoder] = lambda: StubGeocoder()
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_list_programs_defaults_to_d1(client):
    resp = client.get("/programs/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 4
    assert [p["name"] for p in body["results"]] == [
        "Alpha State",
        "Beta College",
        "Delta University",
        "Epsilon College",
    ]
    assert body["facets"]["conferences"] == ["Empire", "Pac West"]
    assert body["facets"]["states"] == ["CA", "NY", "OH"]
    assert body["facets"]["state_labels"] == {"CA": "California", "NY": "New York", "OH": "Ohio"}
    assert body["location_search"] is None


def test_list_programs_with_facets(client):
    resp = client.get("/programs/", params={"division": ["D1", "D2"], "region": "Southwest"})
    body = resp.json()
    assert [p["name"] for p in body["results"]] == ["Gamma Tech"]
    assert body["facets"]["states"] == ["TX"]

    resp = client.get("/programs/", params={"state": "ny"})
    assert [p["name"] for p in resp.json()["results"]] == ["Beta College"]


def test_list_programs_radius_search(client):
    resp = client.get("/programs/", params={"lat": 34.0, "lng": -118.2, "radius_miles": 100, "label": "LA"})
    body = resp.json()
    assert [p["name"] for p in body["results"]] == ["Alpha State"]
    assert body["results"][0]["distance_miles"] == 0
    assert body["location_search"]["label"] == "LA"
    assert body["location_search"]["radius_meters"] == pytest.approx(160934.0)


def test_list_programs_validation(client):
    assert client.get("/programs/", params={"division": "ECNL"}).status_code == 422
    assert client.get("/programs/", params={"lat": 34.0}).status_code == 422
    assert client.get("/programs/", params={"lat": 34.0, "lng": -118.2, "radius_miles": 0}).status_code == 422


def test_get_program(client):
    resp = client.get("/programs/alpha-state")
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["name"] == "Alpha State"
    assert [c["email"] for c in data["coaches"]] == ["head@alpha.edu", "asst@alpha.edu"]

    assert client.get("/programs/missing").status_code == 404


def test_list_clubs(client):
    resp = client.get("/clubs/")
    body = resp.json()
    assert [p["name"] for p in body["results"]] == ["Surf SC"]
    assert body["facets"]["conferences"] == ["California (South & North)"]

    resp = client.get("/clubs/", params={"search": "alpha"})
    assert resp.json()["total"] == 0


def test_conferences(client):
    resp = client.get("/conferences/")
    assert resp.json() == ["California (South & North)", "Empire", "Lone Star", "Pac West"]


def test_geocode(client):
    resp = client.get("/geocode/", params={"q": "Los Angeles"})
    assert resp.status_code == 200
    assert resp.json() == {"lat": 34.05, "lng": -118.24, "label": "Los Angeles, Los Angeles County"}

    assert client.get("/geocode/").status_code == 400
    assert client.get("/geocode/", params={"q": "Atlantis"}).status_code == 404
    assert client.get("/geocode/", params={"q": "offline"}).status_code == 502


def test_compose_email(client):
    resp = client.post(
        "/email/compose",
        json={"program_ids": ["alpha-state", "beta-college", "missing"], "roles": ["head", "associate"]},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["program_count"] == 2
    assert body["emails"] == ["head@alpha.edu", "assoc@beta.edu"]
    assert body["batch_count"] == 1
    assert body["role_counts"] == {"head": 1, "assistant": 1, "associate": 1}
    assert body["role_labels"]["associate"] == "Associate Head Coaches"

    query = parse_qs(urlsplit(body["links"][0]).query)
    assert query["subject"] == ["Recruiting Inquiry"]
    assert query["bcc"] == ["head@alpha.edu,assoc@beta.edu"]


def test_compose_email_club_mode_ignores_roles(client):
    resp = client.post(
        "/email/compose",
        json={"program_ids": ["surf-sc"], "roles": ["head"], "mode": "ecnl"},
    )
    assert resp.json()["emails"] == ["info@surf.example"]


def test_compose_email_errors(client):
    assert client.post("/email/compose", json={"program_ids": []}).status_code == 422
    assert client.post("/email/compose", json={"program_ids": ["missing"]}).status_code == 404
    assert client.post("/email/compose", json={"program_ids": ["alpha-state"], "mode": "nope"}).status_code == 422


def test_dataset_unavailable_returns_503(tmp_path):
    broken = SnapshotDataSource([tmp_path / "missing.json"])
    app.dependency_overrides[get_data_source] = lambda: broken
    try:
        resp = TestClient(app).get("/programs/")
    finally:
        app.dependency_overrides.clear()
    assert resp.status_code == 503
    assert resp.json() == {"detail": "Program data is temporarily unavailable. Please retry."}
