import pytest
import requests

from recruit360.exceptions import GeocodeError, LocationNotFoundError
from recruit360.geocode import GeocodeResult, NominatimGeocoder, short_label


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self.json_error is not None:
            raise self.json_error
        return self.payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def make_geocoder(session):
    return NominatimGeocoder(url="https://geo.test/search", user_agent="TestAgent/1.0", timeout=5, session=session)


def test_geocode_success():
    session = FakeSession(
        FakeResponse([{"lat": "30.2672", "lon": "-97.7431", "display_name": "Austin, Travis County, Texas, United States"}])
    )
    result = make_geocoder(session).geocode("  Austin, TX ")

    assert result == GeocodeResult(lat=30.2672, lng=-97.7431, label="Austin, Travis County")
    call = session.calls[0]
    assert call["url"] == "https://geo.test/search"
    assert call["params"] == {"q": "Austin, TX", "format": "json", "limit": 1, "countrycodes": "us"}
    assert call["headers"] == {"User-Agent": "TestAgent/1.0"}
    assert call["timeout"] == 5


def test_no_results_raises_not_found():
    with pytest.raises(LocationNotFoundError):
        make_geocoder(FakeSession(FakeResponse([]))).geocode("Atlantis")


def test_empty_query_skips_request():
    session = FakeSession(FakeResponse([]))
    with pytest.raises(LocationNotFoundError):
        make_geocoder(session).geocode("   ")
    assert session.calls == []


@pytest.mark.parametrize(
    "session",
    [
        FakeSession(error=requests.ConnectionError("offline")),
        FakeSession(FakeResponse(status_code=503)),
        FakeSession(FakeResponse(json_error=ValueError("not json"))),
        FakeSession(FakeResponse([{"display_name": "No coordinates"}])),
        FakeSession(FakeResponse({"error": "Unable to geocode"})),
    ],
)
def test_service_failures_raise_geocode_error(session):
    with pytest.raises(GeocodeError) as excinfo:
        make_geocoder(session).geocode("Austin")
    assert not isinstance(excinfo.value, LocationNotFoundError)


def test_country_codes_can_be_disabled():
    session = FakeSession(FakeResponse([{"lat": "1", "lon": "2"}]))
    geocoder = NominatimGeocoder(country_codes="", session=session)
    result = geocoder.geocode("Paris")
    assert "countrycodes" not in session.calls[0]["params"]
    assert result.label == ""


def test_short_label():
    assert short_label("Austin, Travis County, Texas, United States") == "Austin, Travis County"
    assert short_label("Texas") == "Texas"
    assert short_label("") == ""
