from dataclasses import replace

import pytest

from backend.app import models
from backend.app.database import Base, make_engine, make_session_factory
from backend.app.repository import DatabaseDataSource, upsert_programs
from recruit360.datasource import FallbackDataSource, StaticDataSource
from recruit360.models import Contact, Program


@pytest.fixture
def session_factory(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'recruit.db'}")
    Base.metadata.create_all(engine)
    yield make_session_factory(engine)
    engine.dispose()


def test_upsert_then_load_round_trip(session_factory, sample_programs):
    with session_factory() as db:
        assert upsert_programs(db, sample_programs) == 3

    loaded = DatabaseDataSource(session_factory).load_programs()
    assert loaded == sorted(sample_programs, key=lambda p: p.name)


def test_upsert_twice_does_not_duplicate_coaches(session_factory, sample_programs):
    with session_factory() as db:
        upsert_programs(db, sample_programs, batch_size=2)
    with session_factory() as db:
        upsert_programs(db, sample_programs, batch_size=2)
        assert db.query(models.College).count() == len(sample_programs)
        assert db.query(models.Coach).count() == 3

    loaded = {p.id: p for p in DatabaseDataSource(session_factory).load_programs()}
    assert [c.email for c in loaded["alpha-state"].coaches] == ["head@alpha.edu", "asst@alpha.edu"]
    assert len(loaded["beta-college"].coaches) == 1


def test_reload_replaces_changed_contacts(session_factory, sample_programs):
    with session_factory() as db:
        upsert_programs(db, sample_programs)

    alpha = replace(sample_programs[0], coaches=(Contact("New Head", "Head Coach", "new@alpha.edu"),), city="Pasadena")
    with session_factory() as db:
        upsert_programs(db, [alpha])

    loaded = {p.id: p for p in DatabaseDataSource(session_factory).load_programs()}
    assert loaded["alpha-state"].city == "Pasadena"
    assert loaded["alpha-state"].coaches == (Contact("New Head", "Head Coach", "new@alpha.edu"),)
    assert len(loaded["beta-college"].coaches) == 1


def test_missing_region_is_derived_from_state(session_factory):
    with session_factory() as db:
        db.add(models.College(id="gamma-tech", name="Gamma Tech", division="D2", state="TX", region=None))
        db.add(models.College(id="nowhere", name="Nowhere", division="D3", state=None, region=None))
        db.add(models.Coach(college_id="gamma-tech", name="Gee", title=None, email="g@gamma.edu"))
        db.commit()

    gamma, nowhere = DatabaseDataSource(session_factory).load_programs()
    assert gamma.region == "Southwest"
    assert gamma.conference == ""
    assert gamma.coaches == (Contact("Gee", "", "g@gamma.edu", None),)
    assert nowhere.region == "Unknown"
    assert nowhere.coaches == ()


def test_load_conferences(session_factory, sample_programs):
    with session_factory() as db:
        upsert_programs(db, sample_programs)
    assert DatabaseDataSource(session_factory).load_conferences() == ["Empire", "Lone Star", "Pac West"]


def test_unbuilt_database_falls_back_to_snapshot(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'empty.db'}")
    snapshot = StaticDataSource([Program(id="a", name="Alpha", division="D1")])
    source = FallbackDataSource(DatabaseDataSource(make_session_factory(engine)), snapshot)
    assert [p.id for p in source.load_programs()] == ["a"]
    engine.dispose()
