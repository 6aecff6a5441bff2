import pytest

from recruit360.models import Contact, Program
from recruit360.utils import slugify
from settings.regions import region_for_state


def make_program(name, division="D1", state="", lat=None, lng=None, **kwargs):
    kwargs.setdefault("region", region_for_state(state))
    return Program(
        id=kwargs.pop("id", slugify(name)),
        name=name,
        division=division,
        state=state,
        lat=lat,
        lng=lng,
        **kwargs,
    )


@pytest.fixture
def sample_programs():
    return [
        make_program(
            "Alpha State",
            state="CA",
            city="Los Angeles",
            conference="Pac West",
            lat=34.0,
            lng=-118.2,
            coaches=(
                Contact("Pat Head", "Head Coach", "head@alpha.edu"),
                Contact("Ari Assist", "Assistant Coach", "asst@alpha.edu"),
            ),
        ),
        make_program(
            "Beta College",
            state="NY",
            city="New York",
            conference="Empire",
            lat=40.7,
            lng=-74.0,
            coaches=(Contact("Bo Assoc", "Associate Head Coach", "assoc@beta.edu"),),
        ),
        make_program(
            "Gamma Tech",
            division="D2",
            state="TX",
            city="Austin",
            conference="Lone Star",
            lat=30.27,
            lng=-97.74,
        ),
        make_program(
            "Delta University",
            state="CA",
            city="San Diego",
            conference="Pac West",
            lat=32.72,
            lng=-117.16,
        ),
        make_program(
            "Epsilon College",
            state="OH",
            city="Columbus",
            conference="Empire",
            lat=0.0,
            lng=0.0,
        ),
    ]
