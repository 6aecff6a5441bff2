import math

import pytest

from recruit360.geo import (
    EARTH_RADIUS_MILES,
    haversine_miles,
    is_within_bounds,
    miles_to_meters,
)
from settings.regions import CONTINENTAL_US_BOUNDS


@pytest.mark.parametrize("lat,lng", [(0.0, 0.0), (34.0, -118.2), (-33.9, 151.2), (89.9, 10.0)])
def test_distance_to_self_is_zero(lat, lng):
    assert haversine_miles(lat, lng, lat, lng) == 0.0


def test_distance_is_symmetric():
    a = (34.0, -118.2)
    b = (40.7, -74.0)
    assert math.isclose(haversine_miles(*a, *b), haversine_miles(*b, *a))


def test_one_mile_along_a_meridian():
    one_mile_in_degrees = math.degrees(1 / EARTH_RADIUS_MILES)
    dist = haversine_miles(40.0, -100.0, 40.0 + one_mile_in_degrees, -100.0)
    assert math.isclose(dist, 1.0, rel_tol=1e-9)


def test_la_to_nyc_is_roughly_2450_miles():
    dist = haversine_miles(34.0, -118.2, 40.7, -74.0)
    assert 2400 < dist < 2500


def test_miles_to_meters():
    assert miles_to_meters(1) == pytest.approx(1609.34)
    assert miles_to_meters(100) == pytest.approx(160934.0)


def test_continental_bounds():
    assert is_within_bounds(39.0, -98.0, CONTINENTAL_US_BOUNDS)
    # Honolulu and Anchorage fall outside the box.
    assert not is_within_bounds(21.3, -157.8, CONTINENTAL_US_BOUNDS)
    assert not is_within_bounds(61.2, -149.9, CONTINENTAL_US_BOUNDS)
    assert not is_within_bounds(None, -98.0, CONTINENTAL_US_BOUNDS)
