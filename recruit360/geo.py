# geo.py
from __future__ import annotations

import math
from typing import Optional, Tuple

EARTH_RADIUS_KM = 6371.0
KM_TO_MILES = 0.621371
EARTH_RADIUS_MILES = EARTH_RADIUS_KM * KM_TO_MILES
METERS_PER_MILE = 1609.34

# (min_lat, max_lat, min_lng, max_lng)
WORLD_BOUNDS: Tuple[float, float, float, float] = (-90.0, 90.0, -180.0, 180.0)


def haversine_miles(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points (degrees), in miles."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lng2 - lng1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def miles_to_meters(miles: float) -> float:
    """Radius conversion for map overlays."""
    return miles * METERS_PER_MILE


def is_within_bounds(
    lat: Optional[float],
    lng: Optional[float],
    bounds: Tuple[float, float, float, float],
) -> bool:
    """
    True when (lat, lng) falls inside a (min_lat, max_lat, min_lng, max_lng) box.
    Missing coordinates are never inside.
    """
    if lat is None or lng is None:
        return False
    min_lat, max_lat, min_lng, max_lng = bounds
    return min_lat <= lat <= max_lat and min_lng <= lng <= max_lng
