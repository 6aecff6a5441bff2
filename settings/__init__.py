# settings/__init__.py
"""Static configuration data shared by ingestion and the API."""

from .regions import (
    CONTINENTAL_US_BOUNDS,
    ECNL_CONFERENCE_TO_REGION,
    REGIONS,
    STATE_DISPLAY_NAMES,
    STATE_TO_REGION,
    UNKNOWN_REGION,
    US_STATE_CODES,
    region_for_state,
)

__all__ = [
    "CONTINENTAL_US_BOUNDS",
    "ECNL_CONFERENCE_TO_REGION",
    "REGIONS",
    "STATE_DISPLAY_NAMES",
    "STATE_TO_REGION",
    "UNKNOWN_REGION",
    "US_STATE_CODES",
    "region_for_state",
]
