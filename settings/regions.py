# regions.py
"""
Static geographic lookup tables.

These are plain data; callers pass them into the filter engine and the
ingestion transforms rather than reading them as module globals.
"""

from __future__ import annotations

from typing import Dict, Tuple

UNKNOWN_REGION = "Unknown"

REGIONS: Tuple[str, ...] = ("Northeast", "Southeast", "Midwest", "Southwest", "West")

STATE_TO_REGION: Dict[str, str] = {
    # Northeast
    "CT": "Northeast", "ME": "Northeast", "MA": "Northeast", "NH": "Northeast",
    "RI": "Northeast", "VT": "Northeast", "NJ": "Northeast", "NY": "Northeast",
    "PA": "Northeast", "DC": "Northeast", "MD": "Northeast", "DE": "Northeast",
    # Southeast
    "AL": "Southeast", "AR": "Southeast", "FL": "Southeast", "GA": "Southeast",
    "KY": "Southeast", "LA": "Southeast", "MS": "Southeast", "NC": "Southeast",
    "SC": "Southeast", "TN": "Southeast", "VA": "Southeast", "WV": "Southeast",
    # Midwest
    "IL": "Midwest", "IN": "Midwest", "IA": "Midwest", "KS": "Midwest",
    "MI": "Midwest", "MN": "Midwest", "MO": "Midwest", "NE": "Midwest",
    "ND": "Midwest", "OH": "Midwest", "SD": "Midwest", "WI": "Midwest",
    # Southwest
    "AZ": "Southwest", "NM": "Southwest", "OK": "Southwest", "TX": "Southwest",
    # West
    "AK": "West", "CA": "West", "CO": "West", "HI": "West",
    "ID": "West", "MT": "West", "NV": "West", "OR": "West",
    "UT": "West", "WA": "West", "WY": "West",
}

# ECNL clubs are bucketed by their league conference, not by state.
ECNL_CONFERENCE_TO_REGION: Dict[str, str] = {
    "Northeast & Mid-Atlantic": "Northeast",
    "Southeast": "Southeast",
    "Midwest": "Midwest",
    "Texas & South Central": "Southwest",
    "West & Northwest": "West",
    "California (South & North)": "West",
}

# Full state name -> postal code, used to pull a state out of a free-text address.
US_STATE_CODES: Dict[str, str] = {
    "Alabama": "AL", "Alaska": "AK", "Arizona": "AZ", "Arkansas": "AR",
    "California": "CA", "Colorado": "CO", "Connecticut": "CT", "Delaware": "DE",
    "Florida": "FL", "Georgia": "GA", "Hawaii": "HI", "Idaho": "ID",
    "Illinois": "IL", "Indiana": "IN", "Iowa": "IA", "Kansas": "KS",
    "Kentucky": "KY", "Louisiana": "LA", "Maine": "ME", "Maryland": "MD",
    "Massachusetts": "MA", "Michigan": "MI", "Minnesota": "MN",
    "Mississippi": "MS", "Missouri": "MO", "Montana": "MT", "Nebraska": "NE",
    "Nevada": "NV", "New Hampshire": "NH", "New Jersey": "NJ",
    "New Mexico": "NM", "New York": "NY", "North Carolina": "NC",
    "North Dakota": "ND", "Ohio": "OH", "Oklahoma": "OK", "Oregon": "OR",
    "Pennsylvania": "PA", "Rhode Island": "RI", "South Carolina": "SC",
    "South Dakota": "SD", "Tennessee": "TN", "Texas": "TX", "Utah": "UT",
    "Vermont": "VT", "Virginia": "VA", "Washington": "WA",
    "West Virginia": "WV", "Wisconsin": "WI", "Wyoming": "WY",
    "District of Columbia": "DC",
}

# Postal code -> label shown next to the state facet.
STATE_DISPLAY_NAMES: Dict[str, str] = {
    code: name for name, code in US_STATE_CODES.items()
}
STATE_DISPLAY_NAMES["DC"] = "D.C."

# (min_lat, max_lat, min_lng, max_lng)
CONTINENTAL_US_BOUNDS: Tuple[float, float, float, float] = (24.5, 49.5, -125.0, -66.5)


def region_for_state(state: str, table: Dict[str, str] | None = None) -> str:
    table = STATE_TO_REGION if table is None else table
    return table.get((state or "").strip().upper(), UNKNOWN_REGION)
