# utils.py
from __future__ import annotations

import math
import re
from typing import Any, Optional

import pandas as pd


def normalize_text(value: Any) -> str:
    """
    Safely normalize arbitrary cell text.
    Returns a single stripped, single-spaced string ("" for None/NaN).
    """
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return " ".join(str(value).split()).strip()


def slugify(name: str) -> str:
    """
    Program id from its display name:
    'St. John's (NY)' -> 'st-john-s-ny'
    """
    s = normalize_text(name).lower()
    s = re.sub(r"[^a-z0-9]+", "-", s)
    return s.strip("-")


def name_key(name: str) -> str:
    """Case/whitespace-insensitive key used to join coach rows to location rows."""
    return normalize_text(name).lower()


def parse_coordinate(value: Any) -> Optional[float]:
    text = normalize_text(value).replace(",", "")
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def guess_city(college_name: str, state: str) -> str:
    """
    Best-effort city when the source has no city column:
      'University of Wisconsin at Parkside' -> 'Parkside'
      'Kutztown State University'           -> 'Kutztown'
    Falls back to the state code.
    """
    name = normalize_text(college_name)
    m = re.match(r"University of (.+?) at (.+)", name)
    if m:
        return m.group(2)
    m = re.match(r"(.+?) State University", name)
    if m:
        return m.group(1)
    return state
