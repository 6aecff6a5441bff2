# geocode.py
"""
Free-text location lookup via OpenStreetMap's Nominatim service.

Nominatim's usage policy asks for a descriptive User-Agent and at most
one request per second; bulk callers (scripts/geocode_programs.py) sleep
between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from .exceptions import GeocodeError, LocationNotFoundError
from .logging_utils import get_logger

logger = get_logger(__name__)

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"
USER_AGENT = "Recruit360/1.0"


@dataclass(frozen=True)
class GeocodeResult:
    lat: float
    lng: float
    label: str


def short_label(display_name: str) -> str:
    """'Austin, Travis County, Texas, United States' -> 'Austin, Travis County'"""
    return ",".join((display_name or "").split(",")[:2]).strip()


class NominatimGeocoder:
    def __init__(
        self,
        url: str = NOMINATIM_URL,
        user_agent: str = USER_AGENT,
        country_codes: str = "us",
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ):
        self.url = url
        self.user_agent = user_agent
        self.country_codes = country_codes
        self.timeout = timeout
        self.session = session or requests.Session()

    def _params(self, query: str) -> Dict[str, Any]:
        params: Dict[str, Any] = {"q": query, "format": "json", "limit": 1}
        if self.country_codes:
            params["countrycodes"] = self.country_codes
        return params

    def geocode(self, query: str) -> GeocodeResult:
        """
        Best single match for `query`.

        Raises LocationNotFoundError when nothing matches and GeocodeError
        when the service call fails. Nothing is retried.
        """
        query = (query or "").strip()
        if not query:
            raise LocationNotFoundError("Empty location query")

        headers = {"User-Agent": self.user_agent}
        try:
            resp = self.session.get(self.url, params=self._params(query), headers=headers, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Geocoding failed for %r: %s", query, exc)
            raise GeocodeError("Geocoding failed") from exc

        if not isinstance(data, list):
            logger.warning("Unexpected geocoding response for %r: %r", query, data)
            raise GeocodeError("Geocoding returned an unexpected response")
        if not data:
            raise LocationNotFoundError("Location not found")

        best = data[0]
        try:
            lat = float(best["lat"])
            lng = float(best["lon"])
        except (KeyError, TypeError, ValueError) as exc:
            raise GeocodeError("Geocoding returned an unusable result") from exc

        return GeocodeResult(lat=lat, lng=lng, label=short_label(best.get("display_name", "")))
