from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple

from settings.regions import UNKNOWN_REGION

DIVISIONS: Tuple[str, ...] = ("D1", "D2", "D3", "ECNL")
NCAA_DIVISIONS: Tuple[str, ...] = ("D1", "D2", "D3")
ECNL_DIVISION = "ECNL"

MODE_NCAA = "ncaa"
MODE_ECNL = "ecnl"

DEFAULT_DIVISIONS: Tuple[str, ...] = ("D1",)


def _coerce_coord(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


@dataclass(frozen=True)
class Contact:
    """A coach or club contact listed under a program."""

    name: str
    title: str = ""
    email: str = ""
    phone: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Contact":
        phone = (data.get("phone") or "").strip()
        return cls(
            name=(data.get("name") or "").strip(),
            title=(data.get("title") or "").strip(),
            email=(data.get("email") or "").strip(),
            phone=phone or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"name": self.name, "title": self.title, "email": self.email}
        if self.phone:
            out["phone"] = self.phone
        return out


@dataclass(frozen=True)
class Program:
    """
    A college soccer program or an ECNL club.

    `distance_miles` is only set on copies returned by a location search;
    stored records never carry it.
    """

    id: str
    name: str
    division: str
    conference: str = ""
    city: str = ""
    state: str = ""
    region: str = UNKNOWN_REGION
    lat: Optional[float] = None
    lng: Optional[float] = None
    coaches: Tuple[Contact, ...] = ()
    website: Optional[str] = None
    distance_miles: Optional[int] = None

    @property
    def has_coordinates(self) -> bool:
        # Ingestion zeroes coordinates it could not trust.
        if self.lat is None or self.lng is None:
            return False
        if not (math.isfinite(self.lat) and math.isfinite(self.lng)):
            return False
        return not (self.lat == 0 and self.lng == 0)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Program":
        return cls(
            id=str(data.get("id") or ""),
            name=data.get("name") or "",
            division=data.get("division") or "",
            conference=data.get("conference") or "",
            city=data.get("city") or "",
            state=data.get("state") or "",
            region=data.get("region") or UNKNOWN_REGION,
            lat=_coerce_coord(data.get("lat")),
            lng=_coerce_coord(data.get("lng")),
            coaches=tuple(Contact.from_dict(c) for c in data.get("coaches") or []),
            website=data.get("website") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "division": self.division,
            "conference": self.conference,
            "city": self.city,
            "state": self.state,
            "region": self.region,
            "lat": self.lat,
            "lng": self.lng,
            "coaches": [c.to_dict() for c in self.coaches],
        }
        if self.website:
            out["website"] = self.website
        if self.distance_miles is not None:
            out["distance_miles"] = self.distance_miles
        return out


@dataclass(frozen=True)
class LocationSearch:
    lat: float
    lng: float
    radius_miles: float
    label: str = ""


def _toggle(values: Iterable[str], value: str) -> FrozenSet[str]:
    current = frozenset(values)
    return current - {value} if value in current else current | {value}


@dataclass(frozen=True)
class FilterState:
    """
    Facet selections for one browsing session.

    Empty conference/region/state sets mean "all". `divisions` is never
    empty. Every method returns a new state.
    """

    divisions: Tuple[str, ...] = DEFAULT_DIVISIONS
    conferences: FrozenSet[str] = field(default_factory=frozenset)
    regions: FrozenSet[str] = field(default_factory=frozenset)
    states: FrozenSet[str] = field(default_factory=frozenset)
    search_query: str = ""
    location_search: Optional[LocationSearch] = None

    def __post_init__(self):
        divisions = tuple(dict.fromkeys(self.divisions or ()))
        object.__setattr__(self, "divisions", divisions or DEFAULT_DIVISIONS)
        object.__setattr__(self, "conferences", frozenset(self.conferences or ()))
        object.__setattr__(self, "regions", frozenset(self.regions or ()))
        object.__setattr__(self, "states", frozenset(self.states or ()))
        object.__setattr__(self, "search_query", self.search_query or "")

    @classmethod
    def for_mode(cls, mode: str) -> "FilterState":
        if mode == MODE_ECNL:
            return cls(divisions=(ECNL_DIVISION,))
        return cls()

    @property
    def has_active_filters(self) -> bool:
        return bool(
            self.conferences
            or self.regions
            or self.states
            or self.search_query
            or self.location_search
        )

    def toggle_division(self, division: str) -> "FilterState":
        if division in self.divisions:
            divisions = tuple(d for d in self.divisions if d != division)
        else:
            divisions = self.divisions + (division,)
        return replace(self, divisions=divisions or DEFAULT_DIVISIONS)

    def toggle_conference(self, conference: str) -> "FilterState":
        return replace(self, conferences=_toggle(self.conferences, conference))

    def toggle_region(self, region: str) -> "FilterState":
        # States are a sub-facet of region; any region change drops them.
        return replace(self, regions=_toggle(self.regions, region), states=frozenset())

    def toggle_state(self, state: str) -> "FilterState":
        return replace(self, states=_toggle(self.states, state))

    def with_search(self, query: str) -> "FilterState":
        return replace(self, search_query=query)

    def with_location(self, location: Optional[LocationSearch]) -> "FilterState":
        return replace(self, location_search=location)

    def cleared(self) -> "FilterState":
        return FilterState(divisions=self.divisions)
