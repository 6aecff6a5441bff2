from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from recruit360.mailto import DEFAULT_SUBJECT
from recruit360.models import MODE_NCAA
from recruit360.roles import ALL_ROLES, CoachRole


class Contact(BaseModel):
    name: str
    title: str = ""
    email: str = ""
    phone: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class Program(BaseModel):
    id: str
    name: str
    division: str
    conference: str
    city: str
    state: str
    region: str
    lat: Optional[float]
    lng: Optional[float]
    coaches: List[Contact] = Field(default_factory=list)
    website: Optional[str] = None
    distance_miles: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)


class LocationSearch(BaseModel):
    lat: float
    lng: float
    radius_miles: float
    label: str = ""
    radius_meters: float


class Facets(BaseModel):
    conferences: List[str]
    states: List[str]
    regions: List[str]
    # Postal code -> display name for the states above.
    state_labels: Dict[str, str] = Field(default_factory=dict)


class ProgramList(BaseModel):
    results: List[Program]
    total: int
    facets: Facets
    location_search: Optional[LocationSearch] = None


class ProgramDetailResponse(BaseModel):
    data: Program


class GeocodeResult(BaseModel):
    lat: float
    lng: float
    label: str

    model_config = ConfigDict(from_attributes=True)


class EmailRequest(BaseModel):
    program_ids: List[str] = Field(..., min_length=1)
    roles: List[CoachRole] = Field(default_factory=lambda: list(ALL_ROLES))
    subject: str = DEFAULT_SUBJECT
    mode: str = Field(MODE_NCAA, pattern="^(ncaa|ecnl)$")


class EmailResponse(BaseModel):
    program_count: int
    emails: List[str]
    links: List[str]
    batch_count: int
    role_counts: Dict[CoachRole, int]
    role_labels: Dict[CoachRole, str]
