from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from recruit360.datasource import DataSource
from recruit360.filters import ProgramFilter, find_program
from recruit360.geo import miles_to_meters
from recruit360.models import FilterState, LocationSearch, NCAA_DIVISIONS
from settings.regions import REGIONS, STATE_DISPLAY_NAMES

from .. import schemas
from ..dependencies import get_data_source, get_program_filter

router = APIRouter(prefix="/programs", tags=["programs"])

DEFAULT_RADIUS_MILES = 100.0


def location_from_query(
    lat: Optional[float],
    lng: Optional[float],
    radius_miles: Optional[float],
    label: Optional[str],
) -> Optional[LocationSearch]:
    if lat is None and lng is None:
        return None
    if lat is None or lng is None:
        raise HTTPException(status_code=422, detail="lat and lng must be given together")
    return LocationSearch(
        lat=lat,
        lng=lng,
        radius_miles=radius_miles if radius_miles is not None else DEFAULT_RADIUS_MILES,
        label=label or "",
    )


def run_search(
    source: DataSource,
    engine: ProgramFilter,
    state: FilterState,
) -> schemas.ProgramList:
    programs = source.load_programs()
    results = engine.apply(programs, state)

    loc = state.location_search
    location = None
    if loc is not None:
        location = schemas.LocationSearch(
            lat=loc.lat,
            lng=loc.lng,
            radius_miles=loc.radius_miles,
            label=loc.label,
            radius_meters=miles_to_meters(loc.radius_miles),
        )

    states = engine.available_states(programs, state)
    return schemas.ProgramList(
        results=[schemas.Program.model_validate(p) for p in results],
        total=len(results),
        facets=schemas.Facets(
            conferences=engine.available_conferences(programs, state),
            states=states,
            regions=list(REGIONS),
            state_labels={s: STATE_DISPLAY_NAMES.get(s, s) for s in states},
        ),
        location_search=location,
    )


@router.get("/", response_model=schemas.ProgramList, summary="List college programs with facet filters")
def list_programs(
    division: List[str] = Query(["D1"], description="Division tag(s): D1, D2, D3"),
    conference: Optional[List[str]] = Query(None, description="Conference name(s); omit for all"),
    region: Optional[List[str]] = Query(None, description="Region(s); omit for all"),
    state: Optional[List[str]] = Query(None, description="Two-letter state code(s); omit for all"),
    search: Optional[str] = Query(None, description="Case-insensitive match on name, city, conference or state"),
    lat: Optional[float] = Query(None, ge=-90, le=90),
    lng: Optional[float] = Query(None, ge=-180, le=180),
    radius_miles: Optional[float] = Query(None, gt=0, le=3000),
    label: Optional[str] = Query(None, description="Display label for the search point"),
    source: DataSource = Depends(get_data_source),
    engine: ProgramFilter = Depends(get_program_filter),
) -> schemas.ProgramList:
    unknown = [d for d in division if d not in NCAA_DIVISIONS]
    if unknown:
        raise HTTPException(status_code=422, detail=f"Unknown division(s): {', '.join(unknown)}")

    filter_state = FilterState(
        divisions=tuple(division),
        conferences=frozenset(conference or ()),
        regions=frozenset(region or ()),
        states=frozenset(s.upper() for s in state or ()),
        search_query=(search or "").strip(),
        location_search=location_from_query(lat, lng, radius_miles, label),
    )
    return run_search(source, engine, filter_state)


@router.get("/{program_id}", response_model=schemas.ProgramDetailResponse, summary="Get a single program with its contacts")
def get_program(program_id: str, source: DataSource = Depends(get_data_source)) -> schemas.ProgramDetailResponse:
    program = find_program(source.load_programs(), program_id)
    if program is None:
        raise HTTPException(status_code=404, detail="Program not found")
    return schemas.ProgramDetailResponse(data=schemas.Program.model_validate(program))
