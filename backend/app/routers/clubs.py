from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from recruit360.datasource import DataSource
from recruit360.filters import ProgramFilter
from recruit360.models import MODE_ECNL, FilterState

from .. import schemas
from ..dependencies import get_data_source, get_program_filter
from .programs import location_from_query, run_search

router = APIRouter(prefix="/clubs", tags=["clubs"])


@router.get("/", response_model=schemas.ProgramList, summary="List ECNL clubs")
def list_clubs(
    conference: Optional[List[str]] = Query(None, description="ECNL conference name(s)"),
    search: Optional[str] = Query(None, description="Case-insensitive match on club name"),
    lat: Optional[float] = Query(None, ge=-90, le=90),
    lng: Optional[float] = Query(None, ge=-180, le=180),
    radius_miles: Optional[float] = Query(None, gt=0, le=3000),
    label: Optional[str] = Query(None),
    source: DataSource = Depends(get_data_source),
    engine: ProgramFilter = Depends(get_program_filter),
) -> schemas.ProgramList:
    # Club mode has no division/region/state facets.
    filter_state = FilterState.for_mode(MODE_ECNL)
    for conf in conference or ():
        filter_state = filter_state.toggle_conference(conf)
    filter_state = filter_state.with_search((search or "").strip())
    filter_state = filter_state.with_location(location_from_query(lat, lng, radius_miles, label))
    return run_search(source, engine, filter_state)
