from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from recruit360.exceptions import GeocodeError, LocationNotFoundError
from recruit360.geocode import NominatimGeocoder

from .. import schemas
from ..dependencies import get_geocoder

router = APIRouter(prefix="/geocode", tags=["geocode"])


@router.get("/", response_model=schemas.GeocodeResult, summary="Resolve a place name to a search point")
def geocode(
    q: Optional[str] = Query(None, description="City, address or ZIP code"),
    geocoder: NominatimGeocoder = Depends(get_geocoder),
) -> schemas.GeocodeResult:
    if not q or not q.strip():
        raise HTTPException(status_code=400, detail="Missing q parameter")
    try:
        result = geocoder.geocode(q)
    except LocationNotFoundError:
        raise HTTPException(status_code=404, detail="Location not found")
    except GeocodeError:
        raise HTTPException(status_code=502, detail="Geocoding failed")
    return schemas.GeocodeResult.model_validate(result)
