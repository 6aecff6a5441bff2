from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from recruit360.datasource import DataSource

from ..dependencies import get_data_source

router = APIRouter(prefix="/conferences", tags=["conferences"])


@router.get("/", response_model=List[str], summary="List all conferences (college and club)")
def list_conferences(source: DataSource = Depends(get_data_source)) -> List[str]:
    return source.load_conferences()
