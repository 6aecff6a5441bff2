from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from recruit360.datasource import DataSource
from recruit360.filters import find_programs
from recruit360.mailto import compose_email
from recruit360.roles import ROLE_LABELS

from .. import schemas
from ..dependencies import get_data_source

router = APIRouter(prefix="/email", tags=["email"])


@router.post("/compose", response_model=schemas.EmailResponse, summary="Build bcc mailto links for selected programs")
def compose(request: schemas.EmailRequest, source: DataSource = Depends(get_data_source)) -> schemas.EmailResponse:
    programs = find_programs(source.load_programs(), request.program_ids)
    if not programs:
        raise HTTPException(status_code=404, detail="None of the requested programs were found")

    composition = compose_email(programs, roles=request.roles, subject=request.subject, mode=request.mode)
    return schemas.EmailResponse(
        program_count=len(programs),
        emails=composition.emails,
        links=composition.links,
        batch_count=composition.batch_count,
        role_counts=composition.role_counts,
        role_labels=ROLE_LABELS,
    )
