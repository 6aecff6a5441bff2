from fastapi import APIRouter

from ..config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health", summary="Simple service health check")
def healthcheck() -> dict[str, str]:
    settings = get_settings()
    return {"status": "ok", "dataset": "database" if settings.db_url else "snapshot"}
