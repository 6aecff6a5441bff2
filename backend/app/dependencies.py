from __future__ import annotations

from functools import lru_cache

from recruit360.datasource import DataSource, FallbackDataSource, SnapshotDataSource
from recruit360.filters import ProgramFilter
from recruit360.geocode import NominatimGeocoder
from settings.regions import STATE_TO_REGION

from .config import get_settings
from .database import get_session_factory
from .repository import DatabaseDataSource


@lru_cache()
def get_data_source() -> DataSource:
    settings = get_settings()
    snapshot = SnapshotDataSource(settings.snapshot_paths, settings.conferences_path)
    factory = get_session_factory()
    primary = DatabaseDataSource(factory) if factory is not None else None
    return FallbackDataSource(primary, snapshot)


@lru_cache()
def get_program_filter() -> ProgramFilter:
    return ProgramFilter(STATE_TO_REGION)


@lru_cache()
def get_geocoder() -> NominatimGeocoder:
    settings = get_settings()
    return NominatimGeocoder(
        url=settings.geocoder_url,
        user_agent=settings.geocoder_user_agent,
        country_codes=settings.geocoder_country_codes,
        timeout=settings.geocoder_timeout,
    )
