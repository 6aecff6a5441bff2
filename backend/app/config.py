from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

ROOT_DIR = Path(__file__).resolve().parents[2]


def _default_data_dir() -> Path:
    return ROOT_DIR / "data"


def _default_db_url() -> Optional[str]:
    """Use the local SQLite build when scripts/build_database.py has produced one."""
    db_path = ROOT_DIR / "data" / "recruit.db"
    if db_path.exists():
        return f"sqlite:///{db_path}"
    return None


class Settings(BaseModel):
    # No database URL means snapshot-only mode.
    db_url: Optional[str] = Field(default_factory=_default_db_url)
    data_dir: Path = Field(default_factory=_default_data_dir)
    colleges_file: str = "colleges.json"
    clubs_file: str = "ecnl_clubs.json"
    conferences_file: str = "conferences.json"

    geocoder_url: str = "https://nominatim.openstreetmap.org/search"
    geocoder_user_agent: str = "Recruit360/1.0"
    geocoder_country_codes: str = "us"
    geocoder_timeout: float = 15.0

    log_level: str = "INFO"

    api_title: str = "Recruit360 API"
    api_description: str = "College and club soccer program directory with facet filtering, radius search and bulk email links."
    api_version: str = "0.1.0"

    @property
    def snapshot_paths(self) -> List[Path]:
        return [self.data_dir / self.colleges_file, self.data_dir / self.clubs_file]

    @property
    def conferences_path(self) -> Path:
        return self.data_dir / self.conferences_file


@lru_cache()
def get_settings() -> Settings:
    values = {}
    if os.getenv("RECRUIT_DB_URL"):
        values["db_url"] = os.getenv("RECRUIT_DB_URL")
    if os.getenv("RECRUIT_DATA_DIR"):
        values["data_dir"] = Path(os.environ["RECRUIT_DATA_DIR"])
    if os.getenv("RECRUIT_GEOCODER_URL"):
        values["geocoder_url"] = os.environ["RECRUIT_GEOCODER_URL"]
    if os.getenv("RECRUIT_GEOCODER_USER_AGENT"):
        values["geocoder_user_agent"] = os.environ["RECRUIT_GEOCODER_USER_AGENT"]
    if os.getenv("RECRUIT_GEOCODER_TIMEOUT"):
        values["geocoder_timeout"] = float(os.environ["RECRUIT_GEOCODER_TIMEOUT"])
    if os.getenv("RECRUIT_LOG_LEVEL"):
        values["log_level"] = os.environ["RECRUIT_LOG_LEVEL"]
    return Settings(**values)
