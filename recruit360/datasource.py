# datasource.py
"""
Where the API gets its program collection from.

A FallbackDataSource pairs a primary store (normally the SQL database)
with the bundled JSON snapshot. A primary failure is logged and answered
from the snapshot; only when the snapshot itself cannot be read does the
caller see an error.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional, Sequence

from .exceptions import DatasetUnavailableError
from .ingest import collect_conferences, load_conferences, load_programs
from .logging_utils import get_logger
from .models import Program

logger = get_logger(__name__)


class DataSource:
    """Read-only access to the program collection."""

    name = "base"

    def load_programs(self) -> List[Program]:
        raise NotImplementedError

    def load_conferences(self) -> List[str]:
        return collect_conferences(self.load_programs())


class SnapshotDataSource(DataSource):
    """
    Programs from one or more JSON snapshot files (e.g. colleges.json and
    ecnl_clubs.json). The files are read once and kept in memory.
    """

    name = "snapshot"

    def __init__(self, program_paths: Sequence[Path | str], conferences_path: Optional[Path | str] = None):
        self.program_paths = [Path(p) for p in program_paths]
        self.conferences_path = Path(conferences_path) if conferences_path else None
        self._programs: Optional[List[Program]] = None
        self._conferences: Optional[List[str]] = None

    def load_programs(self) -> List[Program]:
        if self._programs is None:
            programs: List[Program] = []
            for path in self.program_paths:
                try:
                    programs.extend(load_programs(path))
                except (OSError, ValueError) as exc:
                    raise DatasetUnavailableError(f"Could not read snapshot {path}: {exc}") from exc
            logger.info("Loaded %d programs from %d snapshot file(s)", len(programs), len(self.program_paths))
            self._programs = programs
        return list(self._programs)

    def load_conferences(self) -> List[str]:
        if self._conferences is None:
            if self.conferences_path is not None and self.conferences_path.exists():
                try:
                    self._conferences = load_conferences(self.conferences_path)
                except (OSError, json.JSONDecodeError) as exc:
                    raise DatasetUnavailableError(
                        f"Could not read conferences {self.conferences_path}: {exc}"
                    ) from exc
            else:
                self._conferences = collect_conferences(self.load_programs())
        return list(self._conferences)


class StaticDataSource(DataSource):
    """An in-memory collection; handy for tests and one-off scripts."""

    name = "static"

    def __init__(self, programs: Sequence[Program]):
        self._programs = list(programs)

    def load_programs(self) -> List[Program]:
        return list(self._programs)


class FallbackDataSource(DataSource):
    """
    Primary store with a local fallback.

    `primary` may be None when no database is configured; every read then
    goes straight to the fallback.
    """

    name = "fallback"

    def __init__(self, primary: Optional[DataSource], fallback: DataSource):
        self.primary = primary
        self.fallback = fallback

    def load_programs(self) -> List[Program]:
        if self.primary is not None:
            try:
                return self.primary.load_programs()
            except Exception as exc:
                logger.warning(
                    "Primary source %s failed loading programs (%s); using %s",
                    self.primary.name,
                    exc,
                    self.fallback.name,
                )
        return self.fallback.load_programs()

    def load_conferences(self) -> List[str]:
        if self.primary is not None:
            try:
                return self.primary.load_conferences()
            except Exception as exc:
                logger.warning(
                    "Primary source %s failed loading conferences (%s); using %s",
                    self.primary.name,
                    exc,
                    self.fallback.name,
                )
        return self.fallback.load_conferences()
