#!/usr/bin/env python3
"""
Load the JSON snapshots into the SQL database the API reads from.

Usage examples:
  python scripts/build_database.py
  python scripts/build_database.py --db-url postgresql+psycopg://user:pw@host/recruit
  python scripts/build_database.py --division D3
  python scripts/build_database.py --seed-sql supabase/seed.sql   # write INSERTs instead

Programs are upserted by id. Each loaded program's coaches are deleted and
re-inserted, so re-running does not duplicate contacts.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from backend.app.database import Base, make_engine, make_session_factory
from backend.app.repository import upsert_programs
from recruit360.ingest import load_programs, render_seed_sql
from recruit360.logging_utils import get_logger, setup_logging
from recruit360.models import Program

setup_logging()
logger = get_logger(__name__)

ROOT = Path(__file__).resolve().parent.parent
DEFAULT_DB_URL = f"sqlite:///{ROOT / 'data' / 'recruit.db'}"
DEFAULT_SNAPSHOTS = [ROOT / "data" / "colleges.json", ROOT / "data" / "ecnl_clubs.json"]


def main():
    parser = argparse.ArgumentParser(description="Load program snapshots into SQL")
    parser.add_argument("--db-url", default=DEFAULT_DB_URL)
    parser.add_argument("--snapshot", type=Path, action="append", help="Snapshot JSON (repeatable)")
    parser.add_argument("--division", help="Only load programs of this division")
    parser.add_argument("--seed-sql", type=Path, help="Write seed SQL to this path instead of loading")
    args = parser.parse_args()

    programs: List[Program] = []
    for path in args.snapshot or DEFAULT_SNAPSHOTS:
        if not path.exists():
            logger.warning("Snapshot not found, skipping: %s", path)
            continue
        programs.extend(load_programs(path))
    if args.division:
        programs = [p for p in programs if p.division == args.division]

    if args.seed_sql:
        args.seed_sql.parent.mkdir(parents=True, exist_ok=True)
        args.seed_sql.write_text(render_seed_sql(programs), encoding="utf-8")
        logger.info("Wrote seed SQL for %d programs to %s", len(programs), args.seed_sql)
        return

    engine = make_engine(args.db_url)
    Base.metadata.create_all(engine)
    session_factory = make_session_factory(engine)
    with session_factory() as db:
        coach_count = upsert_programs(db, programs)

    logger.info("Loaded %d programs and %d coaches into %s", len(programs), coach_count, args.db_url)


if __name__ == "__main__":
    main()
