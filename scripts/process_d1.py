#!/usr/bin/env python3
"""
Build the D1 college snapshot from the coach and location CSVs.

Usage:
    python scripts/process_d1.py
    python scripts/process_d1.py --coaches d1_db.csv --locations location.csv --out-dir data

Writes <out-dir>/colleges.json (D1 programs replaced, other divisions kept)
and refreshes <out-dir>/conferences.json.
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from recruit360.ingest import (
    build_d1_programs,
    collect_conferences,
    load_conferences,
    load_programs,
    merge_division,
    write_conferences,
    write_programs,
)
from recruit360.logging_utils import get_logger, setup_logging
from settings.regions import STATE_TO_REGION

setup_logging()
logger = get_logger(__name__)

ROOT = Path(__file__).resolve().parent.parent


def parse_args():
    p = argparse.ArgumentParser(description="Build D1 programs from coach + location CSVs")
    p.add_argument("--coaches", type=Path, default=ROOT / "d1_db.csv")
    p.add_argument("--locations", type=Path, default=ROOT / "location.csv")
    p.add_argument("--out-dir", type=Path, default=ROOT / "data")
    p.add_argument("--dry-run", action="store_true", help="Report counts without writing files")
    return p.parse_args()


def main():
    args = parse_args()
    programs, report = build_d1_programs(args.coaches, args.locations, STATE_TO_REGION)
    report.log_summary("D1")

    colleges_path = args.out_dir / "colleges.json"
    existing = load_programs(colleges_path) if colleges_path.exists() else []
    merged = merge_division(existing, programs, "D1")

    conferences_path = args.out_dir / "conferences.json"
    conferences = set(collect_conferences(merged))
    if conferences_path.exists():
        conferences.update(load_conferences(conferences_path))

    if args.dry_run:
        logger.info("Dry run: %d programs total, %d conferences. No files written.", len(merged), len(conferences))
        return

    write_programs(colleges_path, merged)
    write_conferences(conferences_path, conferences)
    logger.info("Wrote %d programs to %s", len(merged), colleges_path)
    logger.info("Found %d conferences", len(conferences))


if __name__ == "__main__":
    main()
