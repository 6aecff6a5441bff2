#!/usr/bin/env python3
"""
Add (or re-add) a D2/D3 division to colleges.json.

Usage:
    python scripts/add_division.py --division D2 --coaches d2_db.csv --locations locations_d2.csv
    python scripts/add_division.py --division D3 --coaches d3_db.csv --locations d3_locations.csv

Existing programs of the same division are replaced, so re-running is safe.
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from recruit360.ingest import (
    build_division_programs,
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
    p = argparse.ArgumentParser(description="Merge a D2/D3 division into colleges.json")
    p.add_argument("--division", required=True, choices=["D2", "D3"])
    p.add_argument("--coaches", type=Path, required=True)
    p.add_argument("--locations", type=Path, required=True)
    p.add_argument("--out-dir", type=Path, default=ROOT / "data")
    return p.parse_args()


def main():
    args = parse_args()
    programs, report = build_division_programs(args.division, args.coaches, args.locations, STATE_TO_REGION)
    report.log_summary(args.division)

    colleges_path = args.out_dir / "colleges.json"
    existing = load_programs(colleges_path) if colleges_path.exists() else []
    merged = merge_division(existing, programs, args.division)
    write_programs(colleges_path, merged)
    logger.info("Added %d %s programs; total %d", len(programs), args.division, len(merged))

    conferences_path = args.out_dir / "conferences.json"
    previous = set(load_conferences(conferences_path)) if conferences_path.exists() else set()
    new_conferences = set(collect_conferences(programs))
    write_conferences(conferences_path, previous | new_conferences)
    for conf in sorted(new_conferences - previous):
        logger.info("New %s conference: %s", args.division, conf)


if __name__ == "__main__":
    main()
