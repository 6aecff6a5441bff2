#!/usr/bin/env python3
"""
Build data/ecnl_clubs.json from the ECNL club and location CSVs.

Usage:
    python scripts/process_ecnl.py
    python scripts/process_ecnl.py --db ecnl_db.csv --locations ecnl_location.csv

Coordinates outside the continental US box are zeroed (treated as bad
geocoding). Alaska and Hawaii clubs lose their coordinates under this
rule; pass --no-bounds to keep every parsed coordinate.
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from recruit360.ingest import build_ecnl_clubs, collect_conferences, write_programs
from recruit360.logging_utils import get_logger, setup_logging
from settings.regions import CONTINENTAL_US_BOUNDS, ECNL_CONFERENCE_TO_REGION, US_STATE_CODES

setup_logging()
logger = get_logger(__name__)

ROOT = Path(__file__).resolve().parent.parent
WORLD_BOUNDS = (-90.0, 90.0, -180.0, 180.0)


def parse_args():
    p = argparse.ArgumentParser(description="Build ECNL club snapshot")
    p.add_argument("--db", type=Path, default=ROOT / "ecnl_db.csv")
    p.add_argument("--locations", type=Path, default=ROOT / "ecnl_location.csv")
    p.add_argument("--out", type=Path, default=ROOT / "data" / "ecnl_clubs.json")
    p.add_argument("--no-bounds", action="store_true", help="Do not zero coordinates outside the continental US")
    return p.parse_args()


def main():
    args = parse_args()
    bounds = WORLD_BOUNDS if args.no_bounds else CONTINENTAL_US_BOUNDS
    clubs, report = build_ecnl_clubs(
        args.db,
        args.locations,
        ECNL_CONFERENCE_TO_REGION,
        US_STATE_CODES,
        bounds,
    )
    write_programs(args.out, clubs)

    report.log_summary("ECNL")
    logger.info("  %d with valid US coordinates", sum(1 for c in clubs if c.has_coordinates))
    logger.info("  %d with email contacts", sum(1 for c in clubs if c.coaches))
    logger.info("  %d with extracted state", sum(1 for c in clubs if c.state))
    logger.info("Conferences: %s", ", ".join(collect_conferences(clubs)))


if __name__ == "__main__":
    main()
