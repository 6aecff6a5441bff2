#!/usr/bin/env python3
"""
Refresh lat/lng in colleges.json from a location CSV (matched on exact name).

Usage:
    python scripts/update_coordinates.py --locations location.csv
    python scripts/update_coordinates.py --locations locations_d2.csv --name-column College
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from recruit360.ingest import load_programs, update_coordinates, write_programs
from recruit360.logging_utils import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)

ROOT = Path(__file__).resolve().parent.parent


def parse_args():
    p = argparse.ArgumentParser(description="Update program coordinates from a location CSV")
    p.add_argument("--locations", type=Path, required=True)
    p.add_argument("--name-column", default="College Name")
    p.add_argument("--colleges", type=Path, default=ROOT / "data" / "colleges.json")
    return p.parse_args()


def main():
    args = parse_args()
    programs = load_programs(args.colleges)
    updated, report = update_coordinates(programs, args.locations, name_column=args.name_column)
    write_programs(args.colleges, updated)
    logger.info("Updated %d programs with new coordinates", len(report.updated))


if __name__ == "__main__":
    main()
