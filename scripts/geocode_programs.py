#!/usr/bin/env python3
"""
Fill missing (or zeroed) coordinates in a program snapshot using
OpenStreetMap's Nominatim service.

Usage:
  python scripts/geocode_programs.py [--file data/colleges.json] [--delay 1.1] [--force-all] [--limit 0] [--dry-run]

Options:
  --delay <seconds>   Seconds to sleep between requests (default 1.1 to be gentle).
  --force-all         Geocode every program, not just those without coordinates.
  --limit <n>         Stop after N lookups (0 = no limit; default 0).
  --dry-run           Do not write changes; just log planned updates.

Notes:
  - Nominatim usage policy requires a descriptive User-Agent and reasonable rate limits.
  - Results are approximate; verify any critical coordinates before use.
"""

import argparse
import sys
import time
from dataclasses import replace
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from recruit360.exceptions import GeocodeError
from recruit360.geocode import NominatimGeocoder
from recruit360.ingest import load_programs, write_programs
from recruit360.logging_utils import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)

ROOT = Path(__file__).resolve().parent.parent
USER_AGENT = "Recruit360/1.0 (contact: dev@local)"


def build_query(program) -> str:
    parts = [program.name]
    if program.city and program.city != program.state:
        parts.append(program.city)
    if program.state:
        parts.append(program.state)
    return ", ".join(parts)


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", type=Path, default=ROOT / "data" / "colleges.json")
    parser.add_argument("--delay", type=float, default=1.1, help="Seconds between requests (default 1.1)")
    parser.add_argument("--force-all", action="store_true", help="Geocode every program, not just missing coords")
    parser.add_argument("--limit", type=int, default=0, help="Max lookups (0 = all)")
    parser.add_argument("--dry-run", action="store_true", help="Log updates without writing file")
    args = parser.parse_args()

    geocoder = NominatimGeocoder(user_agent=USER_AGENT)
    programs = load_programs(args.file)
    updated = 0
    missing = 0
    lookups = 0

    for idx, program in enumerate(programs):
        if not args.force_all and program.has_coordinates:
            continue
        if args.limit and lookups >= args.limit:
            logger.info("Reached limit %d; stopping.", args.limit)
            break

        query = build_query(program)
        lookups += 1
        try:
            result = geocoder.geocode(query)
        except GeocodeError as exc:
            missing += 1
            logger.warning("[MISS] %s (%s)", query, exc)
        else:
            updated += 1
            programs[idx] = replace(program, lat=result.lat, lng=result.lng)
            logger.info("[OK]   %s -> (%.4f, %.4f)", query, result.lat, result.lng)

        time.sleep(max(args.delay, 0))

    if args.dry_run:
        logger.info("Dry run: %d coord updates, %d misses. No file written.", updated, missing)
        return

    write_programs(args.file, programs)
    logger.info("Wrote %d coord updates to %s. Misses: %d.", updated, args.file, missing)


if __name__ == "__main__":
    main()
