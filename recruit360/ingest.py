# ingest.py
"""
Offline CSV -> JSON transforms that produce the program snapshot.

Input layouts
-------------
D1 coaches      : College, Name, Title, Email, Phone, Source, Conference
D1 locations    : College Name, City, [State], Primary Conference, Latitude, Longitude
D2/D3 coaches   : College, Name, Title, Email, Phone, Source
D2/D3 locations : College, State, Conference, [City], Latitude, Longitude
ECNL db         : Club Name, Source URL, Emails (';'-separated)
ECNL locations  : Club Name, Conference, Latitude, Longitude, Address

Every output record follows the Program shape in `recruit360.models`.
Bad or missing coordinates are zeroed, never a reason to drop a program.
"""

from __future__ import annotations

import json
from collections import OrderedDict
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from settings.regions import UNKNOWN_REGION

from .geo import WORLD_BOUNDS, is_within_bounds
from .logging_utils import get_logger
from .models import ECNL_DIVISION, Contact, Program
from .utils import guess_city, name_key, normalize_text, parse_coordinate, slugify

logger = get_logger(__name__)

# Placeholder addresses that show up in scraped club listings.
PLACEHOLDER_EMAILS = {"mymail@mailservice.com", "email@email.com"}

ECNL_CONTACT_NAME = "Contact"
ECNL_CONTACT_TITLE = "Club Contact"


@dataclass
class IngestReport:
    """Counts and problem rows from one transform run."""

    programs: int = 0
    missing_locations: List[str] = field(default_factory=list)
    no_coordinates: int = 0
    bad_coordinates: int = 0
    duplicate_ids: List[str] = field(default_factory=list)
    updated: List[str] = field(default_factory=list)

    def log_summary(self, label: str) -> None:
        logger.info("%s: %d programs", label, self.programs)
        if self.no_coordinates:
            logger.info("  %d without coordinates", self.no_coordinates)
        if self.bad_coordinates:
            logger.info("  %d with coordinates outside bounds (zeroed)", self.bad_coordinates)
        if self.duplicate_ids:
            logger.info("  %d duplicate ids renamed", len(self.duplicate_ids))
        for name in self.missing_locations:
            logger.warning("  missing location: %s", name)


# ===================== CSV READING =====================

def read_csv_records(path: Path | str) -> List[Dict[str, str]]:
    """
    Read a CSV as a list of string dicts. Nothing is coerced to NaN or
    numbers; blank rows are skipped.
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False, skip_blank_lines=True)
    df.columns = [normalize_text(c) for c in df.columns]
    records = df.to_dict("records")
    return [r for r in records if any(normalize_text(v) for v in r.values())]


def _col(row: Mapping[str, str], *names: str) -> str:
    for name in names:
        value = normalize_text(row.get(name))
        if value:
            return value
    return ""


# ===================== SHARED HELPERS =====================

def _contact_from_row(row: Mapping[str, str]) -> Contact:
    phone = _col(row, "Phone")
    return Contact(
        name=_col(row, "Name"),
        title=_col(row, "Title"),
        email=_col(row, "Email"),
        phone=phone or None,
    )


def group_contacts(rows: Iterable[Mapping[str, str]], key_column: str = "College") -> "OrderedDict[str, dict]":
    """
    Group coach rows under their parent program.

    Returns name -> {"contacts": [...], "website": str, "rows": [...]}.
    The website is the first non-empty Source seen for that program.
    """
    grouped: "OrderedDict[str, dict]" = OrderedDict()
    for row in rows:
        college = _col(row, key_column)
        if not college:
            continue
        entry = grouped.setdefault(college, {"contacts": [], "website": "", "rows": []})
        entry["contacts"].append(_contact_from_row(row))
        entry["rows"].append(row)
        source = _col(row, "Source")
        if source and not entry["website"]:
            entry["website"] = source
    return grouped


def normalize_coordinates(
    lat: Optional[float],
    lng: Optional[float],
    bounds: Optional[Tuple[float, float, float, float]] = None,
) -> Tuple[float, float, str]:
    """
    Returns (lat, lng, status) where status is "ok", "missing" or "out_of_bounds".
    Anything that is not "ok" comes back as (0.0, 0.0). Values that are not
    real latitudes/longitudes count as out of bounds even without `bounds`.
    """
    if lat is None or lng is None:
        return 0.0, 0.0, "missing"
    if not is_within_bounds(lat, lng, WORLD_BOUNDS):
        return 0.0, 0.0, "out_of_bounds"
    if bounds is not None and not is_within_bounds(lat, lng, bounds):
        return 0.0, 0.0, "out_of_bounds"
    return lat, lng, "ok"


def _tally(report: IngestReport, status: str) -> None:
    if status == "missing":
        report.no_coordinates += 1
    elif status == "out_of_bounds":
        report.bad_coordinates += 1


def ensure_unique_ids(programs: Sequence[Program], report: Optional[IngestReport] = None) -> List[Program]:
    """Suffix colliding ids within a division with -2, -3, ..."""
    seen: Dict[Tuple[str, str], int] = {}
    out: List[Program] = []
    for program in programs:
        key = (program.division, program.id)
        count = seen.get(key, 0) + 1
        seen[key] = count
        if count == 1:
            out.append(program)
            continue
        new_id = f"{program.id}-{count}"
        while (program.division, new_id) in seen:
            count += 1
            new_id = f"{program.id}-{count}"
        seen[(program.division, new_id)] = 1
        logger.warning("Duplicate id %s in %s; renamed %s to %s", program.id, program.division, program.name, new_id)
        if report is not None:
            report.duplicate_ids.append(program.name)
        out.append(replace(program, id=new_id))
    return out


def sort_by_name(programs: Iterable[Program]) -> List[Program]:
    return sorted(programs, key=lambda p: p.name.lower())


# ===================== D1 =====================

def build_d1_programs(
    coaches_csv: Path | str,
    locations_csv: Path | str,
    state_regions: Mapping[str, str],
) -> Tuple[List[Program], IngestReport]:
    report = IngestReport()

    locations = {name_key(_col(r, "College Name")): r for r in read_csv_records(locations_csv)}
    grouped = group_contacts(read_csv_records(coaches_csv), key_column="College")

    programs: List[Program] = []
    for college, entry in grouped.items():
        location = locations.get(name_key(college))
        if location is None:
            report.missing_locations.append(college)
            continue

        first_row = entry["rows"][0]
        state = _col(location, "State").upper()
        lat, lng, status = normalize_coordinates(
            parse_coordinate(location.get("Latitude")),
            parse_coordinate(location.get("Longitude")),
        )
        _tally(report, status)

        programs.append(
            Program(
                id=slugify(college),
                name=college,
                division="D1",
                conference=_col(location, "Primary Conference") or _col(first_row, "Conference") or "Unknown",
                city=_col(location, "City"),
                state=state,
                region=state_regions.get(state, UNKNOWN_REGION),
                lat=lat,
                lng=lng,
                coaches=tuple(entry["contacts"]),
                website=entry["website"] or None,
            )
        )

    programs = ensure_unique_ids(sort_by_name(programs), report)
    report.programs = len(programs)
    return programs, report


# ===================== D2 / D3 =====================

def build_division_programs(
    division: str,
    coaches_csv: Path | str,
    locations_csv: Path | str,
    state_regions: Mapping[str, str],
) -> Tuple[List[Program], IngestReport]:
    """
    One program per location row; coaches are attached when the coach file
    lists the same college name.
    """
    report = IngestReport()
    grouped = group_contacts(read_csv_records(coaches_csv), key_column="College")

    programs: List[Program] = []
    for row in read_csv_records(locations_csv):
        college = _col(row, "College")
        if not college:
            continue
        state = _col(row, "State").upper()
        entry = grouped.get(college, {"contacts": [], "website": ""})
        lat, lng, status = normalize_coordinates(
            parse_coordinate(row.get("Latitude")),
            parse_coordinate(row.get("Longitude")),
        )
        _tally(report, status)

        programs.append(
            Program(
                id=slugify(college),
                name=college,
                division=division,
                conference=_col(row, "Conference"),
                city=_col(row, "City") or guess_city(college, state),
                state=state,
                region=state_regions.get(state, UNKNOWN_REGION),
                lat=lat,
                lng=lng,
                coaches=tuple(entry["contacts"]),
                website=entry["website"] or None,
            )
        )

    programs = ensure_unique_ids(programs, report)
    report.programs = len(programs)
    return programs, report


# ===================== ECNL =====================

def extract_state(address: str, state_codes: Mapping[str, str]) -> str:
    if not address:
        return ""
    # Longest names first so "West Virginia" wins over "Virginia".
    for state_name in sorted(state_codes, key=len, reverse=True):
        if state_name in address:
            return state_codes[state_name]
    return ""


def parse_club_emails(raw: str) -> List[str]:
    emails = [e.strip() for e in (raw or "").split(";")]
    return [e for e in emails if e and e.lower() not in PLACEHOLDER_EMAILS]


def build_ecnl_clubs(
    db_csv: Path | str,
    locations_csv: Path | str,
    conference_regions: Mapping[str, str],
    state_codes: Mapping[str, str],
    bounds: Tuple[float, float, float, float],
) -> Tuple[List[Program], IngestReport]:
    """
    ECNL clubs: contacts are bare email addresses, region comes from the
    league conference, state is pulled from the street address.

    Coordinates outside `bounds` are treated as bad geocoding and zeroed.
    """
    report = IngestReport()
    locations = {_col(r, "Club Name"): r for r in read_csv_records(locations_csv)}

    programs: List[Program] = []
    for row in read_csv_records(db_csv):
        club = _col(row, "Club Name")
        if not club:
            continue
        location = locations.get(club, {})
        conference = _col(location, "Conference")

        lat, lng, status = normalize_coordinates(
            parse_coordinate(location.get("Latitude")),
            parse_coordinate(location.get("Longitude")),
            bounds=bounds,
        )
        _tally(report, status)

        contacts = tuple(
            Contact(name=ECNL_CONTACT_NAME, title=ECNL_CONTACT_TITLE, email=email)
            for email in parse_club_emails(_col(row, "Emails"))
        )

        programs.append(
            Program(
                id=slugify(club),
                name=club,
                division=ECNL_DIVISION,
                conference=conference,
                city="",
                state=extract_state(_col(location, "Address"), state_codes),
                region=conference_regions.get(conference, UNKNOWN_REGION),
                lat=lat,
                lng=lng,
                coaches=contacts,
                website=_col(row, "Source URL") or None,
            )
        )

    programs = ensure_unique_ids(sort_by_name(programs), report)
    report.programs = len(programs)
    return programs, report


# ===================== COLLECTION-LEVEL OPS =====================

def merge_division(existing: Iterable[Program], new_programs: Iterable[Program], division: str) -> List[Program]:
    """Replace every program of `division` in `existing` with `new_programs`."""
    kept = [p for p in existing if p.division != division]
    return kept + [p for p in new_programs if p.division == division]


def update_coordinates(
    programs: Iterable[Program],
    locations_csv: Path | str,
    name_column: str = "College Name",
) -> Tuple[List[Program], IngestReport]:
    """Overwrite lat/lng from a location file, matched on exact program name."""
    report = IngestReport()
    coords: Dict[str, Tuple[Optional[float], Optional[float]]] = {}
    for row in read_csv_records(locations_csv):
        name = _col(row, name_column)
        if name:
            coords[name] = (parse_coordinate(row.get("Latitude")), parse_coordinate(row.get("Longitude")))

    out: List[Program] = []
    for program in programs:
        if program.name not in coords:
            out.append(program)
            continue
        lat, lng, status = normalize_coordinates(*coords[program.name])
        _tally(report, status)
        if (lat, lng) != (program.lat, program.lng):
            logger.info("Updated %s: (%s, %s) -> (%s, %s)", program.name, program.lat, program.lng, lat, lng)
            report.updated.append(program.name)
        out.append(replace(program, lat=lat, lng=lng))

    report.programs = len(out)
    return out, report


def collect_conferences(programs: Iterable[Program]) -> List[str]:
    return sorted({p.conference for p in programs if p.conference})


# ===================== JSON SNAPSHOT I/O =====================

def load_programs(path: Path | str) -> List[Program]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return [Program.from_dict(item) for item in data]


def write_programs(path: Path | str, programs: Iterable[Program]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump([p.to_dict() for p in programs], f, indent=2)
        f.write("\n")


def load_conferences(path: Path | str) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return list(json.load(f))


def write_conferences(path: Path | str, conferences: Iterable[str]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(sorted(set(conferences)), f, indent=2)
        f.write("\n")


# ===================== SQL SEED =====================

def _sql_literal(value) -> str:
    if value is None or value == "":
        return "NULL"
    if isinstance(value, (int, float)):
        return repr(value)
    return "'" + str(value).replace("'", "''") + "'"


def render_seed_sql(programs: Sequence[Program]) -> str:
    """INSERT statements for the colleges and coaches tables."""
    lines = ["-- Seed data for Recruit360", ""]

    if programs:
        lines.append("INSERT INTO colleges (id, name, division, conference, city, state, region, lat, lng, website) VALUES")
        values = []
        for p in programs:
            values.append(
                "(" + ", ".join(
                    _sql_literal(v)
                    for v in (p.id, p.name, p.division, p.conference, p.city, p.state, p.region, p.lat, p.lng, p.website)
                ) + ")"
            )
        lines.append(",\n".join(values) + ";")

    coach_rows = [
        (p.id, c.name, c.title, c.email, c.phone)
        for p in programs
        for c in p.coaches
    ]
    if coach_rows:
        lines.append("")
        lines.append("INSERT INTO coaches (college_id, name, title, email, phone) VALUES")
        lines.append(
            ",\n".join("(" + ", ".join(_sql_literal(v) for v in row) + ")" for row in coach_rows) + ";"
        )

    lines.append("")
    lines.append(f"-- Total colleges: {len(programs)}")
    lines.append(f"-- Total coaches: {len(coach_rows)}")
    return "\n".join(lines) + "\n"
