# recruit360 package
# Soccer program directory: ingestion transforms, facet filtering, radius search and bulk-email helpers.

from .models import (
    Contact,
    Program,
    LocationSearch,
    FilterState,
    DIVISIONS,
    MODE_NCAA,
    MODE_ECNL,
)
from .geo import haversine_miles, miles_to_meters, is_within_bounds
from .roles import CoachRole, classify_coach_role, filter_contacts_by_roles, count_roles
from .mailto import MAX_MAILTO_LENGTH, build_mailto_links, collect_emails, compose_email
from .filters import ProgramFilter, find_program, find_programs
from .datasource import DataSource, FallbackDataSource, SnapshotDataSource, StaticDataSource
from .exceptions import DatasetUnavailableError, GeocodeError, LocationNotFoundError, RecruitError

__all__ = [
    # Models
    "Contact",
    "Program",
    "LocationSearch",
    "FilterState",
    "DIVISIONS",
    "MODE_NCAA",
    "MODE_ECNL",
    # Geo
    "haversine_miles",
    "miles_to_meters",
    "is_within_bounds",
    # Roles
    "CoachRole",
    "classify_coach_role",
    "filter_contacts_by_roles",
    "count_roles",
    # Mailto
    "MAX_MAILTO_LENGTH",
    "build_mailto_links",
    "collect_emails",
    "compose_email",
    # Filtering
    "ProgramFilter",
    "find_program",
    "find_programs",
    # Data sources
    "DataSource",
    "FallbackDataSource",
    "SnapshotDataSource",
    "StaticDataSource",
    # Errors
    "RecruitError",
    "DatasetUnavailableError",
    "GeocodeError",
    "LocationNotFoundError",
]
