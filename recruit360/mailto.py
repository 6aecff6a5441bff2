# mailto.py
"""
Bulk-email helpers.

Mail clients truncate very long `mailto:` URIs, so recipient lists are
split into several links, each kept under MAX_MAILTO_LENGTH characters.
Recipients go in `bcc` so coaches do not see each other's addresses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence
from urllib.parse import quote

from .logging_utils import get_logger
from .models import MODE_ECNL, MODE_NCAA, Program
from .roles import ALL_ROLES, CoachRole, count_roles, filter_contacts_by_roles

logger = get_logger(__name__)

MAX_MAILTO_LENGTH = 1900
DEFAULT_SUBJECT = "Recruiting Inquiry"

# Same unreserved set as JavaScript's encodeURIComponent.
_SUBJECT_SAFE = "-_.!~*'()"


def encode_subject(subject: str) -> str:
    return quote(subject or "", safe=_SUBJECT_SAFE)


def unique_valid_emails(emails: Iterable[str]) -> List[str]:
    """First-seen order; drops blanks and anything without an '@'."""
    seen: Dict[str, None] = {}
    for email in emails:
        if email and "@" in email:
            seen.setdefault(email, None)
    return list(seen)


def build_mailto_links(emails: Iterable[str], subject: str) -> List[str]:
    recipients = unique_valid_emails(emails)
    if not recipients:
        return []

    encoded_subject = encode_subject(subject)
    prefix = f"mailto:?subject={encoded_subject}&bcc="
    base_length = len(prefix)

    batches: List[List[str]] = []
    batch: List[str] = []
    current_length = 0

    for email in recipients:
        added = len(email) + 1 if batch else len(email)
        if batch and base_length + current_length + added > MAX_MAILTO_LENGTH:
            batches.append(batch)
            batch = []
            current_length = 0
            added = len(email)
        batch.append(email)
        current_length += added

    if batch:
        batches.append(batch)

    if len(batches) > 1:
        logger.debug("Split %d recipients into %d mailto batches", len(recipients), len(batches))

    return [prefix + ",".join(b) for b in batches]


def collect_emails(
    programs: Iterable[Program],
    roles: Sequence[CoachRole] = ALL_ROLES,
    mode: str = MODE_NCAA,
) -> List[str]:
    """
    Gather contact emails for the selected programs.

    ECNL clubs list generic club contacts, so role filtering only
    applies to college programs.
    """
    emails: List[str] = []
    for program in programs:
        if mode == MODE_ECNL:
            contacts = list(program.coaches)
        else:
            contacts = filter_contacts_by_roles(program.coaches, roles)
        emails.extend(c.email for c in contacts if c.email)
    return list(dict.fromkeys(emails))


@dataclass
class EmailComposition:
    emails: List[str]
    links: List[str]
    role_counts: Dict[CoachRole, int] = field(default_factory=dict)

    @property
    def batch_count(self) -> int:
        return len(self.links)


def compose_email(
    programs: Sequence[Program],
    roles: Sequence[CoachRole] = ALL_ROLES,
    subject: str = DEFAULT_SUBJECT,
    mode: str = MODE_NCAA,
) -> EmailComposition:
    emails = collect_emails(programs, roles, mode)
    return EmailComposition(
        emails=emails,
        links=build_mailto_links(emails, subject),
        role_counts=count_roles(programs),
    )
