# roles.py
from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List

from .models import Contact, Program


class CoachRole(str, Enum):
    HEAD = "head"
    ASSISTANT = "assistant"
    ASSOCIATE = "associate"


ALL_ROLES = (CoachRole.HEAD, CoachRole.ASSISTANT, CoachRole.ASSOCIATE)

ROLE_LABELS: Dict[CoachRole, str] = {
    CoachRole.HEAD: "Head Coaches",
    CoachRole.ASSISTANT: "Assistant Coaches",
    CoachRole.ASSOCIATE: "Associate Head Coaches",
}


def classify_coach_role(title: str) -> CoachRole:
    """
    Map a free-text staff title to a role.

    Associate-head patterns are checked first: "Associate Head Coach"
    also contains "head coach".
    """
    t = (title or "").lower()
    if "associate head" in t or "associate hd" in t:
        return CoachRole.ASSOCIATE
    if "head coach" in t or t == "head" or "hd coach" in t:
        return CoachRole.HEAD
    return CoachRole.ASSISTANT


def filter_contacts_by_roles(contacts: Iterable[Contact], roles: Iterable[CoachRole]) -> List[Contact]:
    wanted = set(roles)
    return [c for c in contacts if classify_coach_role(c.title) in wanted]


def count_roles(programs: Iterable[Program]) -> Dict[CoachRole, int]:
    """Per-role counts of contacts that have an email address."""
    counts = {role: 0 for role in ALL_ROLES}
    for program in programs:
        for contact in program.coaches:
            if contact.email:
                counts[classify_coach_role(contact.title)] += 1
    return counts
