from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, sessionmaker

from recruit360.datasource import DataSource
from recruit360.logging_utils import get_logger
from recruit360.models import Contact, Program
from settings.regions import region_for_state

from . import models

logger = get_logger(__name__)

BATCH_SIZE = 100


def college_to_program(college: models.College, contacts: List[Contact]) -> Program:
    state = college.state or ""
    return Program(
        id=college.id,
        name=college.name,
        division=college.division,
        conference=college.conference or "",
        city=college.city or "",
        state=state,
        region=college.region or region_for_state(state),
        lat=college.lat,
        lng=college.lng,
        coaches=tuple(contacts),
        website=college.website or None,
    )


class DatabaseDataSource(DataSource):
    """
    Programs from the `colleges` table joined with `coaches` rows on
    college_id. Errors propagate; FallbackDataSource decides what to do.
    """

    name = "database"

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def load_programs(self) -> List[Program]:
        with self.session_factory() as db:
            colleges = db.execute(select(models.College).order_by(models.College.name)).scalars().all()
            coaches = db.execute(select(models.Coach).order_by(models.Coach.id)).scalars().all()

            by_college: Dict[str, List[Contact]] = defaultdict(list)
            for coach in coaches:
                by_college[coach.college_id].append(
                    Contact(
                        name=coach.name,
                        title=coach.title or "",
                        email=coach.email or "",
                        phone=coach.phone or None,
                    )
                )

            return [college_to_program(c, by_college.get(c.id, [])) for c in colleges]

    def load_conferences(self) -> List[str]:
        with self.session_factory() as db:
            rows = db.execute(select(models.College.conference).distinct()).scalars().all()
        return sorted({r for r in rows if r})


def _batches(items: Sequence, size: int) -> Iterable[Sequence]:
    for i in range(0, len(items), size):
        yield items[i : i + size]


def upsert_programs(db: Session, programs: Sequence[Program], batch_size: int = BATCH_SIZE) -> int:
    """
    Insert or update programs by id. Each program's coaches are deleted
    and re-inserted, so loading the same snapshot twice changes nothing.
    Returns the number of coach rows written.
    """
    now = datetime.now(timezone.utc).isoformat()
    coach_count = 0
    for batch in _batches(programs, batch_size):
        ids = [p.id for p in batch]
        db.execute(delete(models.Coach).where(models.Coach.college_id.in_(ids)))
        for p in batch:
            db.merge(
                models.College(
                    id=p.id,
                    name=p.name,
                    division=p.division,
                    conference=p.conference or None,
                    city=p.city or None,
                    state=p.state or None,
                    region=p.region or None,
                    lat=p.lat,
                    lng=p.lng,
                    website=p.website,
                    updated_at=now,
                )
            )
            for c in p.coaches:
                db.add(
                    models.Coach(
                        college_id=p.id,
                        name=c.name,
                        title=c.title or None,
                        email=c.email or None,
                        phone=c.phone or None,
                    )
                )
                coach_count += 1
        db.commit()
        logger.info("Programs: %d loaded", len(batch))
    return coach_count
