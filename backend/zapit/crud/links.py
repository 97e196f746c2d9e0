from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from zapit.models.link import Link

# SQLite extended result name / Postgres SQLSTATE for a unique violation
_UNIQUE_VIOLATION_CODES = {"SQLITE_CONSTRAINT_UNIQUE", "23505"}


class InsertStatus(enum.Enum):
    CREATED = "created"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class InsertOutcome:
    status: InsertStatus
    id: Optional[int] = None


def is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    for attr in ("sqlite_errorname", "sqlstate", "pgcode"):
        if getattr(orig, attr, None) in _UNIQUE_VIOLATION_CODES:
            return True
    return "unique" in str(orig).lower()


def create(
    db: Session,
    *,
    link: str,
    pub_date: datetime,
    title: Optional[str] = None,
) -> InsertOutcome:
    """
    Insert one row and commit.
    A unique violation comes back as DUPLICATE; every other database error propagates.
    """
    row = Link(title=title, link=link, pub_date=pub_date)
    db.add(row)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if is_unique_violation(exc):
            return InsertOutcome(InsertStatus.DUPLICATE)
        raise
    return InsertOutcome(InsertStatus.CREATED, row.id)


def list_recent(db: Session, limit: int = 50) -> List[Link]:
    return (
        db.query(Link)
        .order_by(desc(Link.pub_date), desc(Link.id))
        .limit(limit)
        .all()
    )
