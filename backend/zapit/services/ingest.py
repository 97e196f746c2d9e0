"""Link ingestion: validate, timestamp, insert."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from pydantic import AnyUrl, TypeAdapter, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from zapit.core.errors import (
    DuplicateLink,
    InternalStoreError,
    InvalidLink,
    InvalidPubDate,
    InvalidTitle,
)
from zapit.core.xmltext import has_xml_illegal
from zapit.crud.links import InsertStatus, create
from zapit.db.session import Database
from zapit.schemas.link import LinkCreated, LinkSubmission

logger = logging.getLogger(__name__)

_URL = TypeAdapter(AnyUrl)


def validate_link(link: str) -> None:
    """Raise InvalidLink unless ``link`` is an absolute URL with a scheme and host."""
    if not link or not link.strip():
        raise InvalidLink(link, "empty")
    # Stored raw; the URL parser would have percent-encoded these
    if has_xml_illegal(link):
        raise InvalidLink(link, "contains characters not allowed in XML")
    try:
        url = _URL.validate_python(link)
    except ValidationError as exc:
        raise InvalidLink(link, exc.errors()[0]["msg"]) from None
    if not url.host:
        raise InvalidLink(link, "missing host")


def validate_title(title: Optional[str]) -> None:
    if title is not None and has_xml_illegal(title):
        raise InvalidTitle(title, "contains characters not allowed in XML")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def normalize_pub_date(value: Optional[datetime]) -> datetime:
    """
    Naive UTC, whole seconds.
    None means "now", taken at call time. Aware values are converted to UTC.
    """
    if value is None:
        value = utc_now()
    if value.tzinfo is not None:
        try:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        except OverflowError:
            raise InvalidPubDate(value) from None
    # RFC 2822 pubDate has no sub-second field
    return value.replace(microsecond=0)


def submit(db: Database, candidate: LinkSubmission) -> LinkCreated:
    validate_link(candidate.link)
    validate_title(candidate.title)
    pub_date = normalize_pub_date(candidate.pub_date)

    try:
        with db.session() as session:
            outcome = create(
                session,
                title=candidate.title,
                link=candidate.link,
                pub_date=pub_date,
            )
    except SQLAlchemyError as exc:
        logger.exception("[ingest] store failure for %s", candidate.link)
        raise InternalStoreError(str(exc)) from exc

    if outcome.status is InsertStatus.DUPLICATE:
        logger.info("[ingest] duplicate link %s", candidate.link)
        raise DuplicateLink(candidate.link)

    logger.info("[ingest] zapped #%s %s", outcome.id, candidate.link)
    return LinkCreated(id=outcome.id)
