"""
RSS 2.0 feed of the most recently zapped links.

RSS 2.0 reference: https://www.rssboard.org/rss-specification
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from zapit.core.errors import InternalStoreError
from zapit.core.xmltext import strip_xml_illegal
from zapit.crud.links import list_recent
from zapit.db.session import Database
from zapit.schemas.link import LinkRecord

logger = logging.getLogger(__name__)

FEED_PAGE_SIZE = 50

FEED_TITLE = "ZapIt ⚡"
FEED_DESCRIPTION = "Web link to an RSS feed."
IMAGE_TITLE = "Link icon"
ASSETS_PATH = "assets"
IMAGE = "link-solid.png"

RSS_CONTENT_TYPE = "application/rss+xml; charset=utf-8"


def rfc2822(value: datetime) -> str:
    """Format a naive-UTC timestamp as an RSS pubDate, e.g. ``Tue, 10 Jun 2003 04:00:00 +0000``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value.astimezone(timezone.utc))


def icon_url(domain: str) -> str:
    return f"{domain.rstrip('/')}/{ASSETS_PATH}/{IMAGE}"


@dataclass(frozen=True)
class FeedEntry:
    link: str
    pub_date: datetime
    title: Optional[str] = None

    @classmethod
    def from_record(cls, record: LinkRecord) -> "FeedEntry":
        return cls(link=record.link, pub_date=record.pub_date, title=record.title)


@dataclass(frozen=True)
class FeedDocument:
    link: str
    image_url: str
    title: str = FEED_TITLE
    description: str = FEED_DESCRIPTION
    entries: List[FeedEntry] = field(default_factory=list)

    def to_element(self) -> ET.Element:
        rss = ET.Element("rss", version="2.0")
        channel = ET.SubElement(rss, "channel")
        ET.SubElement(channel, "title").text = self.title
        ET.SubElement(channel, "link").text = self.link
        ET.SubElement(channel, "description").text = self.description

        image = ET.SubElement(channel, "image")
        ET.SubElement(image, "url").text = self.image_url
        ET.SubElement(image, "title").text = IMAGE_TITLE
        ET.SubElement(image, "link").text = self.link

        for entry in self.entries:
            item = ET.SubElement(channel, "item")
            if entry.title:
                ET.SubElement(item, "title").text = strip_xml_illegal(entry.title)
            link = strip_xml_illegal(entry.link)
            ET.SubElement(item, "link").text = link
            ET.SubElement(item, "guid", isPermaLink="true").text = link
            ET.SubElement(item, "pubDate").text = rfc2822(entry.pub_date)
        return rss

    def to_xml(self) -> bytes:
        return ET.tostring(self.to_element(), encoding="utf-8", xml_declaration=True)


def render(db: Database, domain: str) -> FeedDocument:
    try:
        with db.session() as session:
            rows = list_recent(session, limit=FEED_PAGE_SIZE)
            records = [LinkRecord.model_validate(r) for r in rows]
    except SQLAlchemyError as exc:
        logger.exception("[feed] database error generating feed")
        raise InternalStoreError(str(exc)) from exc

    logger.debug("[feed] rendering %d entries", len(records))
    return FeedDocument(
        link=domain,
        image_url=icon_url(domain),
        entries=[FeedEntry.from_record(r) for r in records],
    )
