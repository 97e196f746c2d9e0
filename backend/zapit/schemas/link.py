# backend/zapit/schemas/link.py
from __future__ import annotations

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict


class LinkSubmission(BaseModel):
    # Body of POST /add
    title: Optional[str] = None
    link: str
    # Omitted -> server time at submission
    pub_date: Optional[datetime] = None


class LinkCreated(BaseModel):
    id: int


class LinkRecord(BaseModel):
    """Read-only snapshot of a stored row, detached from the session."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    title: Optional[str] = None
    link: str
    pub_date: datetime
