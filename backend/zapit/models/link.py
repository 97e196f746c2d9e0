from sqlalchemy import Column, DateTime, Index, Integer, Text, UniqueConstraint
from zapit.models.base import Base


class Link(Base):
    __tablename__ = "items"

    # AUTOINCREMENT on SQLite so ids are never reused
    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=True)
    link = Column(Text, nullable=False)
    # Naive UTC, whole seconds
    pub_date = Column(DateTime, nullable=False)

    __table_args__ = (
        UniqueConstraint("link", name="uq_items_link"),
        Index("ix_items_pub_date", "pub_date"),
        {"sqlite_autoincrement": True},
    )
