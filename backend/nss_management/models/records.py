"""
NSS Management Backend: Record SQLAlchemy Models
==================================================

What:  ORM models for the three record tables: volunteers, events, activities.
Why:   Maps Python objects to database rows for type-safe database operations.
Who:   Used by the RecordStore for CRUD operations and by Alembic for schema management.

Table Design:
    - UUID primary key generated in Python (works on PostgreSQL and SQLite)
    - created_at / updated_at: UTC, timezone-aware, maintained by the store
    - volunteers.email carries a UNIQUE constraint; the validation layer
      checks it first, the constraint backs it up under concurrent writes
    - events.date / activities.date are indexed for the sorted list queries
    - String columns are unbounded Text
    - No foreign keys: the three record types are independent
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from nss_management.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampedRecord:
    """Columns shared by every record table."""

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )


class Volunteer(TimestampedRecord, Base):
    __tablename__ = "volunteers"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    phone: Mapped[str | None] = mapped_column(Text, nullable=True)
    college: Mapped[str | None] = mapped_column(Text, nullable=True)
    hours_completed: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    status: Mapped[str] = mapped_column(Text, nullable=False, default="Active")

    def __repr__(self) -> str:
        return f"<Volunteer(id={self.id}, email='{self.email}')>"


class Event(TimestampedRecord, Base):
    __tablename__ = "events"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    location: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(Text, nullable=False, default="Upcoming")

    __table_args__ = (
        Index("idx_events_date", "date"),
    )

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, name='{self.name}', date='{self.date}')>"


class Activity(TimestampedRecord, Base):
    __tablename__ = "activities"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    hours: Mapped[float] = mapped_column(Float, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(Text, nullable=False, default="Completed")

    __table_args__ = (
        Index("idx_activities_date", "date"),
    )

    def __repr__(self) -> str:
        return f"<Activity(id={self.id}, name='{self.name}', date='{self.date}')>"
