"""
NSS Management Backend: Record Store
======================================

What:  Persistence operations for one record type: find-all, find-by-id,
       find-one-by-field, insert, update, delete-by-id.
Why:   Keeps SQLAlchemy query construction out of the CRUD service so the
       service can be unit-tested against a mocked store or session.
How:   Works on the request's AsyncSession. Writes are flushed immediately so
       constraint violations surface inside the request; the commit happens in
       get_db_session once the handler returns.

Error mapping:
    Unique-constraint IntegrityError           → DuplicateKeyError
    Any other IntegrityError                   → ValidationError
    Non-UUID identifier                        → DatabaseError (malformed id)
    Anything else                              → propagates to the service
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from nss_management.exceptions import DatabaseError, DuplicateKeyError, ValidationError
from nss_management.models.records import utcnow
from nss_management.services.resources import ResourceType

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


class RecordStore:
    """SQLAlchemy-backed collection of records of a single type."""

    def __init__(self, resource: ResourceType):
        self.resource = resource
        self.model = resource.model

    def parse_id(self, raw_id: str) -> uuid.UUID:
        """Convert a path identifier to a UUID, rejecting malformed values."""
        try:
            return uuid.UUID(str(raw_id))
        except ValueError:
            raise DatabaseError(
                message=f"Invalid {self.resource.name.lower()} id '{raw_id}'",
                context={"resource": self.resource.name, "resource_id": str(raw_id)},
            )

    async def find_all(self, db: AsyncSession) -> List[Any]:
        query = select(self.model)
        if self.resource.sort_field:
            column = getattr(self.model, self.resource.sort_field)
            query = query.order_by(column.desc() if self.resource.sort_descending else column.asc())
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_by_id(self, db: AsyncSession, record_id: uuid.UUID) -> Optional[Any]:
        result = await db.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def find_one_by(self, db: AsyncSession, attribute: str, value: Any) -> Optional[Any]:
        column = getattr(self.model, attribute)
        result = await db.execute(select(self.model).where(column == value).limit(1))
        return result.scalar_one_or_none()

    async def insert(self, db: AsyncSession, values: Dict[str, Any]) -> Any:
        now = utcnow()
        record = self.model(id=uuid.uuid4(), created_at=now, updated_at=now, **values)
        db.add(record)
        await self._flush(db)
        return record

    async def update(self, db: AsyncSession, record: Any, changes: Dict[str, Any]) -> Any:
        for attribute, value in changes.items():
            setattr(record, attribute, value)
        record.updated_at = utcnow()
        await self._flush(db)
        return record

    async def delete_by_id(self, db: AsyncSession, record_id: uuid.UUID) -> Optional[Any]:
        record = await self.find_by_id(db, record_id)
        if record is None:
            return None
        await db.delete(record)
        await db.flush()
        return record

    async def _flush(self, db: AsyncSession) -> None:
        try:
            await db.flush()
        except IntegrityError as e:
            if self.resource.unique_fields and _is_unique_violation(e):
                attribute = self.resource.unique_fields[0]
                wire = self.resource.wire_name(attribute)
                logger.warning("Unique constraint rejected %s write: %s", self.resource.name, e.orig)
                raise DuplicateKeyError(
                    message=f"{wire.capitalize()} already exists",
                    field=wire,
                )
            logger.warning("Constraint rejected %s write: %s", self.resource.name, e.orig)
            raise ValidationError(
                message=f"{self.resource.name} validation failed: {e.orig}",
                context={"resource": self.resource.name},
            )


def _is_unique_violation(error: IntegrityError) -> bool:
    # asyncpg reports SQLSTATE 23505; SQLite only has the message text
    code = getattr(error.orig, "sqlstate", None) or getattr(error.orig, "pgcode", None)
    if code == UNIQUE_VIOLATION:
        return True
    text = str(error.orig).lower()
    return "unique constraint" in text or "duplicate key" in text
