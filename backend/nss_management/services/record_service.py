"""
NSS Management Backend: Record Service (Generic CRUD Handler)
===============================================================

What:  The five CRUD operations (list, get, create, update, delete) for one
       record type, parameterized by a ResourceType descriptor.
Why:   Volunteers, events and activities follow the same request pattern:
       validate, run one store operation, map the outcome. Implemented once,
       instantiated three times.
Who:   Called by the routes built in routes/records.py.

Outcome mapping:
    Operation | Success                 | Failure
    ----------|-------------------------|-------------------------------------------
    list      | all records (sorted)    | store failure → DatabaseError
    get       | record                  | miss → NotFoundError; bad id/store → DatabaseError
    create    | created record          | ValidationError / DuplicateKeyError
    update    | merged record           | miss → NotFoundError; bad id/rules → ValidationError
    delete    | confirmation message    | miss → NotFoundError; bad id/store → DatabaseError

Design Decision:
    RecordService is stateless apart from its descriptor and store; it
    receives the db session on every call, like the rest of the service layer.
"""

import logging
from typing import Any, List

from sqlalchemy.ext.asyncio import AsyncSession

from nss_management.exceptions import (
    DatabaseError,
    NotFoundError,
    NSSManagementError,
    ValidationError,
)
from nss_management.schemas.records import MessageResponse
from nss_management.services import validation
from nss_management.services.record_store import RecordStore
from nss_management.services.resources import (
    ACTIVITIES,
    EVENTS,
    VOLUNTEERS,
    ResourceType,
)

logger = logging.getLogger(__name__)


def _error_text(exc: Exception) -> str:
    # SQLAlchemy wraps driver errors; the driver's text is the useful part
    return str(getattr(exc, "orig", None) or exc)


class RecordService:
    """
    CRUD operations for a single record type.

    Error Handling Strategy:
        Application exceptions propagate unchanged. Anything else raised by
        the store is logged and wrapped in DatabaseError carrying the raw
        error text.
    """

    def __init__(self, resource: ResourceType, store: RecordStore | None = None):
        self.resource = resource
        self.store = store or RecordStore(resource)

    def _to_response(self, record: Any):
        return self.resource.response_schema.model_validate(record)

    def _store_failure(self, action: str, exc: Exception) -> DatabaseError:
        logger.error("Error %s %s: %s", action, self.resource.path, exc, exc_info=True)
        return DatabaseError(
            message=_error_text(exc),
            context={"resource": self.resource.name, "error_type": type(exc).__name__},
        )

    async def list_records(self, db: AsyncSession) -> List[Any]:
        """Return every record, ordered per the descriptor's sort rule."""
        try:
            records = await self.store.find_all(db)
        except NSSManagementError:
            raise
        except Exception as e:
            raise self._store_failure("fetching", e)
        return [self._to_response(record) for record in records]

    async def get_record(self, db: AsyncSession, record_id: str):
        """
        Retrieve a single record by id.

        Raises:
            NotFoundError: no record with this id (→ 404)
            DatabaseError: malformed id or query failure (→ 500)
        """
        try:
            record = await self.store.find_by_id(db, self.store.parse_id(record_id))
        except NSSManagementError:
            raise
        except Exception as e:
            raise self._store_failure("fetching", e)

        if record is None:
            raise NotFoundError(resource=self.resource.name, resource_id=record_id)
        return self._to_response(record)

    async def create_record(self, db: AsyncSession, payload: Any):
        """
        Validate a body and insert it as a new record.

        Defaults fill fields the body omits. For volunteers the email is
        checked for uniqueness before the insert; the table's unique
        constraint catches races between concurrent creates.

        Raises:
            ValidationError: missing required field or uncoercible value (→ 400)
            DuplicateKeyError: unique field already taken (→ 400)
        """
        values = validation.prepare_create(self.resource, payload)
        try:
            await validation.ensure_unique(db, self.store, values)
            record = await self.store.insert(db, values)
        except NSSManagementError:
            raise
        except Exception as e:
            raise self._store_failure("creating", e)

        logger.info("%s created: %s", self.resource.name, record.id)
        return self._to_response(record)

    async def update_record(self, db: AsyncSession, record_id: str, payload: Any):
        """
        Apply a partial update to an existing record.

        Only fields present in the body change; the merged record is
        re-validated. A malformed id is reported as a validation error,
        since every rejected write on this path answers 400.

        Raises:
            NotFoundError: no record with this id (→ 404)
            ValidationError / DuplicateKeyError: rejected write (→ 400)
        """
        try:
            record_uuid = self.store.parse_id(record_id)
        except DatabaseError as e:
            raise ValidationError(message=e.message, field="_id")

        try:
            record = await self.store.find_by_id(db, record_uuid)
            if record is None:
                raise NotFoundError(resource=self.resource.name, resource_id=record_id)
            changes = validation.prepare_update(self.resource, record, payload)
            await validation.ensure_unique(db, self.store, changes, exclude_id=record.id)
            record = await self.store.update(db, record, changes)
        except NSSManagementError:
            raise
        except Exception as e:
            raise self._store_failure("updating", e)

        logger.info("%s updated: %s (%s)", self.resource.name, record.id, ", ".join(changes) or "no changes")
        return self._to_response(record)

    async def delete_record(self, db: AsyncSession, record_id: str) -> MessageResponse:
        """
        Delete a record by id.

        Raises:
            NotFoundError: no record with this id (→ 404)
            DatabaseError: malformed id or query failure (→ 500)
        """
        try:
            record = await self.store.delete_by_id(db, self.store.parse_id(record_id))
        except NSSManagementError:
            raise
        except Exception as e:
            raise self._store_failure("deleting", e)

        if record is None:
            raise NotFoundError(resource=self.resource.name, resource_id=record_id)

        logger.info("%s deleted: %s", self.resource.name, record_id)
        return MessageResponse(message=f"{self.resource.name} deleted successfully")


# ── Service Instances ─────────────────────────────────────────────────────
volunteer_service = RecordService(VOLUNTEERS)
event_service = RecordService(EVENTS)
activity_service = RecordService(ACTIVITIES)

record_services = (volunteer_service, event_service, activity_service)
