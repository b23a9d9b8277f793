"""
NSS Management Backend: Validation Layer
==========================================

What:  Write-time rules for records: body coercion, defaults, required fields
       and uniqueness.
Why:   Every create and update passes through the same checks regardless of
       record type; the ResourceType descriptor supplies the per-type rules.
How:
    prepare_create(resource, payload)          → full value dict for insert
    prepare_update(resource, record, payload)  → changed fields only
    ensure_unique(db, store, values, exclude)  → DuplicateKeyError on clash

Update semantics (partial merge):
    Only fields present in the body change. The merged record (stored values
    overlaid with the body) must still satisfy the required-field rules, so
    {"name": ""} on an existing record is rejected just like on create. An
    explicit null on a defaulted field (status, hoursCompleted) resets it to
    the default, on create and on update alike.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from nss_management.exceptions import DuplicateKeyError, ValidationError
from nss_management.services.record_store import RecordStore
from nss_management.services.resources import ResourceType

logger = logging.getLogger(__name__)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _normalize(value: Any) -> Any:
    # Datetimes are stored in UTC; naive values are taken as UTC
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return value


def coerce_payload(resource: ResourceType, payload: Any) -> Dict[str, Any]:
    """
    Parse a request body into attribute values for the record type.

    Returns only the fields the client supplied (keyed by attribute name).
    Unknown keys, `_id` and timestamps are dropped.

    Raises:
        ValidationError: body is not an object or a value has the wrong type
    """
    if not isinstance(payload, dict):
        raise ValidationError(
            message=f"{resource.name} validation failed: request body must be a JSON object",
        )
    try:
        parsed = resource.input_schema.model_validate(payload)
    except PydanticValidationError as e:
        problems = []
        fields = []
        for error in e.errors():
            loc = ".".join(str(part) for part in error["loc"]) or "body"
            fields.append(loc)
            problems.append(f"{loc}: {error['msg']}")
        raise ValidationError(
            message=f"{resource.name} validation failed: " + ", ".join(problems),
            field=fields[0] if fields else None,
            context={"fields": fields},
        )
    return {
        attribute: _normalize(value)
        for attribute, value in parsed.model_dump(exclude_unset=True).items()
    }


def check_required(resource: ResourceType, values: Dict[str, Any]) -> None:
    """Raise ValidationError naming every required field that is missing or blank."""
    missing = [
        resource.wire_name(attribute)
        for attribute in resource.required_fields
        if _is_blank(values.get(attribute))
    ]
    if missing:
        raise ValidationError(
            message=(
                f"{resource.name} validation failed: "
                + ", ".join(f"{name} is required" for name in missing)
            ),
            field=missing[0],
            context={"missing": missing},
        )


def _apply_defaults(resource: ResourceType, supplied: Dict[str, Any]) -> Dict[str, Any]:
    # null on a defaulted field means "use the default"
    return {
        attribute: resource.defaults[attribute] if value is None and attribute in resource.defaults else value
        for attribute, value in supplied.items()
    }


def prepare_create(resource: ResourceType, payload: Any) -> Dict[str, Any]:
    values = dict(resource.defaults)
    values.update(_apply_defaults(resource, coerce_payload(resource, payload)))
    check_required(resource, values)
    return values


def prepare_update(resource: ResourceType, record: Any, payload: Any) -> Dict[str, Any]:
    changes = _apply_defaults(resource, coerce_payload(resource, payload))
    merged = {attribute: getattr(record, attribute) for attribute in resource.writable_fields}
    merged.update(changes)
    check_required(resource, merged)
    return changes


async def ensure_unique(
    db: AsyncSession,
    store: RecordStore,
    values: Dict[str, Any],
    exclude_id: Optional[uuid.UUID] = None,
) -> None:
    """
    Check the record type's unique fields against stored records.

    Only attributes present in `values` are checked, so an update that leaves
    the email untouched does not query for it. `exclude_id` skips the record
    being updated.

    Raises:
        DuplicateKeyError: another record already holds the value
    """
    resource = store.resource
    for attribute in resource.unique_fields:
        if attribute not in values or _is_blank(values[attribute]):
            continue
        existing = await store.find_one_by(db, attribute, values[attribute])
        if existing is not None and existing.id != exclude_id:
            wire = resource.wire_name(attribute)
            logger.info("Rejected duplicate %s %s", resource.name, wire)
            raise DuplicateKeyError(
                message=f"{wire.capitalize()} already exists",
                field=wire,
            )
