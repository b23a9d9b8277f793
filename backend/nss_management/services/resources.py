"""
NSS Management Backend: Record-Type Descriptors
=================================================

What:  Plain configuration structs describing each managed record type.
Why:   Volunteers, events and activities share one CRUD implementation; the
       only things that differ are captured here as data: which fields are
       required, which are unique, default values and list ordering.
Who:   Consumed by the validation layer, RecordStore, RecordService and the
       router factory.

Per-type rules:
    Volunteer: name + email required, email unique, unsorted list
    Event:     name + date + location required, listed by date ascending
    Activity:  name + date + hours required, listed by date descending

Only volunteers declare a unique field. Events and activities never report
duplicate-key errors.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple, Type

from pydantic import BaseModel

from nss_management.database import Base
from nss_management.models.records import Activity, Event, Volunteer
from nss_management.schemas.records import (
    ActivityInput,
    ActivityResponse,
    EventInput,
    EventResponse,
    VolunteerInput,
    VolunteerResponse,
)


@dataclass(frozen=True)
class ResourceType:
    """
    Descriptor for one record type.

    Attributes:
        name:            Singular label used in messages ("Volunteer")
        path:            URL segment under /api ("volunteers")
        model:           SQLAlchemy model class
        input_schema:    Pydantic model coercing POST/PUT bodies
        response_schema: Pydantic model serializing records
        required_fields: Attribute names that must be present and non-blank
        unique_fields:   Attribute names unique across all records of the type
        defaults:        Values applied on create for fields not supplied
        sort_field:      Attribute the list operation orders by (None = store order)
        sort_descending: Direction of sort_field ordering
    """

    name: str
    path: str
    model: Type[Base]
    input_schema: Type[BaseModel]
    response_schema: Type[BaseModel]
    required_fields: Tuple[str, ...]
    unique_fields: Tuple[str, ...] = ()
    defaults: Mapping[str, Any] = field(default_factory=dict)
    sort_field: Optional[str] = None
    sort_descending: bool = False

    @property
    def writable_fields(self) -> Tuple[str, ...]:
        return tuple(self.input_schema.model_fields)

    def wire_name(self, attribute: str) -> str:
        """JSON name of an attribute, e.g. hours_completed -> hoursCompleted."""
        info = self.input_schema.model_fields.get(attribute)
        if info is not None and info.alias:
            return info.alias
        return attribute


VOLUNTEERS = ResourceType(
    name="Volunteer",
    path="volunteers",
    model=Volunteer,
    input_schema=VolunteerInput,
    response_schema=VolunteerResponse,
    required_fields=("name", "email"),
    unique_fields=("email",),
    defaults={"hours_completed": 0, "status": "Active"},
)

EVENTS = ResourceType(
    name="Event",
    path="events",
    model=Event,
    input_schema=EventInput,
    response_schema=EventResponse,
    required_fields=("name", "date", "location"),
    defaults={"status": "Upcoming"},
    sort_field="date",
)

ACTIVITIES = ResourceType(
    name="Activity",
    path="activities",
    model=Activity,
    input_schema=ActivityInput,
    response_schema=ActivityResponse,
    required_fields=("name", "date", "hours"),
    defaults={"status": "Completed"},
    sort_field="date",
    sort_descending=True,
)

RESOURCE_TYPES = (VOLUNTEERS, EVENTS, ACTIVITIES)
