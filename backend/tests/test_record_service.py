"""
NSS Management Backend: Record Service Unit Tests
===================================================

What:  Tests for the generic CRUD service (list, get, create, update, delete).
How:   Uses mock DB sessions (no real database). The same RecordService class
       is exercised with the volunteer, event and activity descriptors.

What we test:
    ✅ List ordering per record type
    ✅ Lookup miss → NotFoundError with "<Type> not found"
    ✅ Malformed id → DatabaseError on read/delete, ValidationError on update
    ✅ Create applies defaults and assigns identity
    ✅ Duplicate email (pre-check and unique constraint) → DuplicateKeyError
    ✅ Other constraint failures → ValidationError, never a duplicate
    ✅ Store failures wrapped in DatabaseError with the raw error text
"""

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from nss_management.exceptions import (
    DatabaseError,
    DuplicateKeyError,
    NotFoundError,
    ValidationError,
)
from nss_management.models.records import Event, Volunteer
from nss_management.services.record_service import RecordService
from nss_management.services.resources import ACTIVITIES, EVENTS, VOLUNTEERS


def _result(record=None, records=None):
    result = MagicMock()
    result.scalar_one_or_none.return_value = record
    result.scalars.return_value.all.return_value = records or []
    return result


def _volunteer(**overrides):
    now = datetime.now(timezone.utc)
    fields = {
        "id": uuid.uuid4(),
        "name": "Asha Verma",
        "email": "asha@example.org",
        "phone": None,
        "college": "GEC",
        "hours_completed": 10.0,
        "status": "Active",
        "created_at": now,
        "updated_at": now,
    }
    fields.update(overrides)
    return Volunteer(**fields)


def _event(day: int, **overrides):
    now = datetime.now(timezone.utc)
    fields = {
        "id": uuid.uuid4(),
        "name": f"Event {day}",
        "date": datetime(2026, 3, day, tzinfo=timezone.utc),
        "location": "Hall",
        "description": None,
        "status": "Upcoming",
        "created_at": now,
        "updated_at": now,
    }
    fields.update(overrides)
    return Event(**fields)


class TestRecordServiceList:

    @pytest.mark.asyncio
    async def test_events_ordered_by_date_ascending(self, mock_db_session):
        mock_db_session.execute.return_value = _result(records=[_event(1), _event(2)])

        result = await RecordService(EVENTS).list_records(mock_db_session)

        query = str(mock_db_session.execute.call_args.args[0])
        assert "ORDER BY events.date ASC" in query
        assert [event.name for event in result] == ["Event 1", "Event 2"]

    @pytest.mark.asyncio
    async def test_activities_ordered_by_date_descending(self, mock_db_session):
        mock_db_session.execute.return_value = _result(records=[])

        await RecordService(ACTIVITIES).list_records(mock_db_session)

        query = str(mock_db_session.execute.call_args.args[0])
        assert "ORDER BY activities.date DESC" in query

    @pytest.mark.asyncio
    async def test_volunteers_unsorted(self, mock_db_session):
        mock_db_session.execute.return_value = _result(records=[_volunteer()])

        result = await RecordService(VOLUNTEERS).list_records(mock_db_session)

        assert "ORDER BY" not in str(mock_db_session.execute.call_args.args[0])
        assert result[0].email == "asha@example.org"

    @pytest.mark.asyncio
    async def test_store_failure_wrapped(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=RuntimeError("connection refused"))

        with pytest.raises(DatabaseError, match="connection refused"):
            await RecordService(EVENTS).list_records(mock_db_session)


class TestRecordServiceGet:

    @pytest.mark.asyncio
    async def test_get_found(self, mock_db_session):
        volunteer = _volunteer()
        mock_db_session.execute.return_value = _result(record=volunteer)

        result = await RecordService(VOLUNTEERS).get_record(mock_db_session, str(volunteer.id))

        assert result.id == volunteer.id
        assert result.model_dump(by_alias=True)["hoursCompleted"] == 10.0

    @pytest.mark.asyncio
    async def test_get_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = _result(record=None)

        with pytest.raises(NotFoundError, match="^Volunteer not found$"):
            await RecordService(VOLUNTEERS).get_record(mock_db_session, str(uuid.uuid4()))

    @pytest.mark.asyncio
    async def test_get_malformed_id_is_store_error(self, mock_db_session):
        with pytest.raises(DatabaseError, match="Invalid event id"):
            await RecordService(EVENTS).get_record(mock_db_session, "not-a-uuid")

        mock_db_session.execute.assert_not_awaited()


class TestRecordServiceCreate:

    @pytest.mark.asyncio
    async def test_create_volunteer(self, mock_db_session, volunteer_payload):
        mock_db_session.execute.return_value = _result(record=None)

        result = await RecordService(VOLUNTEERS).create_record(mock_db_session, volunteer_payload)

        assert result.name == "Asha Verma"
        assert result.hours_completed == 0
        assert result.status == "Active"
        assert isinstance(result.id, uuid.UUID)
        mock_db_session.add.assert_called_once()
        mock_db_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_duplicate_email_precheck(self, mock_db_session, volunteer_payload):
        mock_db_session.execute.return_value = _result(record=_volunteer())

        with pytest.raises(DuplicateKeyError, match="Email already exists"):
            await RecordService(VOLUNTEERS).create_record(mock_db_session, volunteer_payload)

        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_duplicate_email_constraint(self, mock_db_session, volunteer_payload):
        """A concurrent insert that slips past the pre-check hits the unique constraint."""
        mock_db_session.execute.return_value = _result(record=None)
        mock_db_session.flush = AsyncMock(
            side_effect=IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed: volunteers.email"))
        )

        with pytest.raises(DuplicateKeyError):
            await RecordService(VOLUNTEERS).create_record(mock_db_session, volunteer_payload)

    @pytest.mark.asyncio
    async def test_other_constraint_failure_is_not_a_duplicate(self, mock_db_session, volunteer_payload):
        mock_db_session.execute.return_value = _result(record=None)
        mock_db_session.flush = AsyncMock(
            side_effect=IntegrityError("INSERT", {}, Exception("NOT NULL constraint failed: volunteers.status"))
        )

        with pytest.raises(ValidationError, match="NOT NULL constraint failed") as exc_info:
            await RecordService(VOLUNTEERS).create_record(mock_db_session, volunteer_payload)

        assert not isinstance(exc_info.value, DuplicateKeyError)

    @pytest.mark.asyncio
    async def test_create_event_missing_location(self, mock_db_session, event_payload):
        del event_payload["location"]

        with pytest.raises(ValidationError, match="location is required"):
            await RecordService(EVENTS).create_record(mock_db_session, event_payload)

        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_event_never_checks_uniqueness(self, mock_db_session, event_payload):
        result = await RecordService(EVENTS).create_record(mock_db_session, event_payload)

        assert result.status == "Upcoming"
        mock_db_session.execute.assert_not_awaited()


class TestRecordServiceUpdate:

    @pytest.mark.asyncio
    async def test_partial_update(self, mock_db_session):
        volunteer = _volunteer()
        mock_db_session.execute.return_value = _result(record=volunteer)

        result = await RecordService(VOLUNTEERS).update_record(
            mock_db_session, str(volunteer.id), {"hoursCompleted": 25}
        )

        assert result.hours_completed == 25
        assert result.name == "Asha Verma"
        assert result.email == "asha@example.org"

    @pytest.mark.asyncio
    async def test_update_null_status_resets_default(self, mock_db_session):
        event = _event(4, status="Cancelled")
        mock_db_session.execute.return_value = _result(record=event)

        result = await RecordService(EVENTS).update_record(mock_db_session, str(event.id), {"status": None})

        assert result.status == "Upcoming"
        mock_db_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_to_taken_email(self, mock_db_session):
        volunteer = _volunteer()
        other = _volunteer(email="ravi@example.org")
        mock_db_session.execute = AsyncMock(side_effect=[_result(record=volunteer), _result(record=other)])

        with pytest.raises(DuplicateKeyError):
            await RecordService(VOLUNTEERS).update_record(
                mock_db_session, str(volunteer.id), {"email": "ravi@example.org"}
            )

    @pytest.mark.asyncio
    async def test_update_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = _result(record=None)

        with pytest.raises(NotFoundError, match="Event not found"):
            await RecordService(EVENTS).update_record(mock_db_session, str(uuid.uuid4()), {"name": "x"})

    @pytest.mark.asyncio
    async def test_update_malformed_id_is_validation_error(self, mock_db_session):
        with pytest.raises(ValidationError):
            await RecordService(ACTIVITIES).update_record(mock_db_session, "42", {"hours": 2})


class TestRecordServiceDelete:

    @pytest.mark.asyncio
    async def test_delete_found(self, mock_db_session):
        event = _event(5)
        mock_db_session.execute.return_value = _result(record=event)

        result = await RecordService(EVENTS).delete_record(mock_db_session, str(event.id))

        assert result.message == "Event deleted successfully"
        mock_db_session.delete.assert_awaited_once_with(event)

    @pytest.mark.asyncio
    async def test_delete_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = _result(record=None)

        with pytest.raises(NotFoundError, match="Activity not found"):
            await RecordService(ACTIVITIES).delete_record(mock_db_session, str(uuid.uuid4()))

        mock_db_session.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_malformed_id_is_store_error(self, mock_db_session):
        with pytest.raises(DatabaseError):
            await RecordService(VOLUNTEERS).delete_record(mock_db_session, "abc")
