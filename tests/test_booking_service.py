"""Tests for the one-booking-per-patient-treatment-date guard."""

import pytest
from sqlalchemy import DateTime, func, select

from app.models import Booking, BookingCreate, Payment
from app.services import booking_service
from app.services.booking_service import (
    BookingConflict,
    create_booking,
    get_booking,
    list_bookings_for_email,
)


def _request(**overrides) -> BookingCreate:
    data = {
        "treatment": "Cleaning",
        "appointment_date": "Oct 20, 2026",
        "slot": "09:00",
        "email": "a@x.com",
        "patient_name": "Ada",
        "price": 50,
    }
    data.update(overrides)
    return BookingCreate(**data)


async def _count(session) -> int:
    return (await session.execute(select(func.count()).select_from(Booking))).scalar_one()


@pytest.mark.asyncio
class TestCreateBooking:
    async def test_creates_booking_with_id(self, session):
        booking = await create_booking(session, _request())

        assert booking.id is not None
        assert booking.patient_name == "Ada"
        assert await _count(session) == 1

    async def test_same_patient_treatment_date_conflicts(self, session):
        """Second booking for the same triple raises and inserts nothing."""
        await create_booking(session, _request())

        with pytest.raises(BookingConflict) as exc_info:
            await create_booking(session, _request(slot="10:00"))

        assert exc_info.value.message == "You have already booked the treatment for Oct 20, 2026"
        assert await _count(session) == 1

    @pytest.mark.parametrize(
        "overrides",
        [
            {"email": "b@x.com"},
            {"treatment": "Whitening"},
            {"appointment_date": "Oct 21, 2026"},
        ],
    )
    async def test_any_differing_field_succeeds(self, session, overrides):
        await create_booking(session, _request())

        await create_booking(session, _request(**overrides))

        assert await _count(session) == 2

    async def test_race_past_check_still_conflicts(self, session, monkeypatch):
        """The unique constraint rejects a duplicate the lookup missed."""
        await create_booking(session, _request())
        await session.commit()

        async def no_conflicts(session, data):
            return []

        monkeypatch.setattr(booking_service, "find_conflicting_bookings", no_conflicts)

        with pytest.raises(BookingConflict):
            await create_booking(session, _request(slot="11:00"))

        assert await _count(session) == 1


@pytest.mark.asyncio
async def test_list_bookings_for_email_only_returns_own(session):
    await create_booking(session, _request())
    await create_booking(session, _request(treatment="Whitening"))
    await create_booking(session, _request(email="b@x.com"))

    bookings = await list_bookings_for_email(session, "a@x.com")

    assert [b.treatment for b in bookings] == ["Cleaning", "Whitening"]


@pytest.mark.asyncio
async def test_get_booking_missing_returns_none(session):
    assert await get_booking(session, 12345) is None


def test_timestamps_are_plain_datetime_columns():
    """created_at holds naive UTC regardless of the library's default datetime type."""
    for table in (Booking.__table__, Payment.__table__):
        column_type = table.c.created_at.type
        assert type(column_type) is DateTime
        assert column_type.timezone is False


@pytest.mark.asyncio
async def test_created_at_is_naive_utc(session):
    booking = await create_booking(session, _request())

    assert booking.created_at.tzinfo is None
