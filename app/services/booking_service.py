import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.booking import Booking, BookingCreate

logger = logging.getLogger(__name__)


class BookingConflict(Exception):
    """The patient already holds a booking for this treatment on this date."""

    def __init__(self, appointment_date: str) -> None:
        self.message = f"You have already booked the treatment for {appointment_date}"
        super().__init__(self.message)


async def find_conflicting_bookings(session: AsyncSession, data: BookingCreate) -> list[Booking]:
    result = await session.execute(
        select(Booking).where(
            Booking.appointment_date == data.appointment_date,
            Booking.email == data.email,
            Booking.treatment == data.treatment,
        )
    )
    return list(result.scalars().all())


async def create_booking(session: AsyncSession, data: BookingCreate) -> Booking:
    """Insert the booking unless the patient already booked this treatment on this date.

    Raises BookingConflict without inserting. The unique constraint on
    (appointment_date, email, treatment) catches requests that race past the check.
    """
    if await find_conflicting_bookings(session, data):
        raise BookingConflict(data.appointment_date)
    booking = Booking.model_validate(data)
    session.add(booking)
    try:
        await session.flush()
    except IntegrityError as e:
        await session.rollback()
        logger.info(
            "Concurrent duplicate booking rejected: email=%s treatment=%s date=%s",
            data.email,
            data.treatment,
            data.appointment_date,
        )
        raise BookingConflict(data.appointment_date) from e
    await session.refresh(booking)
    return booking


async def list_bookings_for_email(session: AsyncSession, email: str) -> list[Booking]:
    result = await session.execute(select(Booking).where(Booking.email == email).order_by(Booking.id))
    return list(result.scalars().all())


async def get_booking(session: AsyncSession, booking_id: int) -> Booking | None:
    return await session.get(Booking, booking_id)
