import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_email
from app.api.schemas.booking import BookingConflictResponse, BookingPublic, BookingRequest
from app.api.schemas.common import InsertResult
from app.core.db import get_session
from app.models.booking import Booking, BookingCreate
from app.services.booking_service import (
    BookingConflict,
    create_booking,
    get_booking,
    list_bookings_for_email,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/bookings", tags=["bookings"])


def _to_public(b: Booking) -> BookingPublic:
    return BookingPublic.model_validate(b)


@router.get("", response_model=list[BookingPublic])
async def list_my_bookings(
    email: str | None = Query(None),
    session: AsyncSession = Depends(get_session),
    current_email: str = Depends(get_current_email),
) -> list[BookingPublic]:
    # A valid token only grants access to its own bookings
    if email != current_email:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden access",
        )
    bookings = await list_bookings_for_email(session, email)
    return [_to_public(b) for b in bookings]


@router.get("/{booking_id}", response_model=BookingPublic | None)
async def read_booking(
    booking_id: int,
    session: AsyncSession = Depends(get_session),
) -> BookingPublic | None:
    booking = await get_booking(session, booking_id)
    return _to_public(booking) if booking else None


@router.post("", response_model=InsertResult | BookingConflictResponse)
async def book_treatment(
    body: BookingRequest,
    session: AsyncSession = Depends(get_session),
) -> InsertResult | BookingConflictResponse:
    """Create a booking. A duplicate (date, email, treatment) is reported in the
    body with acknowledged=false rather than as an HTTP error."""
    data = BookingCreate(
        treatment=body.treatment,
        appointment_date=body.appointment_date,
        slot=body.slot,
        email=body.email,
        patient_name=body.patient_name,
        phone=body.phone,
        price=body.price,
    )
    try:
        booking = await create_booking(session, data)
    except BookingConflict as e:
        return BookingConflictResponse(message=e.message)
    logger.info("Booking %s created: %s %s %s", booking.id, booking.treatment, booking.appointment_date, booking.slot)
    return InsertResult(inserted_id=booking.id)
