from datetime import UTC, datetime

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel


def _utc_naive_now() -> datetime:
    """Naive UTC for TIMESTAMP WITHOUT TIME ZONE columns."""
    return datetime.now(UTC).replace(tzinfo=None)


class BookingBase(SQLModel):
    treatment: str = Field(index=True)
    # Caller-supplied format, compared by exact string equality
    appointment_date: str = Field(index=True)
    slot: str
    email: str = Field(index=True)
    patient_name: str | None = None
    phone: str | None = None
    price: float | None = None


class Booking(BookingBase, table=True):
    __tablename__ = "bookings"
    # One booking per patient, treatment and date
    __table_args__ = (
        UniqueConstraint("appointment_date", "email", "treatment", name="uq_booking_patient_treatment_date"),
    )
    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=_utc_naive_now, sa_type=DateTime())


class BookingCreate(BookingBase):
    pass
