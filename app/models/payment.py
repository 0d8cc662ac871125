from datetime import UTC, datetime

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def _utc_naive_now() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


class Payment(SQLModel, table=True):
    __tablename__ = "payments"
    id: int | None = Field(default=None, primary_key=True)
    # Not a foreign key: payments are recorded as reported by the client
    booking_id: int | None = Field(default=None, index=True)
    transaction_id: str
    price: float
    email: str | None = None
    created_at: datetime = Field(default_factory=_utc_naive_now, sa_type=DateTime())


class PaymentCreate(SQLModel):
    booking_id: int | None = None
    transaction_id: str
    price: float
    email: str | None = None
