from pydantic import Field

from app.api.schemas.common import CamelModel


class PaymentIntentRequest(CamelModel):
    price: float = Field(gt=0)


class PaymentIntentResponse(CamelModel):
    client_secret: str


class PaymentRequest(CamelModel):
    booking_id: int | None = None
    transaction_id: str
    price: float
    email: str | None = None
