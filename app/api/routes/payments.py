from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.schemas.common import InsertResult
from app.api.schemas.payment import PaymentIntentRequest, PaymentIntentResponse, PaymentRequest
from app.core.db import get_session
from app.models.payment import PaymentCreate
from app.services.payment_service import create_payment_intent, record_payment

router = APIRouter(tags=["payments"])


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def payment_intent(body: PaymentIntentRequest) -> PaymentIntentResponse:
    client_secret = await create_payment_intent(body.price)
    return PaymentIntentResponse(client_secret=client_secret)


@router.post("/payments", response_model=InsertResult)
async def save_payment(
    body: PaymentRequest,
    session: AsyncSession = Depends(get_session),
) -> InsertResult:
    payment = await record_payment(
        session,
        PaymentCreate(
            booking_id=body.booking_id,
            transaction_id=body.transaction_id,
            price=body.price,
            email=body.email,
        ),
    )
    return InsertResult(inserted_id=payment.id)
