import logging

import stripe
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.payment import Payment, PaymentCreate

logger = logging.getLogger(__name__)


class PaymentProviderError(Exception):
    """Stripe rejected the request or is not configured."""


def to_minor_units(price: float) -> int:
    return int(round(price * 100))


async def create_payment_intent(price: float, currency: str | None = None) -> str:
    """Create a Stripe PaymentIntent for the price and return its client secret."""
    if not settings.payments_enabled:
        raise PaymentProviderError("Stripe not configured (STRIPE_SECRET_KEY is empty)")
    try:
        intent = await stripe.PaymentIntent.create_async(
            api_key=settings.stripe_secret_key,
            amount=to_minor_units(price),
            currency=currency or settings.payment_currency,
            payment_method_types=["card"],
        )
    except stripe.StripeError as e:
        logger.warning("Stripe payment intent failed: %s", e)
        raise PaymentProviderError(f"Stripe error: {e.user_message or e}") from e
    client_secret = intent.client_secret
    if not client_secret:
        raise PaymentProviderError("Stripe response has no client_secret")
    return client_secret


async def record_payment(session: AsyncSession, data: PaymentCreate) -> Payment:
    payment = Payment.model_validate(data)
    session.add(payment)
    await session.flush()
    await session.refresh(payment)
    return payment
