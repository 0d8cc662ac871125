"""Tests for Stripe payment intents and payment records."""

from types import SimpleNamespace

import pytest
import stripe

from app.core.config import settings
from app.models import PaymentCreate
from app.services.payment_service import (
    PaymentProviderError,
    create_payment_intent,
    record_payment,
    to_minor_units,
)


@pytest.fixture
def stripe_key(monkeypatch):
    monkeypatch.setattr(settings, "stripe_secret_key", "sk_test_123")


def test_to_minor_units():
    assert to_minor_units(99) == 9900
    assert to_minor_units(19.99) == 1999


@pytest.mark.asyncio
class TestCreatePaymentIntent:
    async def test_returns_client_secret(self, stripe_key, monkeypatch):
        seen = {}

        async def fake_create(**params):
            seen.update(params)
            return SimpleNamespace(id="pi_1", client_secret="pi_1_secret_abc")

        monkeypatch.setattr(stripe.PaymentIntent, "create_async", fake_create)

        secret = await create_payment_intent(19.99)

        assert secret == "pi_1_secret_abc"
        assert seen == {
            "api_key": "sk_test_123",
            "amount": 1999,
            "currency": "usd",
            "payment_method_types": ["card"],
        }

    async def test_provider_error(self, stripe_key, monkeypatch):
        async def declined(**params):
            raise stripe.CardError("Your card was declined.", param=None, code="card_declined")

        monkeypatch.setattr(stripe.PaymentIntent, "create_async", declined)

        with pytest.raises(PaymentProviderError):
            await create_payment_intent(10)

    async def test_not_configured(self, monkeypatch):
        monkeypatch.setattr(settings, "stripe_secret_key", "")

        with pytest.raises(PaymentProviderError):
            await create_payment_intent(10)


@pytest.mark.asyncio
async def test_record_payment(session):
    payment = await record_payment(
        session, PaymentCreate(booking_id=3, transaction_id="pi_1", price=99, email="a@x.com")
    )

    assert payment.id is not None
    assert payment.transaction_id == "pi_1"
    assert payment.created_at.tzinfo is None
