"""Tests for bearer token signing and verification."""

from datetime import UTC, datetime, timedelta

from jose import jwt

from app.core.config import settings
from app.core.security import create_access_token, decode_access_token


def test_round_trip_email():
    assert decode_access_token(create_access_token("a@x.com")) == "a@x.com"


def test_token_lasts_one_day():
    claims = jwt.get_unverified_claims(create_access_token("a@x.com"))
    expires = datetime.fromtimestamp(claims["exp"], UTC)

    assert timedelta(hours=23) < expires - datetime.now(UTC) <= timedelta(days=1)


def test_expired_token_rejected():
    token = jwt.encode(
        {"email": "a@x.com", "exp": datetime.now(UTC) - timedelta(minutes=1)},
        settings.secret_key,
        algorithm=settings.algorithm,
    )
    assert decode_access_token(token) is None


def test_wrong_secret_rejected():
    token = jwt.encode(
        {"email": "a@x.com", "exp": datetime.now(UTC) + timedelta(hours=1)},
        "not-the-secret",
        algorithm=settings.algorithm,
    )
    assert decode_access_token(token) is None


def test_garbage_rejected():
    assert decode_access_token("not.a.jwt") is None


def test_token_without_email_rejected():
    token = jwt.encode(
        {"sub": "1", "exp": datetime.now(UTC) + timedelta(hours=1)},
        settings.secret_key,
        algorithm=settings.algorithm,
    )
    assert decode_access_token(token) is None
