"""
Tests for token issuing and decoding.
"""

from datetime import timedelta

import jwt
import pytest

from hotel_api.core.config import Settings
from hotel_api.core.errors import UnauthorizedError
from hotel_api.core.security import create_access_token, decode_user_id


@pytest.fixture
def settings():
    return Settings(SECRET_KEY="test-secret", ALGORITHM="HS256")


def test_token_round_trips_user_id(settings):
    token = create_access_token({"sub": "12"}, settings)
    assert decode_user_id(token, settings) == 12


def test_token_carries_expiry(settings):
    token = create_access_token({"sub": "12"}, settings)
    payload = jwt.decode(token, "test-secret", algorithms=["HS256"])
    assert "exp" in payload


def test_expired_token_is_rejected(settings):
    token = create_access_token({"sub": "12"}, settings, expires_delta=timedelta(seconds=-5))
    with pytest.raises(UnauthorizedError):
        decode_user_id(token, settings)


def test_wrong_secret_is_rejected(settings):
    token = jwt.encode({"sub": "12"}, "another-secret", algorithm="HS256")
    with pytest.raises(UnauthorizedError):
        decode_user_id(token, settings)


@pytest.mark.parametrize("payload", [{}, {"sub": "not-a-number"}])
def test_missing_or_bad_subject_is_rejected(settings, payload):
    token = jwt.encode(payload, "test-secret", algorithm="HS256")
    with pytest.raises(UnauthorizedError):
        decode_user_id(token, settings)


def test_garbage_token_is_rejected(settings):
    with pytest.raises(UnauthorizedError):
        decode_user_id("definitely.not.ajwt", settings)
