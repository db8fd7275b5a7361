"""
Unit tests for backend/auth.py

Covers API key parsing and Supabase access token validation.
"""

import time

import jwt
import pytest
from fastapi import HTTPException
from unittest.mock import patch

from backend.auth import get_current_user, validate_api_key, validate_jwt
from backend.settings import Settings

JWT_SECRET = "super-secret-jwt-token-with-at-least-32-characters"


@pytest.fixture
def settings():
    test_settings = Settings(
        environment="test",
        api_keys="sk_test_1,sk_test_2",
        supabase_jwt_secret=JWT_SECRET,
        _env_file=None,
    )
    with patch("backend.auth.get_settings", return_value=test_settings):
        yield test_settings


def make_token(claims=None, secret=JWT_SECRET, expires_in=3600):
    payload = {
        "sub": "0b8f6a8e-user",
        "email": "ana@example.com",
        "aud": "authenticated",
        "exp": int(time.time()) + expires_in,
    }
    payload.update(claims or {})
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.mark.unit
class TestValidateApiKey:
    """Tests for validate_api_key()."""

    def test_simple_key(self, settings):
        assert validate_api_key("sk_test_1") == "admin"

    def test_key_with_owner(self, settings):
        assert validate_api_key("sk_test_2:ana@example.com") == "ana@example.com"

    def test_invalid_key(self, settings):
        with pytest.raises(HTTPException) as exc:
            validate_api_key("sk_wrong")
        assert exc.value.status_code == 401

    def test_not_configured(self, settings):
        settings.api_keys = ""
        with pytest.raises(HTTPException) as exc:
            validate_api_key("sk_test_1")
        assert exc.value.status_code == 401


@pytest.mark.unit
class TestValidateJwt:
    """Tests for validate_jwt()."""

    def test_email_claim_is_owner(self, settings):
        assert validate_jwt(f"Bearer {make_token()}") == "ana@example.com"

    def test_falls_back_to_sub(self, settings):
        token = make_token({"email": None})
        assert validate_jwt(f"Bearer {token}") == "0b8f6a8e-user"

    def test_bad_header_format(self, settings):
        with pytest.raises(HTTPException) as exc:
            validate_jwt(make_token())
        assert exc.value.status_code == 401

    def test_expired(self, settings):
        with pytest.raises(HTTPException) as exc:
            validate_jwt(f"Bearer {make_token(expires_in=-60)}")
        assert exc.value.detail == "Token expired"

    def test_wrong_secret(self, settings):
        token = make_token(secret="another-secret-that-is-also-32-chars-long")
        with pytest.raises(HTTPException) as exc:
            validate_jwt(f"Bearer {token}")
        assert exc.value.status_code == 401

    def test_wrong_audience(self, settings):
        with pytest.raises(HTTPException):
            validate_jwt(f"Bearer {make_token({'aud': 'anon'})}")

    def test_secret_not_configured(self, settings):
        settings.supabase_jwt_secret = None
        with pytest.raises(HTTPException) as exc:
            validate_jwt(f"Bearer {make_token()}")
        assert exc.value.status_code == 500


@pytest.mark.unit
class TestGetCurrentUser:
    """Tests for get_current_user()."""

    @pytest.mark.asyncio
    async def test_api_key_wins(self, settings):
        owner = await get_current_user(
            authorization=f"Bearer {make_token()}",
            x_api_key="sk_test_1:joao@example.com",
        )
        assert owner == "joao@example.com"

    @pytest.mark.asyncio
    async def test_bearer_token(self, settings):
        owner = await get_current_user(authorization=f"Bearer {make_token()}", x_api_key=None)
        assert owner == "ana@example.com"

    @pytest.mark.asyncio
    async def test_missing_credentials(self, settings):
        with pytest.raises(HTTPException) as exc:
            await get_current_user(authorization=None, x_api_key=None)
        assert exc.value.status_code == 401
