"""
Authentication module for Supabase session tokens and API key validation.
Provides FastAPI dependencies for securing endpoints.

Login, registration and session refresh all happen against Supabase Auth.
This service only verifies the access token the client already holds and
derives the owner identifier from it. Rows are keyed by the user's e-mail,
so the `email` claim is the owner identifier (falling back to `sub`).
"""
from typing import Optional
import logging

import jwt
from fastapi import HTTPException, Header

from backend.settings import get_settings

logger = logging.getLogger(__name__)

SUPABASE_JWT_ALGORITHM = "HS256"


async def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key")
) -> str:
    """
    Authenticate via API key OR Supabase access token.
    Returns the owner identifier string.

    Usage:
        @app.get("/protected")
        async def protected_route(owner: str = Depends(get_current_user)):
            return {"owner": owner}
    """
    # Option 1: API Key authentication
    if x_api_key:
        return validate_api_key(x_api_key)

    # Option 2: Supabase session token
    if authorization:
        return validate_jwt(authorization)

    raise HTTPException(
        status_code=401,
        detail="Missing authentication. Provide Authorization header or X-API-Key."
    )


def validate_api_key(api_key: str) -> str:
    """
    Validate API key and return the owner identifier.

    API key format options:
    - Simple: "sk_test_abc123" -> returns "admin"
    - With owner: "sk_test_abc123:ana@example.com" -> returns "ana@example.com"
    """
    valid_keys = get_settings().api_keys_list

    if not valid_keys:
        logger.warning("No API keys configured (API_KEYS env var empty)")
        raise HTTPException(status_code=401, detail="API key authentication not configured")

    # Check if key (without owner suffix) is valid
    key_part = api_key.split(":")[0]

    if key_part not in valid_keys:
        raise HTTPException(status_code=401, detail="Invalid API key")

    # Extract owner if provided (format: "key:owner")
    if ":" in api_key:
        return api_key.split(":", 1)[1]

    return "admin"  # Default for simple API keys


def validate_jwt(authorization: str) -> str:
    """Validate a Supabase access token (HS256) and return the owner identifier."""
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header format")

    token = authorization.split(" ", 1)[1]
    settings = get_settings()

    if not settings.supabase_jwt_secret:
        raise HTTPException(
            status_code=500,
            detail="JWT validation not configured (missing SUPABASE_JWT_SECRET)"
        )

    try:
        payload = jwt.decode(
            token,
            settings.supabase_jwt_secret,
            algorithms=[SUPABASE_JWT_ALGORITHM],
            audience=settings.supabase_jwt_audience,
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid session token: {e}")
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")

    owner = payload.get("email") or payload.get("sub")
    if not owner:
        raise HTTPException(status_code=401, detail="Token missing user identity")
    logger.debug(f"Session token validated for: {owner}")
    return owner
