"""Signed session tokens.

Tokens are HS256 JWTs carrying the user ID in ``sub`` and the username for
display. They are issued at register and login and accepted either as a
Bearer header or through the ``auth_token`` cookie.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ConfigDict, Field

from stackit.config import AuthSettings

REQUIRED_CLAIMS = ["sub", "exp", "iat"]


class TokenPayload(BaseModel):
    """Decoded claims of a session token."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="sub")
    username: str
    issued_at: datetime = Field(alias="iat")
    exp: datetime


class JWTError(Exception):
    """Token is missing, malformed, forged or expired."""


def create_token(user_id: str, username: str, settings: AuthSettings) -> str:
    """Issue a session token valid for ``settings.jwt_expiry_hours``."""
    now = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "username": username,
        "iat": now,
        "exp": now + timedelta(hours=settings.jwt_expiry_hours),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of a token and return its claims.

    Raises:
        JWTError: If the token is expired or cannot be trusted
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload.model_validate(claims)
    except ValueError:
        raise JWTError("Invalid token claims")
