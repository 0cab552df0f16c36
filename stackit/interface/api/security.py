"""Request authentication helpers shared by the routes."""

from fastapi import Cookie, Header, HTTPException, status

from stackit.domain.service import JWTService

BEARER_PREFIX = "bearer "


def get_auth_token(
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> str | None:
    """Read the JWT from an ``Authorization: Bearer`` header or the auth cookie.

    The header wins when both are present.
    """
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX) :].strip() or None
    return auth_token


def require_user_id(jwt_service: JWTService, token: str | None) -> str:
    """Return the authenticated user ID or fail with 401."""
    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id
