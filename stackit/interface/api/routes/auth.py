"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel

from stackit.application.usecase.auth import (
    AuthResponse,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
    UserResponse,
)
from stackit.config import Settings
from stackit.domain.error import NotFoundError
from stackit.interface.api.security import get_auth_token

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


def _set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    """Mirror the issued token into an httpOnly cookie for browser clients."""
    response.set_cookie(
        key="auth_token",
        value=token,
        httponly=True,
        secure=settings.environment == "production",
        samesite="lax",
        path="/",
        max_age=settings.auth.jwt_expiry_hours * 3600,
    )


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Create an account and sign in.

    Raises:
        ValidationError: Bad email, username or password (400)
        BusinessRuleViolationError: Email or username already taken (400)
    """
    result = await register_use_case.execute(request)
    _set_auth_cookie(response, result.token, settings)
    return result


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Sign in with email and password.

    Raises:
        InvalidCredentialsError: Unknown email or wrong password (401)
        NotAuthorizedError: The account is banned (403)
    """
    result = await login_use_case.execute(request)
    _set_auth_cookie(response, result.token, settings)
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """Clear the auth cookie."""
    response.delete_cookie(key="auth_token", path="/")
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=UserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(get_auth_token),
) -> UserResponse:
    """Get the signed-in user.

    Raises:
        HTTPException: 401 without a valid token or for a deleted account
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
        )
