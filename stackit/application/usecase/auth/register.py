"""Register use case."""

from typing import Optional

from pydantic import BaseModel

from stackit.domain.service import AuthService, JWTService

from .get_current_user import UserResponse


class RegisterRequest(BaseModel):
    """Account registration request."""

    email: str
    username: str
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class AuthResponse(BaseModel):
    """Session token plus the signed-in user."""

    token: str
    user: UserResponse


class RegisterUseCase:
    """Use case for creating an account and signing it in."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Register the account and issue a token.

        Raises:
            ValidationError: If a field is malformed
            BusinessRuleViolationError: If the email or username is taken
        """
        user = await self.auth_service.register(
            email=request.email,
            username=request.username,
            password=request.password,
            first_name=request.first_name,
            last_name=request.last_name,
        )
        token = self.jwt_service.create_token(str(user.id), user.username.root)
        return AuthResponse(token=token, user=UserResponse.from_user(user))
