"""Login use case."""

from pydantic import BaseModel

from stackit.domain.error import NotAuthorizedError
from stackit.domain.service import AuthService, JWTService

from .get_current_user import UserResponse
from .register import AuthResponse


class LoginRequest(BaseModel):
    """Email and password login request."""

    email: str
    password: str


class LoginUseCase:
    """Use case for password login."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Check credentials and issue a token.

        Raises:
            InvalidCredentialsError: If email or password is wrong
            NotAuthorizedError: If the account is banned
        """
        user = await self.auth_service.authenticate(request.email, request.password)
        if user.is_banned:
            raise NotAuthorizedError("log in as", "user", str(user.id), str(user.id))

        token = self.jwt_service.create_token(str(user.id), user.username.root)
        return AuthResponse(token=token, user=UserResponse.from_user(user))
