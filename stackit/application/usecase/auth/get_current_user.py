"""Get current user use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.model import User
from stackit.domain.service import JWTService, UserService
from stackit.domain.value import UserId, UserRole
from stackit.domain.value.types import Username


class UserResponse(BaseModel):
    """Public account details."""

    user_id: str
    username: Username
    email: str
    first_name: Optional[str]
    last_name: Optional[str]
    role: UserRole
    reputation: int
    is_banned: bool
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            user_id=str(user.id),
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            reputation=user.reputation,
            is_banned=user.is_banned,
            created_at=user.created_at,
        )


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Load user from database
        3. Reject banned accounts

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If user not found
            NotAuthorizedError: If the user is banned
        """
        payload = self.jwt_service.verify_token(request.token)
        user = await self.user_service.get_active_user(UserId(UUID(payload.user_id)))
        return UserResponse.from_user(user)
