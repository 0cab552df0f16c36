"""Admin user management use cases."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from stackit.application.usecase.auth import UserResponse
from stackit.domain.service import UserService
from stackit.domain.value import UserId, UserRole


class UpdateUserRoleRequest(BaseModel):
    """Change a user's role."""

    user_id: str  # Acting admin
    target_user_id: str
    role: UserRole


class BanUserRequest(BaseModel):
    """Ban or unban a user."""

    user_id: str  # Acting admin
    target_user_id: str
    banned: bool = True


class UpdateUserRoleUseCase:
    """Use case for promoting or demoting a user."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdateUserRoleRequest) -> UserResponse:
        """Execute update role flow.

        Raises:
            NotAuthorizedError: If the acting user is not an admin
            NotFoundError: If the target user does not exist
        """
        admin = await self.user_service.get_admin(UserId(UUID(request.user_id)))
        user = await self.user_service.update_role(
            UserId(UUID(request.target_user_id)), request.role
        )
        logfire.info(
            "Role changed by admin",
            admin_id=str(admin.id),
            user_id=str(user.id),
            role=request.role.value,
        )
        return UserResponse.from_user(user)


class BanUserUseCase:
    """Use case for banning or unbanning a user."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: BanUserRequest) -> UserResponse:
        """Execute ban flow.

        Raises:
            NotAuthorizedError: If the acting user is not an admin, or the
                target is an admin
            NotFoundError: If the target user does not exist
        """
        admin = await self.user_service.get_admin(UserId(UUID(request.user_id)))
        user = await self.user_service.set_banned(
            admin.id, UserId(UUID(request.target_user_id)), request.banned
        )
        return UserResponse.from_user(user)
