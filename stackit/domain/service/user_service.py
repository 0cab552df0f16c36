"""User domain service."""

from datetime import datetime
from typing import Sequence

import logfire

from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.model import User
from stackit.domain.repository import UserQuery, UserRepository
from stackit.domain.value import UserId, UserRole

from .base import Service

# Shorter queries would match most accounts
MIN_SEARCH_LENGTH = 2
SEARCH_LIMIT = 10


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_active_user(self, user_id: UserId) -> User:
        """Get a user who is allowed to act (exists and is not banned).

        Raises:
            NotFoundError: If user not found
            NotAuthorizedError: If the user is banned
        """
        user = await self.get_by_id(user_id)
        if user.is_banned:
            logfire.warn("Banned user attempted an action", user_id=str(user_id))
            raise NotAuthorizedError("act as", "user", str(user_id), str(user_id))
        return user

    async def get_admin(self, user_id: UserId) -> User:
        """Get an active user holding the ADMIN role.

        Raises:
            NotAuthorizedError: If the user is banned or not an admin
        """
        user = await self.get_active_user(user_id)
        if not user.is_admin:
            logfire.warn("Non-admin attempted an admin action", user_id=str(user_id))
            raise NotAuthorizedError("administer", "site", "admin", str(user_id))
        return user

    async def get_by_username(self, username: str) -> User:
        """Get user by username.

        Raises:
            NotFoundError: If no user has that username
        """
        with logfire.span("user_service.get_by_username", username=username):
            user = await self.user_repository.find_by_username(username)
            if not user:
                raise NotFoundError("User", username)
            return user

    async def search_users(self, query: str) -> list[User]:
        """Suggest users for @mention completion.

        Queries under two characters return nothing. Otherwise up to ten
        users whose username contains the query, ordered by username.
        """
        query = query.strip()
        with logfire.span("user_service.search_users", query=query):
            if len(query) < MIN_SEARCH_LENGTH:
                return []
            return await self.user_repository.search_by_username(query, limit=SEARCH_LIMIT)

    async def list_users(self, query: UserQuery) -> list[User]:
        """List users newest first for moderation."""
        with logfire.span(
            "user_service.list_users",
            role=query.role.value if query.role else None,
            search=query.search,
        ):
            users = await self.user_repository.find_all(query)
            logfire.info("Users listed", count=len(users))
            return users

    async def find_by_usernames(self, usernames: Sequence[str]) -> list[User]:
        """Resolve usernames to users in one lookup.

        Unknown usernames are left out of the result.
        """
        with logfire.span("user_service.find_by_usernames", count=len(usernames)):
            if not usernames:
                return []
            users = await self.user_repository.find_by_usernames(usernames)
            logfire.info(
                "Usernames resolved", requested=len(usernames), found=len(users)
            )
            return users

    async def update_role(self, user_id: UserId, role: UserRole) -> User:
        """Change a user's role.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span(
            "user_service.update_role", user_id=str(user_id), role=role.value
        ):
            user = await self.get_by_id(user_id)
            updated = user.model_copy(update={"role": role, "updated_at": datetime.now()})
            saved = await self.user_repository.save(updated)
            logfire.info("User role updated", user_id=str(user_id), role=role.value)
            return saved

    async def set_banned(self, actor_id: UserId, user_id: UserId, banned: bool) -> User:
        """Ban or unban a user on behalf of an administrator.

        Raises:
            NotFoundError: If user not found
            NotAuthorizedError: If the user is an administrator
        """
        with logfire.span(
            "user_service.set_banned", user_id=str(user_id), banned=banned
        ):
            user = await self.get_by_id(user_id)
            if banned and user.is_admin:
                logfire.warn("Attempt to ban an administrator", user_id=str(user_id))
                raise NotAuthorizedError("ban", "user", str(user_id), str(actor_id))

            updated = user.model_copy(
                update={"is_banned": banned, "updated_at": datetime.now()}
            )
            saved = await self.user_repository.save(updated)
            logfire.info("User ban state changed", user_id=str(user_id), banned=banned)
            return saved

    async def count_users(self) -> int:
        """Count registered users."""
        return await self.user_repository.count()
