"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.repository import UserQuery
from stackit.domain.service import UserService
from stackit.domain.value import UserId, UserRole
from tests.conftest import save_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUserService:
    """Tests for user lookups and moderation."""

    @pytest.mark.asyncio
    async def test_get_missing_user(self, unit_env):
        """Unknown users raise NotFoundError."""
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_banned_user_cannot_act(self, unit_env):
        """Banned users are refused as actors."""
        # Arrange
        banned = await save_user(unit_env, "troll", is_banned=True)
        user_service = await unit_env.get(UserService)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await user_service.get_active_user(banned.id)

    @pytest.mark.asyncio
    async def test_get_admin_requires_role(self, unit_env):
        """Only ADMIN users pass the admin check."""
        # Arrange
        admin = await save_user(unit_env, "admin", role=UserRole.ADMIN)
        moderator = await save_user(unit_env, "mod", role=UserRole.MODERATOR)
        user_service = await unit_env.get(UserService)

        # Act
        found = await user_service.get_admin(admin.id)

        # Assert
        assert found.id == admin.id
        with pytest.raises(NotAuthorizedError):
            await user_service.get_admin(moderator.id)

    @pytest.mark.asyncio
    async def test_find_by_usernames_skips_unknown(self, unit_env):
        """Unknown usernames are left out."""
        # Arrange
        bob = await save_user(unit_env, "bob")
        user_service = await unit_env.get(UserService)

        # Act
        users = await user_service.find_by_usernames(["bob", "ghost"])

        # Assert
        assert [u.id for u in users] == [bob.id]

    @pytest.mark.asyncio
    async def test_ban_and_unban(self, unit_env):
        """Admins toggle the ban flag."""
        # Arrange
        admin = await save_user(unit_env, "admin", role=UserRole.ADMIN)
        user = await save_user(unit_env, "user")
        user_service = await unit_env.get(UserService)

        # Act
        banned = await user_service.set_banned(admin.id, user.id, True)
        unbanned = await user_service.set_banned(admin.id, user.id, False)

        # Assert
        assert banned.is_banned is True
        assert unbanned.is_banned is False

    @pytest.mark.asyncio
    async def test_admins_cannot_be_banned(self, unit_env):
        """Banning another admin is refused."""
        # Arrange
        admin = await save_user(unit_env, "admin", role=UserRole.ADMIN)
        other = await save_user(unit_env, "admin2", role=UserRole.ADMIN)
        user_service = await unit_env.get(UserService)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await user_service.set_banned(admin.id, other.id, True)

    @pytest.mark.asyncio
    async def test_update_role(self, unit_env):
        """Roles can be changed."""
        # Arrange
        user = await save_user(unit_env, "user")
        user_service = await unit_env.get(UserService)

        # Act
        updated = await user_service.update_role(user.id, UserRole.MODERATOR)

        # Assert
        assert updated.role == UserRole.MODERATOR


class TestUserLookup:
    """Tests for profile lookup, mention search and the admin listing."""

    @pytest.mark.asyncio
    async def test_get_by_username(self, unit_env):
        """Usernames resolve to users, unknown ones raise NotFoundError."""
        # Arrange
        alice = await save_user(unit_env, "alice")
        user_service = await unit_env.get(UserService)

        # Act
        found = await user_service.get_by_username("alice")

        # Assert
        assert found.id == alice.id
        with pytest.raises(NotFoundError):
            await user_service.get_by_username("nobody")

    @pytest.mark.asyncio
    async def test_search_users_ignores_short_queries(self, unit_env):
        """One-character queries return nothing."""
        # Arrange
        await save_user(unit_env, "alice")
        user_service = await unit_env.get(UserService)

        # Act
        users = await user_service.search_users("a")

        # Assert
        assert users == []

    @pytest.mark.asyncio
    async def test_search_users_matches_substring_sorted(self, unit_env):
        """Matching is case-insensitive on any part of the username."""
        # Arrange
        for name in ("malcolm", "Alice", "bob", "sally"):
            await save_user(unit_env, name)
        user_service = await unit_env.get(UserService)

        # Act
        users = await user_service.search_users(" AL ")

        # Assert
        assert [u.username.root for u in users] == ["Alice", "malcolm", "sally"]

    @pytest.mark.asyncio
    async def test_search_users_caps_results(self, unit_env):
        """At most ten suggestions are returned."""
        # Arrange
        for i in range(12):
            await save_user(unit_env, f"user{i:02d}")
        user_service = await unit_env.get(UserService)

        # Act
        users = await user_service.search_users("user")

        # Assert
        assert len(users) == 10
        assert users[0].username.root == "user00"

    @pytest.mark.asyncio
    async def test_list_users_filters_by_role_and_search(self, unit_env):
        """Role and username/email filters combine."""
        # Arrange
        await save_user(unit_env, "admin", role=UserRole.ADMIN)
        await save_user(unit_env, "alice")
        await save_user(unit_env, "bob")
        user_service = await unit_env.get(UserService)

        # Act
        admins = await user_service.list_users(UserQuery(role=UserRole.ADMIN))
        by_email = await user_service.list_users(UserQuery(search="BOB@example"))

        # Assert
        assert [u.username.root for u in admins] == ["admin"]
        assert [u.username.root for u in by_email] == ["bob"]
