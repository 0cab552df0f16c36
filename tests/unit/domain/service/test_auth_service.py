"""Unit tests for AuthService."""

import pytest

from stackit.domain.error import (
    BusinessRuleViolationError,
    InvalidCredentialsError,
    ValidationError,
)
from stackit.domain.service import AuthService
from stackit.domain.value import UserRole
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegister:
    """Tests for account registration."""

    @pytest.mark.asyncio
    async def test_register_hashes_password(self, unit_env):
        """New accounts are plain users with a bcrypt password hash."""
        # Arrange
        auth_service = await unit_env.get(AuthService)

        # Act
        user = await auth_service.register(
            "Alice@Example.com", "alice", "secret123", first_name="Alice"
        )

        # Assert
        assert user.email == "alice@example.com"
        assert user.username.root == "alice"
        assert user.role == UserRole.USER
        assert user.password_hash != "secret123"
        assert auth_service.check_password("secret123", user.password_hash)

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, unit_env):
        """Emails are unique regardless of case."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("alice@example.com", "alice", "secret123")

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError):
            await auth_service.register("ALICE@example.com", "alice2", "secret123")

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, unit_env):
        """Usernames are unique."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("alice@example.com", "alice", "secret123")

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError):
            await auth_service.register("other@example.com", "alice", "secret123")

    @pytest.mark.asyncio
    async def test_short_password_rejected(self, unit_env):
        """Passwords need at least six characters."""
        # Arrange
        auth_service = await unit_env.get(AuthService)

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await auth_service.register("alice@example.com", "alice", "12345")
        assert exc_info.value.field == "password"

    @pytest.mark.asyncio
    async def test_invalid_username_rejected(self, unit_env):
        """Usernames must be mentionable word characters."""
        # Arrange
        auth_service = await unit_env.get(AuthService)

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await auth_service.register("alice@example.com", "al ice", "secret123")
        assert exc_info.value.field == "username"


class TestAuthenticate:
    """Tests for password login."""

    @pytest.mark.asyncio
    async def test_valid_credentials(self, unit_env):
        """Correct email and password return the user."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        registered = await auth_service.register(
            "alice@example.com", "alice", "secret123"
        )

        # Act
        user = await auth_service.authenticate(" Alice@example.com ", "secret123")

        # Assert
        assert user.id == registered.id

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env):
        """A wrong password is rejected."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("alice@example.com", "alice", "secret123")

        # Act & Assert
        with pytest.raises(InvalidCredentialsError):
            await auth_service.authenticate("alice@example.com", "wrong-password")

    @pytest.mark.asyncio
    async def test_unknown_email(self, unit_env):
        """Unknown accounts are rejected the same way."""
        # Arrange
        auth_service = await unit_env.get(AuthService)

        # Act & Assert
        with pytest.raises(InvalidCredentialsError):
            await auth_service.authenticate("nobody@example.com", "secret123")
