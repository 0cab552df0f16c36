"""Authentication domain service.

Handles account registration and password login. Passwords are stored as
bcrypt hashes; sessions are stateless JWTs issued by JWTService.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import bcrypt
import logfire
from pydantic import ValidationError as PydanticValidationError

from stackit.config import AuthSettings
from stackit.domain.error import (
    BusinessRuleViolationError,
    InvalidCredentialsError,
    ValidationError,
)
from stackit.domain.model import User
from stackit.domain.repository import UserRepository
from stackit.domain.value import UserId, UserRole
from stackit.domain.value.types import Username

from .base import Service

# bcrypt only hashes the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


class AuthService(Service):
    """Domain service for account registration and login."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    def hash_password(self, password: str) -> str:
        """Hash a password with bcrypt."""
        salt = bcrypt.gensalt(rounds=self.auth_settings.password_hash_rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def check_password(self, password: str, password_hash: str) -> bool:
        """Check a password against a stored bcrypt hash."""
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))

    async def register(
        self,
        email: str,
        username: str,
        password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> User:
        """Register a new account.

        Args:
            email: Email address (stored lowercased)
            username: Public username
            password: Plain text password
            first_name: Optional first name
            last_name: Optional last name

        Returns:
            The created user

        Raises:
            ValidationError: If username, email or password is malformed
            BusinessRuleViolationError: If email or username is taken
        """
        email = email.strip().lower()
        with logfire.span("auth_service.register", email=email, username=username):
            try:
                name = Username(username)
            except PydanticValidationError as e:
                raise ValidationError("username", e.errors()[0]["msg"])

            if "@" not in email:
                raise ValidationError("email", "Invalid email address")

            if len(password) < self.auth_settings.password_min_length:
                raise ValidationError(
                    "password",
                    "Password must be at least "
                    f"{self.auth_settings.password_min_length} characters",
                )
            if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
                raise ValidationError("password", "Password is too long")

            if await self.user_repository.find_by_email(
                email
            ) or await self.user_repository.find_by_username(name.root):
                logfire.warn("Registration with existing email or username", email=email)
                raise BusinessRuleViolationError("User already exists")

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                username=name,
                email=email,
                password_hash=self.hash_password(password),
                first_name=first_name,
                last_name=last_name,
                role=UserRole.USER,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), username=username)
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check an email and password pair.

        Unknown email and wrong password are reported identically.

        Raises:
            InvalidCredentialsError: If the credentials do not match an account
        """
        email = email.strip().lower()
        with logfire.span("auth_service.authenticate", email=email):
            user = await self.user_repository.find_by_email(email)
            if not user or not self.check_password(password, user.password_hash):
                logfire.warn("Failed login attempt", email=email)
                raise InvalidCredentialsError()

            logfire.info("User authenticated", user_id=str(user.id))
            return user
