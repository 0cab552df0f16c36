"""Test configuration and fixtures."""

import os

# Settings are read from the environment when the container is built
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret")
os.environ.setdefault("AUTH__PASSWORD_HASH_ROUNDS", "4")  # bcrypt minimum
os.environ.setdefault("OBSERVABILITY__SEND_TO_LOGFIRE", "false")

import logfire  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)

from uuid import uuid4  # noqa: E402

from dishka import AsyncContainer  # noqa: E402

from stackit.domain.model import User  # noqa: E402
from stackit.domain.repository import UserRepository  # noqa: E402
from stackit.domain.value import UserId, UserRole  # noqa: E402
from stackit.domain.value.types import Username  # noqa: E402

# Answers must be at least 30 characters by default
ANSWER_TEXT = "Use a context manager so the file is always closed."


def make_user(
    username: str = "alice",
    role: UserRole = UserRole.USER,
    is_banned: bool = False,
) -> User:
    """Build a user with a throwaway password hash."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=f"{username}@example.com",
        password_hash="not-a-real-hash",
        role=role,
        is_banned=is_banned,
    )


async def save_user(env: AsyncContainer, username: str = "alice", **kwargs) -> User:
    """Store a user in the container's user repository."""
    user_repository = await env.get(UserRepository)
    return await user_repository.save(make_user(username, **kwargs))
