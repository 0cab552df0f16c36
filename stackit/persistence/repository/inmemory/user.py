"""In-memory user repository for testing."""

from typing import Optional, Sequence

from stackit.domain.model import User
from stackit.domain.repository import UserQuery, UserRepository
from stackit.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive)."""
        for user in self._users.values():
            if user.email.lower() == email.lower():
                return user
        return None

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username.root == username:
                return user
        return None

    async def find_by_usernames(self, usernames: Sequence[str]) -> list[User]:
        """Find users by username."""
        wanted = set(usernames)
        return [u for u in self._users.values() if u.username.root in wanted]

    async def save(self, user: User) -> User:
        """Save a user."""
        self._users[user.id] = user
        return user

    async def count(self) -> int:
        """Count all users."""
        return len(self._users)

    async def search_by_username(self, fragment: str, limit: int = 10) -> list[User]:
        """Find users whose username contains fragment."""
        needle = fragment.lower()
        users = [u for u in self._users.values() if needle in u.username.root.lower()]
        users.sort(key=lambda u: u.username.root)
        return users[:limit]

    async def find_all(self, query: UserQuery) -> list[User]:
        """Find users newest first with role and search filters."""
        users = list(self._users.values())
        if query.role is not None:
            users = [u for u in users if u.role == query.role]
        if query.search:
            needle = query.search.lower()
            users = [
                u
                for u in users
                if needle in u.username.root.lower() or needle in u.email.lower()
            ]
        users.sort(key=lambda u: u.created_at, reverse=True)
        return users[query.offset : query.offset + query.limit]
