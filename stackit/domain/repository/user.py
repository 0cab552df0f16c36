"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from stackit.domain.model.user import User
from stackit.domain.value import UserId, UserRole
from stackit.domain.value.common import ValueObject


class UserQuery(ValueObject):
    """Filter and paging parameters for the admin user listing.

    search matches username or email case-insensitively.
    """

    role: Optional[UserRole] = None
    search: Optional[str] = None
    limit: int = 20
    offset: int = 0


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email address (case-insensitive)."""
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by exact username."""
        pass

    @abstractmethod
    async def find_by_usernames(self, usernames: Sequence[str]) -> list[User]:
        """Find multiple users by username in a single query.

        Args:
            usernames: Usernames to look up

        Returns:
            Users that exist (unknown usernames are skipped)
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all registered users."""
        pass

    @abstractmethod
    async def search_by_username(self, fragment: str, limit: int = 10) -> list[User]:
        """Find users whose username contains fragment (case-insensitive).

        Returns:
            At most limit users, ordered by username
        """
        pass

    @abstractmethod
    async def find_all(self, query: UserQuery) -> list[User]:
        """Find users newest first, filtered and paged by query."""
        pass
