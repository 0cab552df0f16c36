"""Notification repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import Optional, Sequence
from uuid import UUID

from stackit.domain.model.notification import Notification
from stackit.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    def isolated(self) -> AbstractAsyncContextManager[None]:
        """Scope whose failed statements do not abort the enclosing transaction.

        Best-effort work (the notification fan-out) runs its reads inside
        this scope so that an error there leaves the request able to commit.
        """
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Store a notification.

        Args:
            notification: The notification to store

        Returns:
            The stored notification
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId, limit: int = 50) -> list[Notification]:
        """Find a user's notifications, newest first.

        Args:
            user_id: Recipient
            limit: Maximum number of notifications to return

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def count_unread(self, user_id: UserId) -> int:
        """Count a user's unread notifications."""
        pass

    @abstractmethod
    async def mark_read(self, notification_id: NotificationId) -> Optional[Notification]:
        """Mark one notification read.

        Returns:
            The updated notification, None if it does not exist
        """
        pass

    @abstractmethod
    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark every unread notification of a user read.

        Returns:
            Number of notifications updated
        """
        pass

    @abstractmethod
    async def delete_by_related(self, related_ids: Sequence[UUID]) -> int:
        """Delete notifications linking to any of the given entities.

        Returns:
            Number of notifications deleted
        """
        pass
