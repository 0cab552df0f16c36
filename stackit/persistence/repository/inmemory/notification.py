"""In-memory notification repository for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, Sequence
from uuid import UUID

from stackit.domain.model import Notification
from stackit.domain.repository import NotificationRepository
from stackit.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    @asynccontextmanager
    async def isolated(self) -> AsyncIterator[None]:
        """Nothing to isolate without a transaction."""
        yield

    async def save(self, notification: Notification) -> Notification:
        """Store a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        return self._notifications.get(notification_id)

    async def find_by_user(self, user_id: UserId, limit: int = 50) -> list[Notification]:
        """Find a user's notifications, newest first."""
        notifications = [n for n in self._notifications.values() if n.user_id == user_id]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[:limit]

    async def count_unread(self, user_id: UserId) -> int:
        """Count a user's unread notifications."""
        return sum(
            1
            for n in self._notifications.values()
            if n.user_id == user_id and not n.is_read
        )

    async def mark_read(self, notification_id: NotificationId) -> Optional[Notification]:
        """Mark one notification read."""
        notification = self._notifications.get(notification_id)
        if notification is None:
            return None
        updated = notification.model_copy(update={"is_read": True})
        self._notifications[notification_id] = updated
        return updated

    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark every unread notification of a user read."""
        count = 0
        for notification in list(self._notifications.values()):
            if notification.user_id == user_id and not notification.is_read:
                self._notifications[notification.id] = notification.model_copy(
                    update={"is_read": True}
                )
                count += 1
        return count

    async def delete_by_related(self, related_ids: Sequence[UUID]) -> int:
        """Delete notifications linking to any of the given entities."""
        wanted = set(related_ids)
        doomed = [
            n.id for n in self._notifications.values() if n.related_id in wanted
        ]
        for notification_id in doomed:
            del self._notifications[notification_id]
        return len(doomed)
