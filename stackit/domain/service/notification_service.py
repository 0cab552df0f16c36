"""Notification domain service.

Stores notifications and serves a user's inbox. ``notify`` is the
best-effort sink used by content-creation flows: a failed insert is logged
and absorbed so the triggering operation still succeeds.
"""

from contextlib import AbstractAsyncContextManager
from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID, uuid4

import logfire

from stackit.config import NotificationSettings
from stackit.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    NotificationDeliveryError,
)
from stackit.domain.model import Notification
from stackit.domain.repository import NotificationRepository
from stackit.domain.value import NotificationId, NotificationType, RelatedType, UserId

from .base import Service


class NotificationService(Service):
    """Domain service for notification operations."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        notification_settings: NotificationSettings,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            notification_settings: Inbox size and message settings
        """
        self.notification_repository = notification_repository
        self.notification_settings = notification_settings

    def isolated(self) -> AbstractAsyncContextManager[None]:
        """Scope for best-effort reads that must not poison the request transaction."""
        return self.notification_repository.isolated()

    async def notify(
        self,
        user_id: UserId,
        type: NotificationType,
        message: str,
        related_id: Optional[UUID] = None,
        related_type: Optional[RelatedType] = None,
    ) -> Optional[Notification]:
        """Deliver a notification, never raising.

        Args:
            user_id: Recipient
            type: Kind of event
            message: Human-readable message
            related_id: Entity the notification links to
            related_type: Type of the linked entity

        Returns:
            The stored notification, None if delivery failed
        """
        with logfire.span(
            "notification_service.notify", user_id=str(user_id), type=type.value
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                user_id=user_id,
                type=type,
                message=message,
                related_id=related_id,
                related_type=related_type,
                is_read=False,
                created_at=datetime.now(),
            )
            try:
                saved = await self.notification_repository.save(notification)
            except Exception as e:
                error = NotificationDeliveryError(str(user_id), e)
                logfire.error(
                    "Notification delivery failed",
                    user_id=str(user_id),
                    type=type.value,
                    error=str(error),
                )
                return None

            logfire.info(
                "Notification delivered",
                notification_id=str(saved.id),
                user_id=str(user_id),
                type=type.value,
            )
            return saved

    async def get_inbox(self, user_id: UserId) -> tuple[list[Notification], int]:
        """Latest notifications of a user and their unread count."""
        with logfire.span("notification_service.get_inbox", user_id=str(user_id)):
            notifications = await self.notification_repository.find_by_user(
                user_id, limit=self.notification_settings.page_size
            )
            unread = await self.notification_repository.count_unread(user_id)
            return notifications, unread

    async def mark_read(
        self, user_id: UserId, notification_id: NotificationId
    ) -> Notification:
        """Mark one of the user's notifications read.

        Raises:
            NotFoundError: If notification not found
            NotAuthorizedError: If the notification belongs to another user
        """
        with logfire.span(
            "notification_service.mark_read",
            user_id=str(user_id),
            notification_id=str(notification_id),
        ):
            notification = await self.notification_repository.find_by_id(
                notification_id
            )
            if not notification:
                raise NotFoundError("Notification", str(notification_id))
            if notification.user_id != user_id:
                raise NotAuthorizedError(
                    "read", "notification", str(notification_id), str(user_id)
                )

            updated = await self.notification_repository.mark_read(notification_id)
            if not updated:
                raise NotFoundError("Notification", str(notification_id))
            return updated

    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark every notification of the user read."""
        with logfire.span("notification_service.mark_all_read", user_id=str(user_id)):
            count = await self.notification_repository.mark_all_read(user_id)
            logfire.info("Notifications marked read", user_id=str(user_id), count=count)
            return count

    async def delete_for_related(self, related_ids: Sequence[UUID]) -> int:
        """Remove notifications linking to deleted content."""
        if not related_ids:
            return 0
        return await self.notification_repository.delete_by_related(related_ids)
