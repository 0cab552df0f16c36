"""List notifications use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.model import Notification
from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationType, RelatedType, UserId


class NotificationResponse(BaseModel):
    """Notification as returned by the API."""

    notification_id: str
    type: NotificationType
    message: str
    related_id: Optional[str]
    related_type: Optional[RelatedType]
    is_read: bool
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationResponse":
        return cls(
            notification_id=str(notification.id),
            type=notification.type,
            message=notification.message,
            related_id=str(notification.related_id) if notification.related_id else None,
            related_type=notification.related_type,
            is_read=notification.is_read,
            created_at=notification.created_at,
        )


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str


class ListNotificationsResponse(BaseModel):
    """Inbox: latest notifications plus the unread count."""

    notifications: list[NotificationResponse]
    unread_count: int


class ListNotificationsUseCase:
    """Use case for reading the notification inbox."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: ListNotificationsRequest) -> ListNotificationsResponse:
        """Execute list notifications flow."""
        notifications, unread = await self.notification_service.get_inbox(
            UserId(UUID(request.user_id))
        )
        return ListNotificationsResponse(
            notifications=[NotificationResponse.from_notification(n) for n in notifications],
            unread_count=unread,
        )
