"""Mark notifications read use cases."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationId, UserId

from .list_notifications import NotificationResponse


class MarkReadRequest(BaseModel):
    """Mark one notification read."""

    user_id: str
    notification_id: str


class MarkAllReadRequest(BaseModel):
    """Mark every notification of the user read."""

    user_id: str


class MarkAllReadResponse(BaseModel):
    """Mark all read response."""

    updated: int


class MarkReadUseCase:
    """Use case for marking one notification read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkReadRequest) -> NotificationResponse:
        """Execute mark read flow.

        Raises:
            NotFoundError: If notification not found
            NotAuthorizedError: If the notification belongs to another user
        """
        notification = await self.notification_service.mark_read(
            UserId(UUID(request.user_id)),
            NotificationId(UUID(request.notification_id)),
        )
        return NotificationResponse.from_notification(notification)


class MarkAllReadUseCase:
    """Use case for clearing the unread badge."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkAllReadRequest) -> MarkAllReadResponse:
        updated = await self.notification_service.mark_all_read(
            UserId(UUID(request.user_id))
        )
        return MarkAllReadResponse(updated=updated)
