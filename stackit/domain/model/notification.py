"""Notification entity."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import NotificationId, NotificationType, RelatedType, UserId


class Notification(DomainModel):
    """Message delivered to a user's inbox.

    related_id/related_type point back at the question (or answer) the
    notification is about, for deep-linking.
    """

    id: NotificationId
    user_id: UserId  # Recipient
    type: NotificationType
    message: str = Field(min_length=1)
    related_id: Optional[UUID] = None
    related_type: Optional[RelatedType] = None
    is_read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
