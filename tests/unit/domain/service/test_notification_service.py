"""Unit tests for NotificationService."""

from uuid import uuid4

import pytest

from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationId, NotificationType, RelatedType
from tests.conftest import save_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestNotificationInbox:
    """Tests for reading and marking notifications."""

    @pytest.mark.asyncio
    async def test_inbox_reports_unread_count(self, unit_env):
        """The inbox lists a user's notifications with the unread count."""
        # Arrange
        alice = await save_user(unit_env, "alice")
        bob = await save_user(unit_env, "bob")
        notification_service = await unit_env.get(NotificationService)
        related_id = uuid4()
        for message in ("first", "second"):
            await notification_service.notify(
                alice.id, NotificationType.MENTION, message, related_id, RelatedType.QUESTION
            )
        await notification_service.notify(bob.id, NotificationType.ANSWER, "other")

        # Act
        notifications, unread = await notification_service.get_inbox(alice.id)

        # Assert
        assert {n.message for n in notifications} == {"first", "second"}
        assert unread == 2

    @pytest.mark.asyncio
    async def test_mark_read(self, unit_env):
        """Marking a notification read lowers the unread count."""
        # Arrange
        alice = await save_user(unit_env, "alice")
        notification_service = await unit_env.get(NotificationService)
        notification = await notification_service.notify(
            alice.id, NotificationType.ANSWER, "answered"
        )

        # Act
        updated = await notification_service.mark_read(alice.id, notification.id)

        # Assert
        assert updated.is_read is True
        _, unread = await notification_service.get_inbox(alice.id)
        assert unread == 0

    @pytest.mark.asyncio
    async def test_cannot_mark_someone_elses_notification(self, unit_env):
        """Users may only mark their own notifications."""
        # Arrange
        alice = await save_user(unit_env, "alice")
        bob = await save_user(unit_env, "bob")
        notification_service = await unit_env.get(NotificationService)
        notification = await notification_service.notify(
            alice.id, NotificationType.ANSWER, "answered"
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await notification_service.mark_read(bob.id, notification.id)

    @pytest.mark.asyncio
    async def test_mark_unknown_notification(self, unit_env):
        """Marking a missing notification fails."""
        # Arrange
        alice = await save_user(unit_env, "alice")
        notification_service = await unit_env.get(NotificationService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await notification_service.mark_read(alice.id, NotificationId(uuid4()))

    @pytest.mark.asyncio
    async def test_mark_all_read(self, unit_env):
        """Marking all read returns how many changed."""
        # Arrange
        alice = await save_user(unit_env, "alice")
        notification_service = await unit_env.get(NotificationService)
        first = await notification_service.notify(
            alice.id, NotificationType.ANSWER, "one"
        )
        await notification_service.notify(alice.id, NotificationType.COMMENT, "two")
        await notification_service.notify(alice.id, NotificationType.MENTION, "three")
        await notification_service.mark_read(alice.id, first.id)

        # Act
        updated = await notification_service.mark_all_read(alice.id)

        # Assert
        assert updated == 2
        _, unread = await notification_service.get_inbox(alice.id)
        assert unread == 0

    @pytest.mark.asyncio
    async def test_delete_for_related(self, unit_env):
        """Notifications pointing at deleted content are removed."""
        # Arrange
        alice = await save_user(unit_env, "alice")
        notification_service = await unit_env.get(NotificationService)
        gone, kept = uuid4(), uuid4()
        await notification_service.notify(
            alice.id, NotificationType.ANSWER, "gone", gone, RelatedType.QUESTION
        )
        await notification_service.notify(
            alice.id, NotificationType.ANSWER, "kept", kept, RelatedType.QUESTION
        )

        # Act
        deleted = await notification_service.delete_for_related([gone])

        # Assert
        assert deleted == 1
        notifications, _ = await notification_service.get_inbox(alice.id)
        assert [n.message for n in notifications] == ["kept"]
