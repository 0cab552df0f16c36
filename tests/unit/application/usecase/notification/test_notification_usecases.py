"""Unit tests for the notification use cases."""

import pytest

from stackit.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsUseCase,
    MarkAllReadRequest,
    MarkAllReadUseCase,
    MarkReadRequest,
    MarkReadUseCase,
)
from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationType, RelatedType
from tests.conftest import save_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestNotificationUseCases:
    """Tests for listing and marking notifications."""

    @pytest.mark.asyncio
    async def test_list_then_mark(self, unit_env):
        """Marking read is reflected in the next listing."""
        # Arrange
        alice = await save_user(unit_env, "alice")
        notification_service = await unit_env.get(NotificationService)
        first = await notification_service.notify(
            alice.id, NotificationType.ANSWER, "one", alice.id, RelatedType.QUESTION
        )
        await notification_service.notify(alice.id, NotificationType.MENTION, "two")
        list_use_case = await unit_env.get(ListNotificationsUseCase)
        mark_use_case = await unit_env.get(MarkReadUseCase)
        mark_all_use_case = await unit_env.get(MarkAllReadUseCase)

        # Act
        before = await list_use_case.execute(ListNotificationsRequest(user_id=str(alice.id)))
        marked = await mark_use_case.execute(
            MarkReadRequest(user_id=str(alice.id), notification_id=str(first.id))
        )
        middle = await list_use_case.execute(ListNotificationsRequest(user_id=str(alice.id)))
        cleared = await mark_all_use_case.execute(
            MarkAllReadRequest(user_id=str(alice.id))
        )
        after = await list_use_case.execute(ListNotificationsRequest(user_id=str(alice.id)))

        # Assert
        assert before.unread_count == 2
        assert len(before.notifications) == 2
        assert marked.is_read is True
        assert marked.related_type == RelatedType.QUESTION
        assert middle.unread_count == 1
        assert cleared.updated == 1
        assert after.unread_count == 0
