"""Unit tests for NotificationResolver."""

from contextlib import asynccontextmanager
from uuid import uuid4

import pytest

from stackit.config import NotificationSettings
from stackit.domain.error import NotFoundError
from stackit.domain.repository import NotificationRepository
from stackit.domain.service import (
    AnswerService,
    NotificationResolver,
    NotificationService,
    QuestionService,
    UserService,
)
from stackit.domain.value import NotificationType, RelatedType
from stackit.persistence.repository.inmemory import (
    InMemoryNotificationRepository,
    InMemoryUserRepository,
)
from tests.conftest import ANSWER_TEXT, save_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class FailingNotificationRepository(InMemoryNotificationRepository):
    """Notification store that is down."""

    async def save(self, notification):
        raise ConnectionError("notification store unavailable")


class SelectivelyFailingNotificationRepository(InMemoryNotificationRepository):
    """Notification store that rejects writes for one recipient."""

    def __init__(self, broken_user_id):
        super().__init__()
        self.broken_user_id = broken_user_id

    async def save(self, notification):
        if notification.user_id == self.broken_user_id:
            raise ConnectionError("recipient shard unavailable")
        return await super().save(notification)


class ScopeRecordingNotificationRepository(InMemoryNotificationRepository):
    """Records errors raised inside the isolated scope."""

    def __init__(self):
        super().__init__()
        self.scope_errors = []

    @asynccontextmanager
    async def isolated(self):
        try:
            yield
        except Exception as e:
            self.scope_errors.append(e)
            raise


class BrokenLookupUserRepository(InMemoryUserRepository):
    """User store whose batch lookup fails."""

    async def find_by_usernames(self, usernames):
        raise ConnectionError("user lookup failed")


async def _question(env, author, title="How do I parse JSON in Python?"):
    question_service = await env.get(QuestionService)
    return await question_service.create_question(
        author, title, "I have a string and need a dict.", []
    )


async def _inbox(env, user):
    notification_repository = await env.get(NotificationRepository)
    return await notification_repository.find_by_user(user.id)


class TestExtractMentions:
    """Tests for mention parsing."""

    def test_mentions_in_order_without_duplicates(self):
        """Each username is reported once, in order of first appearance."""
        # Act
        mentions = list(
            NotificationResolver.extract_mentions(
                "Ping @bob and @carol_2, thanks @bob! mail me at x@y"
            )
        )

        # Assert
        assert mentions == ["bob", "carol_2", "y"]

    def test_no_mentions(self):
        """Content without @ yields nothing."""
        # Act & Assert
        assert list(NotificationResolver.extract_mentions("plain text")) == []


class TestNotifyOnCreate:
    """Tests for owner notifications."""

    @pytest.mark.asyncio
    async def test_answer_notifies_question_author(self, unit_env):
        """Answering someone's question notifies them with a link to it."""
        # Arrange
        asker = await save_user(unit_env, "asker")
        helper = await save_user(unit_env, "helper")
        question = await _question(unit_env, asker)
        resolver = await unit_env.get(NotificationResolver)

        # Act
        delivered = await resolver.notify_on_create(
            NotificationType.ANSWER, helper, question
        )

        # Assert
        assert delivered is True
        [notification] = await _inbox(unit_env, asker)
        assert notification.type == NotificationType.ANSWER
        assert notification.message == (
            "helper answered your question: How do I parse JSON in Python?"
        )
        assert notification.related_id == question.id
        assert notification.related_type == RelatedType.QUESTION
        assert notification.is_read is False

    @pytest.mark.asyncio
    async def test_comment_notifies_answer_author(self, unit_env):
        """Commenting on an answer notifies its author, linking the question."""
        # Arrange
        asker = await save_user(unit_env, "asker")
        helper = await save_user(unit_env, "helper")
        question = await _question(unit_env, asker)
        answer_service = await unit_env.get(AnswerService)
        answer = await answer_service.create_answer(helper, question.id, ANSWER_TEXT)
        resolver = await unit_env.get(NotificationResolver)

        # Act
        delivered = await resolver.notify_on_create(
            NotificationType.COMMENT, asker, answer
        )

        # Assert
        assert delivered is True
        [notification] = await _inbox(unit_env, helper)
        assert notification.type == NotificationType.COMMENT
        assert notification.message == (
            "asker commented on your answer to: How do I parse JSON in Python?"
        )
        assert notification.related_id == question.id

    @pytest.mark.asyncio
    async def test_owner_acting_on_own_content_is_not_notified(self, unit_env):
        """Answering your own question creates no notification."""
        # Arrange
        asker = await save_user(unit_env, "asker")
        question = await _question(unit_env, asker)
        resolver = await unit_env.get(NotificationResolver)

        # Act
        delivered = await resolver.notify_on_create(
            NotificationType.ANSWER, asker, question
        )

        # Assert
        assert delivered is False
        assert await _inbox(unit_env, asker) == []

    @pytest.mark.asyncio
    async def test_long_titles_are_truncated(self, unit_env):
        """Titles longer than the snippet length are cut with an ellipsis."""
        # Arrange
        asker = await save_user(unit_env, "asker")
        helper = await save_user(unit_env, "helper")
        question = await _question(unit_env, asker, title="x" * 80)
        resolver = await unit_env.get(NotificationResolver)

        # Act
        await resolver.notify_on_create(NotificationType.ANSWER, helper, question)

        # Assert
        [notification] = await _inbox(unit_env, asker)
        assert notification.message == f"helper answered your question: {'x' * 60}..."

    @pytest.mark.asyncio
    async def test_mismatched_target_rejected(self, unit_env):
        """A COMMENT event must target an answer."""
        # Arrange
        asker = await save_user(unit_env, "asker")
        helper = await save_user(unit_env, "helper")
        question = await _question(unit_env, asker)
        resolver = await unit_env.get(NotificationResolver)

        # Act & Assert
        with pytest.raises(ValueError):
            await resolver.notify_on_create(NotificationType.COMMENT, helper, question)


class TestNotifyMentions:
    """Tests for @mention notifications."""

    @pytest.mark.asyncio
    async def test_mentioned_users_are_notified_once(self, unit_env):
        """Every existing mentioned user gets one MENTION notification."""
        # Arrange
        asker = await save_user(unit_env, "asker")
        bob = await save_user(unit_env, "bob")
        carol = await save_user(unit_env, "carol")
        question = await _question(unit_env, asker)
        resolver = await unit_env.get(NotificationResolver)

        # Act
        delivered = await resolver.notify_mentions(
            "Maybe @bob knows, or @carol. @bob?",
            asker.id,
            question.id,
            RelatedType.QUESTION,
        )

        # Assert
        assert delivered == 2
        for user in (bob, carol):
            [notification] = await _inbox(unit_env, user)
            assert notification.type == NotificationType.MENTION
            assert notification.message == (
                "You were mentioned in question: How do I parse JSON in Python?"
            )
            assert notification.related_id == question.id

    @pytest.mark.asyncio
    async def test_unknown_users_and_author_are_skipped(self, unit_env):
        """Mentions of nobody and of yourself notify no one."""
        # Arrange
        asker = await save_user(unit_env, "asker")
        question = await _question(unit_env, asker)
        resolver = await unit_env.get(NotificationResolver)

        # Act
        delivered = await resolver.notify_mentions(
            "Note to self @asker, ask @ghost", asker.id, question.id, RelatedType.QUESTION
        )

        # Assert
        assert delivered == 0
        assert await _inbox(unit_env, asker) == []

    @pytest.mark.asyncio
    async def test_mentions_in_answer_link_to_question(self, unit_env):
        """A mention inside an answer links to the answer's question."""
        # Arrange
        asker = await save_user(unit_env, "asker")
        helper = await save_user(unit_env, "helper")
        bob = await save_user(unit_env, "bob")
        question = await _question(unit_env, asker)
        answer_service = await unit_env.get(AnswerService)
        answer = await answer_service.create_answer(
            helper, question.id, ANSWER_TEXT + " cc @bob"
        )
        resolver = await unit_env.get(NotificationResolver)

        # Act
        delivered = await resolver.notify_mentions(
            answer.content, helper.id, answer.id, RelatedType.ANSWER
        )

        # Assert
        assert delivered == 1
        [notification] = await _inbox(unit_env, bob)
        assert notification.message == (
            "You were mentioned in an answer to: How do I parse JSON in Python?"
        )
        assert notification.related_id == question.id
        assert notification.related_type == RelatedType.QUESTION


class TestNotificationFailureIsolation:
    """Notification failures never reach the caller."""

    async def _resolver_with_failing_store(
        self, env, repository=None, user_service=None
    ) -> NotificationResolver:
        settings = NotificationSettings()
        return NotificationResolver(
            user_service=user_service or await env.get(UserService),
            question_service=await env.get(QuestionService),
            answer_service=await env.get(AnswerService),
            notification_service=NotificationService(
                notification_repository=repository or FailingNotificationRepository(),
                notification_settings=settings,
            ),
            notification_settings=settings,
        )

    @pytest.mark.asyncio
    async def test_owner_notification_failure_is_absorbed(self, unit_env):
        """A failing store reports no delivery instead of raising."""
        # Arrange
        asker = await save_user(unit_env, "asker")
        helper = await save_user(unit_env, "helper")
        question = await _question(unit_env, asker)
        resolver = await self._resolver_with_failing_store(unit_env)

        # Act
        delivered = await resolver.notify_on_create(
            NotificationType.ANSWER, helper, question
        )

        # Assert
        assert delivered is False

    @pytest.mark.asyncio
    async def test_mention_failure_is_absorbed(self, unit_env):
        """Mentions to a failing store count zero deliveries."""
        # Arrange
        asker = await save_user(unit_env, "asker")
        await save_user(unit_env, "bob")
        question = await _question(unit_env, asker)
        resolver = await self._resolver_with_failing_store(unit_env)

        # Act
        delivered = await resolver.notify_mentions(
            "@bob", asker.id, question.id, RelatedType.QUESTION
        )

        # Assert
        assert delivered == 0

    @pytest.mark.asyncio
    async def test_one_failing_recipient_does_not_block_others(self, unit_env):
        """A delivery failure for alice still lets bob be notified."""
        # Arrange
        asker = await save_user(unit_env, "asker")
        alice = await save_user(unit_env, "alice")
        bob = await save_user(unit_env, "bob")
        question = await _question(unit_env, asker)
        repository = SelectivelyFailingNotificationRepository(alice.id)
        resolver = await self._resolver_with_failing_store(unit_env, repository)

        # Act
        delivered = await resolver.notify_mentions(
            "@alice @bob @carol", asker.id, question.id, RelatedType.QUESTION
        )

        # Assert
        assert delivered == 1
        assert await repository.find_by_user(alice.id) == []
        [notification] = await repository.find_by_user(bob.id)
        assert notification.type == NotificationType.MENTION
        assert notification.related_id == question.id

    @pytest.mark.asyncio
    async def test_failed_lookup_stays_inside_isolated_scope(self, unit_env):
        """Lookup errors surface in the isolated scope and are then absorbed."""
        # Arrange
        asker = await save_user(unit_env, "asker")
        question = await _question(unit_env, asker)
        repository = ScopeRecordingNotificationRepository()
        resolver = await self._resolver_with_failing_store(
            unit_env,
            repository,
            user_service=UserService(BrokenLookupUserRepository()),
        )

        # Act
        delivered = await resolver.notify_mentions(
            "@bob", asker.id, question.id, RelatedType.QUESTION
        )

        # Assert
        assert delivered == 0
        [error] = repository.scope_errors
        assert isinstance(error, ConnectionError)

    @pytest.mark.asyncio
    async def test_comment_owner_lookup_runs_in_isolated_scope(self, unit_env):
        """A missing question for a commented answer is absorbed after isolation."""
        # Arrange
        asker = await save_user(unit_env, "asker")
        answerer = await save_user(unit_env, "answerer")
        question = await _question(unit_env, asker)
        answer_service = await unit_env.get(AnswerService)
        answer = await answer_service.create_answer(answerer, question.id, ANSWER_TEXT)
        orphan = answer.model_copy(update={"question_id": uuid4()})
        repository = ScopeRecordingNotificationRepository()
        resolver = await self._resolver_with_failing_store(unit_env, repository)

        # Act
        delivered = await resolver.notify_on_create(
            NotificationType.COMMENT, asker, orphan
        )

        # Assert
        assert delivered is False
        [error] = repository.scope_errors
        assert isinstance(error, NotFoundError)
