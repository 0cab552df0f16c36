"""Mention extraction and notification fan-out.

Turns content creation into inbox notifications:

- the owner of the question (for answers) or answer (for comments) is told
  about the new content, unless they wrote it themselves
- every existing user ``@mentioned`` in the content gets a MENTION
  notification, except the author

Notifications always link to a question. Everything here is best-effort:
failures are logged and never reach the caller. Lookups run inside
``NotificationService.isolated`` so a failed read cannot abort the request
transaction holding the new content.
"""

import re
from typing import Iterator, Union
from uuid import UUID

import logfire

from stackit.config import NotificationSettings
from stackit.domain.model import Answer, Question, User
from stackit.domain.value import (
    AnswerId,
    NotificationType,
    QuestionId,
    RelatedType,
    UserId,
)

from .answer_service import AnswerService
from .base import Service
from .notification_service import NotificationService
from .question_service import QuestionService
from .user_service import UserService

MENTION_PATTERN = re.compile(r"@(\w+)")


class NotificationResolver(Service):
    """Resolves who to notify about new questions, answers and comments."""

    def __init__(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
        notification_service: NotificationService,
        notification_settings: NotificationSettings,
    ) -> None:
        self.user_service = user_service
        self.question_service = question_service
        self.answer_service = answer_service
        self.notification_service = notification_service
        self.notification_settings = notification_settings

    @staticmethod
    def extract_mentions(content: str) -> Iterator[str]:
        """Yield each ``@username`` found in content once, in order of appearance."""
        seen: set[str] = set()
        for match in MENTION_PATTERN.finditer(content):
            username = match.group(1)
            if username not in seen:
                seen.add(username)
                yield username

    def _snippet(self, title: str) -> str:
        limit = self.notification_settings.title_snippet_length
        if len(title) > limit:
            return title[:limit] + "..."
        return title

    async def notify_on_create(
        self,
        event_type: NotificationType,
        actor: User,
        target: Union[Question, Answer],
    ) -> bool:
        """Tell the owner of target that actor answered or commented on it.

        Args:
            event_type: ANSWER (target is the question) or COMMENT (target is
                the answer)
            actor: User who created the new content
            target: Content that received the answer or comment

        Returns:
            True if a notification was delivered
        """
        expected = {
            NotificationType.ANSWER: Question,
            NotificationType.COMMENT: Answer,
        }.get(event_type)
        if expected is None or not isinstance(target, expected):
            raise ValueError(
                f"Cannot notify {event_type.value} on {type(target).__name__}"
            )

        with logfire.span(
            "notification_resolver.notify_on_create",
            event_type=event_type.value,
            actor_id=str(actor.id),
            target_id=str(target.id),
        ):
            if target.author_id == actor.id:
                logfire.debug("Owner acted on own content, not notifying")
                return False

            try:
                if isinstance(target, Question):
                    question = target
                    message = (
                        f"{actor.username} answered your question: "
                        f"{self._snippet(question.title)}"
                    )
                else:
                    async with self.notification_service.isolated():
                        question = await self.question_service.get_question(
                            target.question_id
                        )
                    message = (
                        f"{actor.username} commented on your answer to: "
                        f"{self._snippet(question.title)}"
                    )
            except Exception as e:
                logfire.error(
                    "Failed to resolve owner notification",
                    target_id=str(target.id),
                    error=str(e),
                )
                return False

            delivered = await self.notification_service.notify(
                user_id=target.author_id,
                type=event_type,
                message=message,
                related_id=question.id,
                related_type=RelatedType.QUESTION,
            )
            return delivered is not None

    async def notify_mentions(
        self,
        content: str,
        author_id: UserId,
        related_id: UUID,
        related_type: RelatedType,
    ) -> int:
        """Notify every existing user mentioned in content.

        Unknown usernames and the author's own name are skipped. Mentions in
        an answer link to the answer's question.

        Args:
            content: Text to scan for mentions
            author_id: Author of the content
            related_id: Question or answer containing the mentions
            related_type: QUESTION or ANSWER

        Returns:
            Number of notifications delivered
        """
        usernames = list(self.extract_mentions(content))
        if not usernames:
            return 0

        with logfire.span(
            "notification_resolver.notify_mentions",
            author_id=str(author_id),
            related_id=str(related_id),
            related_type=related_type.value,
            mentions=len(usernames),
        ):
            try:
                async with self.notification_service.isolated():
                    users = await self.user_service.find_by_usernames(usernames)
                    recipients = [user for user in users if user.id != author_id]
                    if not recipients:
                        return 0

                    if related_type == RelatedType.ANSWER:
                        answer = await self.answer_service.get_answer(
                            AnswerId(related_id)
                        )
                        question_id = answer.question_id
                    else:
                        question_id = QuestionId(related_id)
                    question = await self.question_service.get_question(question_id)

                if related_type == RelatedType.ANSWER:
                    message = (
                        "You were mentioned in an answer to: "
                        f"{self._snippet(question.title)}"
                    )
                else:
                    message = (
                        f"You were mentioned in question: {self._snippet(question.title)}"
                    )
            except Exception as e:
                logfire.error(
                    "Failed to resolve mentions",
                    related_id=str(related_id),
                    error=str(e),
                )
                return 0

            delivered = 0
            for user in recipients:
                notification = await self.notification_service.notify(
                    user_id=user.id,
                    type=NotificationType.MENTION,
                    message=message,
                    related_id=question.id,
                    related_type=RelatedType.QUESTION,
                )
                if notification is not None:
                    delivered += 1

            logfire.info(
                "Mention notifications sent",
                related_id=str(related_id),
                recipients=len(recipients),
                delivered=delivered,
            )
            return delivered
