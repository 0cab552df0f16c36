"""Answer domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from stackit.config import VotingSettings
from stackit.domain.error import (
    ConcurrencyConflictError,
    NotAuthorizedError,
    NotFoundError,
)
from stackit.domain.model import Answer, User
from stackit.domain.repository import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId, UserId

from .base import Service, ensure_author_or_admin
from .content_policy import ContentPolicy
from .question_service import QuestionService


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_service: QuestionService,
        content_policy: ContentPolicy,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_service: Question domain service
            content_policy: Content validation rules
            voting_settings: Retry limits shared with vote writes
        """
        self.answer_repository = answer_repository
        self.question_service = question_service
        self.content_policy = content_policy
        self.voting_settings = voting_settings

    async def create_answer(
        self, author: User, question_id: QuestionId, content: str
    ) -> Answer:
        """Validate and store an answer to an existing question.

        Raises:
            NotFoundError: If question not found
            ValidationError: If content is too short
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author.id),
        ):
            content = self.content_policy.check_answer(content)
            await self.question_service.get_question(question_id)

            now = datetime.now()
            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                author_id=author.id,
                author_username=author.username,
                content=content,
                is_accepted=False,
                created_at=now,
                updated_at=now,
            )
            saved = await self.answer_repository.save(answer)
            logfire.info(
                "Answer created", answer_id=str(saved.id), question_id=str(question_id)
            )
            return saved

    async def get_answer(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID.

        Raises:
            NotFoundError: If answer not found
        """
        with logfire.span("answer_service.get_answer", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Answer not found", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))
            return answer

    async def get_answers_for_question(self, question_id: QuestionId) -> list[Answer]:
        """Get a question's answers, accepted first then oldest first."""
        return await self.answer_repository.find_by_question(question_id)

    async def count_answers(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers per question."""
        if not question_ids:
            return {}
        return await self.answer_repository.count_by_questions(question_ids)

    async def get_answered_question_ids(
        self, question_ids: Sequence[QuestionId]
    ) -> set[QuestionId]:
        """Return which questions have an accepted answer."""
        if not question_ids:
            return set()
        return await self.answer_repository.find_accepted_question_ids(question_ids)

    async def update_answer(self, actor: User, answer_id: AnswerId, content: str) -> Answer:
        """Edit an answer's content.

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If actor is neither the author nor an admin
            ValidationError: If content is too short
        """
        with logfire.span(
            "answer_service.update_answer",
            answer_id=str(answer_id),
            actor_id=str(actor.id),
        ):
            answer = await self.get_answer(answer_id)
            ensure_author_or_admin(
                actor, answer.author_id, "update", "answer", str(answer_id)
            )
            content = self.content_policy.check_answer(content)

            saved = await self.answer_repository.save(
                answer.model_copy(update={"content": content, "updated_at": datetime.now()})
            )
            logfire.info("Answer updated", answer_id=str(answer_id))
            return saved

    async def accept_answer(self, actor_id: UserId, answer_id: AnswerId) -> Answer:
        """Mark an answer as the accepted answer of its question.

        Only the question's author may accept. Any previously accepted answer
        of the same question is unaccepted in the same atomic write, so a
        question never has more than one accepted answer.

        Args:
            actor_id: User attempting the acceptance
            answer_id: Answer to accept

        Returns:
            The accepted answer

        Raises:
            NotFoundError: If the answer or its question is missing
            NotAuthorizedError: If actor is not the question's author
            ConcurrencyConflictError: If concurrent acceptances kept conflicting
        """
        with logfire.span(
            "answer_service.accept_answer",
            answer_id=str(answer_id),
            actor_id=str(actor_id),
        ):
            answer = await self.get_answer(answer_id)
            question = await self.question_service.get_question(answer.question_id)

            if question.author_id != actor_id:
                logfire.warn(
                    "Accept attempted by non-author",
                    answer_id=str(answer_id),
                    question_id=str(question.id),
                    actor_id=str(actor_id),
                )
                raise NotAuthorizedError("accept", "answer", str(answer_id), str(actor_id))

            attempts = self.voting_settings.max_attempts
            for attempt in range(1, attempts + 1):
                try:
                    accepted = await self.answer_repository.mark_accepted(
                        answer.id, question.id
                    )
                except IntegrityError:
                    logfire.warn(
                        "Concurrent acceptance conflict, retrying",
                        question_id=str(question.id),
                        attempt=attempt,
                    )
                    continue

                if accepted is None:
                    raise NotFoundError("Answer", str(answer_id))

                logfire.info(
                    "Answer accepted",
                    answer_id=str(answer_id),
                    question_id=str(question.id),
                )
                return accepted

            logfire.error(
                "Accept answer retries exhausted",
                answer_id=str(answer_id),
                attempts=attempts,
            )
            raise ConcurrencyConflictError("answer", str(answer_id), attempts)

    async def delete_answer(self, answer_id: AnswerId) -> None:
        """Delete an answer row. Callers remove dependent content first."""
        with logfire.span("answer_service.delete_answer", answer_id=str(answer_id)):
            if not await self.answer_repository.delete(answer_id):
                raise NotFoundError("Answer", str(answer_id))
            logfire.info("Answer deleted", answer_id=str(answer_id))

    async def delete_answers_for_question(
        self, question_id: QuestionId
    ) -> list[AnswerId]:
        """Delete all answers to a question and return their IDs."""
        with logfire.span(
            "answer_service.delete_answers_for_question", question_id=str(question_id)
        ):
            deleted = await self.answer_repository.delete_by_question(question_id)
            logfire.info(
                "Answers deleted", question_id=str(question_id), count=len(deleted)
            )
            return deleted

    async def count_all(self) -> int:
        """Count all answers."""
        return await self.answer_repository.count()

    async def list_recent(self, limit: int, offset: int = 0) -> list[Answer]:
        """Answers across the site, newest first (moderation listing)."""
        with logfire.span("answer_service.list_recent", limit=limit, offset=offset):
            return await self.answer_repository.find_recent(limit, offset)

    async def count_by_authors(self, author_ids: Sequence[UserId]) -> dict[UserId, int]:
        """Count answers written per user."""
        if not author_ids:
            return {}
        return await self.answer_repository.count_by_authors(author_ids)
