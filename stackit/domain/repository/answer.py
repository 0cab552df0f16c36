"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from stackit.domain.model.answer import Answer
from stackit.domain.value import AnswerId, QuestionId, UserId


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Defines the contract for answer persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers to a question.

        Returns:
            Answers ordered accepted first, then oldest first
        """
        pass

    @abstractmethod
    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers for multiple questions (batch query).

        Args:
            question_ids: Questions to count answers for

        Returns:
            Dict mapping question_id -> answer count (missing means zero)
        """
        pass

    @abstractmethod
    async def find_accepted_question_ids(
        self, question_ids: Sequence[QuestionId]
    ) -> set[QuestionId]:
        """Return which of the given questions have an accepted answer."""
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update).

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def mark_accepted(
        self, answer_id: AnswerId, question_id: QuestionId
    ) -> Optional[Answer]:
        """Make answer_id the only accepted answer of question_id.

        Clears every accepted answer of the question and accepts the target
        as one atomic operation.

        Args:
            answer_id: Answer to accept
            question_id: The answer's question

        Returns:
            The accepted answer, None if it no longer exists

        Raises:
            IntegrityError: If a concurrent acceptance won the race
        """
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer (hard delete).

        Returns:
            True if an answer was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def delete_by_question(self, question_id: QuestionId) -> list[AnswerId]:
        """Delete every answer of a question.

        Returns:
            IDs of the deleted answers
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all answers."""
        pass

    @abstractmethod
    async def find_recent(self, limit: int, offset: int = 0) -> list[Answer]:
        """Find answers across all questions, newest first."""
        pass

    @abstractmethod
    async def count_by_authors(
        self, author_ids: Sequence[UserId]
    ) -> dict[UserId, int]:
        """Count answers written by each of the given users.

        Returns:
            Dict mapping author_id -> answer count (missing means zero)
        """
        pass
