"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from stackit.domain.model.question import Question
from stackit.domain.value import QuestionId, UserId
from stackit.domain.value.common import ValueObject
from stackit.domain.value.types import TagName


class QuestionQuery(ValueObject):
    """Filter and paging parameters for question listings.

    search matches title or content case-insensitively; tag restricts the
    listing to questions carrying that tag.
    """

    search: Optional[str] = None
    tag: Optional[TagName] = None
    limit: int = 10
    offset: int = 0


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question (with tag names) if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, query: QuestionQuery) -> list[Question]:
        """Find questions newest first, filtered and paged by query.

        Args:
            query: Search, tag filter and paging parameters

        Returns:
            List of questions matching the criteria
        """
        pass

    @abstractmethod
    async def find_by_ids(self, question_ids: Sequence[QuestionId]) -> list[Question]:
        """Find several questions in one query. Unknown IDs are skipped."""
        pass

    @abstractmethod
    async def count(self, query: Optional[QuestionQuery] = None) -> int:
        """Count questions matching the query filters (paging is ignored).

        Args:
            query: Filters to apply, None counts every question

        Returns:
            Total number of matching questions
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update), including its tag links.

        Tags referenced by question.tag_names must already exist.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment the view counter."""
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question (hard delete).

        Returns:
            True if a question was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def count_by_authors(
        self, author_ids: Sequence[UserId]
    ) -> dict[UserId, int]:
        """Count questions asked by each of the given users.

        Returns:
            Dict mapping author_id -> question count (missing means zero)
        """
        pass
