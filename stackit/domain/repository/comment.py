"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from stackit.domain.model.comment import Comment
from stackit.domain.value import AnswerId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        pass

    @abstractmethod
    async def find_by_answers(self, answer_ids: Sequence[AnswerId]) -> list[Comment]:
        """Find comments on multiple answers (batch query), oldest first.

        Args:
            answer_ids: Answers to fetch comments for

        Returns:
            Comments on any of the answers
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete_by_answers(self, answer_ids: Sequence[AnswerId]) -> int:
        """Delete every comment on the given answers.

        Returns:
            Number of comments deleted
        """
        pass
