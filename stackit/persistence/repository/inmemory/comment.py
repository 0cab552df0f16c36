"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from stackit.domain.model import Comment
from stackit.domain.repository import CommentRepository
from stackit.domain.value import AnswerId, CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_answers(self, answer_ids: Sequence[AnswerId]) -> list[Comment]:
        """Find comments on multiple answers, oldest first."""
        wanted = set(answer_ids)
        comments = [c for c in self._comments.values() if c.answer_id in wanted]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete_by_answers(self, answer_ids: Sequence[AnswerId]) -> int:
        """Delete every comment on the given answers."""
        wanted = set(answer_ids)
        doomed = [c.id for c in self._comments.values() if c.answer_id in wanted]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)
