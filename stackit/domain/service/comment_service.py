"""Comment domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from stackit.domain.model import Comment, User
from stackit.domain.repository import CommentRepository
from stackit.domain.value import AnswerId, CommentId

from .base import Service
from .content_policy import ContentPolicy


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self, comment_repository: CommentRepository, content_policy: ContentPolicy
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            content_policy: Content validation rules
        """
        self.comment_repository = comment_repository
        self.content_policy = content_policy

    async def create_comment(
        self, author: User, answer_id: AnswerId, content: str
    ) -> Comment:
        """Validate and store a comment on an answer.

        The caller is responsible for checking that the answer exists.

        Raises:
            ValidationError: If content is outside the allowed length
        """
        with logfire.span(
            "comment_service.create_comment",
            answer_id=str(answer_id),
            author_id=str(author.id),
        ):
            content = self.content_policy.check_comment(content)
            comment = Comment(
                id=CommentId(uuid4()),
                answer_id=answer_id,
                author_id=author.id,
                author_username=author.username,
                content=content,
                created_at=datetime.now(),
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created", comment_id=str(saved.id), answer_id=str(answer_id)
            )
            return saved

    async def get_comments_for_answers(
        self, answer_ids: Sequence[AnswerId]
    ) -> dict[AnswerId, list[Comment]]:
        """Group comments by answer, oldest first."""
        grouped: dict[AnswerId, list[Comment]] = {aid: [] for aid in answer_ids}
        if not answer_ids:
            return grouped
        for comment in await self.comment_repository.find_by_answers(answer_ids):
            grouped.setdefault(comment.answer_id, []).append(comment)
        return grouped

    async def delete_comments_for_answers(self, answer_ids: Sequence[AnswerId]) -> int:
        """Delete all comments on the given answers."""
        if not answer_ids:
            return 0
        deleted = await self.comment_repository.delete_by_answers(answer_ids)
        logfire.info("Comments deleted", answers=len(answer_ids), count=deleted)
        return deleted
