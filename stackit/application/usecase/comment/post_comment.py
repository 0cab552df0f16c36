"""Post comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.model import Comment
from stackit.domain.service import (
    AnswerService,
    CommentService,
    NotificationResolver,
    UserService,
)
from stackit.domain.value import AnswerId, NotificationType, RelatedType, UserId
from stackit.domain.value.types import Username


class PostCommentRequest(BaseModel):
    """Post comment request."""

    user_id: str  # User ID from authenticated user
    answer_id: str  # UUID string
    content: str


class CommentResponse(BaseModel):
    """Comment as returned by the API."""

    comment_id: str
    answer_id: str
    author_id: str
    author_username: Username
    content: str
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            comment_id=str(comment.id),
            answer_id=str(comment.answer_id),
            author_id=str(comment.author_id),
            author_username=comment.author_username,
            content=comment.content,
            created_at=comment.created_at,
        )


class PostCommentUseCase:
    """Use case for commenting on an answer."""

    def __init__(
        self,
        user_service: UserService,
        answer_service: AnswerService,
        comment_service: CommentService,
        notification_resolver: NotificationResolver,
    ) -> None:
        """Initialize post comment use case.

        Args:
            user_service: User domain service
            answer_service: Answer domain service
            comment_service: Comment domain service
            notification_resolver: Owner and mention notification fan-out
        """
        self.user_service = user_service
        self.answer_service = answer_service
        self.comment_service = comment_service
        self.notification_resolver = notification_resolver

    async def execute(self, request: PostCommentRequest) -> CommentResponse:
        """Store the comment, then notify the answer's author and mentioned users.

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If the author is banned
            ValidationError: If the comment length is out of range
        """
        author = await self.user_service.get_active_user(UserId(UUID(request.user_id)))
        answer = await self.answer_service.get_answer(AnswerId(UUID(request.answer_id)))
        comment = await self.comment_service.create_comment(
            author, answer.id, request.content
        )

        await self.notification_resolver.notify_on_create(
            NotificationType.COMMENT, author, answer
        )
        await self.notification_resolver.notify_mentions(
            comment.content, author.id, answer.id, RelatedType.ANSWER
        )

        return CommentResponse.from_comment(comment)
