"""Post question use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.model import Question
from stackit.domain.service import NotificationResolver, QuestionService, UserService
from stackit.domain.value import RelatedType, UserId
from stackit.domain.value.types import Username


class PostQuestionRequest(BaseModel):
    """Post question request."""

    user_id: str  # User ID from authenticated user
    title: str
    content: str
    tags: list[str] = []


class QuestionResponse(BaseModel):
    """Question as returned by the API."""

    question_id: str
    author_id: str
    author_username: Username
    title: str
    content: str
    tags: list[str]
    views: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_question(cls, question: Question, **extra):
        """Build the response (or a subclass) from a question."""
        return cls(
            question_id=str(question.id),
            author_id=str(question.author_id),
            author_username=question.author_username,
            title=question.title,
            content=question.content,
            tags=[tag.root for tag in question.tag_names],
            views=question.views,
            created_at=question.created_at,
            updated_at=question.updated_at,
            **extra,
        )


class PostQuestionUseCase:
    """Use case for asking a question."""

    def __init__(
        self,
        user_service: UserService,
        question_service: QuestionService,
        notification_resolver: NotificationResolver,
    ) -> None:
        """Initialize post question use case.

        Args:
            user_service: User domain service
            question_service: Question domain service
            notification_resolver: Mention notification fan-out
        """
        self.user_service = user_service
        self.question_service = question_service
        self.notification_resolver = notification_resolver

    async def execute(self, request: PostQuestionRequest) -> QuestionResponse:
        """Store the question, then notify mentioned users.

        Raises:
            NotFoundError: If the author does not exist
            NotAuthorizedError: If the author is banned
            ValidationError: If title, content or tags are invalid
        """
        author = await self.user_service.get_active_user(UserId(UUID(request.user_id)))
        question = await self.question_service.create_question(
            author, request.title, request.content, request.tags
        )

        await self.notification_resolver.notify_mentions(
            question.content, author.id, question.id, RelatedType.QUESTION
        )

        return QuestionResponse.from_question(question)
