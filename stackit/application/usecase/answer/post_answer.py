"""Post answer use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.model import Answer
from stackit.domain.service import (
    AnswerService,
    NotificationResolver,
    QuestionService,
    UserService,
)
from stackit.domain.value import NotificationType, QuestionId, RelatedType, UserId
from stackit.domain.value.types import Username


class PostAnswerRequest(BaseModel):
    """Post answer request."""

    user_id: str  # User ID from authenticated user
    question_id: str  # UUID string
    content: str


class AnswerResponse(BaseModel):
    """Answer as returned by the API."""

    answer_id: str
    question_id: str
    author_id: str
    author_username: Username
    content: str
    is_accepted: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_answer(cls, answer: Answer, **extra):
        """Build the response (or a subclass) from an answer."""
        return cls(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            author_id=str(answer.author_id),
            author_username=answer.author_username,
            content=answer.content,
            is_accepted=answer.is_accepted,
            created_at=answer.created_at,
            updated_at=answer.updated_at,
            **extra,
        )


class PostAnswerUseCase:
    """Use case for answering a question."""

    def __init__(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
        notification_resolver: NotificationResolver,
    ) -> None:
        """Initialize post answer use case.

        Args:
            user_service: User domain service
            question_service: Question domain service
            answer_service: Answer domain service
            notification_resolver: Owner and mention notification fan-out
        """
        self.user_service = user_service
        self.question_service = question_service
        self.answer_service = answer_service
        self.notification_resolver = notification_resolver

    async def execute(self, request: PostAnswerRequest) -> AnswerResponse:
        """Execute post answer flow.

        Steps:
        1. Store the answer (validates length, requires the question)
        2. Notify the question's author
        3. Notify users mentioned in the answer

        Notifications are best-effort and never fail the request.

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If the author is banned
            ValidationError: If the answer is too short
        """
        author = await self.user_service.get_active_user(UserId(UUID(request.user_id)))
        question = await self.question_service.get_question(
            QuestionId(UUID(request.question_id))
        )
        answer = await self.answer_service.create_answer(
            author, question.id, request.content
        )

        await self.notification_resolver.notify_on_create(
            NotificationType.ANSWER, author, question
        )
        await self.notification_resolver.notify_mentions(
            answer.content, author.id, answer.id, RelatedType.ANSWER
        )

        return AnswerResponse.from_answer(answer)
