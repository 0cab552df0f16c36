"""Update question use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import QuestionService, UserService
from stackit.domain.value import QuestionId, UserId

from .post_question import QuestionResponse


class UpdateQuestionRequest(BaseModel):
    """Update question request. Omitted fields are left unchanged."""

    user_id: str
    question_id: str
    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[list[str]] = None


class UpdateQuestionUseCase:
    """Use case for editing a question (author or admin)."""

    def __init__(
        self, user_service: UserService, question_service: QuestionService
    ) -> None:
        self.user_service = user_service
        self.question_service = question_service

    async def execute(self, request: UpdateQuestionRequest) -> QuestionResponse:
        """Execute update question flow.

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If the user is neither author nor admin
            ValidationError: If a new value is invalid
        """
        actor = await self.user_service.get_active_user(UserId(UUID(request.user_id)))
        question = await self.question_service.update_question(
            actor,
            QuestionId(UUID(request.question_id)),
            title=request.title,
            content=request.content,
            tags=request.tags,
        )
        return QuestionResponse.from_question(question)
