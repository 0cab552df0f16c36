"""Update answer use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import AnswerService, UserService
from stackit.domain.value import AnswerId, UserId

from .post_answer import AnswerResponse


class UpdateAnswerRequest(BaseModel):
    """Update answer request."""

    user_id: str
    answer_id: str
    content: str


class UpdateAnswerUseCase:
    """Use case for editing an answer (author or admin)."""

    def __init__(self, user_service: UserService, answer_service: AnswerService) -> None:
        self.user_service = user_service
        self.answer_service = answer_service

    async def execute(self, request: UpdateAnswerRequest) -> AnswerResponse:
        """Execute update answer flow.

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If the user is neither author nor admin
            ValidationError: If the new content is too short
        """
        actor = await self.user_service.get_active_user(UserId(UUID(request.user_id)))
        answer = await self.answer_service.update_answer(
            actor, AnswerId(UUID(request.answer_id)), request.content
        )
        return AnswerResponse.from_answer(answer)
