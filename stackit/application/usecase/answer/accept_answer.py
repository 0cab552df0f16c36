"""Accept answer use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import AnswerService, UserService
from stackit.domain.value import AnswerId, UserId

from .post_answer import AnswerResponse


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    user_id: str  # Must be the question's author
    answer_id: str


class AcceptAnswerUseCase:
    """Use case for accepting an answer."""

    def __init__(self, user_service: UserService, answer_service: AnswerService) -> None:
        """Initialize accept answer use case.

        Args:
            user_service: User domain service
            answer_service: Answer domain service
        """
        self.user_service = user_service
        self.answer_service = answer_service

    async def execute(self, request: AcceptAnswerRequest) -> AnswerResponse:
        """Execute accept answer flow.

        Raises:
            NotFoundError: If the answer or its question is missing
            NotAuthorizedError: If the user is not the question's author
            ConcurrencyConflictError: If concurrent acceptances kept conflicting
        """
        actor = await self.user_service.get_active_user(UserId(UUID(request.user_id)))
        answer = await self.answer_service.accept_answer(
            actor.id, AnswerId(UUID(request.answer_id))
        )
        return AnswerResponse.from_answer(answer)
