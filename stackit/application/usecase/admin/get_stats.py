"""Site statistics use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import (
    AnswerService,
    QuestionService,
    UserService,
    VoteService,
)
from stackit.domain.value import UserId


class GetStatsRequest(BaseModel):
    """Get stats request."""

    user_id: str  # Must be an admin


class GetStatsResponse(BaseModel):
    """Totals across the site."""

    total_users: int
    total_questions: int
    total_answers: int
    total_votes: int


class GetStatsUseCase:
    """Use case for the admin dashboard totals."""

    def __init__(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> None:
        self.user_service = user_service
        self.question_service = question_service
        self.answer_service = answer_service
        self.vote_service = vote_service

    async def execute(self, request: GetStatsRequest) -> GetStatsResponse:
        """Execute get stats flow.

        Raises:
            NotAuthorizedError: If the user is not an admin
        """
        await self.user_service.get_admin(UserId(UUID(request.user_id)))
        return GetStatsResponse(
            total_users=await self.user_service.count_users(),
            total_questions=await self.question_service.count_questions(),
            total_answers=await self.answer_service.count_all(),
            total_votes=await self.vote_service.count_all(),
        )
