"""Delete answer use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from stackit.domain.service import (
    AnswerService,
    CommentService,
    NotificationService,
    UserService,
    VoteService,
    ensure_author_or_admin,
)
from stackit.domain.value import AnswerId, TargetType, UserId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    user_id: str
    answer_id: str


class DeleteAnswerResponse(BaseModel):
    """Delete answer response."""

    success: bool
    deleted_id: str


class DeleteAnswerUseCase:
    """Use case for deleting an answer with its comments and votes."""

    def __init__(
        self,
        user_service: UserService,
        answer_service: AnswerService,
        comment_service: CommentService,
        vote_service: VoteService,
        notification_service: NotificationService,
    ) -> None:
        self.user_service = user_service
        self.answer_service = answer_service
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.notification_service = notification_service

    async def execute(self, request: DeleteAnswerRequest) -> DeleteAnswerResponse:
        """Execute delete answer flow.

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If the user is neither author nor admin
        """
        actor = await self.user_service.get_active_user(UserId(UUID(request.user_id)))
        answer_id = AnswerId(UUID(request.answer_id))

        answer = await self.answer_service.get_answer(answer_id)
        ensure_author_or_admin(actor, answer.author_id, "delete", "answer", str(answer_id))

        await self.comment_service.delete_comments_for_answers([answer_id])
        await self.vote_service.delete_votes_for_targets(TargetType.ANSWER, [answer_id])
        await self.notification_service.delete_for_related([answer_id])
        await self.answer_service.delete_answer(answer_id)

        logfire.info(
            "Answer deleted with dependents",
            answer_id=str(answer_id),
            actor_id=str(actor.id),
        )
        return DeleteAnswerResponse(success=True, deleted_id=str(answer_id))
