"""Delete question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from stackit.domain.service import (
    AnswerService,
    CommentService,
    NotificationService,
    QuestionService,
    UserService,
    VoteService,
    ensure_author_or_admin,
)
from stackit.domain.value import QuestionId, TargetType, UserId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    user_id: str
    question_id: str


class DeleteResponse(BaseModel):
    """Response for delete operations."""

    success: bool
    deleted_id: str


class DeleteQuestionUseCase:
    """Use case for deleting a question with everything attached to it."""

    def __init__(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
        comment_service: CommentService,
        vote_service: VoteService,
        notification_service: NotificationService,
    ) -> None:
        self.user_service = user_service
        self.question_service = question_service
        self.answer_service = answer_service
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.notification_service = notification_service

    async def execute(self, request: DeleteQuestionRequest) -> DeleteResponse:
        """Delete the question, its answers, their comments, all votes on
        them and notifications linking to them.

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If the user is neither author nor admin
        """
        actor = await self.user_service.get_active_user(UserId(UUID(request.user_id)))
        question_id = QuestionId(UUID(request.question_id))

        question = await self.question_service.get_question(question_id)
        ensure_author_or_admin(
            actor, question.author_id, "delete", "question", str(question_id)
        )

        answers = await self.answer_service.get_answers_for_question(question_id)
        answer_ids = [answer.id for answer in answers]

        await self.comment_service.delete_comments_for_answers(answer_ids)
        await self.vote_service.delete_votes_for_targets(TargetType.ANSWER, answer_ids)
        await self.vote_service.delete_votes_for_targets(
            TargetType.QUESTION, [question_id]
        )
        await self.notification_service.delete_for_related([question_id, *answer_ids])
        await self.answer_service.delete_answers_for_question(question_id)
        await self.question_service.delete_question(question_id)

        logfire.info(
            "Question deleted with dependents",
            question_id=str(question_id),
            actor_id=str(actor.id),
            answers=len(answer_ids),
        )
        return DeleteResponse(success=True, deleted_id=str(question_id))
