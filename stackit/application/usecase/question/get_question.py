"""Get question use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.answer.post_answer import AnswerResponse
from stackit.application.usecase.comment.post_comment import CommentResponse
from stackit.domain.service import (
    AnswerService,
    CommentService,
    QuestionService,
    VoteService,
)
from stackit.domain.value import QuestionId, TargetType, UserId, VoteDirection

from .post_question import QuestionResponse


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class AnswerDetail(AnswerResponse):
    """Answer with votes and comments."""

    vote_count: int
    user_vote: Optional[VoteDirection]
    comments: list[CommentResponse]


class GetQuestionResponse(QuestionResponse):
    """Question page: the question, its votes and its answers."""

    vote_count: int
    user_vote: Optional[VoteDirection]
    answers: list[AnswerDetail]


class GetQuestionUseCase:
    """Use case for reading a question with its answers."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            comment_service: Comment domain service
            vote_service: Vote domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Load the question page and count the view.

        Answers come accepted first, then oldest first. Vote counts are
        derived from the stored votes.

        Raises:
            NotFoundError: If question not found
        """
        question_id = QuestionId(UUID(request.question_id))
        viewer_id = UserId(UUID(request.user_id)) if request.user_id else None

        question = await self.question_service.get_question(question_id)
        await self.question_service.record_view(question_id)

        answers = await self.answer_service.get_answers_for_question(question_id)
        answer_ids = [answer.id for answer in answers]

        question_votes = await self.vote_service.get_user_votes(
            viewer_id, TargetType.QUESTION, [question_id]
        )
        answer_counts = await self.vote_service.get_vote_counts(
            TargetType.ANSWER, answer_ids
        )
        answer_votes = await self.vote_service.get_user_votes(
            viewer_id, TargetType.ANSWER, answer_ids
        )
        comments = await self.comment_service.get_comments_for_answers(answer_ids)

        return GetQuestionResponse.from_question(
            question.model_copy(update={"views": question.views + 1}),
            vote_count=await self.vote_service.get_vote_count(
                TargetType.QUESTION, question_id
            ),
            user_vote=question_votes.get(question_id),
            answers=[
                AnswerDetail.from_answer(
                    answer,
                    vote_count=answer_counts.get(answer.id, 0),
                    user_vote=answer_votes.get(answer.id),
                    comments=[
                        CommentResponse.from_comment(comment)
                        for comment in comments.get(answer.id, [])
                    ],
                )
                for answer in answers
            ],
        )
