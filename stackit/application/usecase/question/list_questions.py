"""List questions use case."""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from stackit.domain.error import ValidationError
from stackit.domain.repository import QuestionQuery
from stackit.domain.service import AnswerService, QuestionService, VoteService
from stackit.domain.value import TagName, TargetType

from .post_question import QuestionResponse


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    tag: Optional[str] = None
    search: Optional[str] = None


class QuestionSummary(QuestionResponse):
    """Question list entry."""

    vote_count: int
    answer_count: int
    has_accepted_answer: bool


class Pagination(BaseModel):
    """Page position within a listing."""

    current: int
    total: int  # Number of pages
    total_items: int
    has_next: bool
    has_prev: bool


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionSummary]
    pagination: Pagination


class ListQuestionsUseCase:
    """Use case for listing questions newest first."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            vote_service: Vote domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.vote_service = vote_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Raises:
            ValidationError: If the tag filter is not a valid tag name
        """
        tag = None
        if request.tag:
            try:
                tag = TagName(request.tag)
            except PydanticValidationError:
                raise ValidationError("tag", f"Invalid tag name: {request.tag!r}")

        search = request.search.strip() if request.search else None
        query = QuestionQuery(
            search=search or None,
            tag=tag,
            limit=request.limit,
            offset=(request.page - 1) * request.limit,
        )
        questions, total = await self.question_service.list_questions(query)

        question_ids = [question.id for question in questions]
        vote_counts = await self.vote_service.get_vote_counts(
            TargetType.QUESTION, question_ids
        )
        answer_counts = await self.answer_service.count_answers(question_ids)
        answered = await self.answer_service.get_answered_question_ids(question_ids)

        return ListQuestionsResponse(
            questions=[
                QuestionSummary.from_question(
                    question,
                    vote_count=vote_counts.get(question.id, 0),
                    answer_count=answer_counts.get(question.id, 0),
                    has_accepted_answer=question.id in answered,
                )
                for question in questions
            ],
            pagination=Pagination(
                current=request.page,
                total=(total + request.limit - 1) // request.limit,
                total_items=total,
                has_next=request.page * request.limit < total,
                has_prev=request.page > 1,
            ),
        )
