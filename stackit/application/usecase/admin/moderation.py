"""Admin moderation listings.

Each listing is one page, newest first. has_more is set when the page came
back full, so the dashboard offers a next page.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from stackit.application.usecase.answer import AnswerResponse
from stackit.application.usecase.auth import UserResponse
from stackit.application.usecase.question import QuestionResponse
from stackit.domain.repository import QuestionQuery, UserQuery
from stackit.domain.service import (
    AnswerService,
    QuestionService,
    UserService,
    VoteService,
)
from stackit.domain.value import TargetType, UserId, UserRole


class ModerationPageRequest(BaseModel):
    """Paging shared by the moderation listings."""

    user_id: str  # Must be an admin
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class ListUsersRequest(ModerationPageRequest):
    """List users request. role and search are optional filters."""

    role: Optional[UserRole] = None
    search: Optional[str] = None


class ModerationUser(UserResponse):
    """User row of the admin dashboard."""

    question_count: int
    answer_count: int
    vote_count: int


class ListUsersResponse(BaseModel):
    users: list[ModerationUser]
    has_more: bool


class ModerationQuestion(QuestionResponse):
    """Question row of the admin dashboard."""

    answer_count: int
    vote_count: int


class ListModerationQuestionsResponse(BaseModel):
    questions: list[ModerationQuestion]
    has_more: bool


class ModerationAnswer(AnswerResponse):
    """Answer row of the admin dashboard."""

    question_title: Optional[str]
    vote_count: int


class ListModerationAnswersResponse(BaseModel):
    answers: list[ModerationAnswer]
    has_more: bool


class ListUsersUseCase:
    """Use case for browsing accounts as an admin."""

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

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """Execute list users flow.

        Raises:
            NotAuthorizedError: If the acting user is not an admin
        """
        await self.user_service.get_admin(UserId(UUID(request.user_id)))
        search = request.search.strip() if request.search else None
        users = await self.user_service.list_users(
            UserQuery(
                role=request.role,
                search=search or None,
                limit=request.limit,
                offset=request.offset,
            )
        )

        user_ids = [user.id for user in users]
        question_counts = await self.question_service.count_by_authors(user_ids)
        answer_counts = await self.answer_service.count_by_authors(user_ids)
        vote_counts = await self.vote_service.count_by_users(user_ids)

        return ListUsersResponse(
            users=[
                ModerationUser(
                    **UserResponse.from_user(user).model_dump(),
                    question_count=question_counts.get(user.id, 0),
                    answer_count=answer_counts.get(user.id, 0),
                    vote_count=vote_counts.get(user.id, 0),
                )
                for user in users
            ],
            has_more=len(users) == request.limit,
        )


class ListModerationQuestionsUseCase:
    """Use case for reviewing recent questions as an admin."""

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

    async def execute(
        self, request: ModerationPageRequest
    ) -> ListModerationQuestionsResponse:
        """Execute moderation question listing.

        Raises:
            NotAuthorizedError: If the acting user is not an admin
        """
        await self.user_service.get_admin(UserId(UUID(request.user_id)))
        questions, _ = await self.question_service.list_questions(
            QuestionQuery(limit=request.limit, offset=request.offset)
        )

        question_ids = [question.id for question in questions]
        answer_counts = await self.answer_service.count_answers(question_ids)
        vote_counts = await self.vote_service.get_vote_counts(
            TargetType.QUESTION, question_ids
        )

        return ListModerationQuestionsResponse(
            questions=[
                ModerationQuestion.from_question(
                    question,
                    answer_count=answer_counts.get(question.id, 0),
                    vote_count=vote_counts.get(question.id, 0),
                )
                for question in questions
            ],
            has_more=len(questions) == request.limit,
        )


class ListModerationAnswersUseCase:
    """Use case for reviewing recent answers as an admin."""

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

    async def execute(
        self, request: ModerationPageRequest
    ) -> ListModerationAnswersResponse:
        """Execute moderation answer listing.

        Raises:
            NotAuthorizedError: If the acting user is not an admin
        """
        await self.user_service.get_admin(UserId(UUID(request.user_id)))
        answers = await self.answer_service.list_recent(request.limit, request.offset)

        questions = await self.question_service.get_questions(
            list({answer.question_id for answer in answers})
        )
        vote_counts = await self.vote_service.get_vote_counts(
            TargetType.ANSWER, [answer.id for answer in answers]
        )

        return ListModerationAnswersResponse(
            answers=[
                ModerationAnswer.from_answer(
                    answer,
                    question_title=(
                        questions[answer.question_id].title
                        if answer.question_id in questions
                        else None
                    ),
                    vote_count=vote_counts.get(answer.id, 0),
                )
                for answer in answers
            ],
            has_more=len(answers) == request.limit,
        )
