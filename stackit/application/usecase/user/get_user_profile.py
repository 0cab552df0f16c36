"""User profile use cases."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.model import User
from stackit.domain.service import (
    AnswerService,
    QuestionService,
    UserService,
    VoteService,
)
from stackit.domain.value import UserId, UserRole
from stackit.domain.value.types import Username


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    username: str


class GetMyProfileRequest(BaseModel):
    """Get own profile request."""

    user_id: str  # User ID from authenticated user


class UserProfileResponse(BaseModel):
    """Public profile with activity counts."""

    user_id: str
    username: Username
    first_name: Optional[str]
    last_name: Optional[str]
    reputation: int
    created_at: datetime
    question_count: int
    answer_count: int

    @classmethod
    def from_user(cls, user: User, **counts):
        """Build the response (or a subclass) from a user and its counts."""
        return cls(
            user_id=str(user.id),
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            reputation=user.reputation,
            created_at=user.created_at,
            **counts,
        )


class MyProfileResponse(UserProfileResponse):
    """Own profile, including private fields."""

    email: str
    role: UserRole
    vote_count: int


class GetUserProfileUseCase:
    """Use case for viewing someone's profile by username."""

    def __init__(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            question_service: Question domain service
            answer_service: Answer domain service
        """
        self.user_service = user_service
        self.question_service = question_service
        self.answer_service = answer_service

    async def execute(self, request: GetUserProfileRequest) -> UserProfileResponse:
        """Execute get user profile flow.

        Raises:
            NotFoundError: If no user has the username
        """
        user = await self.user_service.get_by_username(request.username)
        question_counts = await self.question_service.count_by_authors([user.id])
        answer_counts = await self.answer_service.count_by_authors([user.id])
        return UserProfileResponse.from_user(
            user,
            question_count=question_counts.get(user.id, 0),
            answer_count=answer_counts.get(user.id, 0),
        )


class GetMyProfileUseCase:
    """Use case for the authenticated user's own profile."""

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

    async def execute(self, request: GetMyProfileRequest) -> MyProfileResponse:
        """Execute get own profile flow.

        Raises:
            NotFoundError: If the user no longer exists
            NotAuthorizedError: If the user is banned
        """
        user = await self.user_service.get_active_user(UserId(UUID(request.user_id)))
        question_counts = await self.question_service.count_by_authors([user.id])
        answer_counts = await self.answer_service.count_by_authors([user.id])
        vote_counts = await self.vote_service.count_by_users([user.id])
        return MyProfileResponse.from_user(
            user,
            email=user.email,
            role=user.role,
            question_count=question_counts.get(user.id, 0),
            answer_count=answer_counts.get(user.id, 0),
            vote_count=vote_counts.get(user.id, 0),
        )
