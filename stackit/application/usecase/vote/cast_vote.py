"""Cast vote use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import UserService, VoteService
from stackit.domain.value import TargetType, UserId, VoteDirection, VoteOutcome


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    user_id: str  # User ID from authenticated user
    target_type: TargetType
    target_id: str  # UUID string
    direction: VoteDirection


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    target_type: TargetType
    target_id: str
    outcome: VoteOutcome
    user_vote: Optional[VoteDirection]  # None after toggling the vote off
    vote_count: int


class CastVoteUseCase:
    """Use case for voting on a question or answer."""

    def __init__(self, user_service: UserService, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            user_service: User domain service
            vote_service: Vote domain service
        """
        self.user_service = user_service
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Raises:
            NotFoundError: If the target does not exist
            NotAuthorizedError: If the voter is banned
            ConcurrencyConflictError: If concurrent votes kept conflicting
        """
        voter = await self.user_service.get_active_user(UserId(UUID(request.user_id)))
        result = await self.vote_service.cast_vote(
            voter.id,
            request.target_type,
            UUID(request.target_id),
            request.direction,
        )
        return CastVoteResponse(
            target_type=request.target_type,
            target_id=request.target_id,
            outcome=result.outcome,
            user_vote=result.user_vote,
            vote_count=result.vote_count,
        )
