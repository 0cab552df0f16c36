"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from stackit.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from stackit.domain.service import JWTService
from stackit.domain.value import TargetType, VoteDirection
from stackit.interface.api.security import get_auth_token, require_user_id

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting.

    Repeating your current vote removes it; the opposite direction flips it.
    """

    direction: VoteDirection


@router.post("/questions/{question_id}", response_model=CastVoteResponse)
async def vote_on_question(
    question_id: UUID,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
) -> CastVoteResponse:
    """Vote on a question. Requires authentication."""
    user_id = require_user_id(jwt_service, token)
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            user_id=user_id,
            target_type=TargetType.QUESTION,
            target_id=str(question_id),
            direction=request.direction,
        )
    )


@router.post("/answers/{answer_id}", response_model=CastVoteResponse)
async def vote_on_answer(
    answer_id: UUID,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
) -> CastVoteResponse:
    """Vote on an answer. Requires authentication."""
    user_id = require_user_id(jwt_service, token)
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            user_id=user_id,
            target_type=TargetType.ANSWER,
            target_id=str(answer_id),
            direction=request.direction,
        )
    )
