"""Answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from stackit.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerUseCase,
    AnswerResponse,
    DeleteAnswerRequest,
    DeleteAnswerResponse,
    DeleteAnswerUseCase,
    UpdateAnswerRequest,
    UpdateAnswerUseCase,
)
from stackit.application.usecase.comment import (
    CommentResponse,
    PostCommentRequest,
    PostCommentUseCase,
)
from stackit.domain.service import JWTService
from stackit.interface.api.security import get_auth_token, require_user_id

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class AnswerContentAPIRequest(BaseModel):
    """API request carrying answer text."""

    content: str


class PostCommentAPIRequest(BaseModel):
    """API request for commenting on an answer."""

    content: str


@router.put("/{answer_id}", response_model=AnswerResponse)
async def update_answer(
    answer_id: UUID,
    request: AnswerContentAPIRequest,
    update_answer_use_case: FromDishka[UpdateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
) -> AnswerResponse:
    """Edit an answer. Only the author or an admin may edit."""
    user_id = require_user_id(jwt_service, token)
    return await update_answer_use_case.execute(
        UpdateAnswerRequest(
            user_id=user_id, answer_id=str(answer_id), content=request.content
        )
    )


@router.delete("/{answer_id}", response_model=DeleteAnswerResponse)
async def delete_answer(
    answer_id: UUID,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
) -> DeleteAnswerResponse:
    """Delete an answer with its comments and votes."""
    user_id = require_user_id(jwt_service, token)
    return await delete_answer_use_case.execute(
        DeleteAnswerRequest(user_id=user_id, answer_id=str(answer_id))
    )


@router.patch("/{answer_id}/accept", response_model=AnswerResponse)
async def accept_answer(
    answer_id: UUID,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
) -> AnswerResponse:
    """Mark an answer as the accepted one. Only the question's author may accept."""
    user_id = require_user_id(jwt_service, token)
    return await accept_answer_use_case.execute(
        AcceptAnswerRequest(user_id=user_id, answer_id=str(answer_id))
    )


@router.post(
    "/{answer_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_comment(
    answer_id: UUID,
    request: PostCommentAPIRequest,
    post_comment_use_case: FromDishka[PostCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
) -> CommentResponse:
    """Comment on an answer. Requires authentication."""
    user_id = require_user_id(jwt_service, token)
    return await post_comment_use_case.execute(
        PostCommentRequest(
            user_id=user_id, answer_id=str(answer_id), content=request.content
        )
    )
