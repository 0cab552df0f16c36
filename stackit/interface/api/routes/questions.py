"""Question routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from stackit.application.usecase.answer import (
    AnswerResponse,
    PostAnswerRequest,
    PostAnswerUseCase,
)
from stackit.application.usecase.question import (
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    DeleteResponse,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    PostQuestionRequest,
    PostQuestionUseCase,
    QuestionResponse,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from stackit.domain.service import JWTService
from stackit.interface.api.security import get_auth_token, require_user_id

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class PostQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str
    content: str
    tags: list[str] = []


class UpdateQuestionAPIRequest(BaseModel):
    """API request for editing a question. Omitted fields are unchanged."""

    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[list[str]] = None


class PostAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    content: str


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    tag: Optional[str] = None,
    search: Optional[str] = None,
) -> ListQuestionsResponse:
    """List questions newest first, optionally filtered by tag or search text."""
    return await list_questions_use_case.execute(
        ListQuestionsRequest(page=page, limit=limit, tag=tag, search=search)
    )


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
) -> GetQuestionResponse:
    """Get a question with its answers and comments.

    Authentication is optional; signed-in readers also get their own votes.
    """
    user_id = jwt_service.get_user_id_from_token(token)
    return await get_question_use_case.execute(
        GetQuestionRequest(question_id=str(question_id), user_id=user_id)
    )


@router.post("", response_model=QuestionResponse, status_code=status.HTTP_201_CREATED)
async def post_question(
    request: PostQuestionAPIRequest,
    post_question_use_case: FromDishka[PostQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
) -> QuestionResponse:
    """Ask a question. Requires authentication."""
    user_id = require_user_id(jwt_service, token)
    return await post_question_use_case.execute(
        PostQuestionRequest(
            user_id=user_id,
            title=request.title,
            content=request.content,
            tags=request.tags,
        )
    )


@router.put("/{question_id}", response_model=QuestionResponse)
async def update_question(
    question_id: UUID,
    request: UpdateQuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
) -> QuestionResponse:
    """Edit a question. Only the author or an admin may edit."""
    user_id = require_user_id(jwt_service, token)
    return await update_question_use_case.execute(
        UpdateQuestionRequest(
            user_id=user_id,
            question_id=str(question_id),
            title=request.title,
            content=request.content,
            tags=request.tags,
        )
    )


@router.delete("/{question_id}", response_model=DeleteResponse)
async def delete_question(
    question_id: UUID,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
) -> DeleteResponse:
    """Delete a question with everything attached to it."""
    user_id = require_user_id(jwt_service, token)
    return await delete_question_use_case.execute(
        DeleteQuestionRequest(user_id=user_id, question_id=str(question_id))
    )


@router.post(
    "/{question_id}/answers",
    response_model=AnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_answer(
    question_id: UUID,
    request: PostAnswerAPIRequest,
    post_answer_use_case: FromDishka[PostAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
) -> AnswerResponse:
    """Answer a question. Requires authentication."""
    user_id = require_user_id(jwt_service, token)
    return await post_answer_use_case.execute(
        PostAnswerRequest(
            user_id=user_id, question_id=str(question_id), content=request.content
        )
    )
