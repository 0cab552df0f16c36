"""Administration routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from stackit.application.usecase.admin import (
    BanUserRequest,
    BanUserUseCase,
    GetStatsRequest,
    GetStatsResponse,
    GetStatsUseCase,
    ListModerationAnswersResponse,
    ListModerationAnswersUseCase,
    ListModerationQuestionsResponse,
    ListModerationQuestionsUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    ModerationPageRequest,
    UpdateUserRoleRequest,
    UpdateUserRoleUseCase,
)
from stackit.application.usecase.auth import UserResponse
from stackit.domain.service import JWTService
from stackit.domain.value import UserRole
from stackit.interface.api.security import get_auth_token, require_user_id

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class UpdateRoleAPIRequest(BaseModel):
    """API request for changing a user's role."""

    role: UserRole


class BanAPIRequest(BaseModel):
    """API request for banning or unbanning a user."""

    banned: bool = True


@router.get("/stats", response_model=GetStatsResponse)
async def get_stats(
    get_stats_use_case: FromDishka[GetStatsUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
) -> GetStatsResponse:
    """Site totals. Admins only."""
    user_id = require_user_id(jwt_service, token)
    return await get_stats_use_case.execute(GetStatsRequest(user_id=user_id))


@router.get("/users", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    role: Optional[UserRole] = None,
    search: Optional[str] = None,
) -> ListUsersResponse:
    """Accounts newest first, filtered by role and username/email. Admins only."""
    admin_id = require_user_id(jwt_service, token)
    return await list_users_use_case.execute(
        ListUsersRequest(
            user_id=admin_id, page=page, limit=limit, role=role, search=search
        )
    )


@router.patch("/users/{user_id}/role", response_model=UserResponse)
async def update_user_role(
    user_id: UUID,
    request: UpdateRoleAPIRequest,
    update_user_role_use_case: FromDishka[UpdateUserRoleUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
) -> UserResponse:
    """Change a user's role. Admins only."""
    admin_id = require_user_id(jwt_service, token)
    return await update_user_role_use_case.execute(
        UpdateUserRoleRequest(
            user_id=admin_id, target_user_id=str(user_id), role=request.role
        )
    )


@router.patch("/users/{user_id}/ban", response_model=UserResponse)
async def ban_user(
    user_id: UUID,
    request: BanAPIRequest,
    ban_user_use_case: FromDishka[BanUserUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
) -> UserResponse:
    """Ban or unban a user. Admins only, and admins cannot be banned."""
    admin_id = require_user_id(jwt_service, token)
    return await ban_user_use_case.execute(
        BanUserRequest(
            user_id=admin_id, target_user_id=str(user_id), banned=request.banned
        )
    )


@router.get("/questions", response_model=ListModerationQuestionsResponse)
async def list_questions_for_moderation(
    list_questions_use_case: FromDishka[ListModerationQuestionsUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
) -> ListModerationQuestionsResponse:
    """Recent questions with answer and vote counts. Admins only."""
    admin_id = require_user_id(jwt_service, token)
    return await list_questions_use_case.execute(
        ModerationPageRequest(user_id=admin_id, page=page, limit=limit)
    )


@router.get("/answers", response_model=ListModerationAnswersResponse)
async def list_answers_for_moderation(
    list_answers_use_case: FromDishka[ListModerationAnswersUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
) -> ListModerationAnswersResponse:
    """Recent answers with their question title. Admins only.

    Deleting goes through DELETE /answers/{id}, which admins may call on any
    answer.
    """
    admin_id = require_user_id(jwt_service, token)
    return await list_answers_use_case.execute(
        ModerationPageRequest(user_id=admin_id, page=page, limit=limit)
    )
