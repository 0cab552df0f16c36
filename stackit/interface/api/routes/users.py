"""User profile and lookup routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from stackit.application.usecase.user import (
    GetMyProfileRequest,
    GetMyProfileUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    MyProfileResponse,
    SearchUsersRequest,
    SearchUsersResponse,
    SearchUsersUseCase,
    UserProfileResponse,
)
from stackit.domain.service import JWTService
from stackit.interface.api.security import get_auth_token, require_user_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/search", response_model=SearchUsersResponse)
async def search_users(
    search_users_use_case: FromDishka[SearchUsersUseCase],
    q: str = "",
) -> SearchUsersResponse:
    """Suggest usernames containing q (at least 2 characters) for @mentions.

    Example:
        GET /users/search?q=al

        Response:
        {"users": [{"user_id": "...", "username": "alice"}]}
    """
    return await search_users_use_case.execute(SearchUsersRequest(q=q))


@router.get("/me/profile", response_model=MyProfileResponse)
async def get_my_profile(
    get_my_profile_use_case: FromDishka[GetMyProfileUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_auth_token),
) -> MyProfileResponse:
    """The authenticated user's profile with email, role and vote count."""
    user_id = require_user_id(jwt_service, token)
    return await get_my_profile_use_case.execute(GetMyProfileRequest(user_id=user_id))


@router.get("/{username}", response_model=UserProfileResponse)
async def get_user_profile(
    username: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> UserProfileResponse:
    """Public profile by username with question and answer counts."""
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(username=username)
    )
