"""User profile and lookup use cases."""

from .get_user_profile import (
    GetMyProfileRequest,
    GetMyProfileUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    MyProfileResponse,
    UserProfileResponse,
)
from .search_users import SearchUsersRequest, SearchUsersResponse, SearchUsersUseCase

__all__ = [
    "GetMyProfileRequest",
    "GetMyProfileUseCase",
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "MyProfileResponse",
    "SearchUsersRequest",
    "SearchUsersResponse",
    "SearchUsersUseCase",
    "UserProfileResponse",
]
