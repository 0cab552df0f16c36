"""Administration use cases."""

from .get_stats import GetStatsRequest, GetStatsResponse, GetStatsUseCase
from .manage_user import (
    BanUserRequest,
    BanUserUseCase,
    UpdateUserRoleRequest,
    UpdateUserRoleUseCase,
)
from .moderation import (
    ListModerationAnswersResponse,
    ListModerationAnswersUseCase,
    ListModerationQuestionsResponse,
    ListModerationQuestionsUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    ModerationPageRequest,
)

__all__ = [
    "BanUserRequest",
    "BanUserUseCase",
    "GetStatsRequest",
    "GetStatsResponse",
    "GetStatsUseCase",
    "ListModerationAnswersResponse",
    "ListModerationAnswersUseCase",
    "ListModerationQuestionsResponse",
    "ListModerationQuestionsUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "ModerationPageRequest",
    "UpdateUserRoleRequest",
    "UpdateUserRoleUseCase",
]
