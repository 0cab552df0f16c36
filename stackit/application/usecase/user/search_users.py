"""Search users use case."""

from pydantic import BaseModel

from stackit.domain.service import UserService
from stackit.domain.value.types import Username


class SearchUsersRequest(BaseModel):
    """Search users request."""

    q: str = ""


class UserMatch(BaseModel):
    """A user suggested for mention completion."""

    user_id: str
    username: Username


class SearchUsersResponse(BaseModel):
    """Users whose username contains the query."""

    users: list[UserMatch]


class SearchUsersUseCase:
    """Use case for @mention autocompletion."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: SearchUsersRequest) -> SearchUsersResponse:
        users = await self.user_service.search_users(request.q)
        return SearchUsersResponse(
            users=[UserMatch(user_id=str(u.id), username=u.username) for u in users]
        )
