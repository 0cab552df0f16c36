"""Tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from stackit.application.usecase.tag import (
    ListTagsResponse,
    ListTagsUseCase,
    SearchTagsRequest,
    SearchTagsResponse,
    SearchTagsUseCase,
)

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


@router.get("", response_model=ListTagsResponse)
async def list_tags(
    list_tags_use_case: FromDishka[ListTagsUseCase],
) -> ListTagsResponse:
    """List all tags alphabetically with their question counts."""
    return await list_tags_use_case.execute()


@router.get("/search", response_model=SearchTagsResponse)
async def search_tags(
    search_tags_use_case: FromDishka[SearchTagsUseCase],
    q: str = "",
    limit: int = Query(default=10, ge=1, le=10),
) -> SearchTagsResponse:
    """Suggest tags containing q (at least 2 characters)."""
    return await search_tags_use_case.execute(SearchTagsRequest(q=q, limit=limit))
