"""Search tags use case."""

from pydantic import BaseModel, Field

from stackit.domain.service import TagService


class SearchTagsRequest(BaseModel):
    """Search tags request."""

    q: str = ""
    limit: int = Field(default=10, ge=1, le=10)


class SearchTagsResponse(BaseModel):
    """Tag names matching the query."""

    tags: list[str]


class SearchTagsUseCase:
    """Use case for tag autocompletion."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: SearchTagsRequest) -> SearchTagsResponse:
        tags = await self.tag_service.search_tags(request.q, limit=request.limit)
        return SearchTagsResponse(tags=[tag.name.root for tag in tags])
