"""List tags use case."""

import logfire
from pydantic import BaseModel

from stackit.domain.service import TagService


class TagItem(BaseModel):
    """Tag item in response."""

    name: str
    question_count: int


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagItem]


class ListTagsUseCase:
    """Use case for listing tags with their usage."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self) -> ListTagsResponse:
        """Execute list tags flow.

        Returns:
            Every tag alphabetically with the number of questions using it
        """
        with logfire.span("list_tags.execute"):
            usages = await self.tag_service.get_all_tags()
            tag_items = [
                TagItem(name=usage.tag.name.root, question_count=usage.question_count)
                for usage in usages
            ]
            logfire.info("Tags listed", count=len(tag_items))
            return ListTagsResponse(tags=tag_items)
