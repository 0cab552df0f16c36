"""Tag domain service."""

import logfire

from stackit.domain.model.tag import Tag
from stackit.domain.repository.tag import TagRepository, TagUsage
from stackit.domain.value import TagName

from .base import Service

# Shorter queries would match most of the catalogue
MIN_SEARCH_LENGTH = 2


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def ensure_tags(self, tag_names: list[TagName]) -> list[Tag]:
        """Create tags that don't exist yet.

        Args:
            tag_names: Normalized tag names

        Returns:
            Tags for every requested name
        """
        if not tag_names:
            return []
        with logfire.span(
            "tag_service.ensure_tags", tags=[t.root for t in tag_names]
        ):
            tags = await self.tag_repository.ensure(tag_names)
            logfire.info("Tags ensured", count=len(tags))
            return tags

    async def get_all_tags(self) -> list[TagUsage]:
        """Get all tags alphabetically with their question counts."""
        with logfire.span("tag_service.get_all_tags"):
            usages = await self.tag_repository.find_all_with_counts()
            logfire.info("Tags retrieved", count=len(usages))
            return usages

    async def search_tags(self, query: str, limit: int = 10) -> list[Tag]:
        """Search tags by name fragment.

        Args:
            query: Fragment to look for (ignored below two characters)
            limit: Maximum number of tags to return

        Returns:
            Matching tags
        """
        query = query.strip().lower()
        with logfire.span("tag_service.search_tags", query=query, limit=limit):
            if len(query) < MIN_SEARCH_LENGTH:
                return []
            return await self.tag_repository.search(query, limit=limit)
