"""In-memory tag repository for testing."""

from datetime import datetime
from uuid import uuid4

from stackit.domain.model.tag import Tag
from stackit.domain.repository.question import QuestionQuery, QuestionRepository
from stackit.domain.repository.tag import TagRepository, TagUsage
from stackit.domain.value import TagId, TagName


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing.

    Question counts are read from the question repository the tags are
    attached to.
    """

    def __init__(self, question_repository: QuestionRepository) -> None:
        self.question_repository = question_repository
        self._tags: dict[str, Tag] = {}

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names."""
        return [self._tags[n.root] for n in names if n.root in self._tags]

    async def ensure(self, names: list[TagName]) -> list[Tag]:
        """Create any missing tags and return all of them."""
        for name in names:
            if name.root not in self._tags:
                self._tags[name.root] = Tag(
                    id=TagId(uuid4()), name=name, created_at=datetime.now()
                )
        return await self.find_by_names(names)

    async def find_all_with_counts(self) -> list[TagUsage]:
        """Find all tags alphabetically with their question counts."""
        usages = []
        for name in sorted(self._tags):
            tag = self._tags[name]
            count = await self.question_repository.count(QuestionQuery(tag=tag.name))
            usages.append(TagUsage(tag=tag, question_count=count))
        return usages

    async def search(self, fragment: str, limit: int = 10) -> list[Tag]:
        """Find tags whose name contains fragment."""
        fragment = fragment.lower()
        return [self._tags[n] for n in sorted(self._tags) if fragment in n][:limit]
