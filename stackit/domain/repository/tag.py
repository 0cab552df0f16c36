"""Tag repository interface."""

from abc import ABC, abstractmethod

from stackit.domain.model.tag import Tag
from stackit.domain.value import TagName
from stackit.domain.value.common import ValueObject


class TagUsage(ValueObject):
    """A tag with the number of questions that carry it."""

    tag: Tag
    question_count: int = 0


class TagRepository(ABC):
    """Repository interface for Tag aggregate."""

    @abstractmethod
    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query.

        Args:
            names: List of tag names

        Returns:
            List of found tags (may be fewer than requested if some don't exist)
        """
        pass

    @abstractmethod
    async def ensure(self, names: list[TagName]) -> list[Tag]:
        """Create any missing tags and return all of them.

        Concurrent creation of the same name yields one tag.

        Args:
            names: Tag names (already normalized)

        Returns:
            Tags for every requested name
        """
        pass

    @abstractmethod
    async def find_all_with_counts(self) -> list[TagUsage]:
        """Find all tags in alphabetical order with their question counts."""
        pass

    @abstractmethod
    async def search(self, fragment: str, limit: int = 10) -> list[Tag]:
        """Find tags whose name contains fragment (case-insensitive).

        Args:
            fragment: Substring to look for
            limit: Maximum number of tags to return

        Returns:
            Matching tags in alphabetical order
        """
        pass
