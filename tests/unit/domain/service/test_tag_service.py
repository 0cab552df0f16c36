"""Unit tests for TagService."""

import pytest

from stackit.domain.service import QuestionService, TagService
from tests.conftest import save_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestTagService:
    """Tests for tag listing and search."""

    @pytest.mark.asyncio
    async def test_tags_listed_alphabetically_with_counts(self, unit_env):
        """Each tag reports how many questions use it."""
        # Arrange
        author = await save_user(unit_env, "author")
        question_service = await unit_env.get(QuestionService)
        await question_service.create_question(author, "Q1", "Body", ["python", "sql"])
        await question_service.create_question(author, "Q2", "Body", ["Python"])
        tag_service = await unit_env.get(TagService)

        # Act
        usages = await tag_service.get_all_tags()

        # Assert
        assert [(u.tag.name.root, u.question_count) for u in usages] == [
            ("python", 2),
            ("sql", 1),
        ]

    @pytest.mark.asyncio
    async def test_search_matches_fragment(self, unit_env):
        """Search finds tags containing the fragment, case-insensitively."""
        # Arrange
        author = await save_user(unit_env, "author")
        question_service = await unit_env.get(QuestionService)
        await question_service.create_question(
            author, "Q", "Body", ["javascript", "java", "python"]
        )
        tag_service = await unit_env.get(TagService)

        # Act
        tags = await tag_service.search_tags("JAV")

        # Assert
        assert sorted(t.name.root for t in tags) == ["java", "javascript"]

    @pytest.mark.asyncio
    async def test_short_query_returns_nothing(self, unit_env):
        """Queries under two characters return no suggestions."""
        # Arrange
        author = await save_user(unit_env, "author")
        question_service = await unit_env.get(QuestionService)
        await question_service.create_question(author, "Q", "Body", ["c"])
        tag_service = await unit_env.get(TagService)

        # Act & Assert
        assert await tag_service.search_tags(" c ") == []
