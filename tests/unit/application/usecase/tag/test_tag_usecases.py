"""Unit tests for the tag use cases."""

import pytest

from stackit.application.usecase.tag import (
    ListTagsUseCase,
    SearchTagsRequest,
    SearchTagsUseCase,
)
from stackit.domain.service import QuestionService
from tests.conftest import save_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestTagUseCases:
    """Tests for ListTagsUseCase and SearchTagsUseCase."""

    @pytest.mark.asyncio
    async def test_list_and_search(self, unit_env):
        """Listing reports usage counts and search returns matching names."""
        # Arrange
        asker = await save_user(unit_env, "asker")
        question_service = await unit_env.get(QuestionService)
        await question_service.create_question(asker, "Q1", "Body", ["react", "redux"])
        await question_service.create_question(asker, "Q2", "Body", ["react"])
        list_use_case = await unit_env.get(ListTagsUseCase)
        search_use_case = await unit_env.get(SearchTagsUseCase)

        # Act
        listing = await list_use_case.execute()
        found = await search_use_case.execute(SearchTagsRequest(q="re", limit=1))

        # Assert
        assert [(t.name, t.question_count) for t in listing.tags] == [
            ("react", 2),
            ("redux", 1),
        ]
        assert found.tags == ["react"]
