"""Unit tests for QuestionService."""

import pytest

from stackit.domain.error import NotAuthorizedError, ValidationError
from stackit.domain.repository import QuestionQuery
from stackit.domain.service import QuestionService
from stackit.domain.value import TagName, UserRole
from tests.conftest import save_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateQuestion:
    """Tests for asking questions."""

    @pytest.mark.asyncio
    async def test_create_question(self, unit_env):
        """Questions are stored trimmed with normalized tags and no views."""
        # Arrange
        author = await save_user(unit_env, "author")
        question_service = await unit_env.get(QuestionService)

        # Act
        question = await question_service.create_question(
            author, "  What is a monad?  ", "<p>Explain simply.</p>", ["Haskell", "FP"]
        )

        # Assert
        assert question.title == "What is a monad?"
        assert [t.root for t in question.tag_names] == ["haskell", "fp"]
        assert question.views == 0
        assert question.author_username.root == "author"

    @pytest.mark.asyncio
    async def test_blank_title_rejected(self, unit_env):
        """A question needs a title."""
        # Arrange
        author = await save_user(unit_env, "author")
        question_service = await unit_env.get(QuestionService)

        # Act & Assert
        with pytest.raises(ValidationError):
            await question_service.create_question(author, " ", "Body", [])


class TestListQuestions:
    """Tests for question listing."""

    @pytest.mark.asyncio
    async def test_filter_by_tag_and_search(self, unit_env):
        """Tag and text filters narrow the listing."""
        # Arrange
        author = await save_user(unit_env, "author")
        question_service = await unit_env.get(QuestionService)
        await question_service.create_question(
            author, "Async generators", "How do they work?", ["python"]
        )
        await question_service.create_question(
            author, "Window functions", "Ranking rows", ["sql"]
        )
        await question_service.create_question(
            author, "Decorators", "Wrapping ASYNC functions", ["python"]
        )

        # Act
        by_tag, tag_total = await question_service.list_questions(
            QuestionQuery(tag=TagName("python"))
        )
        by_text, text_total = await question_service.list_questions(
            QuestionQuery(search="async")
        )

        # Assert
        assert tag_total == 2
        assert {q.title for q in by_tag} == {"Async generators", "Decorators"}
        assert text_total == 2
        assert {q.title for q in by_text} == {"Async generators", "Decorators"}

    @pytest.mark.asyncio
    async def test_pagination(self, unit_env):
        """Limit and offset page through results while total counts all."""
        # Arrange
        author = await save_user(unit_env, "author")
        question_service = await unit_env.get(QuestionService)
        for i in range(5):
            await question_service.create_question(author, f"Q{i}", "Body", [])

        # Act
        page, total = await question_service.list_questions(
            QuestionQuery(limit=2, offset=4)
        )

        # Assert
        assert total == 5
        assert len(page) == 1


class TestUpdateQuestion:
    """Tests for editing questions."""

    @pytest.mark.asyncio
    async def test_admin_can_edit(self, unit_env):
        """Admins may edit questions they did not write."""
        # Arrange
        author = await save_user(unit_env, "author")
        admin = await save_user(unit_env, "admin", role=UserRole.ADMIN)
        question_service = await unit_env.get(QuestionService)
        question = await question_service.create_question(author, "Old", "Body", [])

        # Act
        updated = await question_service.update_question(
            admin, question.id, title="New", tags=["meta"]
        )

        # Assert
        assert updated.title == "New"
        assert updated.content == "Body"
        assert [t.root for t in updated.tag_names] == ["meta"]

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        """Regular users may not edit someone else's question."""
        # Arrange
        author = await save_user(unit_env, "author")
        other = await save_user(unit_env, "other")
        question_service = await unit_env.get(QuestionService)
        question = await question_service.create_question(author, "Title", "Body", [])

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await question_service.update_question(other, question.id, title="Mine")
