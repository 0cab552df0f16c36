"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from stackit.domain.error import ValidationError
from stackit.domain.service import CommentService
from stackit.domain.value import AnswerId
from tests.conftest import save_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCommentService:
    """Tests for CommentService."""

    @pytest.mark.asyncio
    async def test_create_comment_trims_content(self, unit_env):
        """Comments are stored trimmed with the author's username."""
        # Arrange
        author = await save_user(unit_env, "commenter")
        comment_service = await unit_env.get(CommentService)
        answer_id = AnswerId(uuid4())

        # Act
        comment = await comment_service.create_comment(
            author, answer_id, "  Nice, this fixed it.  "
        )

        # Assert
        assert comment.content == "Nice, this fixed it."
        assert comment.author_username.root == "commenter"
        assert comment.answer_id == answer_id

    @pytest.mark.asyncio
    async def test_short_comment_rejected(self, unit_env):
        """Comments under ten characters fail validation."""
        # Arrange
        author = await save_user(unit_env, "commenter")
        comment_service = await unit_env.get(CommentService)

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await comment_service.create_comment(author, AnswerId(uuid4()), "+1")
        assert exc_info.value.field == "content"

    @pytest.mark.asyncio
    async def test_comments_grouped_by_answer(self, unit_env):
        """Every requested answer gets a list, even with no comments."""
        # Arrange
        author = await save_user(unit_env, "commenter")
        comment_service = await unit_env.get(CommentService)
        first, second, empty = AnswerId(uuid4()), AnswerId(uuid4()), AnswerId(uuid4())
        await comment_service.create_comment(author, first, "First comment here")
        await comment_service.create_comment(author, first, "Second comment here")
        await comment_service.create_comment(author, second, "Other answer comment")

        # Act
        grouped = await comment_service.get_comments_for_answers([first, second, empty])

        # Assert
        assert [c.content for c in grouped[first]] == [
            "First comment here",
            "Second comment here",
        ]
        assert len(grouped[second]) == 1
        assert grouped[empty] == []

    @pytest.mark.asyncio
    async def test_delete_comments_for_answers(self, unit_env):
        """Deleting by answer removes only those answers' comments."""
        # Arrange
        author = await save_user(unit_env, "commenter")
        comment_service = await unit_env.get(CommentService)
        gone, kept = AnswerId(uuid4()), AnswerId(uuid4())
        await comment_service.create_comment(author, gone, "Going away soon")
        await comment_service.create_comment(author, kept, "Staying around")

        # Act
        deleted = await comment_service.delete_comments_for_answers([gone])

        # Assert
        assert deleted == 1
        grouped = await comment_service.get_comments_for_answers([gone, kept])
        assert grouped[gone] == []
        assert len(grouped[kept]) == 1
