"""Unit tests for DeleteAnswerUseCase."""

import pytest

from stackit.application.usecase.answer import DeleteAnswerRequest, DeleteAnswerUseCase
from stackit.domain.error import NotAuthorizedError
from stackit.domain.service import (
    AnswerService,
    CommentService,
    QuestionService,
    VoteService,
)
from stackit.domain.value import TargetType, UserRole, VoteDirection
from tests.conftest import ANSWER_TEXT, save_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeleteAnswerUseCase:
    """Tests for DeleteAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_admin_deletes_answer_with_dependents(self, unit_env):
        """Comments and votes on the answer go with it."""
        # Arrange
        asker = await save_user(unit_env, "asker")
        helper = await save_user(unit_env, "helper")
        admin = await save_user(unit_env, "admin", role=UserRole.ADMIN)
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        comment_service = await unit_env.get(CommentService)
        vote_service = await unit_env.get(VoteService)
        question = await question_service.create_question(asker, "Title", "Body", [])
        answer = await answer_service.create_answer(helper, question.id, ANSWER_TEXT)
        await comment_service.create_comment(asker, answer.id, "Comment to remove")
        await vote_service.cast_vote(
            asker.id, TargetType.ANSWER, answer.id, VoteDirection.UP
        )
        use_case = await unit_env.get(DeleteAnswerUseCase)

        # Act
        response = await use_case.execute(
            DeleteAnswerRequest(user_id=str(admin.id), answer_id=str(answer.id))
        )

        # Assert
        assert response.deleted_id == str(answer.id)
        assert await answer_service.get_answers_for_question(question.id) == []
        grouped = await comment_service.get_comments_for_answers([answer.id])
        assert grouped[answer.id] == []
        assert await vote_service.count_all() == 0

    @pytest.mark.asyncio
    async def test_question_author_cannot_delete_answer(self, unit_env):
        """Owning the question does not grant deleting its answers."""
        # Arrange
        asker = await save_user(unit_env, "asker")
        helper = await save_user(unit_env, "helper")
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        question = await question_service.create_question(asker, "Title", "Body", [])
        answer = await answer_service.create_answer(helper, question.id, ANSWER_TEXT)
        use_case = await unit_env.get(DeleteAnswerUseCase)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteAnswerRequest(user_id=str(asker.id), answer_id=str(answer.id))
            )
