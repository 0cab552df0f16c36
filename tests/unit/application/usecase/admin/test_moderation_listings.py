"""Unit tests for the admin moderation listings."""

import pytest

from stackit.application.usecase.admin import (
    ListModerationAnswersUseCase,
    ListModerationQuestionsUseCase,
    ListUsersRequest,
    ListUsersUseCase,
    ModerationPageRequest,
)
from stackit.domain.error import NotAuthorizedError
from stackit.domain.service import AnswerService, QuestionService, VoteService
from stackit.domain.value import TargetType, UserRole, VoteDirection
from tests.conftest import ANSWER_TEXT, save_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListUsersUseCase:
    """Tests for ListUsersUseCase."""

    @pytest.mark.asyncio
    async def test_users_with_activity_counts(self, unit_env):
        """Each row carries question, answer and vote counts."""
        # Arrange
        admin = await save_user(unit_env, "admin", role=UserRole.ADMIN)
        user = await save_user(unit_env, "alice")
        question_service = await unit_env.get(QuestionService)
        vote_service = await unit_env.get(VoteService)
        question = await question_service.create_question(user, "Title", "Body", [])
        await vote_service.cast_vote(
            admin.id, TargetType.QUESTION, question.id, VoteDirection.UP
        )
        use_case = await unit_env.get(ListUsersUseCase)

        # Act
        response = await use_case.execute(
            ListUsersRequest(user_id=str(admin.id), limit=10)
        )

        # Assert
        rows = {row.username.root: row for row in response.users}
        assert (rows["alice"].question_count, rows["alice"].vote_count) == (1, 0)
        assert (rows["admin"].question_count, rows["admin"].vote_count) == (0, 1)
        assert response.has_more is False

    @pytest.mark.asyncio
    async def test_role_filter_and_paging(self, unit_env):
        """Filters apply before paging and a full page reports has_more."""
        # Arrange
        admin = await save_user(unit_env, "admin", role=UserRole.ADMIN)
        for name in ("mod_one", "mod_two", "mod_three"):
            await save_user(unit_env, name, role=UserRole.MODERATOR)
        await save_user(unit_env, "plain")
        use_case = await unit_env.get(ListUsersUseCase)

        # Act
        first = await use_case.execute(
            ListUsersRequest(user_id=str(admin.id), role=UserRole.MODERATOR, limit=2)
        )
        second = await use_case.execute(
            ListUsersRequest(
                user_id=str(admin.id), role=UserRole.MODERATOR, limit=2, page=2
            )
        )

        # Assert
        assert len(first.users) == 2
        assert first.has_more is True
        assert len(second.users) == 1
        assert second.has_more is False
        names = {u.username.root for u in first.users + second.users}
        assert names == {"mod_one", "mod_two", "mod_three"}

    @pytest.mark.asyncio
    async def test_requires_admin(self, unit_env):
        """Regular users cannot list accounts."""
        # Arrange
        user = await save_user(unit_env, "alice")
        use_case = await unit_env.get(ListUsersUseCase)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(ListUsersRequest(user_id=str(user.id)))


class TestModerationContentListings:
    """Tests for the question and answer moderation listings."""

    @pytest.mark.asyncio
    async def test_questions_newest_first_with_counts(self, unit_env):
        """Questions come newest first with answer and vote counts."""
        # Arrange
        admin = await save_user(unit_env, "admin", role=UserRole.ADMIN)
        user = await save_user(unit_env, "alice")
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        older = await question_service.create_question(user, "Older", "Body", [])
        newer = await question_service.create_question(user, "Newer", "Body", [])
        await answer_service.create_answer(admin, older.id, ANSWER_TEXT)
        use_case = await unit_env.get(ListModerationQuestionsUseCase)

        # Act
        response = await use_case.execute(
            ModerationPageRequest(user_id=str(admin.id))
        )

        # Assert
        assert [q.question_id for q in response.questions] == [
            str(newer.id),
            str(older.id),
        ]
        assert [q.answer_count for q in response.questions] == [0, 1]
        assert response.has_more is False

    @pytest.mark.asyncio
    async def test_answers_carry_question_title(self, unit_env):
        """Answers list newest first with their question's title."""
        # Arrange
        admin = await save_user(unit_env, "admin", role=UserRole.ADMIN)
        user = await save_user(unit_env, "alice")
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        vote_service = await unit_env.get(VoteService)
        question = await question_service.create_question(user, "Files", "Body", [])
        await answer_service.create_answer(admin, question.id, ANSWER_TEXT)
        second = await answer_service.create_answer(user, question.id, ANSWER_TEXT)
        await vote_service.cast_vote(
            admin.id, TargetType.ANSWER, second.id, VoteDirection.DOWN
        )
        use_case = await unit_env.get(ListModerationAnswersUseCase)

        # Act
        response = await use_case.execute(
            ModerationPageRequest(user_id=str(admin.id), limit=1)
        )

        # Assert
        [row] = response.answers
        assert row.answer_id == str(second.id)
        assert row.question_title == "Files"
        assert row.vote_count == -1
        assert response.has_more is True

    @pytest.mark.asyncio
    async def test_content_listings_require_admin(self, unit_env):
        """Moderators cannot use the admin listings."""
        # Arrange
        moderator = await save_user(unit_env, "mod", role=UserRole.MODERATOR)
        questions = await unit_env.get(ListModerationQuestionsUseCase)
        answers = await unit_env.get(ListModerationAnswersUseCase)
        request = ModerationPageRequest(user_id=str(moderator.id))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await questions.execute(request)
        with pytest.raises(NotAuthorizedError):
            await answers.execute(request)
