"""Unit tests for the user profile and search use cases."""

import pytest

from stackit.application.usecase.user import (
    GetMyProfileRequest,
    GetMyProfileUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    SearchUsersRequest,
    SearchUsersUseCase,
)
from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.service import AnswerService, QuestionService, VoteService
from stackit.domain.value import TargetType, UserRole, VoteDirection
from tests.conftest import ANSWER_TEXT, save_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _activity(env, asker, answerer):
    """One question by asker, answered and upvoted by answerer."""
    question_service = await env.get(QuestionService)
    answer_service = await env.get(AnswerService)
    vote_service = await env.get(VoteService)
    question = await question_service.create_question(asker, "Title", "Body", [])
    await answer_service.create_answer(answerer, question.id, ANSWER_TEXT)
    await vote_service.cast_vote(
        answerer.id, TargetType.QUESTION, question.id, VoteDirection.UP
    )
    return question


class TestGetUserProfileUseCase:
    """Tests for GetUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_profile_counts_questions_and_answers(self, unit_env):
        """Public profiles show how much a user asked and answered."""
        # Arrange
        asker = await save_user(unit_env, "asker")
        answerer = await save_user(unit_env, "answerer")
        await _activity(unit_env, asker, answerer)
        use_case = await unit_env.get(GetUserProfileUseCase)

        # Act
        asker_profile = await use_case.execute(GetUserProfileRequest(username="asker"))
        answerer_profile = await use_case.execute(
            GetUserProfileRequest(username="answerer")
        )

        # Assert
        assert asker_profile.user_id == str(asker.id)
        assert (asker_profile.question_count, asker_profile.answer_count) == (1, 0)
        assert (answerer_profile.question_count, answerer_profile.answer_count) == (0, 1)
        assert "email" not in asker_profile.model_dump()

    @pytest.mark.asyncio
    async def test_unknown_username(self, unit_env):
        """Unknown usernames raise NotFoundError."""
        # Arrange
        use_case = await unit_env.get(GetUserProfileUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserProfileRequest(username="ghost"))


class TestGetMyProfileUseCase:
    """Tests for GetMyProfileUseCase."""

    @pytest.mark.asyncio
    async def test_own_profile_includes_private_fields(self, unit_env):
        """The owner sees email, role and their vote count."""
        # Arrange
        asker = await save_user(unit_env, "asker", role=UserRole.MODERATOR)
        answerer = await save_user(unit_env, "answerer")
        await _activity(unit_env, asker, answerer)
        use_case = await unit_env.get(GetMyProfileUseCase)

        # Act
        mine = await use_case.execute(GetMyProfileRequest(user_id=str(answerer.id)))
        theirs = await use_case.execute(GetMyProfileRequest(user_id=str(asker.id)))

        # Assert
        assert mine.email == "answerer@example.com"
        assert (mine.answer_count, mine.vote_count) == (1, 1)
        assert theirs.role == UserRole.MODERATOR
        assert theirs.vote_count == 0

    @pytest.mark.asyncio
    async def test_banned_user_cannot_read_own_profile(self, unit_env):
        """Banned accounts are refused like on /auth/me."""
        # Arrange
        banned = await save_user(unit_env, "troll", is_banned=True)
        use_case = await unit_env.get(GetMyProfileUseCase)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(GetMyProfileRequest(user_id=str(banned.id)))


class TestSearchUsersUseCase:
    """Tests for SearchUsersUseCase."""

    @pytest.mark.asyncio
    async def test_suggestions_for_mentions(self, unit_env):
        """Matching users come back with IDs, sorted by username."""
        # Arrange
        carol = await save_user(unit_env, "carol")
        await save_user(unit_env, "caroline")
        await save_user(unit_env, "dave")
        use_case = await unit_env.get(SearchUsersUseCase)

        # Act
        response = await use_case.execute(SearchUsersRequest(q="car"))

        # Assert
        assert [u.username.root for u in response.users] == ["carol", "caroline"]
        assert response.users[0].user_id == str(carol.id)
