"""Unit tests for the in-memory repositories used by the test container."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from stackit.domain.model import Answer, Question, Vote
from stackit.domain.repository import QuestionQuery, UserQuery
from stackit.domain.value import (
    AnswerId,
    QuestionId,
    TargetType,
    UserId,
    VoteDirection,
    VoteId,
)
from stackit.domain.value.types import Username
from stackit.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryQuestionRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from tests.conftest import make_user


def _vote(user_id, target_id, direction=VoteDirection.UP):
    return Vote(
        id=VoteId(uuid4()),
        user_id=user_id,
        target_type=TargetType.QUESTION,
        target_id=target_id,
        direction=direction,
    )


def _answer(question_id, created_at):
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        author_id=UserId(uuid4()),
        author_username=Username("helper"),
        content="An answer body",
        created_at=created_at,
    )


class TestInMemoryVoteRepository:
    """Tests for InMemoryVoteRepository."""

    @pytest.mark.asyncio
    async def test_duplicate_vote_rejected(self):
        """A second vote by the same user on the same target fails."""
        # Arrange
        repo = InMemoryVoteRepository()
        user_id, target_id = UserId(uuid4()), uuid4()
        await repo.save(_vote(user_id, target_id))

        # Act & Assert
        with pytest.raises(IntegrityError):
            await repo.save(_vote(user_id, target_id, VoteDirection.DOWN))

    @pytest.mark.asyncio
    async def test_update_direction_is_conditional(self):
        """A flip only applies while the vote holds the expected direction."""
        # Arrange
        repo = InMemoryVoteRepository()
        vote = await repo.save(_vote(UserId(uuid4()), uuid4()))

        # Act
        stale = await repo.update_direction(
            vote.id, VoteDirection.DOWN, VoteDirection.UP
        )
        flipped = await repo.update_direction(
            vote.id, VoteDirection.UP, VoteDirection.DOWN
        )

        # Assert
        assert stale is None
        assert flipped.direction == VoteDirection.DOWN

    @pytest.mark.asyncio
    async def test_tally_many(self):
        """Tallies count up and down votes per target."""
        # Arrange
        repo = InMemoryVoteRepository()
        busy, quiet = uuid4(), uuid4()
        await repo.save(_vote(UserId(uuid4()), busy))
        await repo.save(_vote(UserId(uuid4()), busy))
        await repo.save(_vote(UserId(uuid4()), busy, VoteDirection.DOWN))

        # Act
        tallies = await repo.tally_many(TargetType.QUESTION, [busy, quiet])

        # Assert
        assert tallies[busy].up == 2
        assert tallies[busy].down == 1
        assert tallies[busy].net == 1
        assert quiet not in tallies


class TestInMemoryAnswerRepository:
    """Tests for InMemoryAnswerRepository."""

    @pytest.mark.asyncio
    async def test_accepted_answer_listed_first(self):
        """Accepted answers come first, then oldest first."""
        # Arrange
        repo = InMemoryAnswerRepository()
        question_id = QuestionId(uuid4())
        now = datetime.now()
        oldest = await repo.save(_answer(question_id, now - timedelta(hours=2)))
        middle = await repo.save(_answer(question_id, now - timedelta(hours=1)))
        newest = await repo.save(_answer(question_id, now))

        # Act
        await repo.mark_accepted(newest.id, question_id)
        answers = await repo.find_by_question(question_id)

        # Assert
        assert [a.id for a in answers] == [newest.id, oldest.id, middle.id]

    @pytest.mark.asyncio
    async def test_mark_accepted_clears_siblings(self):
        """Only one answer of a question stays accepted."""
        # Arrange
        repo = InMemoryAnswerRepository()
        question_id = QuestionId(uuid4())
        first = await repo.save(_answer(question_id, datetime.now()))
        second = await repo.save(_answer(question_id, datetime.now()))
        await repo.mark_accepted(first.id, question_id)

        # Act
        accepted = await repo.mark_accepted(second.id, question_id)

        # Assert
        assert accepted.is_accepted is True
        assert (await repo.find_by_id(first.id)).is_accepted is False
        assert await repo.find_accepted_question_ids([question_id]) == {question_id}

    @pytest.mark.asyncio
    async def test_mark_accepted_wrong_question(self):
        """An answer cannot be accepted for a question it does not belong to."""
        # Arrange
        repo = InMemoryAnswerRepository()
        answer = await repo.save(_answer(QuestionId(uuid4()), datetime.now()))

        # Act & Assert
        assert await repo.mark_accepted(answer.id, QuestionId(uuid4())) is None


class TestInMemoryQuestionRepository:
    """Tests for InMemoryQuestionRepository."""

    @pytest.mark.asyncio
    async def test_newest_first(self):
        """Listings are ordered newest first."""
        # Arrange
        repo = InMemoryQuestionRepository()
        now = datetime.now()
        for hours in (3, 1, 2):
            await repo.save(
                Question(
                    id=QuestionId(uuid4()),
                    author_id=UserId(uuid4()),
                    author_username=Username("asker"),
                    title=f"{hours} hours ago",
                    content="Body",
                    created_at=now - timedelta(hours=hours),
                )
            )

        # Act
        questions = await repo.find_all(QuestionQuery())

        # Assert
        assert [q.title for q in questions] == [
            "1 hours ago",
            "2 hours ago",
            "3 hours ago",
        ]

    @pytest.mark.asyncio
    async def test_count_by_authors(self):
        """Counts group by author and skip users without questions."""
        # Arrange
        repo = InMemoryQuestionRepository()
        author, other = UserId(uuid4()), UserId(uuid4())
        for title in ("First", "Second"):
            await repo.save(
                Question(
                    id=QuestionId(uuid4()),
                    author_id=author,
                    author_username=Username("asker"),
                    title=title,
                    content="Body",
                )
            )

        # Act
        counts = await repo.count_by_authors([author, other])

        # Assert
        assert counts == {author: 2}


class TestInMemoryUserRepository:
    """Tests for InMemoryUserRepository."""

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self):
        """Underscores and percent signs are plain characters."""
        # Arrange
        repo = InMemoryUserRepository()
        await repo.save(make_user("snake_case"))
        await repo.save(make_user("snakexcase"))

        # Act
        underscore = await repo.search_by_username("e_c")
        percent = await repo.search_by_username("%")

        # Assert
        assert [u.username.root for u in underscore] == ["snake_case"]
        assert percent == []

    @pytest.mark.asyncio
    async def test_find_all_newest_first_and_paged(self):
        """Listing pages through users newest first."""
        # Arrange
        repo = InMemoryUserRepository()
        now = datetime.now()
        for hours, name in ((3, "oldest"), (1, "newest"), (2, "middle")):
            user = make_user(name).model_copy(
                update={"created_at": now - timedelta(hours=hours)}
            )
            await repo.save(user)

        # Act
        page = await repo.find_all(UserQuery(limit=2, offset=1))

        # Assert
        assert [u.username.root for u in page] == ["middle", "oldest"]
