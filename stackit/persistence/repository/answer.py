"""PostgreSQL implementation of Answer repository."""

from typing import Optional, Sequence

import logfire
from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Answer
from stackit.domain.repository import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId, UserId
from stackit.persistence.mappers import answer_to_dict, row_to_answer
from stackit.persistence.tables import answers_table, questions_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find a question's answers, accepted first then oldest first."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(
                answers_table.c.is_accepted.desc(),
                answers_table.c.created_at.asc(),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers per question in a single query."""
        if not question_ids:
            return {}
        stmt = (
            select(answers_table.c.question_id, func.count())
            .where(answers_table.c.question_id.in_(list(question_ids)))
            .group_by(answers_table.c.question_id)
        )
        result = await self.session.execute(stmt)
        return {QuestionId(row[0]): row[1] for row in result.fetchall()}

    async def find_accepted_question_ids(
        self, question_ids: Sequence[QuestionId]
    ) -> set[QuestionId]:
        """Return which of the questions have an accepted answer."""
        if not question_ids:
            return set()
        stmt = select(answers_table.c.question_id).where(
            answers_table.c.question_id.in_(list(question_ids)),
            answers_table.c.is_accepted.is_(True),
        )
        result = await self.session.execute(stmt)
        return {QuestionId(row.question_id) for row in result.fetchall()}

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update).

        is_accepted is only written on insert; acceptance changes go through
        mark_accepted.
        """
        exists = await self.session.execute(
            select(answers_table.c.id).where(answers_table.c.id == answer.id)
        )
        answer_dict = answer_to_dict(answer)

        if exists.first():
            answer_dict.pop("is_accepted")
            stmt = (
                update(answers_table)
                .where(answers_table.c.id == answer.id)
                .values(**answer_dict)
            )
        else:
            stmt = insert(answers_table).values(**answer_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    async def mark_accepted(
        self, answer_id: AnswerId, question_id: QuestionId
    ) -> Optional[Answer]:
        """Accept one answer and unaccept its siblings atomically.

        Runs in a SAVEPOINT holding a row lock on the question, so concurrent
        acceptances for the same question serialize. The partial unique
        index on (question_id) WHERE is_accepted backs this up.
        """
        with logfire.span(
            "answer_repository.mark_accepted",
            answer_id=str(answer_id),
            question_id=str(question_id),
        ):
            async with self.session.begin_nested():
                await self.session.execute(
                    select(questions_table.c.id)
                    .where(questions_table.c.id == question_id)
                    .with_for_update()
                )
                await self.session.execute(
                    update(answers_table)
                    .where(
                        answers_table.c.question_id == question_id,
                        answers_table.c.is_accepted.is_(True),
                        answers_table.c.id != answer_id,
                    )
                    .values(is_accepted=False, updated_at=func.now())
                )
                result = await self.session.execute(
                    update(answers_table)
                    .where(
                        answers_table.c.id == answer_id,
                        answers_table.c.question_id == question_id,
                    )
                    .values(is_accepted=True, updated_at=func.now())
                    .returning(answers_table)
                )
                row = result.fetchone()

            return row_to_answer(row._asdict()) if row else None

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer (hard delete)."""
        result = await self.session.execute(
            delete(answers_table).where(answers_table.c.id == answer_id)
        )
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_question(self, question_id: QuestionId) -> list[AnswerId]:
        """Delete every answer of a question."""
        result = await self.session.execute(
            delete(answers_table)
            .where(answers_table.c.question_id == question_id)
            .returning(answers_table.c.id)
        )
        deleted = [AnswerId(row.id) for row in result.fetchall()]
        await self.session.flush()
        return deleted

    async def count(self) -> int:
        """Count all answers."""
        result = await self.session.execute(
            select(func.count()).select_from(answers_table)
        )
        return result.scalar() or 0

    async def find_recent(self, limit: int, offset: int = 0) -> list[Answer]:
        """Find answers newest first."""
        stmt = (
            select(answers_table)
            .order_by(desc(answers_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def count_by_authors(
        self, author_ids: Sequence[UserId]
    ) -> dict[UserId, int]:
        """Count answers per author in a single query."""
        if not author_ids:
            return {}
        stmt = (
            select(answers_table.c.author_id, func.count())
            .where(answers_table.c.author_id.in_(list(author_ids)))
            .group_by(answers_table.c.author_id)
        )
        result = await self.session.execute(stmt)
        return {UserId(row[0]): row[1] for row in result.fetchall()}
