"""PostgreSQL implementation of Question repository."""

from collections import defaultdict
from typing import List, Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import delete, desc, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Question
from stackit.domain.repository.question import QuestionQuery, QuestionRepository
from stackit.domain.value import QuestionId, UserId
from stackit.persistence.mappers import question_to_dict, row_to_question
from stackit.persistence.tables import question_tags_table, questions_table, tags_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags_for_questions(
        self, question_ids: list[UUID]
    ) -> dict[UUID, list[str]]:
        """Fetch tags for multiple questions in a single query.

        Args:
            question_ids: List of question IDs

        Returns:
            Dict mapping question_id -> list of tag names
        """
        if not question_ids:
            return {}

        stmt = (
            select(question_tags_table.c.question_id, tags_table.c.name)
            .select_from(question_tags_table)
            .join(tags_table, question_tags_table.c.tag_id == tags_table.c.id)
            .where(question_tags_table.c.question_id.in_(question_ids))
            .order_by(tags_table.c.name)
        )
        result = await self.session.execute(stmt)

        question_tag_map: dict[UUID, list[str]] = defaultdict(list)
        for row in result.fetchall():
            question_tag_map[row.question_id].append(row.name)
        return question_tag_map

    def _filter(self, stmt, query: QuestionQuery):
        """Apply the search and tag filters of a query to a statement."""
        if query.tag:
            tagged = (
                select(question_tags_table.c.question_id)
                .join(tags_table, question_tags_table.c.tag_id == tags_table.c.id)
                .where(tags_table.c.name == query.tag.root)
            )
            stmt = stmt.where(questions_table.c.id.in_(tagged))
        if query.search:
            stmt = stmt.where(
                or_(
                    questions_table.c.title.icontains(query.search, autoescape=True),
                    questions_table.c.content.icontains(query.search, autoescape=True),
                )
            )
        return stmt

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span("question_repository.find_by_id", question_id=str(question_id)):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            if not row:
                return None

            question_tag_map = await self._fetch_tags_for_questions([question_id])
            return row_to_question(
                row._asdict(), tag_names=question_tag_map.get(question_id, [])
            )

    async def find_all(self, query: QuestionQuery) -> List[Question]:
        """Find questions newest first with filtering and pagination."""
        with logfire.span(
            "question_repository.find_all",
            search=query.search,
            tag=query.tag.root if query.tag else None,
            limit=query.limit,
            offset=query.offset,
        ):
            stmt = self._filter(select(questions_table), query)
            stmt = (
                stmt.order_by(desc(questions_table.c.created_at))
                .limit(query.limit)
                .offset(query.offset)
            )
            result = await self.session.execute(stmt)
            rows = result.fetchall()
            if not rows:
                return []

            question_tag_map = await self._fetch_tags_for_questions(
                [row.id for row in rows]
            )
            return [
                row_to_question(row._asdict(), tag_names=question_tag_map.get(row.id, []))
                for row in rows
            ]

    async def find_by_ids(self, question_ids: Sequence[QuestionId]) -> List[Question]:
        """Find several questions with their tags in two queries."""
        if not question_ids:
            return []
        stmt = select(questions_table).where(questions_table.c.id.in_(list(question_ids)))
        result = await self.session.execute(stmt)
        rows = result.fetchall()
        question_tag_map = await self._fetch_tags_for_questions([row.id for row in rows])
        return [
            row_to_question(row._asdict(), tag_names=question_tag_map.get(row.id, []))
            for row in rows
        ]

    async def count(self, query: Optional[QuestionQuery] = None) -> int:
        """Count questions matching the query filters."""
        stmt = select(func.count()).select_from(questions_table)
        if query:
            stmt = self._filter(stmt, query)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, question: Question) -> Question:
        """Save a question (create or update) and replace its tag links."""
        with logfire.span(
            "question_repository.save",
            question_id=str(question.id),
            tags=[t.root for t in question.tag_names],
        ):
            exists = await self.session.execute(
                select(questions_table.c.id).where(questions_table.c.id == question.id)
            )
            question_dict = question_to_dict(question)

            if exists.first():
                await self.session.execute(
                    update(questions_table)
                    .where(questions_table.c.id == question.id)
                    .values(**question_dict)
                )
                await self.session.execute(
                    delete(question_tags_table).where(
                        question_tags_table.c.question_id == question.id
                    )
                )
            else:
                await self.session.execute(insert(questions_table).values(**question_dict))

            if question.tag_names:
                tag_result = await self.session.execute(
                    select(tags_table.c.id).where(
                        tags_table.c.name.in_([tag.root for tag in question.tag_names])
                    )
                )
                tag_ids = [row.id for row in tag_result.fetchall()]
                if tag_ids:
                    await self.session.execute(
                        insert(question_tags_table),
                        [
                            {"question_id": question.id, "tag_id": tag_id}
                            for tag_id in tag_ids
                        ],
                    )

            await self.session.flush()
            return question

    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment views by 1."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(views=questions_table.c.views + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question (hard delete)."""
        result = await self.session.execute(
            delete(questions_table).where(questions_table.c.id == question_id)
        )
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_authors(
        self, author_ids: Sequence[UserId]
    ) -> dict[UserId, int]:
        """Count questions per author in a single query."""
        if not author_ids:
            return {}
        stmt = (
            select(questions_table.c.author_id, func.count())
            .where(questions_table.c.author_id.in_(list(author_ids)))
            .group_by(questions_table.c.author_id)
        )
        result = await self.session.execute(stmt)
        return {UserId(row[0]): row[1] for row in result.fetchall()}
