"""PostgreSQL implementation of Comment repository."""

from typing import Optional, Sequence

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Comment
from stackit.domain.repository import CommentRepository
from stackit.domain.value import AnswerId, CommentId
from stackit.persistence.mappers import comment_to_dict, row_to_comment
from stackit.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_answers(self, answer_ids: Sequence[AnswerId]) -> list[Comment]:
        """Find comments on multiple answers, oldest first."""
        if not answer_ids:
            return []
        stmt = (
            select(comments_table)
            .where(comments_table.c.answer_id.in_(list(answer_ids)))
            .order_by(comments_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        await self.session.execute(insert(comments_table).values(**comment_to_dict(comment)))
        await self.session.flush()
        return comment

    async def delete_by_answers(self, answer_ids: Sequence[AnswerId]) -> int:
        """Delete every comment on the given answers."""
        if not answer_ids:
            return 0
        result = await self.session.execute(
            delete(comments_table).where(comments_table.c.answer_id.in_(list(answer_ids)))
        )
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
