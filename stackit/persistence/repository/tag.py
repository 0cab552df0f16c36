"""PostgreSQL implementation of Tag repository."""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model.tag import Tag
from stackit.domain.repository.tag import TagRepository, TagUsage
from stackit.domain.value import TagName
from stackit.persistence.mappers import row_to_tag
from stackit.persistence.tables import question_tags_table, tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query."""
        if not names:
            return []
        stmt = select(tags_table).where(tags_table.c.name.in_([n.root for n in names]))
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def ensure(self, names: list[TagName]) -> list[Tag]:
        """Upsert tags by name.

        ON CONFLICT DO NOTHING on the unique name index makes concurrent
        creation of the same tag safe.
        """
        if not names:
            return []
        now = datetime.now()
        stmt = (
            pg_insert(tags_table)
            .values([{"id": uuid4(), "name": n.root, "created_at": now} for n in names])
            .on_conflict_do_nothing(index_elements=["name"])
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_names(names)

    async def find_all_with_counts(self) -> list[TagUsage]:
        """Find all tags alphabetically with their question counts."""
        stmt = (
            select(tags_table, func.count(question_tags_table.c.question_id).label("uses"))
            .select_from(
                tags_table.outerjoin(
                    question_tags_table, question_tags_table.c.tag_id == tags_table.c.id
                )
            )
            .group_by(tags_table.c.id)
            .order_by(tags_table.c.name)
        )
        result = await self.session.execute(stmt)
        usages = []
        for row in result.fetchall():
            data = row._asdict()
            usages.append(TagUsage(tag=row_to_tag(data), question_count=data["uses"]))
        return usages

    async def search(self, fragment: str, limit: int = 10) -> list[Tag]:
        """Find tags whose name contains fragment.

        Wildcards in fragment match literally, as in the in-memory store.
        """
        stmt = (
            select(tags_table)
            .where(tags_table.c.name.icontains(fragment, autoescape=True))
            .order_by(tags_table.c.name)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]
