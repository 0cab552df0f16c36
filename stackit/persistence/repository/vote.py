"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model.vote import Vote
from stackit.domain.repository.vote import VoteRepository
from stackit.domain.value import TargetType, UserId, VoteDirection, VoteId, VoteTally
from stackit.persistence.mappers import row_to_vote, vote_to_dict
from stackit.persistence.tables import votes_table


def _target_column(target_type: TargetType):
    """Foreign key column holding targets of the given type."""
    if target_type == TargetType.QUESTION:
        return votes_table.c.question_id
    return votes_table.c.answer_id


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                _target_column(target_type) == target_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        if not target_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                _target_column(target_type).in_(list(target_ids)),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Runs in a SAVEPOINT so a unique-constraint violation only rolls back
        this insert, leaving the request transaction usable for a retry.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        async with self.session.begin_nested():
            await self.session.execute(insert(votes_table).values(**vote_to_dict(vote)))
        return vote

    async def update_direction(
        self, vote_id: VoteId, expected: VoteDirection, direction: VoteDirection
    ) -> Optional[Vote]:
        """Flip a vote's direction if it still holds the expected direction."""
        stmt = (
            update(votes_table)
            .where(
                votes_table.c.id == vote_id,
                votes_table.c.direction == expected.value,
            )
            .values(direction=direction.value, updated_at=func.now())
            .returning(votes_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict()) if row else None

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote by ID."""
        result = await self.session.execute(
            delete(votes_table).where(votes_table.c.id == vote_id)
        )
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def tally(self, target_type: TargetType, target_id: UUID) -> VoteTally:
        """Count up and down votes on one item."""
        tallies = await self.tally_many(target_type, [target_id])
        return tallies.get(target_id, VoteTally())

    async def tally_many(
        self, target_type: TargetType, target_ids: Sequence[UUID]
    ) -> dict[UUID, VoteTally]:
        """Count up and down votes on multiple items in one grouped query."""
        if not target_ids:
            return {}

        column = _target_column(target_type)
        stmt = (
            select(column, votes_table.c.direction, func.count())
            .where(column.in_(list(target_ids)))
            .group_by(column, votes_table.c.direction)
        )
        result = await self.session.execute(stmt)

        counts: dict[UUID, dict[str, int]] = {}
        for target_id, direction, count in result.fetchall():
            counts.setdefault(target_id, {})[direction] = count

        return {
            target_id: VoteTally(
                up=by_direction.get(VoteDirection.UP.value, 0),
                down=by_direction.get(VoteDirection.DOWN.value, 0),
            )
            for target_id, by_direction in counts.items()
        }

    async def delete_by_targets(
        self, target_type: TargetType, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every vote on the given items."""
        if not target_ids:
            return 0
        result = await self.session.execute(
            delete(votes_table).where(_target_column(target_type).in_(list(target_ids)))
        )
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def count(self) -> int:
        """Count all votes."""
        result = await self.session.execute(
            select(func.count()).select_from(votes_table)
        )
        return result.scalar() or 0

    async def count_by_users(self, user_ids: Sequence[UserId]) -> dict[UserId, int]:
        """Count votes per voter in a single query."""
        if not user_ids:
            return {}
        stmt = (
            select(votes_table.c.user_id, func.count())
            .where(votes_table.c.user_id.in_(list(user_ids)))
            .group_by(votes_table.c.user_id)
        )
        result = await self.session.execute(stmt)
        return {UserId(row[0]): row[1] for row in result.fetchall()}
