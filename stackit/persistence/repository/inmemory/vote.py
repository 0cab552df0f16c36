"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from stackit.domain.model.vote import Vote
from stackit.domain.repository.vote import VoteRepository
from stackit.domain.value import TargetType, UserId, VoteDirection, VoteId, VoteTally


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_id: UUID,
    ) -> Optional[Vote]:
        """Find a vote by user and target."""
        for vote in self._votes:
            if (
                vote.user_id == user_id
                and vote.target_type == target_type
                and vote.target_id == target_id
            ):
                return vote
        return None

    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        if not target_ids:
            return []

        wanted = set(target_ids)
        return [
            v
            for v in self._votes
            if v.user_id == user_id
            and v.target_type == target_type
            and v.target_id in wanted
        ]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        existing = await self.find_by_user_and_target(
            vote.user_id, vote.target_type, vote.target_id
        )
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def update_direction(
        self, vote_id: VoteId, expected: VoteDirection, direction: VoteDirection
    ) -> Optional[Vote]:
        """Flip a vote's direction if it still holds the expected direction."""
        for i, vote in enumerate(self._votes):
            if vote.id == vote_id and vote.direction == expected:
                updated = vote.model_copy(
                    update={"direction": direction, "updated_at": datetime.now()}
                )
                self._votes[i] = updated
                return updated
        return None

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote by ID."""
        for i, vote in enumerate(self._votes):
            if vote.id == vote_id:
                self._votes.pop(i)
                return True
        return False

    async def tally(self, target_type: TargetType, target_id: UUID) -> VoteTally:
        """Count up and down votes on one item."""
        tallies = await self.tally_many(target_type, [target_id])
        return tallies.get(target_id, VoteTally())

    async def tally_many(
        self, target_type: TargetType, target_ids: Sequence[UUID]
    ) -> dict[UUID, VoteTally]:
        """Count up and down votes on multiple items."""
        wanted = set(target_ids)
        counts: dict[UUID, list[int]] = {}
        for vote in self._votes:
            if vote.target_type == target_type and vote.target_id in wanted:
                up_down = counts.setdefault(vote.target_id, [0, 0])
                up_down[0 if vote.direction == VoteDirection.UP else 1] += 1
        return {tid: VoteTally(up=up, down=down) for tid, (up, down) in counts.items()}

    async def delete_by_targets(
        self, target_type: TargetType, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every vote on the given items."""
        wanted = set(target_ids)
        before = len(self._votes)
        self._votes = [
            v
            for v in self._votes
            if not (v.target_type == target_type and v.target_id in wanted)
        ]
        return before - len(self._votes)

    async def count(self) -> int:
        """Count all votes."""
        return len(self._votes)

    async def count_by_users(self, user_ids: Sequence[UserId]) -> dict[UserId, int]:
        """Count votes per voter."""
        wanted = set(user_ids)
        counts: dict[UserId, int] = {}
        for vote in self._votes:
            if vote.user_id in wanted:
                counts[vote.user_id] = counts.get(vote.user_id, 0) + 1
        return counts
