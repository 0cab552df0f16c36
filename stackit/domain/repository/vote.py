"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from uuid import UUID

from stackit.domain.model.vote import Vote
from stackit.domain.value import TargetType, UserId, VoteDirection, VoteId, VoteTally


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific question or answer.

        Args:
            user_id: The user's ID
            target_type: Type of item (question or answer)
            target_id: ID of the item

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a user's votes on multiple items (batch query).

        Args:
            user_id: The user's ID
            target_type: Type of items (question or answer)
            target_ids: List of item IDs to check

        Returns:
            List of votes by the user on the specified items
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        The store holds at most one vote per (user, target); a second insert
        for the same pair fails.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        pass

    @abstractmethod
    async def update_direction(
        self, vote_id: VoteId, expected: VoteDirection, direction: VoteDirection
    ) -> Optional[Vote]:
        """Flip a vote's direction if it still holds the expected direction.

        Args:
            vote_id: The vote to update
            expected: Direction the caller read before deciding to flip
            direction: New direction

        Returns:
            The updated vote, None if the vote vanished or changed meanwhile
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote.

        Returns:
            True if a vote was deleted, False if it no longer existed
        """
        pass

    @abstractmethod
    async def tally(self, target_type: TargetType, target_id: UUID) -> VoteTally:
        """Count up and down votes on one item."""
        pass

    @abstractmethod
    async def tally_many(
        self, target_type: TargetType, target_ids: Sequence[UUID]
    ) -> dict[UUID, VoteTally]:
        """Count up and down votes on multiple items (batch query).

        Returns:
            Dict mapping target_id -> tally (missing means no votes)
        """
        pass

    @abstractmethod
    async def delete_by_targets(
        self, target_type: TargetType, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every vote on the given items.

        Returns:
            Number of votes deleted
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all votes."""
        pass

    @abstractmethod
    async def count_by_users(self, user_ids: Sequence[UserId]) -> dict[UserId, int]:
        """Count votes cast by each of the given users.

        Returns:
            Dict mapping user_id -> vote count (missing means zero)
        """
        pass
