"""Vote domain service.

Each user holds at most one vote per question or answer. Casting a vote
toggles or flips the stored vote, and the net count is always re-derived
from the vote rows rather than kept as a counter.
"""

from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from stackit.config import VotingSettings
from stackit.domain.error import ConcurrencyConflictError, NotAuthorizedError
from stackit.domain.model.vote import Vote
from stackit.domain.repository import VoteRepository
from stackit.domain.value import (
    AnswerId,
    QuestionId,
    TargetType,
    UserId,
    VoteDirection,
    VoteId,
    VoteOutcome,
    VoteResult,
    VoteTally,
)

from .answer_service import AnswerService
from .base import Service
from .question_service import QuestionService


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            question_service: Question domain service
            answer_service: Answer domain service
            voting_settings: Retry limit and self-vote policy
        """
        self.vote_repository = vote_repository
        self.question_service = question_service
        self.answer_service = answer_service
        self.voting_settings = voting_settings

    async def _get_target_author(self, target_type: TargetType, target_id: UUID) -> UserId:
        if target_type == TargetType.QUESTION:
            question = await self.question_service.get_question(QuestionId(target_id))
            return question.author_id
        answer = await self.answer_service.get_answer(AnswerId(target_id))
        return answer.author_id

    async def cast_vote(
        self,
        voter_id: UserId,
        target_type: TargetType,
        target_id: UUID,
        direction: VoteDirection,
    ) -> VoteResult:
        """Cast, toggle off or flip a vote on a question or answer.

        | stored vote | requested | result  |
        |-------------|-----------|---------|
        | none        | UP/DOWN   | created |
        | same        | same      | removed |
        | opposite    | other     | changed |

        A write that loses a race with a concurrent vote by the same user is
        retried from a fresh read.

        Args:
            voter_id: Voting user
            target_type: Question or answer
            target_id: ID of the question or answer
            direction: UP or DOWN

        Returns:
            Outcome, the voter's resulting vote and the target's net count

        Raises:
            NotFoundError: If the target does not exist
            NotAuthorizedError: If self-votes are disabled and voter is the author
            ConcurrencyConflictError: If every attempt lost a race
        """
        with logfire.span(
            "vote_service.cast_vote",
            voter_id=str(voter_id),
            target_type=target_type.value,
            target_id=str(target_id),
            direction=direction.value,
        ):
            author_id = await self._get_target_author(target_type, target_id)
            if not self.voting_settings.allow_self_votes and author_id == voter_id:
                logfire.warn("Self-vote rejected", voter_id=str(voter_id))
                raise NotAuthorizedError(
                    "vote on", target_type.value.lower(), str(target_id), str(voter_id)
                )

            attempts = self.voting_settings.max_attempts
            for attempt in range(1, attempts + 1):
                existing = await self.vote_repository.find_by_user_and_target(
                    voter_id, target_type, target_id
                )
                try:
                    outcome = await self._apply(
                        existing, voter_id, target_type, target_id, direction
                    )
                except IntegrityError:
                    outcome = None

                if outcome is None:
                    logfire.warn(
                        "Vote write lost a race, retrying",
                        voter_id=str(voter_id),
                        target_id=str(target_id),
                        attempt=attempt,
                    )
                    continue

                tally = await self.vote_repository.tally(target_type, target_id)
                user_vote = None if outcome == VoteOutcome.REMOVED else direction
                logfire.info(
                    "Vote cast",
                    outcome=outcome.value,
                    target_id=str(target_id),
                    vote_count=tally.net,
                )
                return VoteResult(outcome=outcome, user_vote=user_vote, vote_count=tally.net)

            logfire.error(
                "Vote retries exhausted",
                voter_id=str(voter_id),
                target_id=str(target_id),
                attempts=attempts,
            )
            raise ConcurrencyConflictError("vote", str(target_id), attempts)

    async def _apply(
        self,
        existing: Optional[Vote],
        voter_id: UserId,
        target_type: TargetType,
        target_id: UUID,
        direction: VoteDirection,
    ) -> Optional[VoteOutcome]:
        """Perform one state transition. None means the stored vote moved underneath us."""
        if existing is None:
            now = datetime.now()
            await self.vote_repository.save(
                Vote(
                    id=VoteId(uuid4()),
                    user_id=voter_id,
                    target_type=target_type,
                    target_id=target_id,
                    direction=direction,
                    created_at=now,
                    updated_at=now,
                )
            )
            return VoteOutcome.CREATED

        if existing.direction == direction:
            if not await self.vote_repository.delete(existing.id):
                return None
            return VoteOutcome.REMOVED

        updated = await self.vote_repository.update_direction(
            existing.id, existing.direction, direction
        )
        if updated is None:
            return None
        return VoteOutcome.CHANGED

    async def get_vote_count(self, target_type: TargetType, target_id: UUID) -> int:
        """Net vote count of one question or answer."""
        tally = await self.vote_repository.tally(target_type, target_id)
        return tally.net

    async def get_vote_counts(
        self, target_type: TargetType, target_ids: Sequence[UUID]
    ) -> dict[UUID, int]:
        """Net vote counts for several items. Items without votes map to 0."""
        if not target_ids:
            return {}
        tallies = await self.vote_repository.tally_many(target_type, target_ids)
        return {tid: tallies.get(tid, VoteTally()).net for tid in target_ids}

    async def get_user_votes(
        self,
        user_id: UserId | None,
        target_type: TargetType,
        target_ids: Sequence[UUID],
    ) -> dict[UUID, VoteDirection]:
        """The viewer's own votes on several items (empty for anonymous viewers)."""
        if user_id is None or not target_ids:
            return {}
        votes = await self.vote_repository.find_by_user_and_targets(
            user_id, target_type, target_ids
        )
        return {vote.target_id: vote.direction for vote in votes}

    async def delete_votes_for_targets(
        self, target_type: TargetType, target_ids: Sequence[UUID]
    ) -> int:
        """Remove every vote on the given items."""
        if not target_ids:
            return 0
        deleted = await self.vote_repository.delete_by_targets(target_type, target_ids)
        logfire.info(
            "Votes deleted", target_type=target_type.value, count=deleted
        )
        return deleted

    async def count_all(self) -> int:
        """Count all votes."""
        return await self.vote_repository.count()

    async def count_by_users(self, user_ids: Sequence[UserId]) -> dict[UserId, int]:
        """Count votes cast per user."""
        if not user_ids:
            return {}
        return await self.vote_repository.count_by_users(user_ids)
