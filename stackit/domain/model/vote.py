"""Vote entity.

Votes are up or down votes on a question or an answer. Each user holds at
most one vote per target.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import TargetType, UserId, VoteDirection, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per target (enforced by database unique constraint)
    - Target is exactly one question or one answer
    - Casting the same direction again removes the vote, the opposite
      direction flips it
    """

    id: VoteId
    user_id: UserId
    target_type: TargetType
    target_id: UUID  # QuestionId or AnswerId (both are UUIDs)
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
