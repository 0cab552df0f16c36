"""Domain value objects for StackIt.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from stackit.domain.value.common import RootValueObject, ValueObject


class UserRole(str, Enum):
    """Role of a user account."""

    USER = "USER"
    MODERATOR = "MODERATOR"
    ADMIN = "ADMIN"


class VoteDirection(str, Enum):
    """Direction of a vote."""

    UP = "UP"
    DOWN = "DOWN"

    @property
    def weight(self) -> int:
        """Contribution of one vote in this direction to the net count."""
        return 1 if self is VoteDirection.UP else -1


class TargetType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "QUESTION"
    ANSWER = "ANSWER"


class NotificationType(str, Enum):
    """Kind of event a notification reports."""

    ANSWER = "ANSWER"
    COMMENT = "COMMENT"
    VOTE = "VOTE"
    MENTION = "MENTION"


class RelatedType(str, Enum):
    """Type of entity a notification links back to."""

    QUESTION = "QUESTION"
    ANSWER = "ANSWER"


class VoteOutcome(str, Enum):
    """What a cast vote did to the stored vote."""

    CREATED = "created"
    REMOVED = "removed"
    CHANGED = "changed"


class Username(RootValueObject[str]):
    """Public username.

    3-20 word characters (letters, digits, underscore), so every username
    can be referenced with an @mention.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.fullmatch(r"\w{3,20}", v):
            raise ValueError(
                "Username must be 3-20 characters of letters, digits or underscores"
            )
        return v


class TagName(RootValueObject[str]):
    """Tag name for categorizing questions.

    Tag names are case-normalized to lowercase. 1-30 characters of
    letters, digits, hyphens, dots, plus and hash signs.
    Examples: 'python', 'c++', 'c#', 'node.js'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Normalize and validate tag name format."""
        v = v.strip().lower()
        if not re.fullmatch(r"[\w.+#-]{1,30}", v):
            raise ValueError(
                "Tag name must be 1-30 characters of letters, digits, '-', '.', '+' or '#'"
            )
        return v


class VoteResult(ValueObject):
    """Result of casting a vote.

    user_vote is the caller's vote after the operation (None once removed);
    vote_count is the net count derived from all votes on the target.
    """

    outcome: VoteOutcome
    user_vote: VoteDirection | None
    vote_count: int


class VoteTally(ValueObject):
    """Up and down vote counts for one target."""

    up: int = 0
    down: int = 0

    @property
    def net(self) -> int:
        """Net vote count (up minus down)."""
        return self.up - self.down
