"""Domain value objects for StackIt."""

from stackit.domain.value.identifiers import (
    AnswerId,
    CommentId,
    NotificationId,
    QuestionId,
    TagId,
    UserId,
    VoteId,
)
from stackit.domain.value.types import (
    NotificationType,
    RelatedType,
    TagName,
    TargetType,
    Username,
    UserRole,
    VoteDirection,
    VoteOutcome,
    VoteResult,
    VoteTally,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "CommentId",
    "VoteId",
    "NotificationId",
    "TagId",
    # Types
    "NotificationType",
    "RelatedType",
    "TagName",
    "TargetType",
    "Username",
    "UserRole",
    "VoteDirection",
    "VoteOutcome",
    "VoteResult",
    "VoteTally",
]
