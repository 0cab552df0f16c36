"""Repository interfaces for the StackIt domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from stackit.domain.repository.answer import AnswerRepository
from stackit.domain.repository.comment import CommentRepository
from stackit.domain.repository.notification import NotificationRepository
from stackit.domain.repository.question import QuestionQuery, QuestionRepository
from stackit.domain.repository.tag import TagRepository, TagUsage
from stackit.domain.repository.user import UserQuery, UserRepository
from stackit.domain.repository.vote import VoteRepository

__all__ = [
    "UserQuery",
    "UserRepository",
    "QuestionQuery",
    "QuestionRepository",
    "AnswerRepository",
    "CommentRepository",
    "VoteRepository",
    "NotificationRepository",
    "TagRepository",
    "TagUsage",
]
