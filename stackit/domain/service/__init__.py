"""Domain services."""

from .answer_service import AnswerService
from .auth_service import AuthService
from .base import Service, ensure_author_or_admin
from .comment_service import CommentService
from .content_policy import ContentPolicy
from .jwt_service import JWTService
from .notification_resolver import NotificationResolver
from .notification_service import NotificationService
from .question_service import QuestionService
from .tag_service import TagService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "AnswerService",
    "AuthService",
    "CommentService",
    "ContentPolicy",
    "JWTService",
    "NotificationResolver",
    "NotificationService",
    "QuestionService",
    "Service",
    "TagService",
    "UserService",
    "VoteService",
    "ensure_author_or_admin",
]
