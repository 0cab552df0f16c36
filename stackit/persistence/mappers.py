"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional, Sequence
from uuid import UUID

from stackit.domain.model import Answer, Comment, Notification, Question, Tag, User, Vote
from stackit.domain.value import (
    AnswerId,
    CommentId,
    NotificationId,
    NotificationType,
    QuestionId,
    RelatedType,
    TagId,
    TagName,
    TargetType,
    UserId,
    UserRole,
    VoteDirection,
    VoteId,
)
from stackit.domain.value.types import Username


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row["email"],
        password_hash=row["password_hash"],
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        role=UserRole(row["role"]),
        reputation=row["reputation"],
        is_banned=row["is_banned"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "email": user.email,
        "password_hash": user.password_hash,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "role": user.role.value,
        "reputation": user.reputation,
        "is_banned": user.is_banned,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_question(
    row: Dict[str, Any], tag_names: Optional[Sequence[str]] = None
) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict
        tag_names: Names of the question's tags (from question_tags join)

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_username=Username(row["author_username"]),
        title=row["title"],
        content=row["content"],
        tag_names=[TagName(name) for name in (tag_names or [])],
        views=row["views"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Tag names are excluded: they live in the question_tags junction table.
    """
    return {
        "id": question.id,
        "author_id": question.author_id,
        "author_username": question.author_username.root,
        "title": question.title,
        "content": question.content,
        "views": question.views,
        "created_at": question.created_at,
        "updated_at": question.updated_at,
    }


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_username=Username(row["author_username"]),
        content=row["content"],
        is_accepted=row["is_accepted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return {
        "id": answer.id,
        "question_id": answer.question_id,
        "author_id": answer.author_id,
        "author_username": answer.author_username.root,
        "content": answer.content,
        "is_accepted": answer.is_accepted,
        "created_at": answer.created_at,
        "updated_at": answer.updated_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        answer_id=AnswerId(_uuid(row["answer_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_username=Username(row["author_username"]),
        content=row["content"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return {
        "id": comment.id,
        "answer_id": comment.answer_id,
        "author_id": comment.author_id,
        "author_username": comment.author_username.root,
        "content": comment.content,
        "created_at": comment.created_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    The target is whichever of question_id/answer_id is set.
    """
    if row["question_id"] is not None:
        target_type, target_id = TargetType.QUESTION, row["question_id"]
    else:
        target_type, target_id = TargetType.ANSWER, row["answer_id"]

    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        target_type=target_type,
        target_id=_uuid(target_id),
        direction=VoteDirection(row["direction"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    is_question = vote.target_type == TargetType.QUESTION
    return {
        "id": vote.id,
        "user_id": vote.user_id,
        "question_id": vote.target_id if is_question else None,
        "answer_id": None if is_question else vote.target_id,
        "direction": vote.direction.value,
        "created_at": vote.created_at,
        "updated_at": vote.updated_at,
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    related_id = row.get("related_id")
    related_type = row.get("related_type")
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        type=NotificationType(row["type"]),
        message=row["message"],
        related_id=_uuid(related_id) if related_id else None,
        related_type=RelatedType(related_type) if related_type else None,
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    return {
        "id": notification.id,
        "user_id": notification.user_id,
        "type": notification.type.value,
        "message": notification.message,
        "related_id": notification.related_id,
        "related_type": (
            notification.related_type.value if notification.related_type else None
        ),
        "is_read": notification.is_read,
        "created_at": notification.created_at,
    }


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        created_at=row["created_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return {
        "id": tag.id,
        "name": tag.name.root,
        "created_at": tag.created_at,
    }
