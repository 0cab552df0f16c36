"""Comment entity."""

from datetime import datetime

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import AnswerId, CommentId, UserId
from stackit.domain.value.types import Username


class Comment(DomainModel):
    """Comment attached to an answer."""

    id: CommentId
    answer_id: AnswerId
    author_id: UserId
    author_username: Username  # Denormalized from users
    content: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)
