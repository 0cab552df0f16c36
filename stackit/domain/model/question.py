"""Question aggregate root."""

from datetime import datetime

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import QuestionId, TagName, UserId
from stackit.domain.value.types import Username


class Question(DomainModel):
    """Question aggregate root.

    Content length rules are configurable and enforced by QuestionService,
    not by the model.
    """

    id: QuestionId
    author_id: UserId
    author_username: Username  # Denormalized from users
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    tag_names: list[TagName] = Field(default_factory=list)
    views: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
