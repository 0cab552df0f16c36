"""Answer entity."""

from datetime import datetime

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import AnswerId, QuestionId, UserId
from stackit.domain.value.types import Username


class Answer(DomainModel):
    """Answer to a question.

    Business rules:
    - At most one answer per question is accepted
    - Only the question's author may accept an answer
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    author_username: Username  # Denormalized from users
    content: str = Field(min_length=1)
    is_accepted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
