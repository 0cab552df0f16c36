"""User aggregate root.

Users register with email and password, ask and answer questions and are
moderated by administrators.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import UserId, UserRole
from stackit.domain.value.types import Username


class User(DomainModel):
    """User aggregate root.

    Reputation is displayed on profiles but is not derived from votes or
    accepted answers.
    """

    id: UserId
    username: Username
    email: str = Field(min_length=3, max_length=255)
    password_hash: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: UserRole = UserRole.USER
    reputation: int = 0
    is_banned: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        """Whether the user has the ADMIN role."""
        return self.role == UserRole.ADMIN
