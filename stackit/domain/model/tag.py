"""Tag entity for categorizing questions."""

from datetime import datetime

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity.

    Tags are created on first use when a question references them and are
    shared by all questions using the same (lowercased) name.
    """

    id: TagId
    name: TagName  # Unique, lowercase
    created_at: datetime = Field(default_factory=datetime.now)
