"""Base service class for domain services."""

from stackit.domain.error import NotAuthorizedError
from stackit.domain.model import User
from stackit.domain.value import UserId


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


def ensure_author_or_admin(
    actor: User, author_id: UserId, action: str, resource: str, resource_id: str
) -> None:
    """Allow an action only to the content's author or an administrator.

    Raises:
        NotAuthorizedError: If actor is neither the author nor an admin
    """
    if actor.id != author_id and not actor.is_admin:
        raise NotAuthorizedError(action, resource, resource_id, str(actor.id))
