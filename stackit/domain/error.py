"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Content failed a length or shape rule.

    Carries the offending field so the API can report which rule failed.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class InvalidCredentialsError(DomainError):
    """Raised when a login attempt does not match any account."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts an action they are not allowed to perform."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConcurrencyConflictError(DomainError):
    """Raised when a read-modify-write keeps losing races with other writers."""

    def __init__(self, resource: str, resource_id: str, attempts: int):
        self.resource = resource
        self.resource_id = resource_id
        self.attempts = attempts
        super().__init__(
            f"Concurrent update conflict on {resource} {resource_id} "
            f"after {attempts} attempts"
        )


class NotificationDeliveryError(DomainError):
    """A notification could not be stored.

    Never escalated to callers: the notification sink logs and absorbs it.
    """

    def __init__(self, user_id: str, cause: Exception):
        self.user_id = user_id
        self.cause = cause
        super().__init__(f"Failed to notify user {user_id}: {cause}")
