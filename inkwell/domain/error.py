"""Domain layer errors.

Every error raised to a caller of the API is one of these. The interface
layer maps each class to an HTTP status.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed or empty input; the caller can correct it."""

    pass


class NotFoundError(DomainError):
    """Raised when a referenced resource does not exist."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when the caller lacks rights on a resource."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class StorageError(DomainError):
    """Backing store failure. Not correctable by the caller."""

    pass
