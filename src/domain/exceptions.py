"""Domain exceptions shared by every layer.

Repositories and use cases raise these; the controller layer translates them
into HTTP status codes. Nothing below the controllers knows about HTTP.
"""


class DomainError(Exception):
    """Base class for all domain failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationFailedError(DomainError, ValueError):
    """Input violates a field constraint (length, range, regex, window)."""


class NotFoundError(DomainError):
    """Entity is absent or soft-deleted."""


class ConflictError(DomainError):
    """Uniqueness or one-active-discount rule violated."""


class UnprocessableStateError(DomainError):
    """Operation is well formed but the current state forbids it."""


class StorageError(DomainError):
    """Unexpected persistence failure."""
