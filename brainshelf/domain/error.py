"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Carries an optional per-field error map so the API can report which
    fields failed and why.
    """

    def __init__(self, message: str, errors: dict[str, list[str]] | None = None):
        self.errors = errors or {}
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a write collides with existing state (e.g. duplicate tag name)."""

    def __init__(self, message: str):
        super().__init__(message)


class InvalidOperationError(DomainError):
    """Raised when an operation is structurally nonsensical (e.g. self-merge)."""

    def __init__(self, message: str):
        super().__init__(message)
