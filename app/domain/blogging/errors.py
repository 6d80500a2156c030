"""
Domain-specific errors for the blogging bounded context.

All errors raised from the domain and application layers must be defined
here. These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class BloggingDomainError(Exception):
    """Base error for all blogging domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(BloggingDomainError):
    """Raised when required input fields are missing or malformed."""

    def __init__(self, message: str, fields: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.fields = fields


class NotFoundError(BloggingDomainError):
    """Raised when no entity exists for the requested identifier."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(BloggingDomainError):
    """Raised when a write violates a uniqueness constraint of the store."""

    def __init__(self, entity: str, field: str | None = None) -> None:
        if field:
            message = f"{entity} with this {field} already exists"
        else:
            message = f"{entity} already exists"
        super().__init__(message)
        self.entity = entity
        self.field = field


class StoreError(BloggingDomainError):
    """Raised when the underlying document store fails."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Store operation failed: {reason}")
        self.reason = reason
