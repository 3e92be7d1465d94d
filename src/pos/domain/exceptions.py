"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Adapters behind the domain ports raise StorageError / UploadError so callers
never see third-party exception types.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InsufficientStockError(ValidationError):
    """A product does not have enough stock for the requested quantity."""

    def __init__(self, product_name: str, available: int, requested: int) -> None:
        self.product_name = product_name
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient stock for {product_name} "
            f"(available: {available}, requested: {requested})"
        )


class StorageError(DomainException):
    """The persistence backend failed to read or write."""


class UploadError(DomainException):
    """The image service failed to upload or delete an image."""
