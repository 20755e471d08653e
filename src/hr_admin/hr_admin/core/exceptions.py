class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class StoreError(DomainError):
    """Raised when the document store fails to complete an operation."""


class NotFoundError(StoreError):
    """Raised when an update/delete targets an identifier the store no longer has."""
