"""Persistence-related domain exceptions."""

from .base import DomainException


class DataIntegrityException(DomainException):
    """Raised when the store rejects a write on a uniqueness or integrity constraint."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            message=message,
            code="DATA_INTEGRITY_VIOLATION",
        )
        self.detail = detail
