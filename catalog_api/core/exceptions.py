"""
Error types raised by the catalog service and DAO layers.

Client errors carry the status code and the plain-text message sent back to
the caller. Store errors never expose their detail outside the process.
"""

from fastapi import status


class CatalogError(Exception):
    """Base class for catalog errors."""


class ClientError(CatalogError):
    """Malformed or missing input."""

    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(ClientError):
    """A referenced entity does not exist."""

    def __init__(self, message: str):
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND)


class StoreError(CatalogError):
    """Any failure coming from the database layer."""

    def __init__(self, operation: str, original: Exception):
        super().__init__(f"{operation} failed: {original}")
        self.operation = operation
        self.original = original
