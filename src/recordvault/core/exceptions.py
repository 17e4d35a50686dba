"""Domain exceptions raised by the stores and services.

The HTTP layer maps these to status codes in ``main.py``; nothing below
the routers knows about HTTP.
"""

import functools
import logging
from typing import Any, Awaitable, Callable, TypeVar

from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


class RecordVaultError(Exception):
    """Base exception for RecordVault errors."""
    pass


class NotFoundError(RecordVaultError):
    """Raised when a record, token or per-user token does not exist."""

    def __init__(self, entity: str, key: Any = None):
        self.entity = entity
        self.key = key
        if key is None:
            super().__init__(f"{entity} not found")
        else:
            super().__init__(f"{entity} {key!r} not found")


class ConflictError(RecordVaultError):
    """Raised when a uniqueness rule is violated and cannot be resolved."""
    pass


class UnauthorizedError(RecordVaultError):
    """Raised when the acting user may not touch the resource."""
    pass


class MissingCredentialError(UnauthorizedError):
    """No bearer credential on the request."""
    pass


class ExpiredCredentialError(UnauthorizedError):
    """Bearer credential past its expiry."""
    pass


class InvalidCredentialError(UnauthorizedError):
    """Bearer credential malformed or signed with another key."""
    pass


class StorageError(RecordVaultError):
    """Raised when the database fails underneath a store operation."""

    def __init__(self, operation: str, entity: str):
        self.operation = operation
        self.entity = entity
        super().__init__(f"Storage failure in {operation} ({entity})")


def storage_errors(operation: str, entity: str) -> Callable[[F], F]:
    """Wrap SQLAlchemy failures of an async store method into ``StorageError``.

    Domain errors pass through untouched, so a method is only ever wrapped once.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except SQLAlchemyError as e:
                logger.error(f"{operation} failed on {entity}: {e}")
                raise StorageError(operation, entity) from e

        return wrapper  # type: ignore[return-value]

    return decorator
