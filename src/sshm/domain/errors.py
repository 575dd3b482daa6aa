"""Error taxonomy surfaced by the host directory.

Callers switch on ``DirectoryError.kind`` instead of inspecting messages.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


class DirectoryError(Exception):
    """Base class for errors raised by the host directory."""

    kind: ClassVar[ErrorKind]


class ValidationError(DirectoryError):
    """Raised when required fields are missing or invalid."""

    kind = ErrorKind.VALIDATION


class ConflictError(DirectoryError):
    """Raised when a unique host name is already taken."""

    kind = ErrorKind.CONFLICT

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Host with name '{name}' already exists")


class NotFoundError(DirectoryError):
    """Raised when a host id or name does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, *, host_id: int | None = None, name: str | None = None) -> None:
        self.host_id = host_id
        self.name = name
        if name is not None:
            message = f"Host with name '{name}' not found"
        else:
            message = f"Host with id {host_id} not found"
        super().__init__(message)


class StorageError(DirectoryError):
    """Raised when the underlying database operation fails."""

    kind = ErrorKind.STORAGE
