"""
Booktracker exception hierarchy.

Provides typed exceptions so each failure kind can be reported by name.

Exception Hierarchy:
    BookTrackerError (base)
    ├── ArgumentError - Command-line argument problems
    │   ├── InsufficientArgumentsError - Fewer than two arguments
    │   └── InvalidFileNameError - Catalog name without the .txt suffix
    ├── CatalogEntryError - A catalog line or new entry failed validation
    │   ├── MalformedEntryError - Field count, empty name, bad copies
    │   └── InvalidISBNError - Non-numeric or wrong-length ISBN
    ├── DuplicateISBNError - Exact ISBN search matched several records
    └── CatalogIOError - Catalog file could not be read/written/created
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class BookTrackerError(Exception):
    """Base exception for all booktracker errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """
        Initialize booktracker exception.

        Args:
            message: Human-readable error message
            details: Optional structured error details for logging/debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    @property
    def kind(self) -> str:
        """Error kind as shown to users and written to the error log."""
        return type(self).__name__


# =============================================================================
# Argument Errors
# =============================================================================


class ArgumentError(BookTrackerError):
    """Command-line argument error."""

    pass


class InsufficientArgumentsError(ArgumentError):
    """Fewer arguments than the catalog file and operation."""

    def __init__(
        self,
        message: str,
        *,
        provided: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["provided"] = list(provided or [])
        super().__init__(message, details=details)
        self.provided = list(provided or [])


class InvalidFileNameError(ArgumentError):
    """Catalog file name does not carry the expected suffix."""

    def __init__(
        self,
        message: str,
        *,
        file_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if file_name is not None:
            details["file_name"] = file_name
        super().__init__(message, details=details)
        self.file_name = file_name


# =============================================================================
# Catalog Entry Errors
# =============================================================================


class CatalogEntryError(BookTrackerError):
    """A catalog entry failed validation."""

    def __init__(
        self,
        message: str,
        *,
        entry: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if entry is not None:
            details["entry"] = entry
        super().__init__(message, details=details)
        self.entry = entry


class MalformedEntryError(CatalogEntryError):
    """Wrong field count, empty title/author, or invalid copies."""

    def __init__(self, message: str, *, field: str | None = None, **kwargs: Any) -> None:
        details = kwargs.get("details") or {}
        if field:
            details["field"] = field
        kwargs["details"] = details
        super().__init__(message, **kwargs)
        self.field = field


class InvalidISBNError(CatalogEntryError):
    """ISBN is not exactly 13 ASCII digits."""

    NON_NUMERIC = "non_numeric"
    WRONG_LENGTH = "wrong_length"

    def __init__(
        self,
        message: str,
        *,
        isbn: str | None = None,
        reason: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.get("details") or {}
        if isbn is not None:
            details["isbn"] = isbn
        if reason:
            details["reason"] = reason
        kwargs["details"] = details
        super().__init__(message, **kwargs)
        self.isbn = isbn
        self.reason = reason


# =============================================================================
# Search Errors
# =============================================================================


class DuplicateISBNError(BookTrackerError):
    """An exact ISBN search matched more than one record."""

    def __init__(
        self,
        message: str,
        *,
        isbn: str | None = None,
        count: int = 0,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if isbn is not None:
            details["isbn"] = isbn
        details["count"] = count
        super().__init__(message, details=details)
        self.isbn = isbn
        self.count = count


# =============================================================================
# I/O Errors
# =============================================================================


class CatalogIOError(BookTrackerError):
    """Catalog file could not be read, written, or created."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if path:
            details["path"] = str(path)
        if operation:
            details["operation"] = operation
        super().__init__(message, details=details)
        self.path = path
        self.operation = operation
