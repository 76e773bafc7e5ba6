"""booktracker - flat-file library catalog lookup, search and add."""

from booktracker.exceptions import (
    ArgumentError,
    BookTrackerError,
    CatalogEntryError,
    CatalogIOError,
    DuplicateISBNError,
    InsufficientArgumentsError,
    InvalidFileNameError,
    InvalidISBNError,
    MalformedEntryError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Base exception
    "BookTrackerError",
    # Arguments
    "ArgumentError",
    "InsufficientArgumentsError",
    "InvalidFileNameError",
    # Catalog entries
    "CatalogEntryError",
    "MalformedEntryError",
    "InvalidISBNError",
    # Search
    "DuplicateISBNError",
    # I/O
    "CatalogIOError",
]
