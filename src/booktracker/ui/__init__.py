"""Rich console output for the booktracker CLI."""

from __future__ import annotations

from booktracker.ui.core import BOOKTRACKER_THEME, console, err_console
from booktracker.ui.messages import print_error, print_warning
from booktracker.ui.tables import (
    CLOSING_MESSAGE,
    build_book_table,
    print_book_table,
    print_statistics,
)

__all__ = [
    # Core
    "BOOKTRACKER_THEME",
    "console",
    "err_console",
    # Messages
    "print_error",
    "print_warning",
    # Tables
    "CLOSING_MESSAGE",
    "build_book_table",
    "print_book_table",
    "print_statistics",
]
