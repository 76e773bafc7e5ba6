"""Diagnostic message helpers for booktracker UI.

All diagnostics go to stderr so stdout carries only tables and statistics.
Messages are escaped because catalog text may contain rich markup brackets.
"""

from __future__ import annotations

from rich.markup import escape

from booktracker.ui.core import err_console


def print_error(message: str) -> None:
    """Print an error diagnostic line.

    Example:
        >>> print_error("Error: InvalidISBNError: ISBN must be exactly 13 digits")
        Error: InvalidISBNError: ISBN must be exactly 13 digits
    """
    err_console.print(f"[error]{escape(message)}[/]", soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a warning diagnostic line.

    Example:
        >>> print_warning("Warning - skipping invalid line: ...")
    """
    err_console.print(f"[warning]{escape(message)}[/]", soft_wrap=True)
