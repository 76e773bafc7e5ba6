"""Append-only error log written next to the catalog.

Each entry is one line::

    [2026-10-18T14:03:11] INVALID LINE: "Dune:Herbert:12:3" - InvalidISBNError: ...

The file is opened, appended and closed for every entry. Characters that
cannot be encoded are written as backslash escapes. A failure to write is
reported on stderr and otherwise ignored.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from booktracker.ui.messages import print_error

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


def error_kind(error: BaseException) -> str:
    """Name shown for an error: its class name."""
    return type(error).__name__


def format_entry(context: str, error: BaseException, when: datetime | None = None) -> str:
    """Format one error-log line (without trailing newline)."""
    timestamp = (when or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return f"[{timestamp}] {context} - {error_kind(error)}: {error}"


class ErrorLog:
    """Append-only error log sink."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def __repr__(self) -> str:
        return f"ErrorLog({str(self.path)!r})"

    def record(self, context: str, error: BaseException) -> bool:
        """Append one entry.

        Args:
            context: Short description, e.g. ``INVALID LINE: "..."``
            error: The error being reported

        Returns:
            True if the entry was written, False if the log was not writable
        """
        entry = format_entry(context, error)
        try:
            with self.path.open("a", encoding="utf-8", errors="backslashreplace") as handle:
                handle.write(entry + "\n")
        except OSError as e:
            logger.debug("Error log %s not writable", self.path, exc_info=True)
            print_error(f"Could not write to error log: {e}")
            return False
        return True
