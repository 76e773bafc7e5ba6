"""Catalog line codec.

Parses ``title:author:isbn:copies`` lines into ``BookRecord`` objects and
formats them back. Colons are not escaped, so a title or author containing
``:`` cannot be stored.
"""

from __future__ import annotations

import re

from booktracker.exceptions import CatalogEntryError, MalformedEntryError
from booktracker.models import BookRecord, validate_isbn

FIELD_SEPARATOR = ":"
FIELD_COUNT = 4
ENCODING = "utf-8"

# Optional sign then ASCII digits; int() alone also takes underscores and other scripts
COPIES_PATTERN = re.compile(r"[+-]?[0-9]+")


def split_fields(line: str) -> list[str]:
    """Split on every colon, keeping empty trailing fields."""
    return line.split(FIELD_SEPARATOR)


def has_entry_shape(text: str) -> bool:
    """Return True if ``text`` splits into exactly four fields."""
    return len(split_fields(text)) == FIELD_COUNT


def _parse_copies(text: str, entry: str) -> int:
    if not COPIES_PATTERN.fullmatch(text):
        raise MalformedEntryError(
            f'Copies is not a valid integer: "{text}"', field="copies", entry=entry
        )
    return int(text)


def _attach_entry(error: CatalogEntryError, entry: str) -> None:
    error.entry = entry
    error.details["entry"] = entry


def parse_entry(line: str) -> BookRecord:
    """Parse one catalog line into a BookRecord.

    Fields are stripped and checked in order: field count, encodability,
    title, author, ISBN, copies. The first failure is raised.

    Args:
        line: Raw ``title:author:isbn:copies`` text

    Returns:
        The validated record

    Raises:
        MalformedEntryError: Wrong field count, text that cannot be written as
            UTF-8, empty title/author, or copies that are not a positive integer
        InvalidISBNError: ISBN with non-digit characters or not 13 digits
    """
    fields = split_fields(line)
    if len(fields) != FIELD_COUNT:
        raise MalformedEntryError(
            f"Entry must have exactly {FIELD_COUNT} fields separated by "
            f"'{FIELD_SEPARATOR}' (found {len(fields)})",
            entry=line,
        )

    try:
        line.encode(ENCODING)
    except UnicodeEncodeError as e:
        raise MalformedEntryError(
            f"Entry contains characters that cannot be stored as {ENCODING.upper()} "
            f"(position {e.start})",
            entry=line,
        ) from e

    title, author, isbn, copies_text = (value.strip() for value in fields)

    if not title:
        raise MalformedEntryError("Title is empty", field="title", entry=line)
    if not author:
        raise MalformedEntryError("Author is empty", field="author", entry=line)

    try:
        validate_isbn(isbn)
        copies = _parse_copies(copies_text, line)
        return BookRecord(title=title, author=author, isbn=isbn, copies=copies)
    except CatalogEntryError as e:
        _attach_entry(e, line)
        raise


def serialize_record(record: BookRecord) -> str:
    """Format a record as a catalog line (no trailing newline)."""
    return FIELD_SEPARATOR.join(
        [record.title, record.author, record.isbn, str(record.copies)]
    )
