"""Data models for booktracker."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from booktracker.exceptions import CatalogEntryError, InvalidISBNError, MalformedEntryError

ISBN_LENGTH = 13

# ASCII digits only; str.isdigit() would also accept other scripts
ISBN_PATTERN = re.compile(r"[0-9]{13}")
DIGITS_PATTERN = re.compile(r"[0-9]*")


def validate_isbn(isbn: str) -> str:
    """Check that an ISBN is exactly 13 ASCII digits.

    Only the format is checked, the ISBN-13 check digit is not.

    Raises:
        InvalidISBNError: With reason ``non_numeric`` when any character is
            not a digit, otherwise ``wrong_length``.
    """
    if ISBN_PATTERN.fullmatch(isbn):
        return isbn
    if not DIGITS_PATTERN.fullmatch(isbn):
        raise InvalidISBNError(
            f'ISBN must contain only numeric characters: "{isbn}"',
            isbn=isbn,
            reason=InvalidISBNError.NON_NUMERIC,
        )
    raise InvalidISBNError(
        f'ISBN must be exactly {ISBN_LENGTH} digits (got {len(isbn)}): "{isbn}"',
        isbn=isbn,
        reason=InvalidISBNError.WRONG_LENGTH,
    )


@dataclass(frozen=True)
class BookRecord:
    """
    One catalog line: ``title:author:isbn:copies``.

    Every field is validated when the record is built and the record cannot
    be changed afterwards. Title and author are stored stripped.
    """

    title: str
    author: str
    isbn: str
    copies: int

    def __post_init__(self) -> None:
        """Strip names and validate all four fields."""
        object.__setattr__(self, "title", self.title.strip())
        object.__setattr__(self, "author", self.author.strip())

        if not self.title:
            raise MalformedEntryError("Title is empty", field="title")
        if not self.author:
            raise MalformedEntryError("Author is empty", field="author")
        validate_isbn(self.isbn)
        if isinstance(self.copies, bool) or not isinstance(self.copies, int):
            raise MalformedEntryError(
                f'Copies is not a valid integer: "{self.copies}"', field="copies"
            )
        if self.copies <= 0:
            raise MalformedEntryError(
                f"Copies must be a positive integer greater than zero (got {self.copies})",
                field="copies",
            )

    @property
    def sort_key(self) -> str:
        """Key used to keep the catalog ordered by title."""
        return self.title.lower()

    def __str__(self) -> str:
        return f"{self.title}:{self.author}:{self.isbn}:{self.copies}"


@dataclass
class LoadError:
    """A catalog line that was skipped during loading."""

    line_number: int
    line: str
    error: CatalogEntryError

    @property
    def reason(self) -> str:
        return str(self.error)


class SearchStatus(Enum):
    """Result of an exact ISBN lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"


@dataclass
class SearchOutcome:
    """Outcome of an exact ISBN search (duplicates raise instead)."""

    isbn: str
    record: BookRecord | None = None

    @property
    def status(self) -> SearchStatus:
        return SearchStatus.FOUND if self.record is not None else SearchStatus.NOT_FOUND

    @property
    def found(self) -> bool:
        return self.record is not None


@dataclass
class RunStatistics:
    """Counters reported once at the end of every run."""

    valid_records: int = 0
    search_results: int = 0
    books_added: int = 0
    errors: int = 0

    def as_rows(self) -> list[tuple[str, int]]:
        """Label/value pairs in display order."""
        return [
            ("Valid records processed", self.valid_records),
            ("Search results", self.search_results),
            ("Books added", self.books_added),
            ("Errors encountered", self.errors),
        ]


@dataclass
class Catalog:
    """Ordered in-memory collection of book records for one run."""

    records: list[BookRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[BookRecord]:
        return iter(self.records)

    def append(self, record: BookRecord) -> None:
        self.records.append(record)

    def sort_by_title(self) -> None:
        """Order by lowercase title; list.sort is stable so ties keep order."""
        self.records.sort(key=lambda record: record.sort_key)
