"""Catalog search: exact ISBN lookup and title keyword matching."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from booktracker.exceptions import DuplicateISBNError
from booktracker.models import BookRecord, Catalog, SearchOutcome

if TYPE_CHECKING:
    from booktracker.context import RunContext

logger = logging.getLogger(__name__)


def search_by_isbn(catalog: Catalog, isbn: str, ctx: RunContext | None = None) -> SearchOutcome:
    """Find the single record whose ISBN equals ``isbn``.

    ``search_results`` is set to 1 when found and 0 when not found. It is
    left untouched when duplicates raise.

    Raises:
        DuplicateISBNError: If two or more records share the ISBN
    """
    matches = [record for record in catalog if record.isbn == isbn]

    if len(matches) > 1:
        raise DuplicateISBNError(
            f"Multiple books ({len(matches)}) share ISBN: {isbn}",
            isbn=isbn,
            count=len(matches),
        )

    outcome = SearchOutcome(isbn=isbn, record=matches[0] if matches else None)
    if ctx is not None:
        ctx.stats.search_results = 1 if outcome.found else 0
    logger.debug("ISBN search for %s: %s", isbn, outcome.status.value)
    return outcome


def search_by_keyword(
    catalog: Catalog, keyword: str, ctx: RunContext | None = None
) -> list[BookRecord]:
    """Case-insensitive substring search over titles, in catalog order.

    An empty keyword matches every record.
    """
    needle = keyword.lower()
    matches = [record for record in catalog if needle in record.title.lower()]
    if ctx is not None:
        ctx.stats.search_results = len(matches)
    logger.debug("Keyword search for %r matched %d record(s)", keyword, len(matches))
    return matches
