"""Operation classification and routing.

The single operation argument is classified by its shape, most specific
rule first:

1. exactly 13 ASCII digits      -> ISBN search
2. exactly 4 colon-split fields -> add book
3. anything else                -> keyword search (even empty/blank)
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from booktracker.codec import has_entry_shape
from booktracker.exceptions import CatalogEntryError, CatalogIOError, DuplicateISBNError
from booktracker.models import ISBN_PATTERN, Catalog
from booktracker.persist import add_book
from booktracker.search import search_by_isbn, search_by_keyword
from booktracker.ui.tables import print_book_table

if TYPE_CHECKING:
    from booktracker.context import RunContext

logger = logging.getLogger(__name__)


class OperationKind(str, Enum):
    """What the operation argument asks for."""

    ISBN_SEARCH = "isbn_search"
    ADD_BOOK = "add_book"
    KEYWORD_SEARCH = "keyword_search"


def classify_operation(operation: str) -> OperationKind:
    """Classify the operation argument by pattern alone."""
    if ISBN_PATTERN.fullmatch(operation):
        return OperationKind.ISBN_SEARCH
    if has_entry_shape(operation):
        return OperationKind.ADD_BOOK
    return OperationKind.KEYWORD_SEARCH


def run_isbn_search(catalog: Catalog, isbn: str, ctx: RunContext) -> None:
    try:
        outcome = search_by_isbn(catalog, isbn, ctx)
    except DuplicateISBNError as e:
        ctx.report_error(f'DUPLICATE ISBN: "{isbn}"', e, f"Error: {e.kind}: {e}")
        return

    if outcome.record is not None:
        print_book_table([outcome.record])
    else:
        print_book_table([], empty_message=f"No book found with ISBN: {isbn}")


def run_add_book(catalog: Catalog, entry: str, path: Path, ctx: RunContext) -> None:
    try:
        record = add_book(catalog, entry, path, ctx)
    except CatalogEntryError as e:
        ctx.report_error(f'INVALID INPUT: "{entry}"', e, f"Error: {e.kind}: {e}")
        return
    except CatalogIOError as e:
        ctx.report_error(f'IO ERROR: "{e}"', e, f"File I/O Error: {e}")
        return

    print_book_table([record])


def run_keyword_search(catalog: Catalog, keyword: str, ctx: RunContext) -> None:
    matches = search_by_keyword(catalog, keyword, ctx)
    print_book_table(
        matches,
        empty_message=f'No books found matching keyword: "{keyword}"',
    )


def dispatch_operation(
    catalog: Catalog,
    operation: str,
    catalog_path: Path,
    ctx: RunContext,
) -> OperationKind:
    """Run exactly one operation against a fully loaded catalog.

    Expected failures (duplicate ISBN, invalid entry, write failure) are
    reported through ``ctx`` and do not propagate.

    Returns:
        The kind of operation that ran
    """
    kind = classify_operation(operation)
    logger.debug("Operation %r classified as %s", operation, kind.value)

    if kind is OperationKind.ISBN_SEARCH:
        run_isbn_search(catalog, operation, ctx)
    elif kind is OperationKind.ADD_BOOK:
        run_add_book(catalog, operation, catalog_path, ctx)
    else:
        run_keyword_search(catalog, operation, ctx)

    return kind
