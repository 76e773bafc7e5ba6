"""Adding a book and rewriting the catalog file.

The catalog file is rewritten in place: opened for writing (truncating it)
and filled from the sorted in-memory catalog. There is no temporary file or
rename, so a crash during the write can leave a truncated catalog.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from booktracker.codec import parse_entry, serialize_record
from booktracker.exceptions import CatalogIOError
from booktracker.models import BookRecord, Catalog

if TYPE_CHECKING:
    from booktracker.context import RunContext

logger = logging.getLogger(__name__)


def write_catalog(catalog: Catalog, path: Path) -> None:
    """Overwrite ``path`` with one line per record, in catalog order.

    Raises:
        CatalogIOError: If the file cannot be written
    """
    try:
        with path.open("w", encoding="utf-8") as handle:
            for record in catalog:
                handle.write(serialize_record(record) + "\n")
    except OSError as e:
        raise CatalogIOError(
            f"Cannot write catalog {path}: {e.strerror or e}",
            path=path,
            operation="write",
        ) from e
    except UnicodeEncodeError as e:
        raise CatalogIOError(
            f"Cannot write catalog {path}: record is not encodable as UTF-8 ({e.reason})",
            path=path,
            operation="write",
        ) from e
    logger.debug("Wrote %d record(s) to %s", len(catalog), path)


def add_book(
    catalog: Catalog,
    raw_entry: str,
    path: Path,
    ctx: RunContext | None = None,
) -> BookRecord:
    """Parse ``raw_entry``, add it to the catalog, re-sort and persist.

    The catalog is only changed once the entry parses. After that the record
    stays in memory even if the write fails.

    Args:
        catalog: In-memory catalog (mutated)
        raw_entry: ``title:author:isbn:copies`` text
        path: Catalog file to rewrite
        ctx: Run context; ``books_added`` becomes 1 after a successful write

    Returns:
        The new record

    Raises:
        MalformedEntryError: Entry structure, names or copies invalid
        InvalidISBNError: Entry ISBN invalid
        CatalogIOError: Catalog file could not be rewritten
    """
    record = parse_entry(raw_entry)

    catalog.append(record)
    catalog.sort_by_title()
    write_catalog(catalog, path)

    if ctx is not None:
        ctx.stats.books_added = 1
    logger.info("Added %r (%s) to %s", record.title, record.isbn, path)
    return record
