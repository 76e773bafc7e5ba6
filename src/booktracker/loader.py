"""Catalog loading.

Reads a catalog file line by line, parses each non-blank line, and keeps
going past bad lines. Each skipped line is counted and written to the error
log; only an unreadable file stops the load.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from booktracker.codec import parse_entry
from booktracker.exceptions import CatalogEntryError, CatalogIOError
from booktracker.models import Catalog, LoadError

if TYPE_CHECKING:
    from booktracker.context import RunContext

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Records loaded from a catalog file plus the lines that were skipped."""

    catalog: Catalog = field(default_factory=Catalog)
    errors: list[LoadError] = field(default_factory=list)

    @property
    def valid_count(self) -> int:
        return len(self.catalog)


def load_catalog(path: Path, ctx: RunContext | None = None) -> LoadResult:
    """Load every valid record from a catalog file.

    Bytes that are not valid UTF-8 are replaced with U+FFFD. Lines are
    stripped; blank lines are ignored. A line that fails to parse becomes a
    LoadError and, with a context, is reported (counted, logged, shown on
    stderr). Valid records increment ``valid_records``.

    Args:
        path: Catalog file
        ctx: Run context receiving statistics and error reports

    Returns:
        LoadResult with the catalog in file order

    Raises:
        CatalogIOError: If the file cannot be read
    """
    result = LoadResult()

    try:
        with path.open("r", encoding="utf-8", errors="replace") as handle:
            for line_number, raw_line in enumerate(handle, 1):
                line = raw_line.strip()
                if not line:
                    continue
                try:
                    record = parse_entry(line)
                except CatalogEntryError as e:
                    result.errors.append(LoadError(line_number, line, e))
                    if ctx is not None:
                        ctx.report_error(
                            f'INVALID LINE: "{line}"',
                            e,
                            f"Warning - skipping invalid line: {e.kind}: {e}",
                            warning=True,
                        )
                    continue
                result.catalog.append(record)
                if ctx is not None:
                    ctx.stats.valid_records += 1
    except OSError as e:
        raise CatalogIOError(
            f"Cannot read catalog {path}: {e.strerror or e}",
            path=path,
            operation="read",
        ) from e

    logger.debug(
        "Loaded %d record(s) from %s, skipped %d line(s)",
        result.valid_count,
        path,
        len(result.errors),
    )
    return result
