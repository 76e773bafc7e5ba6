"""Table formatting components for booktracker UI.

These components render catalog records and the closing run statistics.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich import box
from rich.markup import escape
from rich.table import Table

from booktracker.models import BookRecord, RunStatistics
from booktracker.ui.core import console

TITLE_WIDTH = 30
AUTHOR_WIDTH = 20
ISBN_WIDTH = 15
COPIES_WIDTH = 6

CLOSING_MESSAGE = "Thank you for using the Library Book Tracker."


def build_book_table(records: Iterable[BookRecord]) -> Table:
    """Build the fixed-width Title/Author/ISBN/Copies table.

    Args:
        records: Records to show, in display order

    Returns:
        Rich Table ready for printing
    """
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold",
        show_edge=False,
        pad_edge=False,
    )
    table.add_column("Title", style="title", width=TITLE_WIDTH, overflow="fold")
    table.add_column("Author", style="author", width=AUTHOR_WIDTH, overflow="fold")
    table.add_column("ISBN", style="isbn", width=ISBN_WIDTH, no_wrap=True)
    table.add_column("Copies", style="copies", width=COPIES_WIDTH, justify="right")

    for record in records:
        table.add_row(
            escape(record.title),
            escape(record.author),
            record.isbn,
            str(record.copies),
        )
    return table


def print_book_table(records: Iterable[BookRecord], empty_message: str | None = None) -> None:
    """Print the book table header and rows.

    The header is always printed; ``empty_message`` follows it when there
    are no rows.

    Example:
        >>> print_book_table([record])
         Title                          Author               ISBN            Copies
        ────────────────────────────────────────────────────────────────────────────
         New Book                       Jane Doe             1234567890123        5
    """
    rows = list(records)
    console.print(build_book_table(rows))
    if not rows and empty_message:
        console.print(escape(empty_message), soft_wrap=True)


def print_statistics(stats: RunStatistics) -> None:
    """Print the closing statistics block and thank-you line."""
    console.print()
    console.print("--- Statistics ---")
    for label, value in stats.as_rows():
        console.print(f"{label:<24}: {value}")
    console.print(CLOSING_MESSAGE)
