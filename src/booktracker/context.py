"""Runtime context shared by every stage of a run.

The RunContext replaces process-wide counters and log paths:
- Statistics accumulated by the loader, search and add stages
- The error log every reported failure is appended to
- The catalog path once it has been validated
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from booktracker.error_log import ErrorLog
from booktracker.models import RunStatistics
from booktracker.paths import DEFAULT_ERROR_LOG_NAME, error_log_path
from booktracker.ui.messages import print_error, print_warning

logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    """Typed context passed explicitly to each stage of one run.

    Example:
        ctx = RunContext.for_catalog(Path("data/books.txt"))
        result = load_catalog(ctx.catalog_path, ctx)
        ...
        print_statistics(ctx.stats)
    """

    error_log: ErrorLog
    catalog_path: Path | None = None
    stats: RunStatistics = field(default_factory=RunStatistics)

    @classmethod
    def for_catalog(
        cls,
        catalog_path: Path | None,
        error_log_name: str = DEFAULT_ERROR_LOG_NAME,
    ) -> RunContext:
        """Create a context whose error log sits next to the catalog."""
        return cls(
            error_log=ErrorLog(error_log_path(catalog_path, error_log_name)),
            catalog_path=catalog_path,
        )

    def report_error(
        self,
        context: str,
        error: BaseException,
        diagnostic: str,
        *,
        warning: bool = False,
    ) -> None:
        """Count, log and display one failure.

        Args:
            context: Error-log context, e.g. ``IO ERROR: "..."``
            error: The failure being reported
            diagnostic: Line printed on stderr
            warning: Print the diagnostic with warning style
        """
        self.stats.errors += 1
        logger.debug("%r - %s: %s", context, type(error).__name__, error)
        self.error_log.record(context, error)
        if warning:
            print_warning(diagnostic)
        else:
            print_error(diagnostic)

    def bind_catalog(self, catalog_path: Path, error_log_name: str = DEFAULT_ERROR_LOG_NAME) -> None:
        """Attach the validated catalog path and move the error log beside it."""
        self.catalog_path = catalog_path
        self.error_log = ErrorLog(error_log_path(catalog_path, error_log_name))
