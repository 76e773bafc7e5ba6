"""Run coordination: validate arguments, load, operate, report.

A run always ends with the statistics block, whichever stage failed.
Loading finishes completely before the operation starts; both happen on
the calling thread.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from booktracker.context import RunContext
from booktracker.dispatch import dispatch_operation
from booktracker.exceptions import (
    CatalogIOError,
    InsufficientArgumentsError,
    InvalidFileNameError,
)
from booktracker.loader import load_catalog
from booktracker.models import RunStatistics
from booktracker.paths import (
    CATALOG_SUFFIX,
    DEFAULT_ERROR_LOG_NAME,
    ensure_catalog_file,
    has_catalog_suffix,
)
from booktracker.ui.tables import print_statistics

logger = logging.getLogger(__name__)

USAGE = f"booktracker <catalogFile{CATALOG_SUFFIX}> <operation>"


def validate_arguments(args: Sequence[str]) -> tuple[Path, str]:
    """Check argument count and catalog file name.

    Arguments after the operation are ignored.

    Returns:
        (catalog path, operation)

    Raises:
        InsufficientArgumentsError: Fewer than two arguments
        InvalidFileNameError: Catalog name does not end in ``.txt``
    """
    if len(args) < 2:
        raise InsufficientArgumentsError(
            f"Insufficient arguments. Usage: {USAGE}",
            provided=list(args),
        )

    file_name, operation = args[0], args[1]
    if not has_catalog_suffix(file_name):
        raise InvalidFileNameError(
            f"Catalog file must end with '{CATALOG_SUFFIX}': {file_name}",
            file_name=file_name,
        )
    return Path(file_name), operation


def run_tracker(
    args: Sequence[str],
    *,
    error_log_name: str = DEFAULT_ERROR_LOG_NAME,
) -> RunStatistics:
    """Run one catalog operation end to end.

    Args:
        args: ``[catalog_file, operation, ...]``
        error_log_name: File name of the error log beside the catalog

    Returns:
        Final statistics (already printed)
    """
    ctx = RunContext.for_catalog(None, error_log_name)

    try:
        catalog_path, operation = validate_arguments(args)
        ctx.bind_catalog(catalog_path, error_log_name)
        ensure_catalog_file(catalog_path)

        result = load_catalog(catalog_path, ctx)
        dispatch_operation(result.catalog, operation, catalog_path, ctx)

    except InsufficientArgumentsError as e:
        provided = " ".join(e.provided) if e.provided else "(none)"
        ctx.report_error(f'INSUFFICIENT ARGUMENTS: "{provided}"', e, f"Error: {e}")
    except InvalidFileNameError as e:
        ctx.report_error(f'INVALID FILE NAME: "{e.file_name}"', e, f"Error: {e}")
    except CatalogIOError as e:
        ctx.report_error(f'IO ERROR: "{e}"', e, f"File I/O Error: {e}")
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        ctx.report_error(
            f'UNEXPECTED ERROR: "{e}"',
            e,
            f"Unexpected error: {type(e).__name__}: {e}",
        )
    finally:
        print_statistics(ctx.stats)

    return ctx.stats
