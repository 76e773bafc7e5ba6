"""Catalog and error-log path handling."""

from __future__ import annotations

import logging
from pathlib import Path

from booktracker.exceptions import CatalogIOError

logger = logging.getLogger(__name__)

CATALOG_SUFFIX = ".txt"
DEFAULT_ERROR_LOG_NAME = "errors.log"


def has_catalog_suffix(file_name: str) -> bool:
    """Check the catalog name ends with ``.txt`` (case-sensitive)."""
    return file_name.endswith(CATALOG_SUFFIX)


def error_log_path(catalog_path: Path | None, name: str = DEFAULT_ERROR_LOG_NAME) -> Path:
    """Get the error log path for a catalog.

    The log sits next to the catalog file, or in the current directory when
    the catalog path has no parent component (or is not known yet).

    Args:
        catalog_path: Catalog file path, or None before arguments are checked
        name: Error log file name

    Returns:
        Path to the error log
    """
    if catalog_path is None or catalog_path.parent == Path("."):
        return Path(name)
    return catalog_path.parent / name


def ensure_catalog_file(catalog_path: Path) -> Path:
    """Create the catalog's parent directories and an empty file if missing.

    Args:
        catalog_path: Catalog file path

    Returns:
        The same path, now existing

    Raises:
        CatalogIOError: If the directory or file cannot be created
    """
    try:
        if not catalog_path.parent.exists():
            logger.debug("Creating catalog directory %s", catalog_path.parent)
            catalog_path.parent.mkdir(parents=True, exist_ok=True)
        if not catalog_path.exists():
            logger.debug("Creating empty catalog %s", catalog_path)
            catalog_path.touch()
    except OSError as e:
        raise CatalogIOError(
            f"Cannot create catalog file {catalog_path}: {e.strerror or e}",
            path=catalog_path,
            operation="create",
        ) from e
    return catalog_path
