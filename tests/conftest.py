"""Shared pytest fixtures and helpers for booktracker tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from booktracker.context import RunContext
from booktracker.env_settings import clear_env_settings_cache
from booktracker.models import BookRecord

ENV_VARS = (
    "BOOKTRACKER_LOG_LEVEL",
    "BOOKTRACKER_LOG_FILE",
    "BOOKTRACKER_ERROR_LOG_NAME",
    "BOOKTRACKER_RICH_CONSOLE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test without booktracker env vars or cached settings."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_env_settings_cache()
    yield
    clear_env_settings_cache()


@pytest.fixture
def catalog_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing catalog lines to a file under tmp_path.

    Usage:
        path = catalog_file(["Dune:Frank Herbert:9780441013593:2"])
    """

    def _write(lines: list[str], name: str = "books.txt") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def run_ctx(tmp_path: Path) -> RunContext:
    """Run context for a catalog at tmp_path/books.txt."""
    return RunContext.for_catalog(tmp_path / "books.txt")


def make_record(
    title: str = "The Hobbit",
    author: str = "J.R.R. Tolkien",
    isbn: str = "9780261103573",
    copies: int = 3,
) -> BookRecord:
    """Create a valid BookRecord with overridable fields."""
    return BookRecord(title=title, author=author, isbn=isbn, copies=copies)
