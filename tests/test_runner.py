"""Tests for run coordination."""

from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path
from unittest import mock

import pytest

from booktracker.exceptions import InsufficientArgumentsError, InvalidFileNameError
from booktracker.runner import run_tracker, validate_arguments
from booktracker.ui.tables import CLOSING_MESSAGE

LOG_LINE = re.compile(r"^\[\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\] .+ - \w+: .*$")


def assert_statistics_printed_once(out: str) -> None:
    assert out.count("--- Statistics ---") == 1
    assert out.count(CLOSING_MESSAGE) == 1


class TestValidateArguments:
    """Tests for validate_arguments."""

    def test_valid(self) -> None:
        """Returns catalog path and operation."""
        assert validate_arguments(["data/books.txt", "dune"]) == (Path("data/books.txt"), "dune")

    def test_extra_arguments_ignored(self) -> None:
        """Arguments after the operation are ignored."""
        assert validate_arguments(["books.txt", "dune", "extra"])[1] == "dune"

    @pytest.mark.parametrize("args", [[], ["books.txt"]])
    def test_too_few(self, args: list[str]) -> None:
        """Fewer than two arguments raise."""
        with pytest.raises(InsufficientArgumentsError, match="Insufficient arguments"):
            validate_arguments(args)

    @pytest.mark.parametrize("name", ["books.csv", "books", "books.TXT", "books.txt.bak"])
    def test_bad_suffix(self, name: str) -> None:
        """Catalog must end in .txt."""
        with pytest.raises(InvalidFileNameError, match="must end with '.txt'"):
            validate_arguments([name, "dune"])


class TestRunTracker:
    """End-to-end tests for run_tracker."""

    def test_keyword_search_run(
        self, catalog_file: Callable[..., Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A clean keyword search reports counts and prints the closing block."""
        path = catalog_file(
            [
                "Harry Potter:J.K. Rowling:9780747532699:4",
                "Dune:Frank Herbert:9780441013593:2",
            ]
        )
        stats = run_tracker([str(path), "harry"])

        out = capsys.readouterr().out
        assert "Harry Potter" in out
        assert stats.valid_records == 2
        assert stats.search_results == 1
        assert stats.books_added == 0
        assert stats.errors == 0
        assert "Valid records processed : 2" in out
        assert "Search results          : 1" in out
        assert "Books added             : 0" in out
        assert "Errors encountered      : 0" in out
        assert_statistics_printed_once(out)
        assert not (path.parent / "errors.log").exists()

    def test_creates_missing_catalog_and_directories(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Missing parent directories and catalog file are created."""
        path = tmp_path / "nested" / "dir" / "books.txt"
        stats = run_tracker([str(path), "anything"])
        assert path.is_file()
        assert path.read_text(encoding="utf-8") == ""
        assert stats.valid_records == 0
        assert 'No books found matching keyword: "anything"' in capsys.readouterr().out

    def test_unencodable_add_counted_once(
        self, catalog_file: Callable[..., Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        """An entry with undecodable argv bytes is one invalid-input error."""
        path = catalog_file(["Dune:Frank Herbert:9780441013593:2"])

        stats = run_tracker([str(path), "Bad\udcff:A:1234567890123:1"])

        captured = capsys.readouterr()
        assert stats.errors == 1
        assert stats.books_added == 0
        assert "UNEXPECTED" not in (path.parent / "errors.log").read_text(encoding="utf-8")
        assert "INVALID INPUT:" in (path.parent / "errors.log").read_text(encoding="utf-8")
        assert path.read_text(encoding="utf-8") == "Dune:Frank Herbert:9780441013593:2\n"
        assert_statistics_printed_once(captured.out)

    def test_add_then_load(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A run that adds a book is visible to the next run."""
        path = tmp_path / "books.txt"
        first = run_tracker([str(path), "New Book:Jane Doe:1234567890123:5"])
        assert first.books_added == 1
        assert path.read_text(encoding="utf-8") == "New Book:Jane Doe:1234567890123:5\n"

        second = run_tracker([str(path), "1234567890123"])
        assert second.valid_records == 1
        assert second.search_results == 1
        assert "New Book" in capsys.readouterr().out

    def test_invalid_lines_counted_and_logged(
        self, catalog_file: Callable[..., Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Bad lines are skipped, counted and logged beside the catalog."""
        path = catalog_file(
            [
                "Dune:Frank Herbert:9780441013593:2",
                "Title:Author:12345:3",
                "Title:Author:123abc4567890:3",
            ],
            name="library/books.txt",
        )
        stats = run_tracker([str(path), "dune"])

        assert stats.valid_records == 1
        assert stats.errors == 2
        log_lines = (path.parent / "errors.log").read_text(encoding="utf-8").splitlines()
        assert len(log_lines) == 2
        assert all(LOG_LINE.match(line) for line in log_lines)
        assert "exactly 13 digits (got 5)" in log_lines[0]
        assert "only numeric characters" in log_lines[1]
        assert_statistics_printed_once(capsys.readouterr().out)

    def test_error_log_appends_across_runs(self, catalog_file: Callable[..., Path]) -> None:
        """Each run appends to the existing error log."""
        path = catalog_file(["bad line"])
        run_tracker([str(path), "x"])
        run_tracker([str(path), "x"])
        assert len((path.parent / "errors.log").read_text(encoding="utf-8").splitlines()) == 2

    def test_no_arguments(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """No arguments is reported and logged in the current directory."""
        monkeypatch.chdir(tmp_path)
        stats = run_tracker([])

        captured = capsys.readouterr()
        assert stats.errors == 1
        assert "Error: Insufficient arguments. Usage:" in captured.err
        assert_statistics_printed_once(captured.out)
        log = (tmp_path / "errors.log").read_text(encoding="utf-8")
        assert 'INSUFFICIENT ARGUMENTS: "(none)" - InsufficientArgumentsError:' in log

    def test_one_argument(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """The provided arguments appear in the log context."""
        monkeypatch.chdir(tmp_path)
        run_tracker(["books.txt"])
        log = (tmp_path / "errors.log").read_text(encoding="utf-8")
        assert 'INSUFFICIENT ARGUMENTS: "books.txt"' in log
        assert not (tmp_path / "books.txt").exists()

    def test_invalid_file_name(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Wrong suffix is reported before any file is created."""
        monkeypatch.chdir(tmp_path)
        stats = run_tracker(["data/books.csv", "dune"])

        captured = capsys.readouterr()
        assert stats.errors == 1
        assert "Error: Catalog file must end with '.txt': data/books.csv" in captured.err
        assert not (tmp_path / "data").exists()
        log = (tmp_path / "errors.log").read_text(encoding="utf-8")
        assert 'INVALID FILE NAME: "data/books.csv" - InvalidFileNameError:' in log
        assert_statistics_printed_once(captured.out)

    def test_unreadable_catalog_skips_operation(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A catalog that cannot be read ends the run after reporting."""
        path = tmp_path / "books.txt"
        path.mkdir()

        stats = run_tracker([str(path), "dune"])

        captured = capsys.readouterr()
        assert stats.errors == 1
        assert "File I/O Error: Cannot read catalog" in captured.err
        assert "No books found" not in captured.out
        assert "IO ERROR:" in (tmp_path / "errors.log").read_text(encoding="utf-8")
        assert_statistics_printed_once(captured.out)

    def test_catalog_creation_failure(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A parent path that is a file cannot hold the catalog."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        stats = run_tracker([str(blocker / "books.txt"), "dune"])

        assert stats.errors == 1
        assert "File I/O Error: Cannot create catalog file" in capsys.readouterr().err

    def test_unexpected_error(
        self, catalog_file: Callable[..., Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Unclassified failures are reported and statistics still print."""
        path = catalog_file([])
        with mock.patch("booktracker.runner.load_catalog", side_effect=RuntimeError("boom")):
            stats = run_tracker([str(path), "dune"])

        captured = capsys.readouterr()
        assert stats.errors == 1
        assert "Unexpected error: RuntimeError: boom" in captured.err
        log = (path.parent / "errors.log").read_text(encoding="utf-8")
        assert 'UNEXPECTED ERROR: "boom" - RuntimeError: boom' in log
        assert_statistics_printed_once(captured.out)

    def test_custom_error_log_name(self, catalog_file: Callable[..., Path]) -> None:
        """Error log file name is configurable."""
        path = catalog_file(["bad"])
        run_tracker([str(path), "x"], error_log_name="catalog-errors.log")
        assert (path.parent / "catalog-errors.log").exists()
        assert not (path.parent / "errors.log").exists()
