"""booktracker CLI built with Typer.

    booktracker [OPTIONS] CATALOG_FILE OPERATION

The positional arguments are passed to the run coordinator as a plain
list, so a missing argument is reported (and counted, and logged) like any
other error instead of triggering Typer's usage message. Options must come
before the catalog file; anything after it is positional, which lets
keywords such as ``-x`` through.
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Annotated

import typer

from booktracker.env_settings import get_env_settings
from booktracker.logging_setup import setup_logging
from booktracker.runner import run_tracker
from booktracker.ui.core import console

logger = logging.getLogger(__name__)

MAIN_EPILOG = """
[bold cyan]Operations:[/]
  [green]9780261103573[/]                     [dim]# 13 digits: exact ISBN lookup[/]
  [green]"Dune:Frank Herbert:9780441013593:2"[/] [dim]# title:author:isbn:copies adds a book[/]
  [green]hobbit[/]                            [dim]# anything else: title keyword search[/]

[dim]Errors are appended to errors.log next to the catalog file.[/]
"""


def get_version() -> str:
    """Get the installed booktracker version, falling back to __version__."""
    try:
        return version("booktracker")
    except PackageNotFoundError:
        from booktracker import __version__

        return __version__


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"booktracker {get_version()}")
        raise typer.Exit()


CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
}

app = typer.Typer(
    name="booktracker",
    help="Look up, search and add books in a flat-file library catalog.",
    epilog=MAIN_EPILOG,
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
    add_completion=False,
    context_settings=CONTEXT_SETTINGS,
)


@app.command(context_settings=CONTEXT_SETTINGS)
def main(
    args: Annotated[
        list[str] | None,
        typer.Argument(
            help="Catalog file (must end in .txt) followed by the operation.",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose (DEBUG) logging on stderr."),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Also write diagnostic logging to this file."),
    ] = None,
    show_version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> None:
    """Run one catalog operation and print the run statistics."""
    env = get_env_settings()
    setup_logging(
        log_level="DEBUG" if verbose else env.log_level,
        log_file=log_file or env.log_file,
        rich_console=env.rich_console,
    )
    logger.debug("Arguments: %r", args)

    run_tracker(args or [], error_log_name=env.error_log_name)


def run() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    run()
