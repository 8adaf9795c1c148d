"""Chirp command-line client.

Usage:
    chirp read
    chirp cheep <message>
    chirp (-h | --help)
    chirp --version

Unrecognised input prints a hint and exits 0 rather than failing.
"""

from __future__ import annotations

import getpass
import time
from typing import Optional, Sequence

import typer

from chirp.cli.csv_store import CheepRecord, CSVDatabase
from chirp.cli.user_interface import print_cheeps, print_message
from chirp.config import get_settings
from chirp.infrastructure.observability import setup_logging

VERSION = "Chirp 1.0"
READ_LIMIT = 10
UNKNOWN_ARGUMENT = "Unknown argument. Please use --help or -h for help"

# Base class of every parse failure, taken from the click that typer is built on
# (older typer releases use the click distribution, newer ones ship their own).
UsageError = typer.BadParameter.__base__

app = typer.Typer(
    help="Chirp.",
    add_completion=False,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def current_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        # no login name and no passwd entry (e.g. bare containers)
        return "unknown"


def now_unix() -> int:
    return int(time.time())


def _database() -> CSVDatabase:
    return CSVDatabase(get_settings().csv_path)


def _version_callback(value: bool) -> None:
    if value:
        print_message(VERSION)
        raise typer.Exit()


@app.callback()
def root(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True,
        help="Show version.",
    ),
):
    """Chirp."""
    if ctx.invoked_subcommand is None:
        print_message(UNKNOWN_ARGUMENT)


@app.command()
def read():
    """Print the most recent cheeps."""
    print_cheeps(_database().read(READ_LIMIT))


@app.command()
def cheep(message: str = typer.Argument(..., help="The message to cheep.")):
    """Post a cheep as the current OS user."""
    _database().store(
        CheepRecord(author=current_user(), message=message, timestamp=now_unix()),
    )


def run(argv: Optional[Sequence[str]] = None) -> int:
    """Invoke the CLI, turning usage errors into a hint instead of an error exit."""
    try:
        result = app(
            args=list(argv) if argv is not None else None,
            prog_name="chirp",
            standalone_mode=False,
        )
    except UsageError:
        print_message(UNKNOWN_ARGUMENT)
        return 0
    return result if isinstance(result, int) else 0


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    return run()


if __name__ == "__main__":
    raise SystemExit(main())
