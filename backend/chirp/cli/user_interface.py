"""Console output for the command-line client."""

from datetime import datetime, tzinfo
from typing import Iterable

from rich.console import Console

from chirp.cli.csv_store import CheepRecord

console = Console()


def format_cheep(record: CheepRecord, tz: tzinfo | None = None) -> str:
    """`author @ MM/DD/YY HH:MM:SS: message`; local time unless tz is given."""
    when = datetime.fromtimestamp(record.timestamp, tz)
    return f"{record.author} @ {when:%m/%d/%y %H:%M:%S}: {record.message}"


def print_cheeps(records: Iterable[CheepRecord]) -> None:
    for record in records:
        print_message(format_cheep(record))


def print_message(message: str) -> None:
    # user text is printed verbatim: no markup, no highlighting, no wrapping
    console.print(message, markup=False, highlight=False, soft_wrap=True)
