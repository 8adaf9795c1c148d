"""CSV Store — append-only cheep log used by the command-line client.

Invariants:
    - File format: header `Author,Message,Timestamp`, one record per line,
      Timestamp in Unix seconds
    - read(limit) returns the LAST `limit` records, in file order
    - A missing file reads as empty; the first store() creates it with its header

Design Decisions:
    - No locking, no schema validation: single-user toy path, separate from the
      relational store
    - csv module quoting: messages may contain commas, quotes, and newlines
"""

import csv
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

FIELDNAMES = ("Author", "Message", "Timestamp")


@dataclass(frozen=True)
class CheepRecord:
    author: str
    message: str
    timestamp: int


class CSVDatabase:
    """Cheep records stored in a single CSV file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def store(self, record: CheepRecord) -> None:
        """Append one record, writing the header if the file is new."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        write_header = not self.path.exists() or self.path.stat().st_size == 0
        with self.path.open("a", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
            if write_header:
                writer.writeheader()
            writer.writerow({
                "Author": record.author,
                "Message": record.message,
                "Timestamp": record.timestamp,
            })
        logger.debug("Stored cheep in %s", self.path, extra={"author": record.author})

    def read(self, limit: int | None = None) -> list[CheepRecord]:
        """Most recent `limit` records (all if None), oldest of them first."""
        if not self.path.exists():
            return []
        with self.path.open(newline="", encoding="utf-8") as f:
            records = [
                CheepRecord(
                    author=row["Author"],
                    message=row["Message"],
                    timestamp=int(float(row["Timestamp"])),
                )
                for row in csv.DictReader(f)
            ]
        if limit is None:
            return records
        if limit <= 0:
            return []
        return records[-limit:]
