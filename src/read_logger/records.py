"""Read records and analysis of read logger output.

Every per-read line emitted by a read logger ends with a comma-separated,
machine-readable suffix. This module turns those lines (or the records passed
to an ``on_read`` callback) back into structured records, useful for
profiling and visualizing access patterns.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

FIELDS = (
    "tag",
    "begin",
    "end",
    "length",
    "request_length",
    "count",
    "bytes_total",
)
"""Field order of the machine-readable suffix of each per-read line."""

HEADER_PREFIX = "Initialize Read logger"
READ_PREFIX = "Read "


@dataclass(frozen=True)
class ReadRecord:
    """Record of a single read call."""

    tag: str
    begin: int
    end: int  # begin + length - 1, so begin - 1 for an empty read
    length: int
    request_length: int
    count: int
    bytes_total: int

    def as_dict(self) -> dict[str, Any]:
        """Return the record as a dict in log field order."""
        return {name: getattr(self, name) for name in FIELDS}


def format_header(tag: str) -> str:
    """Return the initialization line declaring the field order."""
    return f"{HEADER_PREFIX} '{tag}'," + ",".join(FIELDS)


def format_read_line(record: ReadRecord) -> str:
    """Return the per-read line for `record`."""
    return (
        f"{READ_PREFIX}{record.begin}-{record.end} ({record.length} bytes). "
        f"Total requests: {record.count} ({record.bytes_total} bytes),"
        f"{record.tag},{record.begin},{record.end},{record.length},"
        f"{record.request_length},{record.count},{record.bytes_total}"
    )


def parse_read_line(line: str) -> ReadRecord | None:
    """
    Parse a per-read line back into a record.

    Anything before the ``Read`` prefix (timestamps or logger names added by
    a logging formatter) is ignored.

    Parameters
    ----------
    line
        A line of log output.

    Returns
    -------
    ReadRecord | None
        The parsed record, or None for initialization lines and lines that
        were not written by a read logger.
    """
    line = line.rstrip("\r\n")
    if HEADER_PREFIX in line:
        return None
    marker = line.find(READ_PREFIX)
    if marker == -1:
        return None
    # Numeric fields are taken from the right so tags may contain commas
    head, *numbers = line[marker:].rsplit(",", len(FIELDS) - 1)
    if len(numbers) != len(FIELDS) - 1 or "," not in head:
        return None
    tag = head.split(",", 1)[1]
    try:
        begin, end, length, request_length, count, bytes_total = (
            int(n) for n in numbers
        )
    except ValueError:
        return None
    return ReadRecord(
        tag=tag,
        begin=begin,
        end=end,
        length=length,
        request_length=request_length,
        count=count,
        bytes_total=bytes_total,
    )


@dataclass
class ReadLog:
    """Collection of read records with analysis methods."""

    records: list[ReadRecord] = field(default_factory=list)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> ReadLog:
        """Build a log from lines of log output, skipping unrelated lines."""
        log = cls()
        for line in lines:
            record = parse_read_line(line)
            if record is not None:
                log.add(record)
        return log

    def add(self, record: ReadRecord) -> None:
        """Add a read record. Usable directly as an ``on_read`` callback."""
        self.records.append(record)

    def clear(self) -> None:
        """Clear all recorded reads."""
        self.records.clear()

    def to_dataframe(self):
        """Convert to pandas DataFrame."""
        import pandas as pd

        if not self.records:
            return pd.DataFrame(columns=list(FIELDS))

        return pd.DataFrame([r.as_dict() for r in self.records])

    @property
    def total_bytes(self) -> int:
        """Total bytes delivered."""
        return sum(r.length for r in self.records)

    @property
    def total_reads(self) -> int:
        """Total number of read calls."""
        return len(self.records)

    @property
    def tags(self) -> list[str]:
        """Distinct tags in order of first appearance."""
        return list(dict.fromkeys(r.tag for r in self.records))

    def summary(self) -> dict[str, Any]:
        """Get summary statistics."""
        if not self.records:
            return {
                "total_reads": 0,
                "total_bytes": 0,
                "unique_tags": 0,
            }

        lengths = [r.length for r in self.records]

        return {
            "total_reads": len(self.records),
            "total_bytes": sum(lengths),
            "unique_tags": len(self.tags),
            "eof_reads": sum(1 for n in lengths if n == 0),
            "short_reads": sum(
                1 for r in self.records if 0 < r.length < r.request_length
            ),
            "min_read_size": min(lengths),
            "max_read_size": max(lengths),
            "mean_read_size": sum(lengths) / len(lengths),
        }


__all__ = [
    "FIELDS",
    "ReadLog",
    "ReadRecord",
    "format_header",
    "format_read_line",
    "parse_read_line",
]
