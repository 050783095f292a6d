"""Read statistics and the line logger shared by read wrappers."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from read_logger.levels import Level
from read_logger.protocols import LogSink
from read_logger.records import ReadRecord, format_header, format_read_line

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReadStats:
    """Snapshot of the read counters of a read logger."""

    read_count: int = 0
    bytes_total: int = 0


class ReadStatsLogger:
    """
    Count reads and log one structured line per read.

    This is the bookkeeping half of
    [`ReadLogger`][read_logger.wrappers.ReadLogger]. It can also be used on its
    own to log reads performed by code that does not expose a stream.

    Examples
    --------
    ```python
    from read_logger import Level, ReadStatsLogger

    stats = ReadStatsLogger(Level.INFO, "READ")
    stats.record(4)
    stats.record(4)
    assert stats.stats().bytes_total == 8
    ```
    """

    def __init__(
        self,
        level: Level | int | str = Level.DEBUG,
        tag: str = "READ",
        *,
        logger: LogSink | None = None,
    ) -> None:
        """
        Create a statistics logger and emit the initialization line.

        Parameters
        ----------
        level
            Level of every line emitted by this logger.
        tag
            Free-form label identifying this logger in the output.
        logger
            Sink for the lines. Defaults to the ``read_logger.stats`` stdlib logger.
        """
        self._level = Level.coerce(level)
        self._tag = tag
        self._sink = logger if logger is not None else _logger
        self._read_count = 0
        self._bytes_total = 0
        self._sink.log(self._level, format_header(tag))

    @property
    def tag(self) -> str:
        """Label identifying this logger in the output."""
        return self._tag

    @property
    def level(self) -> Level:
        """Level of every line emitted by this logger."""
        return self._level

    def record(self, length: int, request_length: int | None = None) -> ReadRecord:
        """
        Count a completed read of `length` bytes and log it.

        The logged range starts at the number of bytes counted so far.

        Parameters
        ----------
        length
            Number of bytes the read returned. 0 marks end of stream.
        request_length
            Size of the buffer the caller asked to fill. Defaults to `length`.

        Returns
        -------
        ReadRecord
            The values written to the log line.
        """
        begin = self._bytes_total
        self._read_count += 1
        self._bytes_total += length
        record = ReadRecord(
            tag=self._tag,
            begin=begin,
            end=begin + length - 1,
            length=length,
            request_length=length if request_length is None else request_length,
            count=self._read_count,
            bytes_total=self._bytes_total,
        )
        self._sink.log(self._level, format_read_line(record))
        return record

    def stats(self) -> ReadStats:
        """Return a snapshot of the counters."""
        return ReadStats(read_count=self._read_count, bytes_total=self._bytes_total)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(tag={self._tag!r}, level={self._level.name}, "
            f"read_count={self._read_count}, bytes_total={self._bytes_total})"
        )


__all__ = ["ReadStats", "ReadStatsLogger"]
