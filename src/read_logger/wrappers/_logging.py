"""Read logging wrapper for seekable byte sources."""

from __future__ import annotations

import io
from typing import Any, Callable

from read_logger.levels import Level
from read_logger.protocols import LogSink, ReadableSource
from read_logger.records import ReadRecord
from read_logger.stats import ReadStats, ReadStatsLogger


class ReadLogger(io.RawIOBase):
    """
    A wrapper that counts and logs every read made through it.

    Reads and seeks are forwarded unchanged to the wrapped source. After each
    read that returns a byte count (including 0 at end of stream) the read
    count and byte total are updated and one line is logged with the byte
    range delivered, the requested length, and the running totals. Failed
    reads are not counted or logged.

    The logged range is computed from the bytes delivered through this
    wrapper so far, not from the position of the source. After a ``seek()``
    the logged ranges no longer match source offsets.

    The wrapper is a raw stream: put a buffering layer such as
    ``io.BufferedReader`` on top of it to see how many reads actually reach
    the source.

    Examples
    --------
    ```python
    import io
    import logging

    from read_logger import Level, ReadLogger

    logging.basicConfig(level=logging.DEBUG)

    read_logger = ReadLogger(open("data.bin", "rb", buffering=0), Level.DEBUG, "READ")
    reader = io.BufferedReader(read_logger, buffer_size=8192)

    reader.read(4)
    reader.read(4)

    # BufferedReader does only one read() call:
    assert read_logger.stats().read_count == 1
    ```
    """

    def __init__(
        self,
        source: ReadableSource,
        level: Level | int | str = Level.DEBUG,
        tag: str = "READ",
        *,
        logger: LogSink | None = None,
        on_read: Callable[[ReadRecord], None] | None = None,
        close_source: bool = True,
    ) -> None:
        """
        Wrap a source with read logging.

        Parameters
        ----------
        source
            Any seekable binary file object: a file opened in binary mode,
            ``io.BytesIO``, or a [StoreSource][read_logger.sources.StoreSource].
        level
            Level of the lines emitted for this source.
        tag
            Free-form label telling apart the lines of several wrappers.
        logger
            Sink for the lines. Defaults to the ``read_logger.stats`` stdlib logger.
        on_read
            Optional callback called with the record of each logged read
            (e.g., ``ReadLog.add``).
        close_source
            Close the source when this wrapper is closed. Pass False when the
            source is only borrowed.
        """
        super().__init__()
        # Not owned until construction succeeds
        self._close_source = False
        self._source = source
        self._on_read = on_read
        self._stats = ReadStatsLogger(level, tag, logger=logger)
        self._close_source = close_source

    def __getattr__(self, name: str) -> Any:
        """Forward unknown public attributes (e.g. ``name``) to the source."""
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._source, name)

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed file.")

    @property
    def source(self) -> ReadableSource:
        """The wrapped source."""
        return self._source

    @property
    def tag(self) -> str:
        """Label identifying this wrapper in the log lines."""
        return self._stats.tag

    @property
    def level(self) -> Level:
        """Level of the lines emitted for this source."""
        return self._stats.level

    def stats(self) -> ReadStats:
        """Return a snapshot of the read count and byte total."""
        return self._stats.stats()

    def readinto(self, buffer: Any, /) -> int | None:
        """
        Read into `buffer` from the source and log the read.

        Parameters
        ----------
        buffer
            A writable bytes-like object. Its length is logged as the
            requested length.

        Returns
        -------
        int | None
            Exactly what the source returned: the number of bytes read, 0 at
            end of stream, or None if a non-blocking source has no data.
        """
        self._check_open()
        request_length = len(buffer)
        readinto = getattr(self._source, "readinto", None)
        if readinto is not None:
            n = readinto(buffer)
        else:
            data = self._source.read(request_length)
            if data is None:
                return None
            n = len(data)
            memoryview(buffer).cast("B")[:n] = data
        if n is None:
            return None

        record = self._stats.record(n, request_length)
        if self._on_read:
            self._on_read(record)
        return n

    def seek(self, offset: int, whence: int = io.SEEK_SET, /) -> int:
        """Move the source position. Seeks are not counted or logged."""
        self._check_open()
        return self._source.seek(offset, whence)

    def tell(self) -> int:
        """Return the current position of the source."""
        self._check_open()
        return self._source.tell()

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        seekable = getattr(self._source, "seekable", None)
        return seekable() if seekable is not None else True

    def close(self) -> None:
        """Close the wrapper, and the source unless it was borrowed."""
        if self.closed:
            return
        try:
            if self._close_source:
                self._source.close()
        finally:
            super().close()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} tag={self.tag!r} source={self._source!r}>"


__all__ = ["ReadLogger"]
