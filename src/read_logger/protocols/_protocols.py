"""Core protocol definitions for wrapped sources and log sinks."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ReadableSource(Protocol):
    """
    Protocol for seekable binary sources that can be wrapped by a read logger.

    Any binary file object satisfies it: files opened with ``open(path, "rb")``
    (buffered or with ``buffering=0``), ``io.BytesIO``, and
    [`StoreSource`][read_logger.sources.StoreSource].

    Sources that implement ``readinto`` are read straight into the caller's
    buffer. Sources that only implement ``read`` are still accepted by
    [`ReadLogger`][read_logger.wrappers.ReadLogger]; the data is copied into
    the buffer.

    !!! Warning
        It's recommended to define your own protocols. This protocol may change without warning.
    """

    def read(self, size: int = -1, /) -> bytes:
        """
        Read up to `size` bytes from the source.

        Parameters
        ----------
        size
            Number of bytes to read. If -1, read until EOF.

        Returns
        -------
        bytes
            The data read from the source.
        """
        ...

    def seek(self, offset: int, whence: int = 0, /) -> int:
        """
        Move to a new position.

        Parameters
        ----------
        offset
            Position offset.
        whence
            Reference point: 0=start (SEEK_SET), 1=current (SEEK_CUR), 2=end (SEEK_END).

        Returns
        -------
        int
            The new absolute position.
        """
        ...

    def tell(self) -> int:
        """Return the current position in bytes from the start of the source."""
        ...


@runtime_checkable
class LogSink(Protocol):
    """
    Minimal interface a read logger writes its lines to.

    ``logging.Logger`` and ``logging.LoggerAdapter`` satisfy it, so the default
    is a stdlib logger. The sink decides formatting, filtering by level, and
    transport.
    """

    def log(self, level: int, msg: str, /) -> None:
        """Emit `msg` at the numeric logging `level`."""
        ...


__all__ = ["LogSink", "ReadableSource"]
