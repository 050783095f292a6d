"""Unbuffered raw source over a path in an object store."""

from __future__ import annotations

import io
from typing import Any, Protocol

from obspec import GetRange, Head


class StoreSource(io.RawIOBase):
    """
    A raw, unbuffered binary stream over a file in an object store.

    Every ``readinto()`` call issues exactly one [`get_range()`][obspec.GetRange]
    request for at most the size of the buffer. Wrapping a StoreSource in a
    [ReadLogger][read_logger.wrappers.ReadLogger] therefore logs one line per
    range request, and putting ``io.BufferedReader`` on top controls the
    request size.

    Examples
    --------
    ```python
    import io

    from obstore.store import MemoryStore
    from read_logger import ReadLogger
    from read_logger.sources import StoreSource

    store = MemoryStore()
    store.put("data.bin", b"0123456789")

    read_logger = ReadLogger(StoreSource(store, "data.bin"), tag="S3")
    reader = io.BufferedReader(read_logger, buffer_size=4096)
    reader.read()
    ```
    """

    class Store(GetRange, Head, Protocol):
        """
        Store protocol required by StoreSource.

        Combines [GetRange][obspec.GetRange] and [Head][obspec.Head] from obspec.
        """

        pass

    def __init__(self, store: StoreSource.Store, path: str) -> None:
        """
        Create a raw stream for any object store.

        Parameters
        ----------
        store
            Any object implementing [GetRange][obspec.GetRange] and [Head][obspec.Head].
        path
            The path to the file within the store.
        """
        super().__init__()
        self._store = store
        self._path = path
        self._position = 0
        self._size: int | None = None

    @property
    def name(self) -> str:
        return self._path

    def _get_size(self) -> int:
        """Lazily fetch the file size via a head() call."""
        if self._size is None:
            self._size = self._store.head(self._path)["size"]
        return self._size

    def readinto(self, buffer: Any, /) -> int:
        """
        Read up to ``len(buffer)`` bytes with a single range request.

        Returns
        -------
        int
            The number of bytes read, 0 at end of file. No request is made
            at end of file or for an empty buffer.
        """
        if self.closed:
            raise ValueError("I/O operation on closed file.")
        remaining = self._get_size() - self._position
        fetch_size = min(len(buffer), remaining)
        if fetch_size <= 0:
            return 0

        data = bytes(
            self._store.get_range(self._path, start=self._position, length=fetch_size)
        )
        n = len(data)
        memoryview(buffer).cast("B")[:n] = data
        self._position += n
        return n

    def seek(self, offset: int, whence: int = io.SEEK_SET, /) -> int:
        """
        Move the file position.

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
        if self.closed:
            raise ValueError("I/O operation on closed file.")
        if whence == io.SEEK_SET:
            position = offset
        elif whence == io.SEEK_CUR:
            position = self._position + offset
        elif whence == io.SEEK_END:
            position = self._get_size() + offset
        else:
            raise ValueError(f"Invalid whence value: {whence}")

        if position < 0:
            raise ValueError(f"Negative seek position {position}")

        self._position = position
        return self._position

    def tell(self) -> int:
        """Return the current position in bytes from the start of the file."""
        if self.closed:
            raise ValueError("I/O operation on closed file.")
        return self._position

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True


__all__ = ["StoreSource"]
