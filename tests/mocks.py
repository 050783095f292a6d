"""Shared mock classes for tests."""

from __future__ import annotations

import io


class ChunkedSource(io.BytesIO):
    """BytesIO that returns at most the next scripted chunk size per read."""

    def __init__(self, data: bytes, chunk_sizes):
        super().__init__(data)
        self._chunk_sizes = list(chunk_sizes)

    def readinto(self, buffer):
        size = self._chunk_sizes.pop(0) if self._chunk_sizes else len(buffer)
        data = self.read(min(size, len(buffer)))
        buffer[: len(data)] = data
        return len(data)


class ScriptedSource:
    """A source whose readinto returns scripted counts or raises scripted errors."""

    def __init__(self, results):
        self._results = list(results)
        self.calls = 0

    def readinto(self, buffer):
        self.calls += 1
        result = self._results.pop(0)
        if isinstance(result, BaseException):
            raise result
        if result:
            buffer[:result] = b"x" * result
        return result

    def seek(self, offset, whence=0):
        return offset

    def tell(self):
        return 0

    def close(self):
        pass


class ReadOnlySource:
    """A source implementing read/seek/tell but not readinto."""

    def __init__(self, data: bytes):
        self._data = data
        self._position = 0
        self.closed = False

    def read(self, size=-1):
        if size < 0:
            size = len(self._data) - self._position
        data = self._data[self._position : self._position + size]
        self._position += len(data)
        return data

    def seek(self, offset, whence=0):
        self._position = offset
        return offset

    def tell(self):
        return self._position

    def close(self):
        self.closed = True


class FailingSource:
    """A source that raises on every operation."""

    def readinto(self, buffer):
        raise IOError("Source error")

    def seek(self, offset, whence=0):
        raise OSError("Seek error")

    def tell(self):
        return 0

    def close(self):
        pass


class RecordingSink:
    """A minimal log sink collecting (level, message) pairs."""

    def __init__(self):
        self.lines = []

    def log(self, level, msg):
        self.lines.append((level, msg))

    @property
    def messages(self):
        return [msg for _, msg in self.lines]


class MockStore:
    """In-memory store implementing get_range and head, counting requests."""

    def __init__(self, data: bytes):
        self._data = data
        self.range_requests = []
        self.head_requests = 0

    def get_range(self, path, *, start, end=None, length=None):
        if length is None:
            length = end - start
        self.range_requests.append((start, length))
        return self._data[start : start + length]

    def head(self, path):
        self.head_requests += 1
        return {
            "path": path,
            "last_modified": None,
            "size": len(self._data),
            "e_tag": None,
            "version": None,
        }
