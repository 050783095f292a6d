"""Byte sources that can be wrapped by a read logger."""

from read_logger.sources._store import StoreSource

__all__ = ["StoreSource"]
