"""Protocols for byte sources and log sinks.

This module defines the core protocols used throughout read-logger.
"""

from read_logger.protocols._protocols import LogSink, ReadableSource

__all__ = ["LogSink", "ReadableSource"]
