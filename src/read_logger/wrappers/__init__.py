"""Source wrappers that add functionality to underlying byte sources.

This module provides transparent wrapper classes that observe reads made
through them without changing what the caller sees.
"""

from read_logger.wrappers._logging import ReadLogger

__all__ = ["ReadLogger"]
