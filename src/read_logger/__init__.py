from ._version import __version__
from .levels import Level
from .records import ReadLog, ReadRecord, parse_read_line
from .sources import StoreSource
from .stats import ReadStats, ReadStatsLogger
from .wrappers import ReadLogger

__all__ = [
    "__version__",
    "Level",
    "ReadLog",
    "ReadLogger",
    "ReadRecord",
    "ReadStats",
    "ReadStatsLogger",
    "StoreSource",
    "parse_read_line",
]
