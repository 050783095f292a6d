"""Log levels used by read loggers."""

from __future__ import annotations

import logging
from enum import IntEnum

TRACE = 5
"""Numeric value of the TRACE level, below ``logging.DEBUG``."""

logging.addLevelName(TRACE, "TRACE")


class Level(IntEnum):
    """
    Severity of the lines emitted by a read logger.

    Values are the matching stdlib ``logging`` levels, so a ``Level`` can be
    passed anywhere a logging level is expected. Filtering is left to the
    logging configuration of the application.
    """

    ERROR = logging.ERROR
    WARN = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    TRACE = 5

    @classmethod
    def coerce(cls, value: Level | int | str) -> Level:
        """
        Convert a level name or number to a ``Level``.

        Parameters
        ----------
        value
            A ``Level``, a stdlib logging level number, or a case-insensitive
            level name ("error", "warn", "warning", "info", "debug", "trace").

        Returns
        -------
        Level
            The matching level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name == "WARNING":
                name = "WARN"
            try:
                return cls[name]
            except KeyError:
                raise ValueError(f"Unknown log level: {value!r}") from None
        return cls(value)


__all__ = ["Level", "TRACE"]
