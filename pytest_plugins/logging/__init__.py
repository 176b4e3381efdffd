"""Logging configuration and pytest plugin."""

from .logging import (
    VERBOSE_LEVEL,
    ColorFormatter,
    LogLevel,
    RPCLogger,
    UTCFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "VERBOSE_LEVEL",
    "ColorFormatter",
    "LogLevel",
    "RPCLogger",
    "UTCFormatter",
    "configure_logging",
    "get_logger",
]
