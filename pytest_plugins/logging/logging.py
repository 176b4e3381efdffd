"""
Project logger of the JSON-RPC bindings.

Besides the standard levels, records carry a `VERBOSE` level (15) used for the request
and response payloads exchanged with a node. The module serves two audiences:

1. Scripts and the `eth_rpc` CLI call `configure_logging()` directly.
2. As a pytest plugin it writes one log file per test session (and per xdist worker) to
   `logs/`, so the payloads exchanged by a failing test can be read back after the run.
"""

import functools
import logging
import os
import sys
from datetime import datetime, timezone
from logging import LogRecord
from pathlib import Path
from typing import Any, ClassVar, Literal, Optional, Union, cast

import pytest

VERBOSE_LEVEL = 15
logging.addLevelName(VERBOSE_LEVEL, "VERBOSE")

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class RPCLogger(logging.Logger):
    """Logger class of the project, adds `verbose()`."""

    def verbose(
        self,
        msg: object,
        *args: Any,
        exc_info: Union[BaseException, bool, None] = None,
        stack_info: bool = False,
        stacklevel: int = 1,
        extra: Optional[dict[str, Any]] = None,
    ) -> None:
        """Log `msg` at the `VERBOSE` level, between DEBUG and INFO."""
        if self.isEnabledFor(VERBOSE_LEVEL):
            self._log(VERBOSE_LEVEL, msg, args, exc_info, extra, stack_info, stacklevel)


logging.setLoggerClass(RPCLogger)


def get_logger(name: str) -> RPCLogger:
    """Return the logger called `name`, typed as an `RPCLogger`."""
    return cast(RPCLogger, logging.getLogger(name))


logger = get_logger(__name__)


class UTCFormatter(logging.Formatter):
    """Formatter printing timestamps in UTC with milliseconds."""

    def formatTime(self, record, datefmt=None):  # noqa: D102,N802
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return created.isoformat(sep=" ", timespec="milliseconds")


class ColorFormatter(UTCFormatter):
    """`UTCFormatter` that colors the level name for terminals; plain inside Docker."""

    running_in_docker: ClassVar[bool] = Path("/.dockerenv").exists()

    RESET = "\033[0m"
    COLORS = {
        logging.DEBUG: "\033[37m",
        VERBOSE_LEVEL: "\033[36m",
        logging.INFO: "\033[36m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[41m",
    }

    def format(self, record: LogRecord) -> str:
        """Format a copy of the record so that file handlers never see the color codes."""
        if self.running_in_docker:
            return super().format(record)
        colored = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(colored.levelno, self.RESET)
        colored.levelname = f"{color}{colored.levelname}{self.RESET}"
        return super().format(colored)


class LogLevel:
    """Parse log levels given on the command-line."""

    @classmethod
    def from_cli(cls, value: str) -> int:
        """Return the numeric level of a level name (any case, `VERBOSE` included) or number."""
        if value.strip().lstrip("-").isdigit():
            return int(value)
        level = logging.getLevelName(value.strip().upper())
        if not isinstance(level, int):
            names = ", ".join(logging.getLevelNamesMapping())
            raise ValueError(f"Invalid log level '{value}'. Expected one of: {names} or a number.")
        return level


def configure_logging(
    log_level: Union[int, str] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    log_to: Literal["stdout", "stderr"] | None = "stdout",
    log_format: str = DEFAULT_LOG_FORMAT,
    use_color: Optional[bool] = None,
) -> Optional[logging.FileHandler]:
    """
    Replace the handlers of the root logger.

    Args:
        log_level: Level name (`VERBOSE` included) or number.
        log_file: File to write the log to, parent directories are created; no file if None.
        log_to: Console stream to log to; the CLI logs to stderr to keep stdout for results.
        log_format: Format of every record.
        use_color: Color the level names on the console, defaults to not in Docker.

    Returns:
        The handler of `log_file`, if any.

    """
    if isinstance(log_level, str):
        log_level = LogLevel.from_cli(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    file_handler = None
    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode="w")
        file_handler.setFormatter(UTCFormatter(fmt=log_format))
        root_logger.addHandler(file_handler)

    if log_to is not None:
        console_handler = logging.StreamHandler(getattr(sys, log_to))
        if use_color is None:
            use_color = not ColorFormatter.running_in_docker
        formatter_class = ColorFormatter if use_color else UTCFormatter
        console_handler.setFormatter(formatter_class(fmt=log_format))
        root_logger.addHandler(console_handler)

    logger.verbose(f"Logging configured at level {logging.getLevelName(log_level)}")
    return file_handler


# Pytest plugin


def pytest_addoption(parser):  # noqa: D103
    group = parser.getgroup("rpc-logging", "Logging of the JSON-RPC bindings")
    group.addoption(
        "--rpc-log-level",
        action="store",
        default="INFO",
        type=LogLevel.from_cli,
        dest="rpc_log_level",
        help=(
            "Level of the session log: DEBUG, VERBOSE (request and response payloads), INFO, "
            "WARNING, ERROR or CRITICAL, or a number. Default: INFO."
        ),
    )


@functools.cache
def get_log_stem(argv0: str, argv1: Optional[str]) -> str:
    """Return `<program>[-<subcommand>]-<UTC timestamp>`, shared by every worker of a session."""
    program = Path(argv0).stem
    if program in ("", "-c", "__main__"):
        program = "pytest"
    parts = [program]
    if argv1 and not argv1.startswith("-"):
        parts.append(argv1)
    parts.append(datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S"))
    return "-".join(parts)


def _session_log_stem() -> str:
    return get_log_stem(sys.argv[0], sys.argv[1] if len(sys.argv) > 1 else None)


@pytest.hookimpl(optionalhook=True)
def pytest_configure_node(node):
    """Hand the controller's log stem to an xdist worker."""
    node.workerinput["log_stem"] = _session_log_stem()


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Open `logs/<stem>-<worker>.log` and route the session's records to it."""
    log_stem = getattr(config, "workerinput", {}).get("log_stem") or _session_log_stem()
    worker_id = os.getenv("PYTEST_XDIST_WORKER", "main")
    log_file_path = Path("logs") / f"{log_stem}-{worker_id}.log"

    config.option.rpc_log_file_path = log_file_path
    configure_logging(
        log_level=config.getoption("rpc_log_level"),
        log_file=log_file_path,
    )


def pytest_report_header(config: pytest.Config) -> list[str]:
    """Name the session log file in the header."""
    if log_file_path := config.option.rpc_log_file_path:
        return [f"Log file: {log_file_path}"]
    return []

