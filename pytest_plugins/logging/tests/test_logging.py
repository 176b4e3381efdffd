"""
Tests for the logging module.

These tests cover the custom `VERBOSE` level, the formatters, the standalone
configuration and the pytest hooks that open the session log file.
"""

import io
import logging
import re
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from ..logging import (
    VERBOSE_LEVEL,
    ColorFormatter,
    LogLevel,
    RPCLogger,
    UTCFormatter,
    configure_logging,
    get_log_stem,
    get_logger,
)


@pytest.fixture
def clean_root_logger():
    """Restore the root logger's handlers and level after the test."""
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers.copy()
    original_level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)
    for handler in original_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(original_level)


class TestLoggerSetup:
    """Test the basic setup of loggers and custom levels."""

    def test_verbose_level_registered(self):
        """Test that the verbose level is registered in both directions."""
        assert logging.getLevelName(VERBOSE_LEVEL) == "VERBOSE"
        assert logging.getLevelName("VERBOSE") == VERBOSE_LEVEL

    def test_get_logger(self):
        """Test that get_logger returns a properly typed logger."""
        logger = get_logger("test_logger")
        assert isinstance(logger, RPCLogger)
        assert logger.name == "test_logger"

    def test_request_modules_use_rpc_logger(self):
        """Test that the request manager module logs through an `RPCLogger`."""
        from eth_rpc import request_manager

        assert isinstance(request_manager.logger, RPCLogger)


class TestRPCLogger:
    """Test the custom logger methods."""

    def setup_method(self):
        """Set up a logger and string stream for capturing log output."""
        self.log_output = io.StringIO()
        self.logger = get_logger("test_rpc_logger")
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)
        handler = logging.StreamHandler(self.log_output)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        self.logger.addHandler(handler)
        self.logger.setLevel(logging.DEBUG)

    def test_verbose_method(self):
        """Test the verbose() method logs at the expected level."""
        self.logger.verbose("Sending eth_blockNumber")
        assert "VERBOSE: Sending eth_blockNumber" in self.log_output.getvalue()

    def test_verbose_respects_level(self):
        """Test that verbose messages are dropped above the verbose level."""
        self.logger.setLevel(logging.INFO)
        self.logger.verbose("Hidden payload")
        assert self.log_output.getvalue() == ""

    def test_standard_methods(self):
        """Test that standard log methods still work."""
        self.logger.debug("Debug message")
        self.logger.info("Info message")
        self.logger.warning("Warning message")

        log_output = self.log_output.getvalue()
        assert "DEBUG: Debug message" in log_output
        assert "INFO: Info message" in log_output
        assert "WARNING: Warning message" in log_output


class TestLogLevel:
    """Test parsing of log levels given on the command-line."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("DEBUG", logging.DEBUG),
            ("verbose", VERBOSE_LEVEL),
            ("Warning", logging.WARNING),
            ("15", 15),
        ],
    )
    def test_from_cli(self, value, expected):
        """Test that level names and numbers are accepted."""
        assert LogLevel.from_cli(value) == expected

    def test_from_cli_invalid(self):
        """Test that unknown level names are rejected."""
        with pytest.raises(ValueError, match="Invalid log level 'chatty'"):
            LogLevel.from_cli("chatty")


class TestFormatters:
    """Test the custom log formatters."""

    def test_utc_formatter(self):
        """Test that UTCFormatter formats timestamps correctly."""
        formatter = UTCFormatter(fmt="%(asctime)s: %(message)s")
        record = logging.makeLogRecord(
            {
                "msg": "Test message",
                "created": 1609459200.0,  # 2021-01-01 00:00:00 UTC
            }
        )

        formatted = formatter.format(record)
        assert re.match(r"2021-01-01 00:00:00\.\d{3}\+00:00: Test message", formatted)

    def test_color_formatter(self, monkeypatch):
        """Test that ColorFormatter adds color codes to the log level."""
        formatter = ColorFormatter(fmt="[%(levelname)s] %(message)s")
        record = logging.makeLogRecord(
            {
                "levelno": logging.ERROR,
                "levelname": "ERROR",
                "msg": "Error message",
            }
        )

        monkeypatch.setattr(ColorFormatter, "running_in_docker", False)
        formatted = formatter.format(record)
        assert "\033[31mERROR\033[0m" in formatted

        monkeypatch.setattr(ColorFormatter, "running_in_docker", True)
        formatted = formatter.format(record)
        assert "\033[31mERROR\033[0m" not in formatted
        assert "ERROR" in formatted

    def test_color_formatter_leaves_record_untouched(self, monkeypatch):
        """Test that coloring does not leak into other handlers sharing the record."""
        monkeypatch.setattr(ColorFormatter, "running_in_docker", False)
        record = logging.makeLogRecord(
            {"levelno": VERBOSE_LEVEL, "levelname": "VERBOSE", "msg": "payload"}
        )
        ColorFormatter(fmt="%(levelname)s").format(record)
        assert record.levelname == "VERBOSE"


class TestStandaloneConfiguration:
    """Test the standalone logging configuration function."""

    def test_configure_logging_defaults(self, clean_root_logger):
        """Test configure_logging with default parameters."""
        with patch("sys.stdout", new=io.StringIO()):
            handler = configure_logging()

            assert any(
                isinstance(h, logging.StreamHandler) for h in clean_root_logger.handlers
            )
            assert clean_root_logger.level == logging.INFO
            assert handler is None

    def test_configure_logging_with_file(self, clean_root_logger):
        """Test configure_logging with file output."""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = Path(temp_dir) / "nested" / "test.log"
            handler = configure_logging(log_file=log_file, log_to=None)

            assert isinstance(handler, logging.FileHandler)
            assert log_file.exists()

            get_logger("test_config").info("Test log message")
            handler.flush()
            assert "Test log message" in log_file.read_text()
            handler.close()

    def test_configure_logging_with_level(self, clean_root_logger):
        """Test configure_logging with custom log level."""
        configure_logging(log_level="DEBUG", log_to=None)
        assert clean_root_logger.level == logging.DEBUG

        configure_logging(log_level=VERBOSE_LEVEL, log_to=None)
        assert clean_root_logger.level == VERBOSE_LEVEL

    def test_configure_logging_to_stderr(self, clean_root_logger):
        """Test that console records can be sent to stderr, leaving stdout untouched."""
        with patch("sys.stdout", new=io.StringIO()) as stdout:
            with patch("sys.stderr", new=io.StringIO()) as stderr:
                configure_logging(log_level="WARNING", log_to="stderr", use_color=False)
                get_logger("test_stderr").warning("node unreachable")
        assert "[WARNING] test_stderr: node unreachable" in stderr.getvalue()
        assert stdout.getvalue() == ""

    def test_configure_logging_replaces_handlers(self, clean_root_logger):
        """Test that repeated configuration does not stack handlers."""
        with patch("sys.stdout", new=io.StringIO()):
            configure_logging()
            configure_logging()
        assert len(clean_root_logger.handlers) == 1


class TestPytestIntegration:
    """Test the pytest integration of the logging module."""

    def test_get_log_stem(self):
        """Test that the stem is built from the program and its subcommand."""
        assert re.fullmatch(r"pytest-\d{8}-\d{6}", get_log_stem("__main__", "-x"))
        stem = get_log_stem("eth_rpc", "blockNumber")
        assert re.fullmatch(r"eth_rpc-blockNumber-\d{8}-\d{6}", stem)

    def test_pytest_configure(self, monkeypatch, tmp_path, clean_root_logger):
        """Test that pytest_configure opens the session log file under `logs/`."""
        from pytest_plugins.logging.logging import pytest_configure

        monkeypatch.chdir(tmp_path)

        class MockConfig:
            def __init__(self):
                self.option = MagicMock()
                self.workerinput = {}

            def getoption(self, name):
                if name == "rpc_log_level":
                    return logging.INFO

        monkeypatch.setattr("sys.argv", ["pytest"])
        monkeypatch.setenv("PYTEST_XDIST_WORKER", "worker1")

        config = MockConfig()
        with patch("sys.stdout", new=io.StringIO()):
            pytest_configure(config)

        file_handlers = [
            h for h in clean_root_logger.handlers if isinstance(h, logging.FileHandler)
        ]
        assert len(file_handlers) == 1

        log_file = Path(file_handlers[0].baseFilename)
        assert log_file.exists()
        assert log_file.parent.resolve() == (tmp_path / "logs").resolve()
        assert log_file.name.endswith("-worker1.log")
        assert config.option.rpc_log_file_path == Path("logs") / log_file.name

    def test_report_header_names_log_file(self):
        """Test that the header names the session log file and nothing else."""
        from pytest_plugins.logging.logging import pytest_report_header

        config = MagicMock()
        config.option.rpc_log_file_path = Path("logs") / "pytest-main.log"
        assert pytest_report_header(config) == [f"Log file: {Path('logs') / 'pytest-main.log'}"]
        config.option.rpc_log_file_path = None
        assert pytest_report_header(config) == []
