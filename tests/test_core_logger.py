"""
Tests for logging configuration.
"""

import pytest
import sys
import logging
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bandcamp_download.core.logger import setup_logging, get_logger, log_fields


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self):
        """Test setup_logging with default parameters."""
        logger = setup_logging()

        assert logger is not None
        assert logger.name == "bandcamp_download"
        assert logger.level == logging.INFO
        assert logger.propagate is False

    def test_setup_logging_custom_level(self):
        """Test setup_logging with custom level."""
        logger = setup_logging(level="DEBUG")

        assert logger.level == logging.DEBUG
        assert logger.handlers[0].level == logging.DEBUG

    def test_setup_logging_disable_console(self):
        """Test setup_logging with console disabled."""
        logger = setup_logging(enable_console=False)

        assert logger.handlers == []

    def test_setup_logging_removes_existing_handlers(self):
        """Test that setup_logging does not stack handlers."""
        setup_logging()
        logger = setup_logging()

        assert len(logger.handlers) == 1

    def test_setup_logging_invalid_level(self):
        """Test setup_logging with invalid level."""
        logger = setup_logging(level="INVALID_LEVEL")
        assert logger.level == logging.INFO

    def test_setup_logging_non_level_attribute(self):
        """Test that names of non-level logging attributes fall back to INFO."""
        logger = setup_logging(level="Logger")
        assert logger.level == logging.INFO


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_creates_logger(self):
        """Test that get_logger creates a namespaced logger."""
        logger = get_logger("test_module")

        assert logger.name == "bandcamp_download.test_module"
        assert isinstance(logger, logging.Logger)

    def test_get_logger_sets_up_main_logger(self):
        """Test that get_logger sets up main logger if needed."""
        main_logger = logging.getLogger("bandcamp_download")
        main_logger.handlers.clear()

        get_logger("test_module")

        assert len(main_logger.handlers) > 0

    def test_get_logger_same_module_returns_same_logger(self):
        """Test that get_logger returns same logger for same module."""
        assert get_logger("test_module") is get_logger("test_module")


class TestLogFields:
    """Tests for log_fields helper."""

    def test_log_fields_renders_pairs(self):
        """Test that fields are rendered in order as key='value'."""
        assert log_fields(artist="Foo", track_number=1) == "artist='Foo' track_number=1"

    def test_log_fields_skips_none(self):
        """Test that None values are left out."""
        assert log_fields(url="http://x", path=None) == "url='http://x'"

    def test_log_fields_empty(self):
        """Test that no fields render as an empty string."""
        assert log_fields() == ""
