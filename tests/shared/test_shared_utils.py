"""Tests for utility functions."""

import logging

from src.shared.utils import setup_logger


def test_setup_logger_basic():
    """Test basic logger setup."""
    logger = setup_logger("test_logger")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "test_logger"
    assert logger.level == logging.INFO


def test_setup_logger_with_file(tmp_path):
    """Test logger setup with file handler."""
    log_file = tmp_path / "logs" / "test.log"
    logger = setup_logger("test_file_logger", log_file=log_file)

    assert log_file.exists()
    logger.info("Test message")

    assert log_file.read_text()


def test_setup_logger_custom_level():
    """Test logger with custom level."""
    logger = setup_logger("test_debug_logger", level=logging.DEBUG)
    assert logger.level == logging.DEBUG


def test_setup_logger_string_level():
    """Test logger with a level name."""
    logger = setup_logger("test_string_level_logger", level="warning")
    assert logger.level == logging.WARNING


def test_setup_logger_does_not_duplicate_handlers():
    """Repeated setup keeps a single console handler."""
    setup_logger("test_repeat_logger")
    logger = setup_logger("test_repeat_logger", level="DEBUG")
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
