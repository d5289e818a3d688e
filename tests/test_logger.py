"""
Tests for logging configuration
"""

import logging
from todolist.utils.logger import ROOT_LOGGER_NAME, get_logger, setup_logger


def test_get_logger_returns_package_child():
    child = get_logger("repository")
    assert child.name == "todolist.repository"
    assert child.parent is logging.getLogger(ROOT_LOGGER_NAME)


def test_setup_logger_with_file(tmp_path):
    """Test that a configured log file receives debug records"""
    log_file = tmp_path / "logs" / "todolist.log"
    logger = setup_logger("todolist.test_file", level="WARNING", log_file=log_file)
    try:
        assert len(logger.handlers) == 2
        logger.debug("written to file only")
        for handler in logger.handlers:
            handler.flush()
        assert "written to file only" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


def test_setup_logger_replaces_handlers():
    logger = setup_logger("todolist.test_console", level="INFO")
    logger = setup_logger("todolist.test_console", level="INFO")
    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.INFO
