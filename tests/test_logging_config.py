"""
Tests for the logging configuration module
"""

import logging

from webtrees.shared.logging_config import get_project_logger, setup_logger


def test_setup_logger_basic():
    """Test basic logger setup"""
    logger = setup_logger("webtrees_test_logger")

    assert logger.name == "webtrees_test_logger"
    assert logger.level == logging.INFO
    assert len(logger.handlers) >= 1


def test_setup_logger_with_debug():
    """Test logger setup with debug level"""
    logger = setup_logger("webtrees_test_debug", level="DEBUG")

    assert logger.level == logging.DEBUG


def test_setup_logger_with_file(tmp_path):
    """Test logger setup with file output"""
    log_file = tmp_path / "test.log"
    logger = setup_logger("webtrees_test_file", log_file=str(log_file))

    logger.info("Test message")
    for handler in logger.handlers:
        handler.flush()

    assert log_file.exists()
    assert "Test message" in log_file.read_text()


def test_get_project_logger(monkeypatch):
    """Test project logger creation"""
    monkeypatch.delenv('WEBTREES_LOG_LEVEL', raising=False)
    logger = get_project_logger("webtrees_test_module")

    assert logger.name == "webtrees_test_module"
    assert logger.level == logging.INFO


def test_get_project_logger_level_from_environment(monkeypatch):
    """Test that WEBTREES_LOG_LEVEL sets the level of new loggers"""
    monkeypatch.setenv('WEBTREES_LOG_LEVEL', 'warning')
    logger = get_project_logger("webtrees_test_env_level")

    assert logger.level == logging.WARNING


def test_get_project_logger_verbose():
    """Test project logger with verbose mode"""
    logger_name = "webtrees_test_verbose"
    if logger_name in logging.Logger.manager.loggerDict:
        del logging.Logger.manager.loggerDict[logger_name]

    logger = get_project_logger(logger_name, verbose=True)

    assert logger.level == logging.DEBUG


def test_duplicate_logger_handlers():
    """Test that duplicate handlers aren't added"""
    logger1 = setup_logger("webtrees_duplicate_test")
    initial_handlers = len(logger1.handlers)

    logger2 = setup_logger("webtrees_duplicate_test")

    assert logger1 is logger2
    assert len(logger2.handlers) == initial_handlers
