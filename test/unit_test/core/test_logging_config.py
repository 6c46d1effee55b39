"""Unit tests for the logging configuration module."""

import importlib
import logging

import pytest

from expressfix.core import logging_config
from expressfix.core.logging_config import (
    DETAILED_FORMAT,
    JSON_FORMAT,
    LOG_FILE_NAME,
    MODULE_LOG_LEVELS,
    SIMPLE_FORMAT,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_logging():
    """Put the root logger and module levels back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    module_levels = {name: logging.getLogger(name).level for name in MODULE_LOG_LEVELS}
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
    for name, module_level in module_levels.items():
        logging.getLogger(name).setLevel(module_level)


def console_handler() -> logging.Handler:
    return next(h for h in logging.getLogger().handlers if type(h) is logging.StreamHandler)


class TestSetupLogging:
    def test_console_handler_uses_requested_level(self):
        setup_logging(log_level="warning", enable_file=False)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert console_handler().level == logging.WARNING

    @pytest.mark.parametrize(
        "fmt,expected",
        [("simple", SIMPLE_FORMAT), ("detailed", DETAILED_FORMAT), ("json", JSON_FORMAT), ("unknown", DETAILED_FORMAT)],
    )
    def test_formats(self, fmt, expected):
        setup_logging(log_format=fmt, enable_file=False)
        assert console_handler().formatter._fmt == expected

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging(enable_file=False)
        setup_logging(enable_file=False)
        streams = [h for h in logging.getLogger().handlers if type(h) is logging.StreamHandler]
        assert len(streams) == 1

    def test_file_logging(self, tmp_path):
        log_dir = tmp_path / "logs"
        setup_logging(enable_file=True, log_file_dir=str(log_dir))
        get_logger("expressfix.server.test").info("written to file")

        file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.DEBUG
        file_handlers[0].flush()
        assert "written to file" in (log_dir / LOG_FILE_NAME).read_text()

    def test_module_levels_are_applied(self):
        setup_logging(enable_file=False)
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        assert logging.getLogger("expressfix.server.api").level == logging.DEBUG
        assert logging.getLogger("PIL").level == logging.WARNING


class TestConfigLoading:
    def test_values_come_from_settings(self):
        from expressfix.server.core.config import settings

        config = logging_config._get_logging_config()
        assert config["log_level"] == settings.log_level.upper()
        assert config["log_format"] == settings.log_format
        assert config["enable_file_logging"] == settings.log_file_enabled

    def test_get_logger_returns_named_logger(self):
        logger = get_logger("expressfix.server.api.v1.uploads")
        assert logger.name == "expressfix.server.api.v1.uploads"
        assert logger is logging.getLogger("expressfix.server.api.v1.uploads")


@pytest.mark.parametrize(
    "module_name",
    [
        "expressfix.core.monitoring",
        "expressfix.server.services.auth",
        "expressfix.server.services.storage",
        "expressfix.server.services.notifications",
        "expressfix.server.services.deps",
        "expressfix.server.api.v1.uploads",
        "expressfix.server.main",
    ],
)
def test_modules_log_through_get_logger(module_name):
    module = importlib.import_module(module_name)
    assert module.get_logger is get_logger
    assert module.logger is logging.getLogger(module_name)
