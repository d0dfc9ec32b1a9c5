"""Unit tests for the logging configuration module."""

import logging

import pytest

from profilehub.core import logging_config
from profilehub.core.logging_config import (
    DETAILED_FORMAT,
    JSON_FORMAT,
    MODULE_LOG_LEVELS,
    SIMPLE_FORMAT,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_root_handlers():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.mark.parametrize("fmt, expected", [("simple", SIMPLE_FORMAT), ("json", JSON_FORMAT), ("detailed", DETAILED_FORMAT)])
def test_format_selection(fmt, expected):
    setup_logging(log_level="WARNING", log_format=fmt, enable_file=False)
    handler = logging.getLogger().handlers[0]
    assert handler.formatter._fmt == expected
    assert handler.level == logging.WARNING


def test_setup_replaces_existing_handlers():
    setup_logging(enable_file=False)
    setup_logging(enable_file=False)
    assert len(logging.getLogger().handlers) == 1


def test_module_levels_applied():
    setup_logging(enable_file=False)
    for name, level in MODULE_LOG_LEVELS.items():
        assert logging.getLogger(name).level == logging.getLevelName(level)


def test_file_logging(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(logging_config, "ENABLE_FILE_LOGGING", True)
    monkeypatch.setattr(logging_config, "LOG_FILE_DIR", str(tmp_path / "logs"))

    setup_logging(enable_file=True)

    file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert (tmp_path / "logs" / "profilehub.log").exists()
    file_handlers[0].close()


def test_get_logger():
    assert get_logger("profilehub.test").name == "profilehub.test"
