# tests/test_logging.py
"""Tests for logging setup."""

import logging

import pytest

from tinyclass.logging import configure_logging, get_logger, resolve_level

pytestmark = pytest.mark.tier1


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_configure_logging_does_not_duplicate_handlers(restore_root_level):
    configure_logging(logging.INFO)
    count = len(logging.getLogger().handlers)

    configure_logging(logging.DEBUG)

    assert len(logging.getLogger().handlers) == count
    assert logging.getLogger().level == logging.DEBUG


def test_get_logger_follows_module_path():
    assert get_logger("tinyclass.core.registry") is logging.getLogger("tinyclass.core.registry")


def test_declarations_are_logged_with_tag(registry, caplog):
    with caplog.at_level(logging.DEBUG, logger="tinyclass"):
        registry.declare("Logged", attributes=["x"])

    assert "[REGISTRY] Declared Logged" in caplog.text


@pytest.mark.parametrize(
    "level, expected",
    [(logging.WARNING, logging.WARNING), ("debug", logging.DEBUG), ("Error", logging.ERROR)],
)
def test_resolve_level(level, expected):
    assert resolve_level(level) == expected


def test_resolve_level_rejects_unknown_names():
    with pytest.raises(ValueError):
        resolve_level("LOUD")


def test_configure_logging_accepts_level_names(restore_root_level):
    assert configure_logging("warning") == logging.WARNING
    assert logging.getLogger().level == logging.WARNING
