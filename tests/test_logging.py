"""Tests for logging setup."""

import logging

import pytest

from reply_drafter.utils.logging import configure_logging, get_logger


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    package_level = logging.getLogger("reply_drafter").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("reply_drafter").setLevel(package_level)


def test_configure_sets_package_level(restore_logging):
    configure_logging("debug")
    assert logging.getLogger("reply_drafter").level == logging.DEBUG
    assert logging.getLogger("streamlit").level == logging.WARNING


def test_get_logger_is_cached():
    assert get_logger("reply_drafter.session") is get_logger("reply_drafter.session")
