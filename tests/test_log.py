"""
Tests for logging setup
"""
import logging

import pytest

from coursecare.log import get_logger, setup_logging


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_installs_single_handler(self, restore_root):
        setup_logging("debug")
        assert restore_root.level == logging.DEBUG
        assert len(restore_root.handlers) == 1

    def test_default_level(self, restore_root, monkeypatch):
        monkeypatch.setattr("coursecare.config.LOG_LEVEL", "WARNING")
        setup_logging()
        assert restore_root.level == logging.WARNING

    def test_get_logger(self):
        assert get_logger("coursecare.test").name == "coursecare.test"
