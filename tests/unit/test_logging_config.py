"""
Unit tests for logging configuration.
"""
import logging

import pytest

from feedback_service.logging_config import LOG_FORMAT, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level

    yield root

    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:

    def test_installs_single_handler(self, restore_root_logger):
        configure_logging("debug")
        configure_logging("debug")

        root = restore_root_logger
        assert len(root.handlers) == 1
        assert root.handlers[0].formatter._fmt == LOG_FORMAT
        assert root.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        configure_logging("chatty")

        assert restore_root_logger.level == logging.INFO
