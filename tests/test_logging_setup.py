import logging
import sys

import pytest

from alphabase64.logging_setup import LOG_FORMAT, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_installs_single_stderr_handler(restore_root_logger):
    configure_logging("debug")
    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    handler = root.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr
    assert handler.formatter._fmt == LOG_FORMAT


def test_unknown_level_falls_back_to_info(restore_root_logger):
    configure_logging("chatty")
    assert restore_root_logger.level == logging.INFO
