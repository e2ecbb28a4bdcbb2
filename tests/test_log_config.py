import logging
import sys

import pytest

from log_config import LOG_FORMAT, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.mark.parametrize("level, expected", [
    ("debug", logging.DEBUG),
    ("WARNING", logging.WARNING),
    (logging.ERROR, logging.ERROR),
])
def test_level_from_name_or_constant(restore_root_logger, level, expected):
    setup_logging(level)
    assert restore_root_logger.level == expected


def test_single_stdout_handler_after_repeated_setup(restore_root_logger):
    setup_logging("INFO")
    setup_logging("INFO")

    handlers = restore_root_logger.handlers
    assert len(handlers) == 1
    assert handlers[0].stream is sys.stdout
    assert handlers[0].formatter._fmt == LOG_FORMAT


def test_unknown_level_name_rejected(restore_root_logger):
    with pytest.raises(ValueError):
        setup_logging("LOUD")
