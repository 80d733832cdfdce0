import logging

from config import LOG_LEVEL
from logger import LOGGER_NAME, setup_logger


def test_setup_logger_takes_level():
    try:
        logger = setup_logger("WARNING")
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.WARNING
    finally:
        setup_logger(LOG_LEVEL)


def test_setup_logger_does_not_duplicate_handlers():
    before = len(setup_logger().handlers)
    assert len(setup_logger().handlers) == before
    assert before >= 1
