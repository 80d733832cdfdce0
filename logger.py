# logger.py
import logging
import sys

from config import LOG_FILE, LOG_LEVEL

LOGGER_NAME = "eisenhower_matrix"


def setup_logger(level=LOG_LEVEL):
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Prevent duplicate handlers; a repeat call only moves the level
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )

    # Console handler (for local / hosted logs)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler, skipped when LOG_FILE is set to an empty string
    if LOG_FILE:
        file_handler = logging.FileHandler(LOG_FILE)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
