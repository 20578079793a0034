# utils/logger.py
import logging
import os
import sys

LOGGER_NAME = "submission_scanner"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Return the shared project logger, attaching a stdout handler the first time.
    Level comes from LOG_LEVEL (default INFO).
    """
    log = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        log.addHandler(handler)
        log.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
    return log


def set_level(level: str) -> None:
    logger.setLevel(level.upper())


logger = get_logger()
