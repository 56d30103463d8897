"""Logging setup for applications embedding the calculator."""

import logging
import sys

LOGGER_NAME = "scicalc"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level="INFO", stream=None):
    """
    Attaches a single stream handler to the "scicalc" logger.

    Safe to call more than once: an existing handler is replaced rather
    than duplicated.

    Args:
        level (str|int): Level name or number
        stream: Output stream, stderr by default

    Returns:
        logging.Logger: The configured package logger
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))

    logger.handlers.clear()
    logger.addHandler(handler)
    return logger
