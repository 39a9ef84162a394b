"""Logging helpers.

`get_logger` hands out loggers that share a single stream handler so every
module logs in the same format.
"""

import logging

from config import LOG_LEVEL

_formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

_stream_handler = logging.StreamHandler()
_stream_handler.setFormatter(_formatter)


def get_logger(name: str = __name__, level: str = LOG_LEVEL) -> logging.Logger:
    """Return a logger with the shared stream handler attached once."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level)
        logger.addHandler(_stream_handler)
    return logger
