"""
Logging setup for the bravais package.

Every module logs through `logging.getLogger(__name__)`; this module only
maps the integer verbosity used by the factory onto the `bravais` logger.
"""

import logging
import sys

PACKAGE_LOGGER = 'bravais'
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def verbosity_to_level(verbosity: int) -> int:
    """0 -> WARNING, 1 -> INFO, 2 or more -> DEBUG."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(verbosity: int = 1, stream=None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Parameters
    ----------
    verbosity : int
        0 quiet, 1 info, 2 or more debug
    stream : file-like, optional
        Destination of the log records (default: sys.stdout)

    Returns
    -------
    logger : logging.Logger
        The `bravais` package logger

    Notes
    -----
    Calling this repeatedly only adjusts the level; a single handler is
    installed.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = verbosity_to_level(verbosity)
    logger.setLevel(level)

    handler = next((h for h in logger.handlers if getattr(h, '_bravais', False)), None)
    if handler is None:
        handler = logging.StreamHandler(stream=stream or sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._bravais = True
        logger.addHandler(handler)
    elif stream is not None:
        handler.setStream(stream)
    handler.setLevel(level)
    return logger
