"""Logging setup for the resume_schema package."""

from __future__ import annotations

import logging

LOGGER_NAME = "resume_schema"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a console handler to the package logger.

    Safe to call more than once; the handler is only added the first time.
    Level is INFO when *verbose*, WARNING otherwise.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    return logger
