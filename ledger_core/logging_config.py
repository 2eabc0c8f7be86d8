"""
Logging setup for the ledger.

Every module logs through ``get_logger(__name__)``, so all records
land under the ``ledger_core`` logger. Applications call
``configure_logging()`` once at startup; library use leaves the
handlers to the host application.
"""

import logging

from ledger_core.config import get_settings

LOGGER_NAME = "ledger_core"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``ledger_core`` hierarchy."""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a stream handler to the ``ledger_core`` logger.

    Calling it again replaces the handler rather than stacking
    a second one, so repeated setup never duplicates output.
    """
    settings = get_settings()
    logger = logging.getLogger(LOGGER_NAME)

    for handler in list(logger.handlers):
        if getattr(handler, "_ledger_core", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._ledger_core = True
    logger.addHandler(handler)
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    logger.propagate = False
    return logger


def reset_logging() -> None:
    """Remove handlers installed by configure_logging (used by tests)."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_ledger_core", False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
