"""Logging setup for the ``starlight`` logger tree.

Modules log through ``logging.getLogger("starlight.<area>")``; this module
only attaches the handler that prints them.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "starlight"


def configure_logging(level: str | int = "info") -> logging.Logger:
    """Attach a stream handler to the ``starlight`` logger.

    Idempotent: calling it again only updates the level.
    """
    logger = logging.getLogger("starlight")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
