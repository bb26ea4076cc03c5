"""Logging setup with rich console output."""

import logging

from rich.logging import RichHandler

from .config import Config

LOGGER_NAME = "eshop_e2e"


def setup_logging(config: Config) -> logging.Logger:
    """Attach a RichHandler to the package logger.

    Idempotent: a second call only updates the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.logging.level.upper())

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            rich_tracebacks=config.logging.rich_tracebacks,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)

    return logger
