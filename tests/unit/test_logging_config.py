"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from eshop_e2e.config import Config, LoggingConfig
from eshop_e2e.logging_config import LOGGER_NAME, setup_logging


@pytest.fixture(autouse=True)
def reset_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])


def test_installs_single_rich_handler():
    setup_logging(Config(logging=LoggingConfig(level="debug")))
    logger = setup_logging(Config(logging=LoggingConfig(level="warning")))

    assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_flow_loggers_are_children():
    assert logging.getLogger("eshop_e2e.flows.catalog").parent.name.startswith(LOGGER_NAME)
