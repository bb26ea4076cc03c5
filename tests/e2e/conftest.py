"""Fixtures for the browser scenarios: one browser session per test."""

import pytest

from eshop_e2e.browser.session import open_session
from eshop_e2e.config import load_config
from eshop_e2e.flows.catalog import CatalogFlow
from eshop_e2e.logging_config import setup_logging
# Failure artifacts are only captured for the tests in this directory
from eshop_e2e.plugins.capture import pytest_runtest_makereport  # noqa: F401


@pytest.fixture(scope="session")
def e2e_config():
    config = load_config()
    setup_logging(config)
    return config


@pytest.fixture
def session(e2e_config):
    with open_session(e2e_config) as browser_session:
        yield browser_session


@pytest.fixture
def catalog(session):
    return CatalogFlow(session)
