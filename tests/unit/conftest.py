"""Fixtures for the unit tests."""

import pytest

from eshop_e2e.browser.session import open_session
from eshop_e2e.config import ArtifactsConfig, Config, WaitConfig
from eshop_e2e.flows.catalog import CatalogFlow

from fakes import FakeStorefront


@pytest.fixture
def config(tmp_path):
    """Config with short waits so failing lookups time out quickly."""
    return Config(
        waits=WaitConfig(timeout=0.3, poll_frequency=0.01, click_attempts=3),
        artifacts=ArtifactsConfig(directory=tmp_path / "failures"),
    )


@pytest.fixture
def storefront():
    return FakeStorefront()


@pytest.fixture
def session(storefront, config):
    with open_session(config, driver_factory=lambda _: storefront) as s:
        yield s


@pytest.fixture
def catalog(session):
    return CatalogFlow(session)
