"""Shared pytest configuration: browser tests only run with --e2e."""

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--e2e",
        action="store_true",
        default=False,
        help="run browser tests against a live storefront",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--e2e"):
        return
    skip_e2e = pytest.mark.skip(reason="browser test, pass --e2e to run")
    for item in items:
        if item.get_closest_marker("e2e"):
            item.add_marker(skip_e2e)
