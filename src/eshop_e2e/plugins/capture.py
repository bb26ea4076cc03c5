"""Pytest plugin to capture page source and screenshots on test failure."""

import logging
from datetime import datetime
from pathlib import Path

from selenium.common.exceptions import WebDriverException

from ..browser.session import Session
from ..config import Config, load_config

logger = logging.getLogger(__name__)

# Fixtures that may hold a browser, checked in order
FIXTURE_NAMES = ["session", "driver", "browser"]


def pytest_runtest_makereport(item, call):
    """Hook to execute after each test phase."""
    if call.when == "call" and call.excinfo is not None:
        logger.debug("Test failed: %s, capturing artifacts", item.name)
        try:
            _capture_artifacts(item)
        except Exception as e:
            # The test outcome must be reported even when capturing breaks
            logger.warning("Could not capture artifacts for %s: %s", item.name, e)


def _find_browser(item):
    """Return the test's session or driver fixture, if any."""
    funcargs = getattr(item, "funcargs", {})
    for name in FIXTURE_NAMES:
        if name in funcargs:
            return funcargs[name]

    # Class attributes (unittest style)
    instance = getattr(item, "instance", None)
    if instance is not None:
        for name in FIXTURE_NAMES:
            if hasattr(instance, name):
                return getattr(instance, name)

    return None


def _artifact_stem(item, failure_dir: Path) -> Path:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    clean_name = item.name.replace("::", "_").replace("/", "_").replace("[", "_").replace("]", "")
    return failure_dir / f"{clean_name}_{timestamp}"


def _capture_artifacts(item, config: Config | None = None) -> list[Path]:
    """Save whatever the failed test's browser can give us.

    Uses the session's own configuration when the test ran through a
    ``Session``; otherwise the configuration is loaded afresh.
    """
    browser = _find_browser(item)
    if browser is None:
        return []

    if isinstance(browser, Session):
        driver = browser.driver
        config = config or browser.config
    else:
        driver = browser
        config = config or load_config()

    failure_dir = config.artifacts.directory
    failure_dir.mkdir(parents=True, exist_ok=True)
    stem = _artifact_stem(item, failure_dir)
    saved: list[Path] = []

    if config.artifacts.page_source:
        try:
            html_path = stem.parent / f"{stem.name}.html"
            html_path.write_text(driver.page_source, encoding="utf-8")
            item.user_properties.append(("page_source_path", str(html_path)))
            saved.append(html_path)
        except (WebDriverException, OSError) as e:
            logger.warning("Could not save page source for %s: %s", item.name, e)

    if config.artifacts.screenshots:
        try:
            png_path = stem.parent / f"{stem.name}.png"
            if driver.save_screenshot(str(png_path)):
                item.user_properties.append(("screenshot_path", str(png_path)))
                saved.append(png_path)
        except (WebDriverException, OSError) as e:
            logger.warning("Could not save screenshot for %s: %s", item.name, e)

    return saved
