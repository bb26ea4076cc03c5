"""Explicit waits over the live DOM."""

import logging
from typing import Any, Callable

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from ..config import Config
from ..exceptions import ElementNotFoundError

logger = logging.getLogger(__name__)

Locator = tuple[str, str]


class ElementWaiter:
    """Poll the DOM until a condition holds or the timeout elapses."""

    def __init__(self, driver, timeout: float = 10.0, poll_frequency: float = 0.5):
        self.driver = driver
        self.timeout = timeout
        self.poll_frequency = poll_frequency

    @classmethod
    def from_config(cls, driver, config: Config) -> "ElementWaiter":
        return cls(driver, config.waits.timeout, config.waits.poll_frequency)

    def wait_until(self, condition: Callable[[Any], Any], message: str) -> Any:
        """
        Wait for ``condition(driver)`` to return a truthy value.

        Returns:
            The condition's last return value

        Raises:
            ElementNotFoundError: the timeout elapsed first
        """
        wait = WebDriverWait(self.driver, self.timeout, poll_frequency=self.poll_frequency)
        try:
            return wait.until(condition)
        except TimeoutException as e:
            logger.debug("Wait timed out after %ss: %s", self.timeout, message)
            raise ElementNotFoundError(message) from e

    def visible(self, locator: Locator, message: str | None = None) -> WebElement:
        return self.wait_until(
            EC.visibility_of_element_located(locator),
            message or f"Element {locator[1]!r} is not visible",
        )

    def clickable(self, target: Locator | WebElement, message: str | None = None) -> WebElement:
        """Wait for a locator or an already-located element to be clickable."""
        if message is None:
            name = target[1] if isinstance(target, tuple) else "element"
            message = f"Element {name!r} is not clickable"
        return self.wait_until(EC.element_to_be_clickable(target), message)

    def stale(self, element: WebElement, message: str | None = None) -> bool:
        """Wait for the page holding ``element`` to be replaced."""
        return self.wait_until(
            EC.staleness_of(element),
            message or "The page was not reloaded",
        )
