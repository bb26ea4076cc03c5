"""Click dispatch that tolerates transient overlays."""

import logging

from selenium.common.exceptions import ElementClickInterceptedException
from selenium.webdriver.remote.webelement import WebElement
from tenacity import (
    RetryError,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from .waiter import ElementWaiter, Locator

logger = logging.getLogger(__name__)

RETRY_WAIT_SECONDS = 0.2


def click_element(
    driver,
    waiter: ElementWaiter,
    target: Locator | WebElement,
    attempts: int = 3,
) -> WebElement:
    """
    Wait until ``target`` is clickable, then click it.

    An intercepted click is retried up to ``attempts`` times; if something
    still covers the element, the click is dispatched through JavaScript.

    Returns:
        The clicked element
    """
    element = waiter.clickable(target)

    @retry(
        stop=stop_after_attempt(attempts),
        wait=wait_fixed(RETRY_WAIT_SECONDS),
        retry=retry_if_exception_type(ElementClickInterceptedException),
    )
    def _click() -> None:
        element.click()

    try:
        _click()
    except RetryError:
        logger.debug("Click intercepted %d times, dispatching through JavaScript", attempts)
        driver.execute_script("arguments[0].click();", element)

    return element


class ClickHelper:
    """Click helper bound to one driver and waiter."""

    def __init__(self, driver, waiter: ElementWaiter, attempts: int = 3):
        self.driver = driver
        self.waiter = waiter
        self.attempts = attempts

    def __call__(self, target: Locator | WebElement) -> WebElement:
        return click_element(self.driver, self.waiter, target, self.attempts)
