"""Browser session: driver lifecycle plus sign-in and sign-out."""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator

from selenium import webdriver
from selenium.common.exceptions import WebDriverException

from .. import locators
from ..config import BrowserConfig, Config
from ..exceptions import BrowserSetupError
from .click import ClickHelper
from .waiter import ElementWaiter

logger = logging.getLogger(__name__)


def _browser_options(browser: BrowserConfig):
    if browser.name == "firefox":
        options = webdriver.FirefoxOptions()
    elif browser.name == "edge":
        options = webdriver.EdgeOptions()
    else:
        options = webdriver.ChromeOptions()

    if browser.headless:
        options.add_argument("--headless" if browser.name == "firefox" else "--headless=new")
    options.add_argument(f"--window-size={browser.window_width},{browser.window_height}")
    return options


def create_driver(browser: BrowserConfig):
    """Start a local or remote WebDriver for the configured browser."""
    options = _browser_options(browser)
    try:
        if browser.remote_url:
            driver = webdriver.Remote(command_executor=browser.remote_url, options=options)
        elif browser.name == "firefox":
            driver = webdriver.Firefox(options=options)
        elif browser.name == "edge":
            driver = webdriver.Edge(options=options)
        else:
            driver = webdriver.Chrome(options=options)
    except WebDriverException as e:
        raise BrowserSetupError(f"Could not start {browser.name}: {e.msg or e}") from e

    if browser.name == "firefox":
        driver.set_window_size(browser.window_width, browser.window_height)
    return driver


class Session:
    """Owns one browser handle for the duration of a test."""

    def __init__(self, driver, config: Config):
        self.driver = driver
        self.config = config
        self.waiter = ElementWaiter.from_config(driver, config)
        self.click = ClickHelper(driver, self.waiter, config.waits.click_attempts)
        self._closed = False

    def open_catalog(self) -> None:
        """Navigate to the storefront home page, which lists the catalog."""
        logger.info("Opening catalog at %s", self.config.storefront.base_url)
        self.driver.get(self.config.storefront.base_url)

    def is_authenticated(self) -> bool:
        return bool(self.driver.find_elements(*locators.USER_MENU))

    def login(self, username: str | None = None, password: str | None = None) -> None:
        """Sign in through the identity form and wait for the user menu."""
        username = username or self.config.storefront.username
        password = password or self.config.storefront.password
        logger.info("Logging in as %s", username)

        self.click(locators.LOGIN_LINK)

        email_input = self.waiter.visible(locators.LOGIN_EMAIL, "The login email field is not visible")
        email_input.clear()
        email_input.send_keys(username)

        password_input = self.waiter.visible(locators.LOGIN_PASSWORD, "The login password field is not visible")
        password_input.clear()
        password_input.send_keys(password)

        self.click(locators.LOGIN_SUBMIT)
        self.waiter.visible(locators.USER_MENU, f"Login as {username} did not complete")

    def logout(self) -> None:
        """Sign out through the user menu and wait for the login link."""
        logger.info("Logging out")
        self.click(locators.USER_MENU)
        self.click(locators.LOGOUT_LINK)
        self.waiter.visible(locators.LOGIN_LINK, "Logout did not complete")

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        logger.info("Closing browser session")
        self.driver.quit()


@contextmanager
def open_session(
    config: Config,
    driver_factory: Callable[[BrowserConfig], object] = create_driver,
) -> Iterator[Session]:
    """Acquire a browser, open the catalog, and always release the browser."""
    driver = driver_factory(config.browser)
    session = Session(driver, config)
    try:
        session.open_catalog()
        yield session
    finally:
        session.close()
