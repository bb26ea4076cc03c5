"""Strategies for reaching a filter dropdown option."""

import logging
from abc import ABC, abstractmethod

from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webelement import WebElement

from .. import locators
from ..browser.session import Session
from ..exceptions import ElementNotFoundError
from ..models import FilterSelection

logger = logging.getLogger(__name__)


class OptionLocator(ABC):
    """Abstract way of locating the element of a dropdown option."""

    @abstractmethod
    def locate(self, session: Session, selection: FilterSelection) -> WebElement:
        """
        Find the option element for ``selection``.

        Raises:
            ElementNotFoundError: the option is not on the page
        """
        pass


class DirectOption(OptionLocator):
    """The option elements are rendered and can be addressed directly."""

    def locate(self, session: Session, selection: FilterSelection) -> WebElement:
        try:
            return session.driver.find_element(*selection.option_locator)
        except NoSuchElementException as e:
            raise ElementNotFoundError(
                f"Option {selection.option_index} ({selection.label}) of {selection.filter_id} not found"
            ) from e


class MenuThenOption(OptionLocator):
    """The options only exist once the dropdown menu has been opened."""

    def locate(self, session: Session, selection: FilterSelection) -> WebElement:
        try:
            menu = session.driver.find_element(By.ID, selection.filter_id)
        except NoSuchElementException as e:
            raise ElementNotFoundError(f"Filter {selection.filter_id} not found") from e

        session.click(menu)
        try:
            return menu.find_element(
                By.XPATH, locators.MENU_OPTION_XPATH.format(index=selection.option_index)
            )
        except NoSuchElementException as e:
            raise ElementNotFoundError(
                f"Option {selection.option_index} ({selection.label}) not found in "
                f"the {selection.filter_id} menu"
            ) from e


def probe_option_locator(driver, filter_id: str) -> OptionLocator:
    """Pick the option strategy from whether the options are already rendered."""
    if driver.find_elements(*locators.filter_options(filter_id)):
        return DirectOption()
    logger.debug("Options of %s not rendered, opening the menu first", filter_id)
    return MenuThenOption()
