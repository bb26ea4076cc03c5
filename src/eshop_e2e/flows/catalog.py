"""Catalog browsing and basket interactions on the storefront."""

import logging

from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.remote.webelement import WebElement

from .. import locators
from ..browser.session import Session
from ..exceptions import ElementNotFoundError, PaginationLimitError, expect_equal
from ..models import BRAND_OPTIONS, TYPE_OPTIONS, FilterSelection
from .options import probe_option_locator

logger = logging.getLogger(__name__)

# Product slot whose button state reveals whether purchasing is allowed
GATED_PRODUCT_SLOT = 1


class CatalogFlow:
    """Drive the catalog page: filters, pagination and the basket badge.

    Nothing is cached between calls. Every count is read from the DOM as it
    is rendered at that moment.
    """

    def __init__(self, session: Session, max_pages: int | None = None):
        self.session = session
        self.driver = session.driver
        self.waiter = session.waiter
        self.max_pages = max_pages if max_pages is not None else session.config.catalog.max_pages
        if self.max_pages < 1:
            raise ValueError(f"max_pages must be at least 1, got {self.max_pages}")

    def _find(self, locator: tuple[str, str], message: str) -> WebElement:
        try:
            return self.driver.find_element(*locator)
        except NoSuchElementException as e:
            raise ElementNotFoundError(message) from e

    # Basket

    def basket_count(self) -> int:
        """Number of items shown in the header basket badge."""
        self.waiter.visible(locators.BASKET_ICON, "The basket icon is not visible")
        badge = self._find(locators.BASKET_BADGE, "The basket badge is not on the page")
        items_text = badge.text.strip()
        logger.debug("The number of items is: %s", items_text)
        return int(items_text)

    def check_product_button_disabled(self) -> None:
        """Assert that purchasing is gated: the product button looks disabled."""
        logger.debug("Checking that the product buttons are disabled")
        button = self._find(
            locators.product_button(GATED_PRODUCT_SLOT),
            f"Product button {GATED_PRODUCT_SLOT} not found",
        )
        expect_equal(
            locators.PRODUCT_BUTTON_DISABLED_CLASS,
            button.get_attribute("class"),
            "The eShop product button was expected to be disabled but was enabled",
        )

    def add_product_to_basket(self, slot: int, name: str) -> int:
        """
        Add the product in a 1-based catalog slot and check the basket grew by one.

        Args:
            slot: Position of the product card on the page
            name: Display name, used for logging and messages

        Returns:
            The basket count after the addition
        """
        items_before = self.basket_count()
        logger.debug("Adding the product: %s", name)

        button = self._find(locators.product_button(slot), f"Product button for {name} (slot {slot}) not found")
        expect_equal(
            locators.PRODUCT_BUTTON_ENABLED_CLASS,
            button.get_attribute("class"),
            f"The eShop product button for {name} was expected to be enabled but was disabled",
        )

        self.session.click(button)
        self.waiter.stale(button, f"The catalog did not reload after adding {name}")

        items_after = self.basket_count()
        expect_equal(
            items_before + 1,
            items_after,
            f"The number of items in the basket doesn't match after adding {name}",
        )
        return items_after

    # Filters

    def select_filter(self, filter_id: str, option_labels: tuple[str, ...], option_index: int) -> FilterSelection:
        """Choose the Nth option of a filter dropdown and apply it."""
        selection = FilterSelection(filter_id, option_index, tuple(option_labels))
        strategy = probe_option_locator(self.driver, filter_id)
        option = strategy.locate(self.session, selection)

        logger.debug("Selecting the %s : %s", filter_id, selection.label)
        self.session.click(option)

        logger.debug("Click the Filter Apply button")
        apply_button = self.session.click(locators.FILTER_APPLY_BUTTON)
        self.waiter.stale(apply_button, f"The catalog did not reload after filtering by {selection.label}")
        return selection

    def select_brand_filter(self, option: int) -> FilterSelection:
        """Brand options: 1) All Brands, 2) Net Core, 3) Others."""
        return self.select_filter(locators.BRAND_FILTER_ID, BRAND_OPTIONS, option)

    def select_type_filter(self, option: int) -> FilterSelection:
        """Type options: 1) All Types, 2) Mug, 3) TShirt, 4) Pin."""
        return self.select_filter(locators.TYPE_FILTER_ID, TYPE_OPTIONS, option)

    # Pagination

    def _page_item_count(self) -> int:
        return len(self.driver.find_elements(*locators.CATALOG_ITEM))

    def _pager_visible(self, locator: tuple[str, str]) -> bool:
        return any(e.is_displayed() for e in self.driver.find_elements(*locator))

    def _turn_page(self, locator: tuple[str, str]) -> None:
        pager = self.session.click(locator)
        self.waiter.stale(pager, f"The catalog did not change page after clicking {locator[1]}")

    def number_catalog_displayed_items(self) -> int:
        """
        Count the catalog items across the current page and every following page.

        The pager is walked back afterwards, so the call leaves the browser
        on the page it started from.

        Raises:
            PaginationLimitError: more than ``max_pages`` pages
        """
        logger.debug("Checking the visibility of the Next button")
        total_items = self._page_item_count()
        pages = 1

        while self._pager_visible(locators.NEXT_PAGE):
            if pages >= self.max_pages:
                raise PaginationLimitError(f"The catalog has more than {self.max_pages} pages")
            logger.debug("Going to page %d. Items counted so far: %d", pages + 1, total_items)
            self._turn_page(locators.NEXT_PAGE)
            pages += 1
            total_items += self._page_item_count()

        if pages == 1:
            logger.debug("Next button not visible. Counting only the elements on the current page.")

        for _ in range(pages - 1):
            self._turn_page(locators.PREVIOUS_PAGE)

        logger.debug("The total number of items is: %d", total_items)
        return total_items
