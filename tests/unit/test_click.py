"""Tests for the click helper."""

import pytest

from eshop_e2e import locators
from eshop_e2e.browser.click import ClickHelper, click_element
from eshop_e2e.browser.waiter import ElementWaiter
from eshop_e2e.exceptions import ElementNotFoundError


@pytest.fixture
def waiter(storefront):
    storefront.get("http://localhost:5100")
    return ElementWaiter(storefront, timeout=0.2, poll_frequency=0.01)


class TestClickElement:

    def test_clicks_locator(self, storefront, waiter):
        element = click_element(storefront, waiter, locators.NEXT_PAGE)
        assert element.name == "Next"
        assert storefront.page == 1

    def test_intercepted_click_is_retried(self, storefront, waiter):
        storefront.intercepts["Next"] = 2
        click_element(storefront, waiter, locators.NEXT_PAGE, attempts=3)

        assert storefront.page == 1
        assert storefront.scripts == []

    def test_falls_back_to_javascript(self, storefront, waiter):
        storefront.intercepts["Next"] = 10
        click_element(storefront, waiter, locators.NEXT_PAGE, attempts=2)

        assert storefront.page == 1
        assert storefront.scripts == ["arguments[0].click();"]

    def test_hidden_element_is_not_clicked(self, storefront, waiter):
        with pytest.raises(ElementNotFoundError):
            click_element(storefront, waiter, locators.PREVIOUS_PAGE)
        assert "Previous" not in storefront.clicks


class TestClickHelper:

    def test_bound_helper(self, storefront, waiter):
        click = ClickHelper(storefront, waiter, attempts=1)
        click(locators.NEXT_PAGE)
        assert storefront.clicks == ["Next"]
