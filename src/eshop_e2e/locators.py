"""DOM contract of the eShopOnContainers web storefront.

Every selector the suite relies on lives here. Positional XPaths are fragile
by nature; when the storefront markup changes, this is the file to update.
"""

from selenium.webdriver.common.by import By

# Catalog product cards
PRODUCT_BUTTON_XPATH = "/html/body/div/div[3]/div[{slot}]/form/input[1]"
PRODUCT_BUTTON_ENABLED_CLASS = "esh-catalog-button "
PRODUCT_BUTTON_DISABLED_CLASS = "esh-catalog-button is-disabled"
CATALOG_ITEM = (By.CLASS_NAME, "esh-catalog-item")

# Basket badge in the header
BASKET_ICON = (By.XPATH, "/html/body/header/div/article/section[3]/a")
BASKET_BADGE = (By.CLASS_NAME, "esh-basketstatus-badge")

# Filters
BRAND_FILTER_ID = "BrandFilterApplied"
TYPE_FILTER_ID = "TypesFilterApplied"
FILTER_OPTION_XPATH = '//*[@id="{filter_id}"]/option[{index}]'
FILTER_OPTIONS_XPATH = '//*[@id="{filter_id}"]/option'
MENU_OPTION_XPATH = "./option[{index}]"
FILTER_APPLY_BUTTON = (By.XPATH, "/html/body/section[2]/div/form/input[1]")

# Pager
NEXT_PAGE = (By.ID, "Next")
PREVIOUS_PAGE = (By.ID, "Previous")

# Identity
LOGIN_LINK = (By.XPATH, "//section[contains(@class, 'esh-identity')]//a[contains(@href, 'SignIn')]")
LOGIN_EMAIL = (By.ID, "Email")
LOGIN_PASSWORD = (By.ID, "Password")
LOGIN_SUBMIT = (By.XPATH, "//form//button[@type='submit']")
USER_MENU = (By.CLASS_NAME, "esh-identity-drop")
LOGOUT_LINK = (By.XPATH, "//a[contains(@href, 'Signout')]")


def product_button(slot: int) -> tuple[str, str]:
    """Locator for the "add to basket" button of a 1-based product slot."""
    return (By.XPATH, PRODUCT_BUTTON_XPATH.format(slot=slot))


def filter_option(filter_id: str, index: int) -> tuple[str, str]:
    """Locator for the 1-based option of a filter dropdown."""
    return (By.XPATH, FILTER_OPTION_XPATH.format(filter_id=filter_id, index=index))


def filter_options(filter_id: str) -> tuple[str, str]:
    """Locator matching every option of a filter dropdown."""
    return (By.XPATH, FILTER_OPTIONS_XPATH.format(filter_id=filter_id))
