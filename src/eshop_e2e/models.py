"""Catalog data models and the storefront's seed-data expectations."""

from dataclasses import dataclass

from . import locators

BRAND_OPTIONS = ("All Brands", "Net Core", "Others")
TYPE_OPTIONS = ("All Types", "Mug", "TShirt", "Pin")

# Displayed items per (brand option, type option) for the default seed catalog
EXPECTED_ITEMS: dict[tuple[int, int], int] = {
    (brand, type_): count
    for brand, row in enumerate(((14, 4, 7, 3), (7, 2, 3, 2), (7, 2, 4, 1)), start=1)
    for type_, count in enumerate(row, start=1)
}

# (product slot, display name) added in the basket scenario
BASKET_PRODUCTS = ((1, "NetCore Cup"), (3, "Hoodie"), (6, "Pin"))


@dataclass(frozen=True)
class FilterSelection:
    """One dropdown choice: the filter element id and a 1-based option."""

    filter_id: str
    option_index: int
    options: tuple[str, ...]

    def __post_init__(self):
        if not 1 <= self.option_index <= len(self.options):
            raise ValueError(
                f"Option {self.option_index} out of range for {self.filter_id} "
                f"(1..{len(self.options)})"
            )

    @property
    def label(self) -> str:
        """Display name of the selected option."""
        return self.options[self.option_index - 1]

    @property
    def option_locator(self) -> tuple[str, str]:
        """Locator of the selected option element."""
        return locators.filter_option(self.filter_id, self.option_index)
