"""Catalog flows built on the browser session."""

from .catalog import CatalogFlow
from .options import DirectOption, MenuThenOption, OptionLocator, probe_option_locator

__all__ = ["CatalogFlow", "DirectOption", "MenuThenOption", "OptionLocator", "probe_option_locator"]
