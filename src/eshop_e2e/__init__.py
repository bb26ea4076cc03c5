"""Browser end-to-end tests for the eShopOnContainers catalog and basket."""

__version__ = "0.1.0"
