"""Exceptions raised by the catalog flows and browser helpers."""


class E2EError(Exception):
    """Base exception for all suite failures."""

    pass


class ElementNotFoundError(E2EError):
    """Element was not found, or never reached the awaited condition."""

    pass


class UnexpectedStateError(E2EError, AssertionError):
    """An observed page value disagrees with the expected one."""

    def __init__(self, message: str, expected=None, actual=None):
        super().__init__(f"{message} (expected: {expected!r}, actual: {actual!r})")
        self.expected = expected
        self.actual = actual


class PaginationLimitError(E2EError):
    """The catalog kept offering a next page past the configured limit."""

    pass


class BrowserSetupError(E2EError):
    """Browser initialization failed."""

    pass


def expect_equal(expected, actual, message: str) -> None:
    """Raise UnexpectedStateError unless ``actual == expected``."""
    if actual != expected:
        raise UnexpectedStateError(message, expected=expected, actual=actual)
