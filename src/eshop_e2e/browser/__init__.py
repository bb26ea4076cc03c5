"""Browser collaborators: waits, clicks and the session lifecycle."""

from .click import ClickHelper, click_element
from .session import Session, create_driver, open_session
from .waiter import ElementWaiter

__all__ = ["ClickHelper", "ElementWaiter", "Session", "click_element", "create_driver", "open_session"]
