"""
Core module containing the wait helper.

This package contains the Waiter class and the polling predicates
it hands to Selenium's WebDriverWait.
"""

from .conditions import (URL_CONTAINS, URL_EQUALS, URL_STARTS_WITH,
                         element_displayed, page_load_complete, url_matches)
from .helper import POLL_FREQUENCY, TIMEOUT, Waiter

__all__ = [
    "Waiter",
    "TIMEOUT",
    "POLL_FREQUENCY",
    "page_load_complete",
    "element_displayed",
    "url_matches",
    "URL_EQUALS",
    "URL_CONTAINS",
    "URL_STARTS_WITH",
]
