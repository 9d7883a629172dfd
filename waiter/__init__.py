"""
Selenium waiter package.

This package provides named explicit waits for Selenium WebDriver:
page load completion, element visibility, URL matching and
click-then-wait sequences.
"""

__version__ = "1.0.0"
__author__ = "Michael Elliott"

from .core.conditions import element_displayed, page_load_complete, url_matches
from .core.helper import TIMEOUT, Waiter

__all__ = ["Waiter", "TIMEOUT", "page_load_complete", "element_displayed", "url_matches"]
