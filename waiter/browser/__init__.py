"""
Browser module for starting the WebDriver used by the command line.

The Waiter itself never creates or owns a browser; these helpers are
only needed when waiter is run as a program.
"""

from .driver import get_random_user_agent, setup_webdriver
from .stealth import apply_stealth_mode

__all__ = [
    "setup_webdriver",        # Create a Chrome WebDriver with retries
    "apply_stealth_mode",     # Patch the driver against bot detection
    "get_random_user_agent",  # Random user agent for new sessions
]
