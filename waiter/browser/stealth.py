"""
Browser stealth configuration to avoid bot detection.
"""

from selenium.common.exceptions import WebDriverException
from selenium_stealth import stealth


def apply_stealth_mode(driver):
    """
    Apply stealth mode to the WebDriver to avoid bot detection.

    Pages that gate their redirects on bot checks otherwise never reach
    the URL being waited for.

    Args:
        driver: Selenium WebDriver instance

    Returns:
        WebDriver: The modified WebDriver instance
    """
    try:
        stealth(
            driver,
            languages=["en-US", "en"],
            vendor="Google Inc.",
            platform="Win32",
            webgl_vendor="Intel Inc.",
            renderer="Intel Iris OpenGL Engine",
            fix_hairline=True,
        )
        print("Applied stealth mode to WebDriver")
        return driver
    except WebDriverException as e:
        print(f"Warning: Could not apply stealth mode: {e}")
        return driver
