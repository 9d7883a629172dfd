#!/usr/bin/env python3
"""
WebDriver setup and initialization module.

This module contains functions for creating and configuring Chrome
WebDriver instances for the command-line waiter.
"""

import platform
import random
import time

from selenium import webdriver
from selenium.common.exceptions import (SessionNotCreatedException,
                                        WebDriverException)
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service
from webdriver_manager.chrome import ChromeDriverManager

USER_AGENTS = [
    # Chrome on Windows
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36",
    # Chrome on macOS
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36",
    # Chrome on Linux
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36",
    # Edge
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 Edg/120.0.0.0",
]


def get_random_user_agent():
    """
    Return a random Chromium user agent string.

    Returns:
        str: Random user agent string
    """
    return random.choice(USER_AGENTS)


def build_chrome_options(headless=True):
    """
    Build the Chrome options used for every session.

    Args:
        headless: Whether to run in headless mode

    Returns:
        Options: Configured Chrome options
    """
    chrome_options = Options()
    if headless:
        chrome_options.add_argument('--headless=new')

    # Waits rely on document.readyState, so let driver.get() return on the normal strategy
    chrome_options.page_load_strategy = 'normal'

    chrome_options.add_argument('--no-sandbox')
    chrome_options.add_argument('--disable-dev-shm-usage')
    chrome_options.add_argument('--disable-gpu')
    chrome_options.add_argument('--disable-extensions')
    chrome_options.add_argument('--disable-notifications')
    chrome_options.add_argument('--disable-infobars')

    if platform.system() == 'Darwin':
        chrome_options.add_argument('--disable-renderer-backgrounding')

    chrome_options.add_argument(f'--user-agent={get_random_user_agent()}')
    return chrome_options


def setup_webdriver(headless=True, webdriver_path=None, retry_count=3, page_load_timeout=30):
    """
    Set up and return a Selenium Chrome WebDriver instance with retry logic.

    Args:
        headless: Whether to run in headless mode
        webdriver_path: Path to the ChromeDriver executable (downloaded if omitted)
        retry_count: Number of times to try WebDriver creation
        page_load_timeout: Timeout for page loads and scripts in seconds

    Returns:
        WebDriver: Configured Selenium WebDriver instance

    Raises:
        WebDriverException: If the last creation attempt fails
        RuntimeError: If no attempt was made
    """
    print(f"Starting WebDriver setup: headless={headless}, system={platform.system()}, python={platform.python_version()}")
    chrome_options = build_chrome_options(headless)

    for attempt in range(retry_count):
        try:
            if not webdriver_path:
                service = Service(ChromeDriverManager().install())
            else:
                service = Service(webdriver_path)

            driver = webdriver.Chrome(service=service, options=chrome_options)

            driver.set_page_load_timeout(page_load_timeout)
            driver.set_script_timeout(page_load_timeout)
            return driver

        except (WebDriverException, SessionNotCreatedException) as e:
            print(f"WebDriver creation failed (attempt {attempt+1}/{retry_count}): {e}")

            if attempt == retry_count - 1:
                raise
            time.sleep(2)

    raise RuntimeError("Failed to create WebDriver after multiple attempts")
