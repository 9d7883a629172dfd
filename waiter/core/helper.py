#!/usr/bin/env python3
"""
Wait helper module.

This module contains the Waiter class, a set of named explicit waits
built on Selenium's WebDriverWait: page load completion, element
visibility, URL matching and click-then-wait sequences.
"""

from typing import Optional

from selenium.webdriver.support.ui import WebDriverWait

from .conditions import (URL_CONTAINS, URL_EQUALS, URL_MATCHES,
                         URL_STARTS_WITH, describe_url_match,
                         element_displayed, page_load_complete, url_matches)

# Up to how many seconds to wait for a condition to take place
TIMEOUT = 30

# Seconds between two evaluations of a condition (Selenium's own default)
POLL_FREQUENCY = 0.5


class Waiter:
    """
    Named wait operations for a Selenium WebDriver.

    The driver, URLs and elements are passed into every call and are not
    kept. Every method accepts an optional timeout in seconds; when it is
    omitted the instance default is used.

    A condition that does not hold in time raises Selenium's
    TimeoutException from WebDriverWait.until() unchanged.
    """

    def __init__(self, timeout=TIMEOUT, poll_frequency=POLL_FREQUENCY, verbose=False):
        """
        Initialize the waiter.

        Args:
            timeout: Default number of seconds to wait for a condition
            poll_frequency: Seconds to sleep between condition checks
            verbose: Print a line for every wait that starts
        """
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")
        if poll_frequency <= 0:
            raise ValueError(f"poll_frequency must be positive, got {poll_frequency}")

        self.timeout = timeout
        self.poll_frequency = poll_frequency
        self.verbose = verbose

    def _resolve_timeout(self, timeout: Optional[float]) -> float:
        if timeout is None:
            return self.timeout
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")
        return timeout

    def _until(self, driver, condition, timeout, description):
        """Poll condition until it holds or the timeout elapses."""
        if self.verbose:
            print(f"Waiting up to {timeout}s for {description}")

        wait = WebDriverWait(driver, timeout, poll_frequency=self.poll_frequency)
        return wait.until(condition, f"Timed out after {timeout}s waiting for {description}")

    # Navigation

    def get(self, driver, url: str, timeout: Optional[float] = None) -> None:
        """
        Open a URL and wait for the page to load completely.

        Use instead of driver.get().

        Args:
            driver: WebDriver instance
            url: URL to open in the browser
            timeout: Seconds to wait for the page load
        """
        timeout = self._resolve_timeout(timeout)
        driver.get(url)
        self.wait_for_page_load_complete(driver, timeout)

    def get_and_wait_for_element_to_be_displayed(
        self, driver, url: str, element, timeout: Optional[float] = None
    ) -> None:
        """
        Open a URL, wait for the page to load and for an element to be displayed.

        Args:
            driver: WebDriver instance
            url: URL to open in the browser
            element: WebElement expected to become visible
            timeout: Seconds allowed for each of the two waits
        """
        timeout = self._resolve_timeout(timeout)
        self.get(driver, url, timeout)
        self.wait_for_element_to_be_displayed(driver, element, timeout)

    def get_url_and_wait_for_url(
        self,
        driver,
        url_to_get: str,
        url_to_wait_for: str,
        timeout: Optional[float] = None,
        match: str = URL_EQUALS,
        ignore_case: bool = False,
    ) -> None:
        """
        Open a URL and wait for the browser to arrive at another one.

        Useful when the URL being opened redirects. After the expected URL
        is reached, also waits for that page to load completely.

        Args:
            driver: WebDriver instance
            url_to_get: URL to open initially
            url_to_wait_for: URL expected after the redirect
            timeout: Seconds allowed for each of the two waits
            match: How the current URL is compared ('equals', 'contains', 'starts_with')
            ignore_case: Compare URLs case-insensitively
        """
        timeout = self._resolve_timeout(timeout)
        if match not in URL_MATCHES:
            raise ValueError(f"Unknown URL match '{match}', expected one of {', '.join(URL_MATCHES)}")

        driver.get(url_to_get)
        self.wait_for_url_match(driver, url_to_wait_for, match, ignore_case, timeout)

    # Page load

    def wait_for_page_load_complete(self, driver, timeout: Optional[float] = None) -> None:
        """Wait until document.readyState reports 'complete'."""
        timeout = self._resolve_timeout(timeout)
        self._until(driver, page_load_complete(), timeout, "page load to complete")

    # Elements

    def wait_for_element_to_be_displayed(self, driver, element, timeout: Optional[float] = None) -> None:
        """
        Wait for element.is_displayed() to return True.

        Exceptions raised by the element itself, such as
        StaleElementReferenceException, are not swallowed.
        """
        timeout = self._resolve_timeout(timeout)
        self._until(driver, element_displayed(element), timeout, "element to be displayed")

    # URLs

    def wait_for_url_match(
        self,
        driver,
        expected: str,
        match: str = URL_EQUALS,
        ignore_case: bool = False,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Wait for the current URL to match, then for the page to load completely.

        Args:
            driver: WebDriver instance
            expected: String to compare the current URL against
            match: 'equals', 'contains' or 'starts_with'
            ignore_case: Lower-case both URLs before comparing
            timeout: Seconds allowed for each of the two waits

        Raises:
            ValueError: If match is unknown
            TimeoutException: If either condition does not hold in time
        """
        timeout = self._resolve_timeout(timeout)
        condition = url_matches(expected, match, ignore_case)
        self._until(driver, condition, timeout, describe_url_match(expected, match, ignore_case))
        self.wait_for_page_load_complete(driver, timeout)

    def wait_for_url(self, driver, url: str, timeout: Optional[float] = None) -> None:
        """Wait for the current URL to equal url."""
        self.wait_for_url_match(driver, url, URL_EQUALS, False, timeout)

    def wait_for_url_ignore_case(self, driver, url: str, timeout: Optional[float] = None) -> None:
        """Wait for the current URL to equal url, ignoring case."""
        self.wait_for_url_match(driver, url, URL_EQUALS, True, timeout)

    def wait_for_url_contains(self, driver, expected_string: str, timeout: Optional[float] = None) -> None:
        """Wait for the current URL to contain expected_string."""
        self.wait_for_url_match(driver, expected_string, URL_CONTAINS, False, timeout)

    def wait_for_url_contains_ignore_case(
        self, driver, expected_string: str, timeout: Optional[float] = None
    ) -> None:
        self.wait_for_url_match(driver, expected_string, URL_CONTAINS, True, timeout)

    def wait_for_url_starts_with(self, driver, expected_string: str, timeout: Optional[float] = None) -> None:
        """Wait for the current URL to start with expected_string."""
        self.wait_for_url_match(driver, expected_string, URL_STARTS_WITH, False, timeout)

    def wait_for_url_starts_with_ignore_case(
        self, driver, expected_string: str, timeout: Optional[float] = None
    ) -> None:
        self.wait_for_url_match(driver, expected_string, URL_STARTS_WITH, True, timeout)

    # Click and wait

    def _click_and_wait(self, driver, element, expected, match, ignore_case, timeout):
        timeout = self._resolve_timeout(timeout)
        element.click()
        self.wait_for_url_match(driver, expected, match, ignore_case, timeout)

    def click_element_and_wait_for_url(
        self, driver, element, url: str, timeout: Optional[float] = None
    ) -> None:
        """
        Click an element, then wait for the browser to load the given URL.

        Args:
            driver: WebDriver instance
            element: WebElement to click on
            url: URL expected to load after the click
            timeout: Seconds allowed for each wait
        """
        self._click_and_wait(driver, element, url, URL_EQUALS, False, timeout)

    def click_element_and_wait_for_url_ignore_case(
        self, driver, element, url: str, timeout: Optional[float] = None
    ) -> None:
        """Click an element, then wait for the given URL ignoring case."""
        self._click_and_wait(driver, element, url, URL_EQUALS, True, timeout)

    def click_element_and_wait_for_url_contains(
        self, driver, element, expected_string: str, timeout: Optional[float] = None
    ) -> None:
        """Click an element, then wait for the URL to contain expected_string."""
        self._click_and_wait(driver, element, expected_string, URL_CONTAINS, False, timeout)

    def click_element_and_wait_for_url_contains_ignore_case(
        self, driver, element, expected_string: str, timeout: Optional[float] = None
    ) -> None:
        self._click_and_wait(driver, element, expected_string, URL_CONTAINS, True, timeout)

    def click_element_and_wait_for_url_starts_with(
        self, driver, element, expected_string: str, timeout: Optional[float] = None
    ) -> None:
        """Click an element, then wait for the URL to start with expected_string."""
        self._click_and_wait(driver, element, expected_string, URL_STARTS_WITH, False, timeout)

    def click_element_and_wait_for_url_starts_with_ignore_case(
        self, driver, element, expected_string: str, timeout: Optional[float] = None
    ) -> None:
        self._click_and_wait(driver, element, expected_string, URL_STARTS_WITH, True, timeout)
