#!/usr/bin/env python3
"""
Main entry point for the waiter program.

Opens a URL in Chrome and blocks until the page has loaded, the browser
has reached an expected URL, and optionally an element is displayed.
"""

import sys
import traceback

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.common.by import By

from .browser.driver import setup_webdriver
from .browser.stealth import apply_stealth_mode
from .cli.argument_parser import parse_args
from .cli.config import load_config_from_args, save_config
from .core.helper import Waiter


def run_waits(waiter, driver, config):
    """
    Perform the waits described by the configuration.

    Args:
        waiter: Waiter instance
        driver: WebDriver instance
        config: Configuration of this run
    """
    if config.expected_url:
        waiter.get_url_and_wait_for_url(
            driver,
            config.url,
            config.expected_url,
            match=config.url_match,
            ignore_case=config.ignore_case,
        )
    else:
        waiter.get(driver, config.url)

    if config.element_selector:
        element = driver.find_element(By.CSS_SELECTOR, config.element_selector)
        waiter.wait_for_element_to_be_displayed(driver, element)


def main(argv=None):
    """Main entry point for the waiter program."""
    try:
        args = parse_args(argv)
        config = load_config_from_args(args)

        if args.save_config:
            save_config(config, args.save_config)

        if config.verbose:
            config.print_summary()

        driver = setup_webdriver(
            headless=config.headless,
            webdriver_path=config.webdriver_path,
            retry_count=config.retry_count,
            page_load_timeout=config.timeout,
        )

        try:
            if config.stealth:
                driver = apply_stealth_mode(driver)

            waiter = Waiter(
                timeout=config.timeout,
                poll_frequency=config.poll_frequency,
                verbose=config.verbose,
            )
            run_waits(waiter, driver, config)
            print(f"Page ready: {driver.current_url}")
        finally:
            driver.quit()

        return 0

    except TimeoutException as e:
        print(f"\nTimeout: {e.msg}")
        return 1

    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 130  # Standard exit code for SIGINT

    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
