#!/usr/bin/env python3
"""
Command-line argument parsing module.

This module provides functions for setting up and parsing command-line
arguments for the waiter program.
"""

import argparse
from urllib.parse import urlparse

from ..core.conditions import URL_CONTAINS, URL_EQUALS, URL_STARTS_WITH
from ..core.helper import POLL_FREQUENCY, TIMEOUT


def create_parser():
    """
    Create the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser
    """
    parser = argparse.ArgumentParser(
        description='Open a URL in a browser and wait for it to finish loading, redirecting or rendering an element'
    )

    parser.add_argument('url', type=str, nargs='?', default=None,
                        help='URL to open (optional when --config provides one)')

    # Wait options
    wait_group = parser.add_argument_group('Wait Options')
    wait_group.add_argument('--timeout', type=float, default=TIMEOUT,
                        help=f'Seconds to wait for each condition (default: {TIMEOUT})')
    wait_group.add_argument('--poll-frequency', type=float, default=POLL_FREQUENCY,
                        help=f'Seconds between condition checks (default: {POLL_FREQUENCY})')
    wait_group.add_argument('--element', dest='element_selector', type=str, default=None,
                        help='CSS selector of an element to wait for after the page loads')
    wait_group.add_argument('--ignore-case', action='store_true',
                        help='Compare URLs case-insensitively')

    url_group = wait_group.add_mutually_exclusive_group()
    url_group.add_argument('--wait-for-url', type=str, default=None,
                        help='Wait for the browser to reach exactly this URL (e.g., after a redirect)')
    url_group.add_argument('--url-contains', type=str, default=None,
                        help='Wait for the browser URL to contain this string')
    url_group.add_argument('--url-starts-with', type=str, default=None,
                        help='Wait for the browser URL to start with this string')

    # Browser options
    browser_group = parser.add_argument_group('Browser Options')
    browser_group.add_argument('--visible', action='store_true',
                        help='Run in visible browser mode instead of headless (default: headless)')
    browser_group.add_argument('--webdriver-path', type=str, default=None,
                        help='Path to the chromedriver executable (optional)')
    browser_group.add_argument('--stealth', action='store_true',
                        help='Apply selenium-stealth patches to the browser')
    browser_group.add_argument('--retry-count', type=int, default=3,
                        help='Attempts at starting the browser (default: 3)')

    # Configuration file options
    config_group = parser.add_argument_group('Configuration Options')
    config_group.add_argument('--config', type=str, default=None,
                        help='Path to configuration file (JSON)')
    config_group.add_argument('--save-config', type=str, default=None,
                        help='Save current settings to configuration file')
    config_group.add_argument('--verbose', action='store_true',
                        help='Print configuration and every wait as it starts')

    return parser


def explicit_options(args=None):
    """
    Return the destinations of the options given on the command line.

    Re-parses with every default suppressed, so an option typed with
    its default value still counts as given.

    Args:
        args: Command-line arguments to parse (uses sys.argv if None)

    Returns:
        set: Destination names present on the command line
    """
    parser = create_parser()
    for action in parser._actions:
        action.default = argparse.SUPPRESS
    return set(vars(parser.parse_args(args)))


def parse_args(args=None):
    """
    Parse command-line arguments.

    The three URL options are folded into ``expected_url`` and
    ``url_match``.

    Args:
        args: Command-line arguments to parse (uses sys.argv if None)

    Returns:
        argparse.Namespace: Parsed arguments

    Raises:
        SystemExit: If required arguments are missing or invalid
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.url is None and not parsed_args.config:
        parser.error("A URL is required unless --config is given")

    if parsed_args.url is not None:
        parsed_url = urlparse(parsed_args.url)
        if not parsed_url.scheme or not parsed_url.netloc:
            parser.error("Invalid URL. Please provide a valid URL (e.g., https://example.com)")

    if parsed_args.timeout <= 0:
        parser.error("--timeout must be a positive number of seconds")
    if parsed_args.poll_frequency <= 0:
        parser.error("--poll-frequency must be a positive number of seconds")
    if parsed_args.retry_count < 1:
        parser.error("--retry-count must be at least 1")

    parsed_args.explicit = explicit_options(args)

    parsed_args.expected_url = None
    parsed_args.url_match = URL_EQUALS
    if parsed_args.wait_for_url:
        parsed_args.expected_url = parsed_args.wait_for_url
    elif parsed_args.url_contains:
        parsed_args.expected_url = parsed_args.url_contains
        parsed_args.url_match = URL_CONTAINS
    elif parsed_args.url_starts_with:
        parsed_args.expected_url = parsed_args.url_starts_with
        parsed_args.url_match = URL_STARTS_WITH

    return parsed_args
