#!/usr/bin/env python3
"""
Configuration management module.

This module provides functionality for loading and saving configuration
files, and for managing the settings of a waiter run.
"""

import json
import os
from dataclasses import asdict, dataclass
from typing import Optional
from urllib.parse import urlparse

from ..core.conditions import URL_EQUALS, URL_MATCHES
from ..core.helper import POLL_FREQUENCY, TIMEOUT


@dataclass
class Configuration:
    """
    Configuration class for a waiter run.

    This dataclass holds all configuration parameters, allowing for easy
    serialization and deserialization.
    """
    # URL to open
    url: str

    # Wait configuration
    timeout: float = TIMEOUT
    poll_frequency: float = POLL_FREQUENCY
    expected_url: Optional[str] = None
    url_match: str = URL_EQUALS
    ignore_case: bool = False
    element_selector: Optional[str] = None

    # Browser configuration
    headless: bool = True
    webdriver_path: Optional[str] = None
    stealth: bool = False
    retry_count: int = 3

    verbose: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        parsed_url = urlparse(self.url or "")
        if not parsed_url.scheme or not parsed_url.netloc:
            raise ValueError(f"Invalid URL: {self.url}")

        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

        if self.url_match not in URL_MATCHES:
            raise ValueError(f"Unknown url_match '{self.url_match}'")

        if self.poll_frequency > self.timeout:
            print(f"Warning: poll_frequency ({self.poll_frequency}) exceeds timeout ({self.timeout}). Setting poll_frequency to {self.timeout}.")
            self.poll_frequency = self.timeout

    @classmethod
    def from_args(cls, args):
        """
        Create a Configuration instance from parsed command-line arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            Configuration: Configuration instance
        """
        return cls(
            url=args.url,
            timeout=args.timeout,
            poll_frequency=args.poll_frequency,
            expected_url=args.expected_url,
            url_match=args.url_match,
            ignore_case=args.ignore_case,
            element_selector=args.element_selector,
            headless=not args.visible,
            webdriver_path=args.webdriver_path,
            stealth=args.stealth,
            retry_count=args.retry_count,
            verbose=args.verbose,
        )

    def to_dict(self):
        """
        Convert configuration to a dictionary.

        Returns:
            dict: Dictionary representation of the configuration
        """
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict):
        """
        Create a Configuration instance from a dictionary.

        Args:
            config_dict: Dictionary containing configuration parameters

        Returns:
            Configuration: Configuration instance
        """
        return cls(**config_dict)

    def print_summary(self):
        """Print a summary of the configuration."""
        print("\nWaiter configuration:")
        print(f"- URL: {self.url}")
        print(f"- Timeout: {self.timeout}s (polling every {self.poll_frequency}s)")

        if self.expected_url:
            case = " (ignoring case)" if self.ignore_case else ""
            print(f"- Wait for URL to {self.url_match.replace('_', ' ')}: {self.expected_url}{case}")
        if self.element_selector:
            print(f"- Wait for element: {self.element_selector}")

        print(f"- Browser mode: {'Headless' if self.headless else 'Visible'}")
        if self.stealth:
            print("- Stealth mode: Enabled")
        print()


def load_config(config_file: str) -> Configuration:
    """
    Load configuration from a JSON file.

    Args:
        config_file: Path to the configuration file

    Returns:
        Configuration: Configuration instance

    Raises:
        FileNotFoundError: If the configuration file does not exist
        json.JSONDecodeError: If the configuration file is not valid JSON
        KeyError: If the configuration file is missing required fields
    """
    if not os.path.exists(config_file):
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    with open(config_file, 'r') as f:
        config_dict = json.load(f)

    if 'url' not in config_dict:
        raise KeyError("Missing required field in configuration: url")

    return Configuration.from_dict(config_dict)


def save_config(config: Configuration, config_file: str) -> None:
    """
    Save configuration to a JSON file.

    Args:
        config: Configuration instance
        config_file: Path to the configuration file
    """
    directory = os.path.dirname(os.path.abspath(config_file))
    if directory and not os.path.exists(directory):
        os.makedirs(directory)

    with open(config_file, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)

    print(f"Configuration saved to {config_file}")


def load_config_from_args(args):
    """
    Load configuration from command-line arguments or a config file.

    Values read from the file are overridden by any argument given
    explicitly on the command line.

    Args:
        args: Parsed command-line arguments

    Returns:
        Configuration: Configuration instance
    """
    if args.config:
        try:
            config = load_config(args.config)
            print(f"Loaded configuration from {args.config}")
            return _override_config_from_args(config, args)

        except (OSError, ValueError, KeyError, TypeError) as e:
            print(f"Error loading configuration file: {e}")
            if args.url is None:
                raise
            print("Falling back to command-line arguments")

    return Configuration.from_args(args)


def _override_config_from_args(config, args):
    """
    Override configuration with explicitly specified command-line arguments.

    Args:
        config: Existing configuration
        args: Parsed command-line arguments

    Returns:
        Configuration: Updated configuration
    """
    for key in args.explicit:
        value = getattr(args, key)

        if key == 'visible':
            config.headless = not value
        elif key in ('wait_for_url', 'url_contains', 'url_starts_with'):
            config.expected_url = args.expected_url
            config.url_match = args.url_match
        elif hasattr(config, key):
            setattr(config, key, value)

    # Re-run validation on the merged values
    config.__post_init__()
    return config
