"""
Command-line interface module for the waiter program.

This package contains modules for parsing command-line arguments
and managing configuration for a waiter run.
"""

from .argument_parser import create_parser, parse_args
from .config import Configuration, load_config, load_config_from_args, save_config

__all__ = ["create_parser", "parse_args", "Configuration", "load_config", "load_config_from_args", "save_config"]
