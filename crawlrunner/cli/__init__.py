"""
Command-line interface module for the crawl runner.

This package contains modules for parsing and validating command-line
arguments and for assembling the crawl configuration.
"""

from .config import CrawlConfig, build_config
from .info import print_help, render_help, report_version
from .options import OptionSchema, OptionSpec, RawOptions, default_schema, parse_arguments
from .output_dir import prepare_output_dir
from .validation import (ValidatedOptions, parse_non_negative_int, parse_positive_int,
                         resolve_browser, validate_options, validate_url)

__all__ = [
    "CrawlConfig",
    "build_config",
    "default_schema",
    "OptionSchema",
    "OptionSpec",
    "parse_arguments",
    "parse_non_negative_int",
    "parse_positive_int",
    "prepare_output_dir",
    "print_help",
    "RawOptions",
    "render_help",
    "report_version",
    "resolve_browser",
    "validate_options",
    "validate_url",
    "ValidatedOptions",
]
