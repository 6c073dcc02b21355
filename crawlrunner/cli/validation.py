#!/usr/bin/env python3
"""
Validation of parsed command-line values.

Each check returns a ``Result`` instead of raising so the entry point can
report the first problem and stop.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

import validators

from ..browser import BrowserCatalog, BrowserType
from ..errors import ErrorKind, Result
from .options import BROWSER, DEPTH, MAXSTATES, OVERRIDE, PARALLEL, RawOptions

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = ("http", "https")

DEFAULT_DEPTH = 2
DEFAULT_MAX_STATES = 0
DEFAULT_PARALLEL = 1


@dataclass(frozen=True)
class ValidatedOptions:
    """Optional fields after validation, with defaults filled in."""
    browser: BrowserType
    max_depth: int = DEFAULT_DEPTH
    max_states: int = DEFAULT_MAX_STATES
    parallel: int = DEFAULT_PARALLEL
    override: bool = False


def validate_url(value: Optional[str]) -> Result[str]:
    """
    Check that a value is an absolute http(s) URL.

    Args:
        value: Candidate URL

    Returns:
        Result: The URL unchanged, or an INVALID_URL failure
    """
    if value is None:
        return Result.fail(ErrorKind.INVALID_URL, "provide a valid URL like http://example.com")

    parsed = urlparse(value)
    if parsed.scheme not in ALLOWED_SCHEMES or not parsed.netloc or not validators.url(value):
        return Result.fail(ErrorKind.INVALID_URL,
                           "provide a valid URL like http://example.com", value)
    return Result.ok(value)


def resolve_browser(name: Optional[str], catalog: BrowserCatalog) -> Result[BrowserType]:
    """Look a browser up by name, ignoring case."""
    browser = catalog.lookup(name)
    if browser is None:
        available = ", ".join(catalog.names())
        return Result.fail(
            ErrorKind.UNKNOWN_BROWSER,
            f"Unrecognized browser: '{name}'. Available browsers are: {available}",
            name,
        )
    return Result.ok(browser)


def _parse_int(value: Optional[str]) -> Result[int]:
    try:
        return Result.ok(int(value))
    except (TypeError, ValueError) as e:
        return Result.fail(ErrorKind.NOT_A_NUMBER, f"Could not parse number {e}", value)


def parse_non_negative_int(value: Optional[str], name: str = "value") -> Result[int]:
    """
    Parse a decimal integer that must be zero or greater.

    Args:
        value: Raw string from the command line
        name: Option name used in the error message

    Returns:
        Result: The integer, or a NOT_A_NUMBER / OUT_OF_RANGE failure
    """
    result = _parse_int(value)
    if result.is_ok and result.value < 0:
        return Result.fail(ErrorKind.OUT_OF_RANGE,
                           f"{name} must be a non-negative number, got {result.value}", value)
    return result


def parse_positive_int(value: Optional[str], name: str = "value") -> Result[int]:
    """Parse a decimal integer that must be greater than zero."""
    result = _parse_int(value)
    if result.is_ok and result.value <= 0:
        return Result.fail(ErrorKind.OUT_OF_RANGE,
                           f"{name} must be greater than 0, got {result.value}", value)
    return result


def validate_options(raw: RawOptions, catalog: BrowserCatalog) -> Result[ValidatedOptions]:
    """
    Validate the optional fields of a parsed command line.

    Fields that were not given keep their defaults. Validation stops at
    the first failing field.

    Args:
        raw: Parsed options
        catalog: Browsers the ``--browser`` value is checked against

    Returns:
        Result: ``ValidatedOptions`` or the first failure
    """
    browser = catalog.default
    if raw.has(BROWSER):
        result = resolve_browser(raw.get(BROWSER), catalog)
        if not result.is_ok:
            return Result(error=result.error)
        browser = result.value

    numbers = {}
    checks = (
        (DEPTH, parse_non_negative_int, DEFAULT_DEPTH),
        (MAXSTATES, parse_non_negative_int, DEFAULT_MAX_STATES),
        (PARALLEL, parse_positive_int, DEFAULT_PARALLEL),
    )
    for key, parse, default in checks:
        if not raw.has(key):
            numbers[key] = default
            continue
        result = parse(raw.get(key), key)
        if not result.is_ok:
            return Result(error=result.error)
        numbers[key] = result.value

    validated = ValidatedOptions(
        browser=browser,
        max_depth=numbers[DEPTH],
        max_states=numbers[MAXSTATES],
        parallel=numbers[PARALLEL],
        override=raw.has(OVERRIDE),
    )
    logger.debug(f"Validated options: {validated}")
    return Result.ok(validated)
