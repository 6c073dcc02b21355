#!/usr/bin/env python3
"""
Command-line option schema and argument parsing.

This module declares the flags the runner recognises and turns the raw
argument vector into a ``RawOptions`` value. Nothing here validates the
meaning of a value; that is left to ``validation``.
"""

import argparse
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Sequence, Tuple

from ..browser import BrowserCatalog
from ..errors import ErrorKind, Result

PROG = "crawl-runner"
USAGE = f"{PROG} theUrl theOutputDir"

HELP = "help"
VERSION = "version"
BROWSER = "browser"
DEPTH = "depth"
MAXSTATES = "maxstates"
PARALLEL = "parallel"
OVERRIDE = "override"

_FLAG_PATTERN = re.compile(r"--?[A-Za-z][\w-]*")


@dataclass(frozen=True)
class OptionSpec:
    """One recognised flag."""
    key: str
    short: str
    long: str
    takes_value: bool
    description: str

    @property
    def flags(self) -> Tuple[str, str]:
        return f"-{self.short}", f"--{self.long}"


class OptionSchema:
    """Ordered, immutable collection of ``OptionSpec`` entries."""

    def __init__(self, specs: Sequence[OptionSpec]):
        self._specs: Tuple[OptionSpec, ...] = tuple(specs)
        keys = [s.key for s in self._specs]
        if len(set(keys)) != len(keys):
            raise ValueError("Duplicate option keys in schema")

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __getitem__(self, key: str) -> OptionSpec:
        for spec in self._specs:
            if spec.key == key:
                return spec
        raise KeyError(key)


def default_schema(catalog: BrowserCatalog) -> OptionSchema:
    """
    Build the runner's option schema.

    Args:
        catalog: Supported browsers, listed in the ``--browser`` description

    Returns:
        OptionSchema: The flags accepted on the command line
    """
    browsers = ", ".join(catalog.names())
    default_browser = str(catalog.default).capitalize()
    return OptionSchema([
        OptionSpec(HELP, "h", HELP, False, "print this message"),
        OptionSpec(VERSION, "v", VERSION, False, "print the version information and exit"),
        OptionSpec(BROWSER, "b", BROWSER, True,
                   f"browser type: {browsers}. Default is {default_browser}"),
        OptionSpec(DEPTH, "d", DEPTH, True, "crawl depth level. Default is 2"),
        OptionSpec(MAXSTATES, "s", MAXSTATES, True,
                   "max number of states to crawl. Default is 0 (unlimited)"),
        OptionSpec(PARALLEL, "p", PARALLEL, True,
                   "Number of browsers to use for crawling. Default is 1"),
        OptionSpec(OVERRIDE, "o", OVERRIDE, False,
                   "Override the output directory if non-empty"),
    ])


@dataclass(frozen=True)
class RawOptions:
    """
    Unvalidated result of parsing.

    ``values`` holds one entry per flag that was given; boolean flags map
    to None. ``positionals`` keeps non-flag arguments in input order.
    """
    values: Mapping[str, Optional[str]] = field(default_factory=dict)
    positionals: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))
        object.__setattr__(self, "positionals", tuple(self.positionals))

    def has(self, key: str) -> bool:
        return key in self.values

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)


class _ParserError(Exception):
    pass


class _NonExitingParser(argparse.ArgumentParser):
    """argparse parser that raises instead of printing usage and exiting."""

    def error(self, message):
        raise _ParserError(message)


def create_parser(schema: OptionSchema) -> argparse.ArgumentParser:
    """
    Create an argparse parser for the schema.

    Help and version are ordinary boolean flags so the caller decides
    what to print and when to stop.
    """
    parser = _NonExitingParser(prog=PROG, usage=USAGE, add_help=False, allow_abbrev=False)
    for spec in schema:
        if spec.takes_value:
            parser.add_argument(*spec.flags, dest=spec.key, default=None, metavar="<arg>")
        else:
            parser.add_argument(*spec.flags, dest=spec.key, action="store_true")
    parser.add_argument("positionals", nargs="*")
    return parser


def _offending_token(argv: Sequence[str], message: str) -> Optional[str]:
    named = set(_FLAG_PATTERN.findall(message))
    short = [flag for flag in named if not flag.startswith("--")]
    for token in argv:
        if token.split("=", 1)[0] in named:
            return token
        # bundled short flags, e.g. -ox
        if not token.startswith("--") and any(token.startswith(flag) for flag in short):
            return token
    for token in argv:
        if token.startswith("-") and len(token) > 1:
            return token
    return None


def parse_arguments(schema: OptionSchema, argv: Sequence[str]) -> Result[RawOptions]:
    """
    Parse an argument vector against the schema.

    Args:
        schema: Recognised flags
        argv: Arguments without the program name

    Returns:
        Result: ``RawOptions`` on success, a PARSE_FAILURE naming the
        offending token otherwise
    """
    argv = list(argv)
    # everything after the first "--" is positional, kept verbatim
    tail: Tuple[str, ...] = ()
    if "--" in argv:
        split = argv.index("--")
        argv, tail = argv[:split], tuple(argv[split + 1:])

    parser = create_parser(schema)
    try:
        namespace, extras = parser.parse_known_intermixed_args(argv)
    except _ParserError as e:
        token = _offending_token(argv, str(e))
        return Result.fail(ErrorKind.PARSE_FAILURE, str(e), token)

    if extras:
        token = extras[0]
        return Result.fail(ErrorKind.PARSE_FAILURE, f"Unrecognized option: {token}", token)

    values = {}
    for spec in schema:
        value = getattr(namespace, spec.key)
        if spec.takes_value:
            if value is not None:
                values[spec.key] = value
        elif value:
            values[spec.key] = None

    return Result.ok(RawOptions(values=values, positionals=tuple(namespace.positionals or ()) + tail))
