#!/usr/bin/env python3
"""
Error kinds and result values for the command-line front-end.

User-input problems are returned as ``Result`` values so each step of the
pipeline can stop at the first failure without raising. Internal faults
(broken build artifact, violated invariant, no engine) raise subclasses of
``CrawlRunnerError`` instead.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Kinds of failure the front-end can report."""
    PARSE_FAILURE = "parse_failure"
    INVALID_URL = "invalid_url"
    UNKNOWN_BROWSER = "unknown_browser"
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"
    OUTPUT_DIRECTORY_CONFLICT = "output_directory_conflict"
    DIRECTORY_DELETION_FAILED = "directory_deletion_failed"
    VERSION_RESOURCE_MISSING = "version_resource_missing"
    ENGINE_UNAVAILABLE = "engine_unavailable"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class CliError:
    """A single human-readable failure."""
    kind: ErrorKind
    message: str
    token: Optional[str] = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a validation step.

    Exactly one of ``value`` and ``error`` is meaningful: ``error`` is None
    on success.
    """
    value: Optional[T] = None
    error: Optional[CliError] = None

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str, token: Optional[str] = None) -> "Result[T]":
        return cls(error=CliError(kind, message, token))


class CrawlRunnerError(Exception):
    """Base class for internal, non-user errors."""

    kind = ErrorKind.INTERNAL_ERROR

    def to_cli_error(self) -> CliError:
        return CliError(self.kind, str(self))


class VersionResourceMissing(CrawlRunnerError):
    """The packaged version resource could not be located or read."""

    kind = ErrorKind.VERSION_RESOURCE_MISSING


class ConfigInvariantError(CrawlRunnerError, AssertionError):
    """A CrawlConfig was assembled from values that were never validated."""


class EngineUnavailable(CrawlRunnerError):
    """No crawl engine could be loaded."""

    kind = ErrorKind.ENGINE_UNAVAILABLE
