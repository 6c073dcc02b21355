#!/usr/bin/env python3
"""
Version and usage output.
"""

import sys
import textwrap
from importlib.resources import files
from typing import Optional, TextIO

from ..errors import VersionResourceMissing
from .options import USAGE, OptionSchema

VERSION_RESOURCE = "VERSION"

ROW_WIDTH = 80
SPACES_BEFORE_OPTION = 5
SPACES_AFTER_OPTION = 3


def report_version(package: str = "crawlrunner") -> str:
    """
    Read the version string packaged with the runner.

    Args:
        package: Package holding the VERSION resource

    Returns:
        str: The version, without surrounding whitespace

    Raises:
        VersionResourceMissing: If the resource is absent or unreadable
    """
    try:
        return files(package).joinpath(VERSION_RESOURCE).read_text(encoding="utf-8").strip()
    except (OSError, ModuleNotFoundError) as e:
        raise VersionResourceMissing(f"Could not read version resource: {e}") from e


def render_help(schema: OptionSchema) -> str:
    """Render the usage line and a fixed-width table of options."""
    rows = []
    for spec in schema:
        names = f"-{spec.short},--{spec.long}"
        if spec.takes_value:
            names += " <arg>"
        rows.append((names, spec.description))

    name_width = max((len(names) for names, _ in rows), default=0)
    indent = " " * (SPACES_BEFORE_OPTION + name_width + SPACES_AFTER_OPTION)
    desc_width = max(ROW_WIDTH - len(indent), 20)

    lines = [f"usage: {USAGE}"]
    for names, description in rows:
        wrapped = textwrap.wrap(description, desc_width) or [""]
        lines.append(" " * SPACES_BEFORE_OPTION + names.ljust(name_width)
                     + " " * SPACES_AFTER_OPTION + wrapped[0])
        lines.extend(indent + line for line in wrapped[1:])
    return "\n".join(lines) + "\n"


def print_help(schema: OptionSchema, stream: Optional[TextIO] = None) -> None:
    (stream or sys.stdout).write(render_help(schema))
