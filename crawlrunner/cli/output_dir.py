#!/usr/bin/env python3
"""
Output directory checks.

Decides whether the requested output directory can be used as is, must be
cleared first, or conflicts with existing content.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import Union

from ..errors import ErrorKind, Result

logger = logging.getLogger(__name__)


def prepare_output_dir(path: Union[str, os.PathLike], override: bool = False) -> Result[Path]:
    """
    Make sure the output directory is missing or empty.

    A non-empty directory is only removed when ``override`` is set. A
    missing directory is left for the crawl engine to create.

    Args:
        path: Requested output directory
        override: Whether existing content may be deleted

    Returns:
        Result: The directory path, or an OUTPUT_DIRECTORY_CONFLICT /
        DIRECTORY_DELETION_FAILED failure
    """
    if os.fspath(path) == "":
        return Result.fail(ErrorKind.OUTPUT_DIRECTORY_CONFLICT,
                           "Output directory must not be an empty path", os.fspath(path))

    out = Path(path)
    if not out.exists():
        logger.debug(f"Output directory {out} does not exist yet")
        return Result.ok(out)

    if not out.is_dir():
        return Result.fail(ErrorKind.OUTPUT_DIRECTORY_CONFLICT,
                           f"Output path {out} exists and is not a directory", str(out))

    try:
        is_empty = next(out.iterdir(), None) is None
    except OSError as e:
        return Result.fail(ErrorKind.OUTPUT_DIRECTORY_CONFLICT,
                           f"Could not read output directory {out}: {e}", str(out))
    if is_empty:
        return Result.ok(out)

    if not override:
        return Result.fail(
            ErrorKind.OUTPUT_DIRECTORY_CONFLICT,
            "Output directory is not empty. If you want to override, use the --override option",
            str(out),
        )

    print("Overriding output directory...")
    try:
        shutil.rmtree(out)
    except OSError as e:
        return Result.fail(ErrorKind.DIRECTORY_DELETION_FAILED,
                           f"Could not delete output directory {out}: {e}", str(out))
    logger.debug(f"Removed output directory {out}")
    return Result.ok(out)
