#!/usr/bin/env python3
"""
Main entry point for the crawl runner.

This module turns command-line arguments into a validated CrawlConfig and
hands it to the crawl engine.
"""

import logging
import sys
from typing import Optional, Sequence

from .browser import BrowserCatalog, default_catalog
from .cli.config import build_config
from .cli.info import print_help, report_version
from .cli.options import HELP, OVERRIDE, VERSION, default_schema, parse_arguments
from .cli.output_dir import prepare_output_dir
from .cli.validation import validate_options, validate_url
from .engine.interface import CrawlEngine, load_engine
from .errors import CliError, CrawlRunnerError
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def _report(error: CliError) -> int:
    print(error.message, file=sys.stderr)
    logger.debug(f"Run failed with {error.kind.name} (token: {error.token!r})")
    return 1


def _exit_status(status) -> int:
    if status is None:
        return 0
    if isinstance(status, bool):
        return 0 if status else 1
    try:
        return int(status)
    except (TypeError, ValueError):
        logger.warning(f"Crawl engine returned unexpected status {status!r}, treating as failure")
        return 1


def run(
    argv: Sequence[str],
    engine: Optional[CrawlEngine] = None,
    catalog: Optional[BrowserCatalog] = None,
) -> int:
    """
    Run one invocation of the command line.

    Args:
        argv: Arguments without the program name
        engine: Crawl engine to hand the configuration to (loaded from
            the installed engines when omitted)
        catalog: Supported browsers (default: all known browsers)

    Returns:
        int: Process exit status

    Raises:
        CrawlRunnerError: On internal failures such as a missing version
            resource or no available engine
    """
    catalog = catalog or default_catalog()
    schema = default_schema(catalog)

    parsed = parse_arguments(schema, argv)
    if not parsed.is_ok:
        return _report(parsed.error)
    raw = parsed.value

    if raw.has(VERSION):
        print(report_version())
        return 0

    if raw.has(HELP) or len(raw.positionals) < 2:
        print_help(schema)
        return 0

    url_arg, output_arg = raw.positionals[0], raw.positionals[1]

    url = validate_url(url_arg)
    if not url.is_ok:
        return _report(url.error)

    output_dir = prepare_output_dir(output_arg, override=raw.has(OVERRIDE))
    if not output_dir.is_ok:
        return _report(output_dir.error)

    options = validate_options(raw, catalog)
    if not options.is_ok:
        return _report(options.error)
    opts = options.value

    config = build_config(
        url=url.value,
        output_dir=output_dir.value,
        browser=opts.browser,
        parallel=opts.parallel,
        max_depth=opts.max_depth,
        max_states=opts.max_states,
        override=opts.override,
        catalog=catalog,
    )
    config.print_summary()

    if engine is None:
        engine = load_engine()

    logger.info(f"Handing configuration to {type(engine).__name__}")
    try:
        status = engine.run(config)
    except KeyboardInterrupt:
        print("\nCrawling interrupted by user.")
        return 130
    except Exception as e:
        logger.error(f"Crawl engine failed: {e}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return _exit_status(status)


def main(argv: Optional[Sequence[str]] = None, engine: Optional[CrawlEngine] = None) -> int:
    """Main entry point for the crawl runner."""
    setup_logging()
    if argv is None:
        argv = sys.argv[1:]
    try:
        return run(argv, engine=engine)
    except CrawlRunnerError as e:
        logger.debug("Internal error", exc_info=True)
        return _report(e.to_cli_error())


if __name__ == "__main__":
    sys.exit(main())
