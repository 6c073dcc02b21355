#!/usr/bin/env python3
"""
Crawl configuration module.

This module provides the immutable configuration handed to the crawl
engine and the builder that assembles it from validated values.
"""

import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Optional, Tuple, Union
from urllib.parse import urlparse

from ..browser import BrowserCatalog, BrowserType, default_catalog
from ..engine.interface import CrawlOverviewPlugin, CrawlRules
from ..errors import ConfigInvariantError
from .validation import ALLOWED_SCHEMES, DEFAULT_DEPTH, DEFAULT_MAX_STATES, DEFAULT_PARALLEL


@dataclass(frozen=True)
class CrawlConfig:
    """
    Configuration for a single crawl.

    Built once per invocation by ``build_config`` and never modified
    afterwards.
    """
    # Target
    url: str
    output_dir: Path

    # Browser configuration
    browser: BrowserType
    parallel: int = DEFAULT_PARALLEL

    # Crawl limits
    max_depth: int = DEFAULT_DEPTH
    max_states: int = DEFAULT_MAX_STATES  # 0 = unlimited

    override: bool = False

    # Registered with every crawl
    plugins: Tuple[CrawlOverviewPlugin, ...] = ()
    crawl_rules: CrawlRules = field(default_factory=CrawlRules)

    def to_dict(self) -> dict:
        """
        Convert configuration to a dictionary.

        Returns:
            dict: JSON-friendly representation of the configuration
        """
        config_dict = asdict(self)
        config_dict["output_dir"] = str(self.output_dir)
        config_dict["browser"] = str(self.browser)
        config_dict["plugins"] = [
            {"name": type(p).__name__, "output_dir": str(p.output_dir)} for p in self.plugins
        ]
        return config_dict

    def print_summary(self):
        """Print a summary of the configuration."""
        print(f"\nStarting crawl with the following configuration:")
        print(f"- Starting URL: {self.url}")
        print(f"- Output directory: {self.output_dir}")
        print(f"- Browser: {self.browser} ({self.parallel} instance{'s' if self.parallel != 1 else ''})")
        print(f"- Max depth: {self.max_depth}")
        print(f"- Max states: {'Unlimited' if self.max_states == 0 else self.max_states}")
        print(f"- Override output directory: {'Yes' if self.override else 'No'}")
        print()


def _check_invariants(config: CrawlConfig, catalog: BrowserCatalog) -> None:
    if urlparse(config.url).scheme not in ALLOWED_SCHEMES:
        raise ConfigInvariantError(f"URL scheme must be http or https: {config.url}")
    if config.browser not in catalog:
        raise ConfigInvariantError(f"Browser {config.browser} is not supported")
    if config.parallel <= 0:
        raise ConfigInvariantError(f"parallel must be positive, got {config.parallel}")
    if config.max_depth < 0 or config.max_states < 0:
        raise ConfigInvariantError(
            f"Crawl limits must be non-negative, got depth={config.max_depth} "
            f"max_states={config.max_states}"
        )


def build_config(
    url: str,
    output_dir: Union[str, os.PathLike],
    browser: BrowserType,
    parallel: int = DEFAULT_PARALLEL,
    max_depth: int = DEFAULT_DEPTH,
    max_states: int = DEFAULT_MAX_STATES,
    override: bool = False,
    catalog: Optional[BrowserCatalog] = None,
) -> CrawlConfig:
    """
    Assemble a CrawlConfig from already validated values.

    The crawl overview report is always bound to the output directory and
    default elements are always clicked; neither can be turned off from
    the command line.

    Args:
        url: Validated http(s) URL
        output_dir: Prepared output directory
        browser: Resolved browser type
        parallel: Number of browser instances
        max_depth: Maximum crawl depth
        max_states: Maximum number of states, 0 for unlimited
        override: Whether the output directory was cleared on request
        catalog: Browsers the engine supports (default: all known browsers)

    Returns:
        CrawlConfig: Immutable configuration for the engine

    Raises:
        ConfigInvariantError: If the values were not validated first
    """
    output_dir = Path(output_dir)
    config = CrawlConfig(
        url=url,
        output_dir=output_dir,
        browser=browser,
        parallel=parallel,
        max_depth=max_depth,
        max_states=max_states,
        override=override,
        plugins=(CrawlOverviewPlugin(output_dir),),
        crawl_rules=CrawlRules(click_default_elements=True),
    )
    _check_invariants(config, catalog or default_catalog())
    return config
