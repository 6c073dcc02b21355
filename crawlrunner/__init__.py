"""
Crawl runner package.

This package provides the command-line front-end that validates crawl
options and hands a CrawlConfig to a crawl engine.
"""

from .browser import BrowserType
from .cli.config import CrawlConfig, build_config
from .engine.interface import CrawlEngine

__all__ = ["BrowserType", "CrawlConfig", "CrawlEngine", "build_config"]
