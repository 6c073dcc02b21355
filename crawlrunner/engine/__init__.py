"""
Crawl engine module.

Defines the narrow interface between the runner and the crawl engine
that performs the actual site traversal.
"""

from .interface import CrawlEngine, CrawlOverviewPlugin, CrawlRules, load_engine

__all__ = ["CrawlEngine", "CrawlOverviewPlugin", "CrawlRules", "load_engine"]
