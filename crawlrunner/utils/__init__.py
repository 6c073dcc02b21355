"""
Utility functions for the crawl runner.
"""

from .logging import setup_logging

__all__ = ["setup_logging"]
