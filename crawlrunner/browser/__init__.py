"""
Browser module exposing the browsers the automation layer supports.

The front-end never starts a browser itself; it only needs the names
and the default member to validate the ``--browser`` option.
"""

from .types import BrowserCatalog, BrowserType, default_catalog

__all__ = [
    "BrowserCatalog",   # Read-only view used by validation
    "BrowserType",      # Enumerated browser identifiers
    "default_catalog",  # Catalog of all supported browsers
]
