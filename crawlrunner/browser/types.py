#!/usr/bin/env python3
"""
Supported browser types.

The set of browsers is owned by the browser-automation layer (Selenium).
The command-line front-end only queries it through a ``BrowserCatalog``
so it never has to know which browsers exist.
"""

from enum import Enum
from typing import Dict, Iterable, Optional, Tuple

from selenium.webdriver import DesiredCapabilities


class BrowserType(Enum):
    """Browsers a crawl engine can drive through Selenium WebDriver."""
    FIREFOX = "firefox"
    CHROME = "chrome"
    EDGE = "edge"
    SAFARI = "safari"
    INTERNET_EXPLORER = "internet_explorer"

    def __str__(self) -> str:
        return self.value

    @property
    def capabilities(self) -> Dict[str, object]:
        """
        Selenium desired capabilities for this browser.

        Returns:
            dict: A fresh copy, safe for the caller to modify
        """
        return getattr(DesiredCapabilities, _CAPABILITY_KEYS[self]).copy()


_CAPABILITY_KEYS = {
    BrowserType.FIREFOX: "FIREFOX",
    BrowserType.CHROME: "CHROME",
    BrowserType.EDGE: "EDGE",
    BrowserType.SAFARI: "SAFARI",
    BrowserType.INTERNET_EXPLORER: "INTERNETEXPLORER",
}


class BrowserCatalog:
    """
    Read-only view of the browsers supported by the automation layer.

    Names are kept in declaration order so listings are stable.
    """

    def __init__(self, browsers: Iterable[BrowserType], default: BrowserType):
        self._browsers: Tuple[BrowserType, ...] = tuple(browsers)
        if default not in self._browsers:
            raise ValueError(f"Default browser {default} is not in the catalog")
        self._default = default

    @property
    def default(self) -> BrowserType:
        return self._default

    def names(self) -> Tuple[str, ...]:
        return tuple(str(b) for b in self._browsers)

    def __contains__(self, browser: object) -> bool:
        return browser in self._browsers

    def __iter__(self):
        return iter(self._browsers)

    def lookup(self, name: Optional[str]) -> Optional[BrowserType]:
        """Case-insensitive exact match on the browser name, or None."""
        if name is None:
            return None
        for browser in self._browsers:
            if name.lower() == str(browser).lower():
                return browser
        return None


def default_catalog() -> BrowserCatalog:
    """Catalog of every ``BrowserType``, with Firefox as the default."""
    return BrowserCatalog(BrowserType, default=BrowserType.FIREFOX)
