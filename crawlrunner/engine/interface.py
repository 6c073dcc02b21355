#!/usr/bin/env python3
"""
Crawl engine interface definition module.

The runner does not crawl anything itself. It builds a ``CrawlConfig`` and
hands it to an engine implementing ``CrawlEngine``. Engines are found
through the ``crawlrunner.engines`` entry-point group, or through a
``module:attribute`` path in the ``CRAWLRUNNER_ENGINE`` environment
variable.
"""

import importlib
import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from importlib.metadata import entry_points
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from ..errors import EngineUnavailable

if TYPE_CHECKING:
    from ..cli.config import CrawlConfig

logger = logging.getLogger(__name__)

ENGINE_GROUP = "crawlrunner.engines"
ENGINE_ENV_VAR = "CRAWLRUNNER_ENGINE"


@dataclass(frozen=True)
class CrawlOverviewPlugin:
    """Handle for the report plugin that writes the crawl overview."""
    output_dir: Path


@dataclass(frozen=True)
class CrawlRules:
    """Fixed crawl behaviour enabled for every run."""
    click_default_elements: bool = True


class CrawlEngine(ABC):
    """Abstract base class for crawl engine implementations."""

    @abstractmethod
    def run(self, config: "CrawlConfig") -> Union[int, bool, None]:
        """
        Crawl the site described by the configuration.

        Blocks until the crawl completes. An int is used as the process
        exit status; None means success and a bool means success/failure.
        """
        pass


def _load_from_path(path: str):
    module_name, _, attribute = path.partition(":")
    try:
        module = importlib.import_module(module_name)
        return getattr(module, attribute)
    except (ImportError, AttributeError) as e:
        raise EngineUnavailable(f"Could not load crawl engine '{path}': {e}") from e


def _load_from_entry_points(name: Optional[str]):
    candidates = list(entry_points(group=ENGINE_GROUP))
    if name:
        candidates = [ep for ep in candidates if ep.name == name]
    if not candidates:
        wanted = f"'{name}'" if name else "any"
        raise EngineUnavailable(
            f"No crawl engine found ({wanted} in entry-point group '{ENGINE_GROUP}'). "
            f"Install an engine or set {ENGINE_ENV_VAR}=module:attribute"
        )
    if len(candidates) > 1:
        logger.warning(f"Several crawl engines installed, using '{candidates[0].name}'")
    try:
        return candidates[0].load()
    except Exception as e:
        raise EngineUnavailable(f"Could not load crawl engine '{candidates[0].name}': {e}") from e


def load_engine(name: Optional[str] = None) -> CrawlEngine:
    """
    Find and instantiate a crawl engine.

    Args:
        name: Entry-point name or ``module:attribute`` path. Falls back to
            the ``CRAWLRUNNER_ENGINE`` environment variable, then to the
            first installed engine.

    Returns:
        CrawlEngine: A ready engine instance

    Raises:
        EngineUnavailable: If no engine can be loaded
    """
    name = name or os.environ.get(ENGINE_ENV_VAR)
    if name and ":" in name:
        factory = _load_from_path(name)
    else:
        factory = _load_from_entry_points(name)

    engine = factory() if isinstance(factory, type) or not hasattr(factory, "run") else factory
    if not callable(getattr(engine, "run", None)):
        raise EngineUnavailable(f"Crawl engine {engine!r} has no run() method")
    logger.debug(f"Loaded crawl engine {engine!r}")
    return engine
