"""Convenience constructors wiring a loader, a registry and a scraper together."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from glypto.providers.loader import Loader, ProviderLoadError
from glypto.providers.registry import ProviderRegistry
from glypto.scraper import Scraper

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from bs4 import Tag

    from glypto.metadata import Metadata
    from glypto.plugins import MetadataProvider

logger = logging.getLogger(__name__)


def create_scraper(provider_dir: str | Path | None = None) -> Scraper:
    """Return a scraper using plugins from *provider_dir*, else the defaults.

    A plugin directory that fails to load is logged and replaced by the
    built-in providers.
    """
    loader = Loader()
    try:
        providers = loader.load_from_directory(provider_dir)
    except ProviderLoadError as exc:
        logger.warning("%s; falling back to default providers", exc)
        providers = loader.load_defaults()
    return Scraper(ProviderRegistry(providers))


def create_scraper_with_providers(providers: Iterable[MetadataProvider]) -> Scraper:
    return Scraper(ProviderRegistry(providers))


def create_scraper_with_provider_names(provider_names: Iterable[str]) -> Scraper:
    """Return a scraper for the named built-in providers.

    Raises:
        UnknownProviderError: a name is not a built-in provider.
    """
    providers = Loader().load_from_list(provider_names)
    return Scraper(ProviderRegistry(providers))


def scrape_metadata(document: Tag | None) -> Metadata:
    """Scrape *document* with the default providers."""
    return create_scraper().scrape(document)


def scrape_metadata_with_providers(
    document: Tag | None,
    providers: Iterable[MetadataProvider],
) -> Metadata:
    return create_scraper_with_providers(providers).scrape(document)


def scrape_metadata_with_provider_names(
    document: Tag | None,
    provider_names: Iterable[str],
) -> Metadata:
    return create_scraper_with_provider_names(provider_names).scrape(document)
