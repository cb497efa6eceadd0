"""glypto - extract page metadata with prioritized, pluggable providers.

Quick single-URL usage::

    from glypto import fetch

    meta = fetch("https://example.com/blog/some-post")
    print(meta.title)
    print(meta.site_name)
    print(meta.favicon)

Scraping an already parsed document::

    from bs4 import BeautifulSoup
    from glypto import scrape_metadata

    meta = scrape_metadata(BeautifulSoup(html, "lxml"))
    print(meta.open_graph)

Custom providers::

    from glypto import ProviderRegistry, Scraper
    from glypto.providers import Loader

    registry = ProviderRegistry(Loader().load_defaults())
    registry.add_provider(MyProvider())
    meta = Scraper(registry).scrape(soup)
"""

from glypto.errors import GlyptoError
from glypto.factory import (
    create_scraper,
    create_scraper_with_provider_names,
    create_scraper_with_providers,
    scrape_metadata,
    scrape_metadata_with_provider_names,
    scrape_metadata_with_providers,
)
from glypto.items import Feed, ScrapedData, ScrapingResult
from glypto.metadata import Metadata
from glypto.plugins import MetadataProvider
from glypto.providers import Loader, ProviderLoadError, ProviderRegistry, UnknownProviderError
from glypto.query import FetchError, extract, fetch, fetch_html, parse_html
from glypto.scraper import ScrapeError, Scraper

__version__ = "0.1.0"
__all__ = [
    "Feed",
    "FetchError",
    "GlyptoError",
    "Loader",
    "Metadata",
    "MetadataProvider",
    "ProviderLoadError",
    "ProviderRegistry",
    "ScrapeError",
    "ScrapedData",
    "Scraper",
    "ScrapingResult",
    "UnknownProviderError",
    "create_scraper",
    "create_scraper_with_provider_names",
    "create_scraper_with_providers",
    "extract",
    "fetch",
    "fetch_html",
    "parse_html",
    "scrape_metadata",
    "scrape_metadata_with_provider_names",
    "scrape_metadata_with_providers",
]
