"""Scraping engine: walks a parsed document and feeds elements to the registry.

The document is traversed once per targeted tag family, in this order:

    1. <meta>
    2. <title>
    3. <h1>
    4. <link> carrying a rel attribute (any value)
    5. <link rel="alternate"> feed links

Each pass is a full depth-first walk from the root in document order.  A
``<link rel="alternate">`` is visited by both pass 4 (where no built-in
provider claims it) and pass 5 (where it becomes a :class:`Feed`).

A :class:`Scraper` keeps the document and the in-progress result on the
instance while scraping, so one instance must not be shared between threads.
The registry itself can be shared.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from bs4 import Tag

from glypto.errors import GlyptoError
from glypto.items import Feed
from glypto.metadata import Metadata
from glypto.providers.base import get_attribute, has_attribute, is_element

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from glypto.plugins import Registry

logger = logging.getLogger(__name__)


class ScrapeError(GlyptoError, ValueError):
    """Raised when there is no document to scrape."""


class Scraper:
    """Extract metadata from a parsed HTML document.

    Args:
        registry: Provider registry consulted for every visited element and
                  attached to the returned :class:`Metadata`.
    """

    def __init__(self, registry: Registry) -> None:
        self.registry = registry
        self._document: Tag | None = None
        self._result: Metadata | None = None

    def scrape(self, document: Tag | None) -> Metadata:
        """Run every pass over *document* and return the collected metadata.

        Args:
            document: ``BeautifulSoup`` document (or any ``Tag`` used as root).

        Raises:
            ScrapeError: *document* is None.
        """
        if document is None:
            raise ScrapeError("HTML document cannot be None")

        self._document = document
        self._result = Metadata(self.registry)

        passes: list[Callable[[], None]] = [
            self._scrape_meta_tags,
            self._scrape_title_tag,
            self._scrape_heading_tags,
            self._scrape_link_tags,
            self._scrape_feed_links,
        ]
        try:
            for run_pass in passes:
                run_pass()
            result = self._result
        finally:
            self._document = None
            self._result = None

        logger.debug("Scraped %r", result)
        return result

    # ------------------------------------------------------------------
    # Passes
    # ------------------------------------------------------------------

    def _scrape_meta_tags(self) -> None:
        for node in self._walk():
            if is_element(node, "meta"):
                self._scrape_from_element(node)

    def _scrape_title_tag(self) -> None:
        for node in self._walk():
            if is_element(node, "title"):
                self._scrape_from_element(node)

    def _scrape_heading_tags(self) -> None:
        for node in self._walk():
            if is_element(node, "h1"):
                self._scrape_from_element(node)

    def _scrape_link_tags(self) -> None:
        for node in self._walk():
            if is_element(node, "link") and has_attribute(node, "rel"):
                self._scrape_from_element(node)

    def _scrape_feed_links(self) -> None:
        for node in self._walk():
            if not is_element(node, "link") or get_attribute(node, "rel") != "alternate":
                continue
            href = get_attribute(node, "href")
            if not href:
                continue
            feed = Feed(
                title=get_attribute(node, "title") or None,
                type=get_attribute(node, "type"),
                href=href,
            )
            self._result.feeds.append(feed)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _scrape_from_element(self, node: Any) -> None:
        extraction = self.registry.scrape_from_element(node)
        if extraction is None:
            return
        self._result.add_data(
            extraction.provider.name,
            extraction.data.key,
            extraction.data.value,
        )

    def _walk(self) -> Iterator[Any]:
        """Yield the root followed by every descendant, depth-first."""
        yield self._document
        if isinstance(self._document, Tag):
            yield from self._document.descendants
