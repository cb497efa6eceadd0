"""Aggregated scrape output for one document.

:class:`Metadata` stores every key/value pair the providers extracted,
partitioned by provider name, and exposes convenience accessors that fall
back across keys and across providers.

Fallback chains (first non-empty wins, providers consulted in priority order):

    title     → title → firstHeading
    site_name → site_name → site
    favicon   → icon → shortcut icon → "/favicon.ico"
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from glypto.settings import DEFAULT_FAVICON

if TYPE_CHECKING:
    from glypto.items import Feed, ProviderData
    from glypto.plugins import Registry

logger = logging.getLogger(__name__)


class Metadata:
    """Scraped metadata plus the registry used to resolve it.

    Args:
        registry: Registry whose provider order drives value resolution.
                  One empty partition is created per registered provider so
                  lookups by those names never miss.  ``None`` is accepted;
                  every resolved accessor then returns ``None``.
    """

    def __init__(self, registry: Registry | None) -> None:
        self._registry = registry
        self._provider_data: ProviderData = {}
        self.feeds: list[Feed] = []

        if registry is not None:
            for provider in registry.get_providers():
                self._provider_data[provider.name] = {}

    def __repr__(self) -> str:
        return (
            f"Metadata(title={self.title!r}, url={self.url!r}, "
            f"providers={list(self._provider_data)!r}, feeds={len(self.feeds)})"
        )

    # ------------------------------------------------------------------
    # Accumulation
    # ------------------------------------------------------------------

    def add_data(self, provider_name: str, key: str, value: str) -> None:
        """Append *value* under ``provider_name`` / ``key``.

        Unknown provider names get a fresh partition.
        """
        if provider_name not in self._provider_data:
            logger.debug("Creating data partition for unregistered provider %r", provider_name)
            self._provider_data[provider_name] = {}
        self._provider_data[provider_name].setdefault(key, []).append(value)

    def _resolve_value(self, key: str) -> str | None:
        if self._registry is None:
            return None
        return self._registry.resolve_value(key, self._provider_data)

    def _resolve_first(self, *keys: str) -> str | None:
        for key in keys:
            value = self._resolve_value(key)
            if value is not None:
                return value
        return None

    # ------------------------------------------------------------------
    # Resolved accessors
    # ------------------------------------------------------------------

    @property
    def title(self) -> str | None:
        return self._resolve_first("title", "firstHeading")

    @property
    def description(self) -> str | None:
        return self._resolve_value("description")

    @property
    def image(self) -> str | None:
        return self._resolve_value("image")

    @property
    def url(self) -> str | None:
        """Canonical URL (``og:url``, ``twitter:url`` or ``<link rel="canonical">``)."""
        return self._resolve_value("url")

    @property
    def site_name(self) -> str | None:
        # Twitter cards call it "site"
        return self._resolve_first("site_name", "site")

    @property
    def favicon(self) -> str:
        """Favicon href; never ``None``."""
        icon = self._resolve_first("icon", "shortcut icon")
        return icon if icon is not None else DEFAULT_FAVICON

    # ------------------------------------------------------------------
    # Raw partitions
    # ------------------------------------------------------------------

    def get_provider_data(self, provider_name: str) -> dict[str, list[str]]:
        """Return the raw key → values map for *provider_name* (``{}`` if absent)."""
        return self._provider_data.get(provider_name, {})

    @property
    def open_graph(self) -> dict[str, list[str]]:
        return self.get_provider_data("openGraph")

    @property
    def twitter_card(self) -> dict[str, list[str]]:
        return self.get_provider_data("twitter")

    @property
    def meta(self) -> dict[str, list[str]]:
        return self.get_provider_data("meta")

    @property
    def other(self) -> dict[str, list[str]]:
        return self.get_provider_data("other")

    @property
    def provider_data(self) -> ProviderData:
        return self._provider_data

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable snapshot of the resolved and raw data."""
        return {
            "title": self.title,
            "description": self.description,
            "image": self.image,
            "url": self.url,
            "site_name": self.site_name,
            "favicon": self.favicon,
            "feeds": [feed.model_dump() for feed in self.feeds],
            "providers": {
                name: {key: list(values) for key, values in data.items()}
                for name, data in self._provider_data.items()
            },
        }
