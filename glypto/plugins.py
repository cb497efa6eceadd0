"""glypto.plugins - contracts for metadata providers and provider registries.

A provider is any object with a ``name``, a ``priority`` and the three
methods below; inheriting from a base class is not required::

    from bs4 import Tag

    from glypto.items import ScrapedData

    class OEmbedProvider:
        name = "oembed"
        priority = 5

        def can_handle(self, node: Tag) -> bool:
            return node.name == "link" and node.get("type") == "application/json+oembed"

        def scrape(self, node: Tag) -> ScrapedData | None:
            href = node.get("href")
            return ScrapedData("oembed", href) if href else None

        def get_value(self, key: str, data: dict[str, list[str]]) -> str | None:
            values = data.get(key)
            return values[0] if values else None

Both contracts are ``runtime_checkable`` ``Protocol`` classes so they can be
used with ``isinstance()`` when validating plugins loaded from disk.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from glypto.items import ProviderData, ScrapedData, ScrapingResult

# ---------------------------------------------------------------------------
# Protocol definitions
# ---------------------------------------------------------------------------

@runtime_checkable
class MetadataProvider(Protocol):
    """Named, prioritized strategy extracting one key/value pair per element."""

    name: str
    priority: int  # Lower = preferred

    def can_handle(self, node: Any) -> bool:
        """Return True if this provider recognizes *node*."""
        ...

    def scrape(self, node: Any) -> ScrapedData | None:
        """Extract a key/value pair from *node*, or None when it carries no data."""
        ...

    def get_value(self, key: str, data: dict[str, list[str]]) -> str | None:
        """Resolve *key* from this provider's accumulated *data*."""
        ...


@runtime_checkable
class Registry(Protocol):
    """Ordered provider collection used by the scraper and by results."""

    def get_providers(self) -> list[MetadataProvider]:
        ...

    def scrape_from_element(self, node: Any) -> ScrapingResult | None:
        ...

    def resolve_value(self, key: str, provider_data: ProviderData) -> str | None:
        ...

    def add_provider(self, provider: MetadataProvider) -> None:
        ...

    def remove_provider(self, name: str) -> None:
        ...

    def get_provider(self, name: str) -> MetadataProvider | None:
        ...
