"""Priority-ordered provider registry.

Providers are kept sorted ascending by ``priority`` (lower = preferred).
Sorting is stable, so providers sharing a priority keep the order in which
they were supplied or added.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any

from glypto.items import ScrapingResult

if TYPE_CHECKING:
    from glypto.items import ProviderData
    from glypto.plugins import MetadataProvider

logger = logging.getLogger(__name__)


def _by_priority(provider: MetadataProvider) -> int:
    return provider.priority


class ProviderRegistry:
    """Ordered collection of providers with priority-based dispatch.

    Args:
        providers: Providers to register.  The iterable is copied; the
                   caller's list is never reordered.
    """

    def __init__(self, providers: Iterable[MetadataProvider] = ()) -> None:
        self._providers: list[MetadataProvider] = sorted(providers, key=_by_priority)

    def __repr__(self) -> str:
        names = ", ".join(f"{p.name}:{p.priority}" for p in self._providers)
        return f"ProviderRegistry([{names}])"

    def __len__(self) -> int:
        return len(self._providers)

    def __iter__(self) -> Iterator[MetadataProvider]:
        return iter(list(self._providers))

    def get_providers(self) -> list[MetadataProvider]:
        """Return the registered providers in priority order."""
        return list(self._providers)

    @property
    def providers(self) -> list[MetadataProvider]:
        return self.get_providers()

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def scrape_from_element(self, node: Any) -> ScrapingResult | None:
        """Extract data from *node* with the first provider that can handle it.

        Only the first capable provider is consulted.  When it yields nothing
        the element is skipped; lower-priority providers are not tried.
        """
        for provider in self._providers:
            if not provider.can_handle(node):
                continue
            data = provider.scrape(node)
            if data is None:
                logger.debug(
                    "Provider %r handled <%s> but returned no data",
                    provider.name, getattr(node, "name", "?"),
                )
                return None
            return ScrapingResult(provider=provider, data=data)
        return None

    def resolve_value(self, key: str, provider_data: ProviderData) -> str | None:
        """Return the first value for *key* across providers in priority order."""
        for provider in self._providers:
            data = provider_data.get(provider.name)
            if data is None:
                continue
            value = provider.get_value(key, data)
            if value is not None:
                return value
        return None

    # ------------------------------------------------------------------
    # Mutation / lookup
    # ------------------------------------------------------------------

    def add_provider(self, provider: MetadataProvider) -> None:
        self._providers.append(provider)
        self._providers.sort(key=_by_priority)

    def remove_provider(self, name: str) -> None:
        """Remove the first provider called *name*; no-op if none matches."""
        for i, provider in enumerate(self._providers):
            if provider.name == name:
                del self._providers[i]
                return

    def get_provider(self, name: str) -> MetadataProvider | None:
        for provider in self._providers:
            if provider.name == name:
                return provider
        return None
