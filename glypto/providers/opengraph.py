"""Open Graph provider: ``<meta property="og:*">``."""

from __future__ import annotations

from typing import Any

from glypto.items import ScrapedData
from glypto.providers.base import BaseProvider, get_attribute, is_element
from glypto.settings import OG_PREFIX


class OpenGraphProvider(BaseProvider):
    """Extracts Open Graph tags; highest built-in priority."""

    name = "openGraph"
    priority = 1

    def can_handle(self, node: Any) -> bool:
        if not is_element(node, "meta"):
            return False
        return (
            get_attribute(node, "property").startswith(OG_PREFIX)
            or get_attribute(node, "name").startswith(OG_PREFIX)
        )

    def scrape(self, node: Any) -> ScrapedData | None:
        if not self.can_handle(node):
            return None
        return self._scrape_meta_tag(node, OG_PREFIX)
