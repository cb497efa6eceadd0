"""Twitter Card provider: ``<meta name="twitter:*">``."""

from __future__ import annotations

from typing import Any

from glypto.items import ScrapedData
from glypto.providers.base import BaseProvider, get_attribute, is_element
from glypto.settings import TWITTER_PREFIX


class TwitterProvider(BaseProvider):
    name = "twitter"
    priority = 2

    def can_handle(self, node: Any) -> bool:
        if not is_element(node, "meta"):
            return False
        return (
            get_attribute(node, "property").startswith(TWITTER_PREFIX)
            or get_attribute(node, "name").startswith(TWITTER_PREFIX)
        )

    def scrape(self, node: Any) -> ScrapedData | None:
        if not self.can_handle(node):
            return None
        return self._scrape_meta_tag(node, TWITTER_PREFIX)
