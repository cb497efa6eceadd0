"""Standard ``<meta name=... content=...>`` tags (description, author, ...)."""

from __future__ import annotations

from typing import Any

from glypto.items import ScrapedData
from glypto.providers.base import BaseProvider, get_attribute, is_element
from glypto.settings import OG_PREFIX, TWITTER_PREFIX

_SOCIAL_PREFIXES = (OG_PREFIX, TWITTER_PREFIX)


class StandardMetaProvider(BaseProvider):
    """Handles named meta tags that are neither Open Graph nor Twitter Card."""

    name = "meta"
    priority = 3

    def can_handle(self, node: Any) -> bool:
        if not is_element(node, "meta"):
            return False
        name = get_attribute(node, "name")
        prop = get_attribute(node, "property")
        if not name and not prop:
            return False
        return not name.startswith(_SOCIAL_PREFIXES) and not prop.startswith(_SOCIAL_PREFIXES)

    def scrape(self, node: Any) -> ScrapedData | None:
        if not self.can_handle(node):
            return None
        return self._scrape_meta_tag(node, "")
