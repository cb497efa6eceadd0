"""Fallback provider for non-meta elements.

Element → key mapping:

    <title>                   → title
    <h1>                      → firstHeading
    <link rel="icon">         → icon
    <link rel="shortcut icon">→ shortcut icon
    <link rel="canonical">    → url
"""

from __future__ import annotations

from typing import Any

from glypto.items import ScrapedData
from glypto.providers.base import BaseProvider, get_attribute, get_text_content, is_element

_ICON_RELS: frozenset[str] = frozenset({"icon", "shortcut icon"})
_HANDLED_RELS: frozenset[str] = _ICON_RELS | {"canonical"}

_TEXT_KEYS: dict[str, str] = {
    "title": "title",
    "h1": "firstHeading",
}


class OtherElementsProvider(BaseProvider):
    name = "other"
    priority = 4

    def can_handle(self, node: Any) -> bool:
        if is_element(node, "title", "h1"):
            return True
        if is_element(node, "link"):
            return get_attribute(node, "rel") in _HANDLED_RELS
        return False

    def scrape(self, node: Any) -> ScrapedData | None:
        if not self.can_handle(node):
            return None

        if node.name in _TEXT_KEYS:
            content = get_text_content(node)
            if not content:
                return None
            return ScrapedData(key=_TEXT_KEYS[node.name], value=content)

        rel = get_attribute(node, "rel")
        href = get_attribute(node, "href")
        if not href:
            return None
        if rel in _ICON_RELS:
            return ScrapedData(key=rel, value=href)
        return ScrapedData(key="url", value=href)
