"""Shared helpers for the built-in metadata providers."""

from __future__ import annotations

import logging
from typing import Any

from bs4 import NavigableString, Tag

from glypto.items import ScrapedData

logger = logging.getLogger(__name__)


def _safe_str(val: Any, default: str = "") -> str:
    """Safely convert a BeautifulSoup attribute value (str | list | None) to str.

    Multi-valued attributes such as ``rel`` come back as lists; they are
    joined with a single space so ``rel="shortcut icon"`` reads back as
    ``"shortcut icon"``.
    """
    if val is None:
        return default
    if isinstance(val, list):
        return " ".join(str(v) for v in val)
    return str(val)


def is_element(node: Any, *names: str) -> bool:
    """Return True if *node* is an element whose tag name is one of *names*."""
    return isinstance(node, Tag) and node.name in names


def get_attribute(node: Any, key: str) -> str:
    """Return attribute *key* of *node* as a string, ``""`` when absent."""
    if not isinstance(node, Tag):
        return ""
    return _safe_str(node.get(key), "")


def has_attribute(node: Any, key: str) -> bool:
    return isinstance(node, Tag) and node.has_attr(key)


def get_text_content(node: Any) -> str:
    """Concatenate the text of every descendant text node, trimmed.

    Only the joined result is stripped; whitespace inside nested elements is
    kept, so ``<h1>Hello<span> world </span>!</h1>`` reads ``"Hello world !"``.
    """
    if isinstance(node, NavigableString):
        return str(node)
    if isinstance(node, Tag):
        return node.get_text().strip()
    return ""


class BaseProvider:
    """Common behaviour for providers; subclasses set ``name`` and ``priority``."""

    name: str = ""
    priority: int = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, priority={self.priority})"

    def can_handle(self, node: Any) -> bool:
        raise NotImplementedError

    def scrape(self, node: Any) -> ScrapedData | None:
        raise NotImplementedError

    def get_value(self, key: str, data: dict[str, list[str]]) -> str | None:
        """Return the first value stored under *key*, or None."""
        values = data.get(key)
        if values:
            return values[0]
        return None

    def _scrape_meta_tag(self, node: Any, prefix: str) -> ScrapedData | None:
        """Pair ``property`` (falling back to ``name``) with ``content``.

        *prefix* is removed from the front of the property to form the key.
        """
        prop = get_attribute(node, "property") or get_attribute(node, "name")
        content = get_attribute(node, "content")
        if not prop or not content:
            logger.debug("%s: skipping <meta> without property/content", self.name)
            return None
        return ScrapedData(key=prop.removeprefix(prefix), value=content)
