"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup, Tag

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


def make_node(html: str, tag: str) -> Tag:
    """Parse *html* and return its first *tag* element."""
    node = BeautifulSoup(html, "lxml").find(tag)
    assert isinstance(node, Tag), f"no <{tag}> in {html!r}"
    return node


@pytest.fixture
def article_html() -> str:
    return _read_fixture("article.html")


@pytest.fixture
def minimal_html() -> str:
    return _read_fixture("minimal.html")


@pytest.fixture
def article_soup(article_html) -> BeautifulSoup:
    return BeautifulSoup(article_html, "lxml")


class StubProvider:
    """Configurable provider used to exercise ordering and dispatch."""

    def __init__(
        self,
        name: str,
        priority: int,
        *,
        handles: str | None = "meta",
        data: tuple[str, str] | None = ("test", "value"),
    ) -> None:
        self.name = name
        self.priority = priority
        self.handles = handles
        self.data = data
        self.scrape_calls = 0

    def can_handle(self, node) -> bool:
        return isinstance(node, Tag) and self.handles is not None and node.name == self.handles

    def scrape(self, node):
        from glypto.items import ScrapedData

        self.scrape_calls += 1
        if self.data is None:
            return None
        return ScrapedData(*self.data)

    def get_value(self, key, data):
        values = data.get(key)
        return values[0] if values else None


@pytest.fixture
def stub_provider():
    return StubProvider
