"""Unit tests for the built-in metadata providers."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup
from conftest import make_node

from glypto.items import ScrapedData
from glypto.plugins import MetadataProvider
from glypto.providers import (
    OpenGraphProvider,
    OtherElementsProvider,
    StandardMetaProvider,
    TwitterProvider,
)
from glypto.providers.base import _safe_str, get_attribute, get_text_content


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class TestHelpers:
    def test_safe_str_joins_lists(self):
        assert _safe_str(["shortcut", "icon"]) == "shortcut icon"

    def test_safe_str_none_default(self):
        assert _safe_str(None) == ""
        assert _safe_str(None, "x") == "x"

    def test_get_attribute_missing(self):
        node = make_node('<meta name="a">', "meta")
        assert get_attribute(node, "content") == ""

    def test_get_attribute_multi_valued_rel(self):
        node = make_node('<link rel="shortcut icon" href="/f.ico">', "link")
        assert get_attribute(node, "rel") == "shortcut icon"

    def test_get_attribute_on_text_node(self):
        soup = BeautifulSoup("<p>hello</p>", "lxml")
        assert get_attribute(soup.p.string, "rel") == ""

    def test_text_content_concatenates_descendants(self):
        node = make_node("<h1>  Hello <b>big</b> <i>world</i>  </h1>", "h1")
        assert get_text_content(node) == "Hello big world"

    def test_text_content_keeps_inner_whitespace(self):
        node = make_node("<h1>Hello<span> world </span>!</h1>", "h1")
        assert get_text_content(node) == "Hello world !"

    def test_text_content_skips_comments(self):
        node = make_node("<h1>Page<!-- hidden --></h1>", "h1")
        assert get_text_content(node) == "Page"

    @pytest.mark.parametrize("cls", [
        OpenGraphProvider, TwitterProvider, StandardMetaProvider, OtherElementsProvider,
    ])
    def test_builtins_satisfy_protocol(self, cls):
        assert isinstance(cls(), MetadataProvider)


# ---------------------------------------------------------------------------
# Open Graph
# ---------------------------------------------------------------------------

class TestOpenGraphProvider:
    provider = OpenGraphProvider()

    def test_identity(self):
        assert self.provider.name == "openGraph"
        assert self.provider.priority == 1

    @pytest.mark.parametrize(("html", "expected"), [
        ('<meta property="og:title" content="T">', True),
        ('<meta name="og:title" content="T">', True),
        ('<meta name="twitter:title" content="T">', False),
        ('<meta name="description" content="D">', False),
        ('<meta content="orphan">', False),
    ])
    def test_can_handle_meta(self, html, expected):
        assert self.provider.can_handle(make_node(html, "meta")) is expected

    def test_can_handle_rejects_other_elements(self):
        assert not self.provider.can_handle(make_node('<link rel="og:title" href="x">', "link"))

    def test_scrape_strips_prefix(self):
        node = make_node('<meta property="og:title" content="Hello">', "meta")
        assert self.provider.scrape(node) == ScrapedData("title", "Hello")

    def test_scrape_nested_key(self):
        node = make_node('<meta property="og:image:width" content="1200">', "meta")
        assert self.provider.scrape(node) == ScrapedData("image:width", "1200")

    def test_scrape_falls_back_to_name(self):
        node = make_node('<meta name="og:site_name" content="Site">', "meta")
        assert self.provider.scrape(node) == ScrapedData("site_name", "Site")

    def test_scrape_prefers_property_over_name(self):
        node = make_node('<meta property="og:title" name="og:other" content="X">', "meta")
        assert self.provider.scrape(node).key == "title"

    def test_scrape_without_content(self):
        node = make_node('<meta property="og:title">', "meta")
        assert self.provider.scrape(node) is None

    def test_scrape_with_empty_content(self):
        node = make_node('<meta property="og:title" content="">', "meta")
        assert self.provider.scrape(node) is None

    def test_scrape_unhandled_node(self):
        node = make_node('<meta name="description" content="D">', "meta")
        assert self.provider.scrape(node) is None

    def test_get_value(self):
        data = {"image": ["a.png", "b.png"]}
        assert self.provider.get_value("image", data) == "a.png"
        assert self.provider.get_value("title", data) is None
        assert self.provider.get_value("image", {"image": []}) is None


# ---------------------------------------------------------------------------
# Twitter
# ---------------------------------------------------------------------------

class TestTwitterProvider:
    provider = TwitterProvider()

    def test_identity(self):
        assert self.provider.name == "twitter"
        assert self.provider.priority == 2

    @pytest.mark.parametrize(("html", "expected"), [
        ('<meta name="twitter:card" content="summary">', True),
        ('<meta property="twitter:site" content="@x">', True),
        ('<meta property="og:title" content="T">', False),
        ('<meta name="robots" content="noindex">', False),
    ])
    def test_can_handle(self, html, expected):
        assert self.provider.can_handle(make_node(html, "meta")) is expected

    def test_scrape(self):
        node = make_node('<meta name="twitter:site" content="@example">', "meta")
        assert self.provider.scrape(node) == ScrapedData("site", "@example")

    def test_scrape_without_content(self):
        node = make_node('<meta name="twitter:card">', "meta")
        assert self.provider.scrape(node) is None


# ---------------------------------------------------------------------------
# Standard meta
# ---------------------------------------------------------------------------

class TestStandardMetaProvider:
    provider = StandardMetaProvider()

    def test_identity(self):
        assert self.provider.name == "meta"
        assert self.provider.priority == 3

    @pytest.mark.parametrize(("html", "expected"), [
        ('<meta name="description" content="D">', True),
        ('<meta property="article:author" content="A">', True),
        ('<meta name="og:title" content="T">', False),
        ('<meta property="og:title" content="T">', False),
        ('<meta name="twitter:card" content="summary">', False),
        ('<meta name="author" property="og:title" content="T">', False),
        ('<meta charset="utf-8">', False),
        ('<meta http-equiv="refresh" content="5">', False),
    ])
    def test_can_handle(self, html, expected):
        assert self.provider.can_handle(make_node(html, "meta")) is expected

    def test_scrape_keeps_full_name(self):
        node = make_node('<meta name="description" content="About us">', "meta")
        assert self.provider.scrape(node) == ScrapedData("description", "About us")

    def test_scrape_property_namespaced_key(self):
        node = make_node('<meta property="article:published_time" content="2024-01-15">', "meta")
        assert self.provider.scrape(node) == ScrapedData("article:published_time", "2024-01-15")

    def test_scrape_without_content(self):
        node = make_node('<meta name="keywords">', "meta")
        assert self.provider.scrape(node) is None


# ---------------------------------------------------------------------------
# Other elements
# ---------------------------------------------------------------------------

class TestOtherElementsProvider:
    provider = OtherElementsProvider()

    def test_identity(self):
        assert self.provider.name == "other"
        assert self.provider.priority == 4

    @pytest.mark.parametrize(("html", "tag", "expected"), [
        ("<title>T</title>", "title", True),
        ("<h1>H</h1>", "h1", True),
        ("<h2>H</h2>", "h2", False),
        ('<link rel="icon" href="/i.png">', "link", True),
        ('<link rel="shortcut icon" href="/i.ico">', "link", True),
        ('<link rel="canonical" href="https://e.com/">', "link", True),
        ('<link rel="stylesheet" href="/s.css">', "link", False),
        ('<link rel="alternate" href="/feed.xml">', "link", False),
        ('<link rel="apple-touch-icon" href="/a.png">', "link", False),
        ('<link href="/nothing">', "link", False),
        ('<meta name="description" content="D">', "meta", False),
    ])
    def test_can_handle(self, html, tag, expected):
        assert self.provider.can_handle(make_node(html, tag)) is expected

    def test_scrape_title(self):
        node = make_node("<title>\n   My Page  \n</title>", "title")
        assert self.provider.scrape(node) == ScrapedData("title", "My Page")

    def test_scrape_empty_title(self):
        node = make_node("<title>   </title>", "title")
        assert self.provider.scrape(node) is None

    def test_scrape_heading(self):
        node = make_node("<h1>Welcome <em>home</em></h1>", "h1")
        assert self.provider.scrape(node) == ScrapedData("firstHeading", "Welcome home")

    def test_scrape_empty_heading(self):
        node = make_node("<h1><img src='x.png'></h1>", "h1")
        assert self.provider.scrape(node) is None

    def test_scrape_icon(self):
        node = make_node('<link rel="icon" href="/icon.png">', "link")
        assert self.provider.scrape(node) == ScrapedData("icon", "/icon.png")

    def test_scrape_shortcut_icon_key_verbatim(self):
        node = make_node('<link rel="shortcut icon" href="/favicon.ico">', "link")
        assert self.provider.scrape(node) == ScrapedData("shortcut icon", "/favicon.ico")

    def test_scrape_canonical_becomes_url(self):
        node = make_node('<link rel="canonical" href="https://example.com/post">', "link")
        assert self.provider.scrape(node) == ScrapedData("url", "https://example.com/post")

    def test_scrape_link_without_href(self):
        node = make_node('<link rel="canonical">', "link")
        assert self.provider.scrape(node) is None

    def test_scrape_stylesheet(self):
        node = make_node('<link rel="stylesheet" href="/s.css">', "link")
        assert self.provider.scrape(node) is None
