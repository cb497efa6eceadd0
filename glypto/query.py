"""glypto.query - fetch a page and scrape its metadata in one call.

Uses only the stdlib (``urllib``) for HTTP.  Parsing is done by
BeautifulSoup with the ``lxml`` tree builder.

Basic usage::

    from glypto.query import fetch

    meta = fetch("https://example.com/blog/some-post")
    print(meta.title)
    print(meta.description)
    print(meta.favicon)
    for feed in meta.feeds:
        print(feed.href)

Pre-fetched HTML::

    from glypto.query import extract

    meta = extract(html, providers=["openGraph", "other"])

Low-level access::

    from glypto.query import fetch_html, parse_html

    soup = parse_html(fetch_html("https://example.com"))
"""

from __future__ import annotations

import gzip
import logging
import urllib.error
import urllib.request
import zlib
from typing import TYPE_CHECKING
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from glypto.errors import GlyptoError
from glypto.factory import create_scraper, create_scraper_with_provider_names
from glypto.settings import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from glypto.metadata import Metadata

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public exception
# ---------------------------------------------------------------------------

class FetchError(GlyptoError, RuntimeError):
    """Raised when a URL cannot be fetched.

    Attributes:
        url    -- the URL that failed
        status -- HTTP status code (0 if no response was received)
    """

    def __init__(self, message: str, url: str = "", status: int = 0) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


def _decode_response_body(raw: bytes, headers: object | None, url: str) -> str:
    encoding = ""
    if headers is not None:
        encoding = str(headers.get("Content-Encoding", "")).lower().strip()

    try:
        if encoding == "gzip":
            raw = gzip.decompress(raw)
        elif encoding in ("deflate", "zlib"):
            raw = zlib.decompress(raw)
    except (OSError, zlib.error) as exc:
        raise FetchError(f"{encoding} decompression failed for {url}: {exc}", url=url) from exc

    charset = "utf-8"
    if headers is not None:
        charset = headers.get_content_charset("utf-8") or "utf-8"
    try:
        return raw.decode(charset, errors="replace")
    except (LookupError, ValueError):
        return raw.decode("utf-8", errors="replace")


# ---------------------------------------------------------------------------
# Low-level HTTP fetch
# ---------------------------------------------------------------------------

def fetch_html(
    url: str,
    *,
    timeout: int = DEFAULT_TIMEOUT,
    user_agent: str | None = None,
) -> str:
    """Fetch *url* and return the response body as a decoded string.

    A single attempt is made; there is no retry.

    Args:
        url:        Fully-qualified HTTP/HTTPS URL.
        timeout:    Request timeout in seconds.
        user_agent: Override the default browser User-Agent string.

    Raises:
        FetchError: Non-200 status, connection failure or unsupported scheme.
    """
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        raise FetchError(f"Unsupported URL scheme: {parsed.scheme!r}", url=url)

    req = urllib.request.Request(
        url,
        headers={
            "User-Agent": user_agent or DEFAULT_USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
            "Accept-Encoding": "gzip, deflate",
        },
    )

    logger.info("Fetching %s", url)
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            status = resp.status
            if status != 200:
                raise FetchError(f"HTTP error! status: {status}", url=url, status=status)
            return _decode_response_body(resp.read(), resp.headers, url)
    except urllib.error.HTTPError as exc:
        raise FetchError(f"HTTP error! status: {exc.code}", url=url, status=exc.code) from exc
    except urllib.error.URLError as exc:
        raise FetchError(f"failed to fetch URL {url}: {exc.reason}", url=url) from exc
    except OSError as exc:
        raise FetchError(f"failed to fetch URL {url}: {exc}", url=url) from exc


def parse_html(html: str | bytes) -> BeautifulSoup:
    """Parse *html* into a BeautifulSoup document using lxml."""
    return BeautifulSoup(html, "lxml")


# ---------------------------------------------------------------------------
# High-level API
# ---------------------------------------------------------------------------

def extract(
    html: str | bytes,
    *,
    providers: Sequence[str] | None = None,
    provider_dir: str | Path | None = None,
) -> Metadata:
    """Scrape metadata from an HTML string (no network).

    Args:
        html:         Raw HTML.
        providers:    Built-in provider names; ``None`` or empty means all.
        provider_dir: Directory of provider plugins, used when *providers*
                      is not given.

    Raises:
        UnknownProviderError: a name in *providers* is not a built-in.
    """
    if providers:
        scraper = create_scraper_with_provider_names(providers)
    else:
        scraper = create_scraper(provider_dir)
    return scraper.scrape(parse_html(html))


def fetch(
    url: str,
    *,
    providers: Sequence[str] | None = None,
    provider_dir: str | Path | None = None,
    timeout: int = DEFAULT_TIMEOUT,
    user_agent: str | None = None,
) -> Metadata:
    """Fetch *url* and scrape its metadata.

    Raises:
        FetchError: the page could not be fetched.
        UnknownProviderError: a name in *providers* is not a built-in.
    """
    html = fetch_html(url, timeout=timeout, user_agent=user_agent)
    return extract(html, providers=providers, provider_dir=provider_dir)
