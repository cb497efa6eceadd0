"""Value types produced by providers and the scraping engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from pydantic import BaseModel, field_validator

if TYPE_CHECKING:
    from glypto.plugins import MetadataProvider

# provider name -> key -> values in document order (duplicates kept)
ProviderData = dict[str, dict[str, list[str]]]


class ScrapedData(NamedTuple):
    """Single key/value pair extracted from one DOM element."""

    key: str
    value: str


class ScrapingResult(NamedTuple):
    """A :class:`ScrapedData` together with the provider that produced it."""

    provider: MetadataProvider
    data: ScrapedData


class Feed(BaseModel):
    """RSS/Atom feed advertised through ``<link rel="alternate">``."""

    title: str | None = None
    type: str = ""
    href: str

    @field_validator("href")
    @classmethod
    def _href_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("feed href must not be empty")
        return v
