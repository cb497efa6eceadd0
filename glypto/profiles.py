"""YAML-based scrape configuration.

Example file::

    default:
      timeout: 15
      providers: [openGraph, twitter, meta, other]

    domains:
      example.com:
        providers: [openGraph, other]
      blog.example.com:
        provider_dir: ./plugins

The ``default`` mapping applies everywhere; the longest ``domains`` key that
matches the URL's host (exactly or as a parent domain) is merged on top.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml
from pydantic import BaseModel, ValidationError

from glypto.errors import GlyptoError
from glypto.settings import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class ConfigError(GlyptoError, ValueError):
    """Raised when a config file cannot be read or has invalid values."""


class ScrapeConfig(BaseModel):
    """Effective settings for one scrape."""

    providers: list[str] = []
    provider_dir: str | None = None
    timeout: int = DEFAULT_TIMEOUT
    user_agent: str | None = None


def _select_domain(domains: Any, url: str) -> dict[str, Any]:
    netloc = urlparse(url).netloc.lower()
    best_key = ""
    best_cfg: dict[str, Any] = {}
    if not netloc or not isinstance(domains, dict):
        return best_cfg
    for key, cfg in domains.items():
        if not isinstance(key, str) or not isinstance(cfg, dict):
            continue
        key_lower = key.lower()
        if (netloc == key_lower or netloc.endswith("." + key_lower)) and (
            len(key_lower) > len(best_key)
        ):
            best_key = key_lower
            best_cfg = cfg
    if best_key:
        logger.debug("Using domain profile %r for %s", best_key, url)
    return best_cfg


def load_config(path: str | Path, url: str = "") -> ScrapeConfig:
    """Load the YAML config at *path* and return settings for *url*.

    Raises:
        ConfigError: unreadable file, invalid YAML or wrongly typed values.
    """
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    except OSError as exc:
        raise ConfigError(f"cannot read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"config {path} must be a mapping, got {type(data).__name__}")

    default = data.get("default", {})
    merged: dict[str, Any] = {}
    if isinstance(default, dict):
        merged.update(default)
    merged.update(_select_domain(data.get("domains", {}), url))

    known = set(ScrapeConfig.model_fields)
    for key in sorted(set(merged) - known):
        logger.debug("Ignoring unknown config key %r in %s", key, path)
        merged.pop(key)

    try:
        return ScrapeConfig(**merged)
    except ValidationError as exc:
        raise ConfigError(f"invalid config {path}: {exc}") from exc
