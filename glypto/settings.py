"""Project-wide defaults for glypto.

Values here are used when neither a config file (see :mod:`glypto.profiles`)
nor a CLI flag overrides them.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------

# Built-in provider names in priority order
PROVIDER_NAMES: tuple[str, ...] = ("openGraph", "twitter", "meta", "other")

OG_PREFIX = "og:"
TWITTER_PREFIX = "twitter:"

# Returned by Metadata.favicon when the page declares no icon
DEFAULT_FAVICON = "/favicon.ico"

# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

DEFAULT_TIMEOUT = 30

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36"
)

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

DEFAULT_LOG_LEVEL = "WARNING"
