"""Exception hierarchy shared across glypto.

Only genuine failures are raised.  A missing attribute, an empty tag or a
key no provider knows about is reported as ``None`` by the accessors, never
as an exception.
"""

from __future__ import annotations


class GlyptoError(Exception):
    """Base class for every error raised by glypto."""
