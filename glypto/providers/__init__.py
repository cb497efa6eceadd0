"""Built-in metadata providers, the provider registry and the provider loader."""

from .base import BaseProvider
from .loader import Loader, ProviderLoadError, UnknownProviderError
from .opengraph import OpenGraphProvider
from .other_elements import OtherElementsProvider
from .registry import ProviderRegistry
from .standard_meta import StandardMetaProvider
from .twitter import TwitterProvider

__all__ = [
    "BaseProvider",
    "Loader",
    "OpenGraphProvider",
    "OtherElementsProvider",
    "ProviderLoadError",
    "ProviderRegistry",
    "StandardMetaProvider",
    "TwitterProvider",
    "UnknownProviderError",
]
