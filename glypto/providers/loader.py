"""Assemble provider lists: built-in defaults, by name, or from a plugin directory.

Plugin directories hold plain ``.py`` files.  Each file must define a
``new_provider()`` callable returning an object that satisfies
:class:`glypto.plugins.MetadataProvider`::

    # plugins/jsonld.py
    from glypto.providers.base import BaseProvider

    class JsonLdProvider(BaseProvider):
        name = "jsonld"
        priority = 0
        ...

    def new_provider():
        return JsonLdProvider()
"""

from __future__ import annotations

import hashlib
import importlib.util
import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from glypto.errors import GlyptoError
from glypto.plugins import MetadataProvider
from glypto.providers.opengraph import OpenGraphProvider
from glypto.providers.other_elements import OtherElementsProvider
from glypto.providers.standard_meta import StandardMetaProvider
from glypto.providers.twitter import TwitterProvider

if TYPE_CHECKING:
    from types import ModuleType

logger = logging.getLogger(__name__)

PLUGIN_FACTORY = "new_provider"

_BUILTIN_FACTORIES: dict[str, Callable[[], MetadataProvider]] = {
    "openGraph": OpenGraphProvider,
    "twitter": TwitterProvider,
    "meta": StandardMetaProvider,
    "other": OtherElementsProvider,
}


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class UnknownProviderError(GlyptoError, ValueError):
    """Raised when a provider name is not one of the built-ins."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown provider: {name}")
        self.name = name


class ProviderLoadError(GlyptoError):
    """Raised when a plugin directory cannot be turned into providers."""

    def __init__(self, message: str, path: str | Path = "") -> None:
        super().__init__(message)
        self.path = str(path)


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

class Loader:
    """Builds provider lists for a :class:`~glypto.providers.registry.ProviderRegistry`."""

    def __init__(self) -> None:
        self._default_providers: list[MetadataProvider] = [
            factory() for factory in _BUILTIN_FACTORIES.values()
        ]

    def load_defaults(self) -> list[MetadataProvider]:
        """Return the four built-in providers."""
        return list(self._default_providers)

    def load_from_list(self, provider_names: Iterable[str]) -> list[MetadataProvider]:
        """Instantiate built-in providers by name.

        An empty list falls back to :meth:`load_defaults`.  An unrecognised
        name raises :class:`UnknownProviderError`; there is no fallback.
        """
        providers: list[MetadataProvider] = []
        for name in provider_names:
            factory = _BUILTIN_FACTORIES.get(name)
            if factory is None:
                raise UnknownProviderError(name)
            providers.append(factory())

        if not providers:
            return self.load_defaults()
        return providers

    def load_from_directory(self, directory: str | Path | None) -> list[MetadataProvider]:
        """Load one provider per ``.py`` plugin file found under *directory*.

        Files are visited in sorted path order; names starting with ``_`` are
        skipped.  An empty *directory* argument, or a directory without any
        plugin files, yields the defaults.

        Raises:
            ProviderLoadError: directory missing, plugin import failure,
                missing ``new_provider``, a ``new_provider`` that raises, or
                a return value that is not a provider.
        """
        if not directory:
            return self.load_defaults()

        root = Path(directory)
        if not root.is_dir():
            raise ProviderLoadError(
                f"failed to load providers from directory {root}: not a directory",
                path=root,
            )

        providers: list[MetadataProvider] = []
        for path in sorted(root.rglob("*.py")):
            if path.name.startswith("_"):
                continue
            providers.append(self._load_plugin(path))

        if not providers:
            logger.info("No provider plugins found in %s; using defaults", root)
            return self.load_defaults()

        logger.info(
            "Loaded %d provider plugin(s) from %s: %s",
            len(providers), root, ", ".join(p.name for p in providers),
        )
        return providers

    def _load_plugin(self, path: Path) -> MetadataProvider:
        module = _import_file(path)

        factory = getattr(module, PLUGIN_FACTORY, None)
        if not callable(factory):
            raise ProviderLoadError(
                f"plugin {path} does not export a {PLUGIN_FACTORY}() function",
                path=path,
            )

        try:
            provider = factory()
        except Exception as exc:
            raise ProviderLoadError(
                f"plugin {path} {PLUGIN_FACTORY}() failed: {exc}", path=path,
            ) from exc
        if not isinstance(provider, MetadataProvider):
            raise ProviderLoadError(
                f"plugin {path} {PLUGIN_FACTORY}() returned {type(provider).__name__}, "
                "not a metadata provider",
                path=path,
            )
        logger.debug("Loaded provider %r (priority %d) from %s",
                     provider.name, provider.priority, path)
        return provider

    @staticmethod
    def available_providers() -> list[str]:
        """Return the names accepted by :meth:`load_from_list`."""
        return list(_BUILTIN_FACTORIES)


def _import_file(path: Path) -> ModuleType:
    """Import *path* as a uniquely named module."""
    digest = hashlib.sha1(str(path.resolve()).encode("utf-8")).hexdigest()[:12]
    module_name = f"glypto_plugin_{path.stem}_{digest}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ProviderLoadError(f"failed to open plugin {path}", path=path)

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise ProviderLoadError(f"failed to open plugin {path}: {exc}", path=path) from exc
    return module
