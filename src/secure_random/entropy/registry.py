"""Entropy source registry keyed by :class:`SourceKind`.

Built-in sources are registered at module import time via the
``@register_entropy_source`` decorator. Selection looks classes up here so
that the configured source order stays plain data.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from secure_random.entropy.base import EntropySource, SourceKind

logger = logging.getLogger("secure_random")


class EntropySourceRegistry:
    """Registry for entropy source classes, one class per :class:`SourceKind`."""

    _registry: ClassVar[dict[SourceKind, type[EntropySource]]] = {}

    @classmethod
    def register(cls, kind: SourceKind) -> Callable[[type[EntropySource]], type[EntropySource]]:
        """Decorator to register a source class under its kind.

        Args:
            kind: The variant the class implements.

        Returns:
            The original class, unmodified.

        Example::

            @EntropySourceRegistry.register(SourceKind.OS_DEVICE)
            class OsDeviceSource(EntropySource):
                ...
        """

        def decorator(source_cls: type[EntropySource]) -> type[EntropySource]:
            cls._registry[kind] = source_cls
            logger.debug("Registered entropy source %s -> %s", kind.value, source_cls.__name__)
            return source_cls

        return decorator

    @classmethod
    def get(cls, kind: SourceKind) -> type[EntropySource]:
        """Look up a source class by kind.

        Args:
            kind: Registered variant.

        Returns:
            The entropy source class (not an instance).

        Raises:
            KeyError: If no class is registered for *kind*.
        """
        try:
            return cls._registry[kind]
        except KeyError:
            available = ", ".join(sorted(k.value for k in cls._registry)) or "(none)"
            raise KeyError(f"Unknown entropy source: {kind.value!r}. Available: {available}") from None

    @classmethod
    def list_available(cls) -> list[str]:
        """Return all registered source names, sorted."""
        return sorted(k.value for k in cls._registry)

    @classmethod
    def _reset(cls) -> None:
        """Reset registry state. **Test-only** — not part of public API."""
        cls._registry.clear()


# Convenience alias used as a decorator in source modules.
register_entropy_source = EntropySourceRegistry.register
