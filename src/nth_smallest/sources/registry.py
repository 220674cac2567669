"""Registry mapping file extensions to number sources.

Built-in sources register at module import time via the
``@register_number_source`` decorator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from nth_smallest.sources.base import NumberSource


class NumberSourceRegistry:
    """Registry for number source classes, keyed by lower-case extension."""

    _registry: ClassVar[dict[str, type[NumberSource]]] = {}

    @classmethod
    def register(cls, extension: str) -> Callable[[type[NumberSource]], type[NumberSource]]:
        """Decorator to register a source class for a file extension.

        Args:
            extension: Extension including the dot (e.g., ``'.xlsx'``).

        Returns:
            The original class, unmodified.
        """

        def decorator(source_cls: type[NumberSource]) -> type[NumberSource]:
            cls._registry[extension.lower()] = source_cls
            return source_cls

        return decorator

    @classmethod
    def get(cls, extension: str) -> type[NumberSource]:
        """Look up a source class by extension.

        Raises:
            KeyError: If no source handles *extension*.
        """
        key = extension.lower()
        if key not in cls._registry:
            available = ", ".join(cls.list_available()) or "(none)"
            raise KeyError(f"No number source for {extension!r}. Available: {available}")
        return cls._registry[key]

    @classmethod
    def list_available(cls) -> list[str]:
        """Return all registered extensions, sorted."""
        return sorted(cls._registry)


register_number_source = NumberSourceRegistry.register
