"""Registry for selector implementations.

Uses a decorator pattern for registration. The ``build()`` method passes the
optional ``seed`` constructor argument to selectors that declare one (e.g.
quickselect, whose pivot choice is randomised).
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from nth_smallest.selection.base import SelectionStrategy, Selector


class SelectorRegistry:
    """Registry mapping strategy names to Selector classes.

    Built-in selectors register via the ``@SelectorRegistry.register()``
    decorator. The ``build()`` class method instantiates the selector for a
    strategy, passing ``seed`` if the constructor accepts it.
    """

    _registry: ClassVar[dict[str, type[Selector]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[Selector]], type[Selector]]:
        """Decorator that registers a Selector class under *name*.

        Args:
            name: Identifier used in config ``selection_strategy``.

        Returns:
            Decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(klass: type[Selector]) -> type[Selector]:
            if name in cls._registry:
                raise ValueError(f"Selector '{name}' is already registered")
            cls._registry[name] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[Selector]:
        """Return the selector class registered under *name*.

        Args:
            name: Identifier to look up.

        Returns:
            The registered Selector subclass.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown selector '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def build(cls, strategy: SelectionStrategy | str, seed: int | None = None) -> Selector:
        """Instantiate the selector registered for *strategy*.

        If the selector constructor declares a ``seed`` parameter (checked via
        ``inspect.signature``), it is passed. Otherwise, the constructor is
        called with no arguments.

        Args:
            strategy: Strategy enum member or its string value.
            seed: Optional seed for selectors with a random source.

        Returns:
            A fully constructed Selector instance.
        """
        name = getattr(strategy, "value", strategy)
        klass = cls.get(name)
        if "seed" in inspect.signature(klass).parameters:
            return klass(seed=seed)  # type: ignore[call-arg]
        return klass()

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered selector names."""
        return sorted(cls._registry)
