"""Base classes for selection strategies.

Defines the strategy enum and the abstract interface every selector
implements: given a sequence and a validated 1-based rank, return the
value at that position in ascending order.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class SelectionStrategy(str, enum.Enum):
    """Identifiers of the built-in selection algorithms."""

    BOUNDED_HEAP = "bounded_heap"
    QUICKSELECT = "quickselect"


class Selector(ABC):
    """Abstract base class for order-statistic selectors.

    Implementations must never mutate the caller's sequence. Rank validation
    is the service's job: ``select()`` may assume ``1 <= n <= len(data)``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry identifier (e.g., ``'quickselect'``)."""

    @abstractmethod
    def select(self, data: Sequence[int], n: int) -> int:
        """Return the *n*-th smallest value of *data*.

        Args:
            data: Non-empty sequence of integers. Left unmodified.
            n: 1-based rank, already validated against ``len(data)``.

        Returns:
            The value that would sit at index ``n - 1`` if *data* were
            sorted ascending.
        """
