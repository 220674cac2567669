"""Bounded max-heap selector.

Keeps the *n* smallest values seen so far in a heap capped at size *n*.
``heapq`` only provides a min-heap, so values are stored negated and the
heap root is the current maximum.
"""

from __future__ import annotations

import heapq
from typing import TYPE_CHECKING

from nth_smallest.selection.base import SelectionStrategy, Selector
from nth_smallest.selection.registry import SelectorRegistry

if TYPE_CHECKING:
    from collections.abc import Sequence


@SelectorRegistry.register(SelectionStrategy.BOUNDED_HEAP.value)
class BoundedHeapSelector(Selector):
    """Single pass over the data with a size-capped max-heap.

    After ``i`` elements the heap holds the ``n`` smallest of them, so once
    the pass is done its maximum is the answer. Time ``O(M log n)``, space
    ``O(n)``. The input is only iterated, never copied or modified.
    """

    @property
    def name(self) -> str:
        """Return ``'bounded_heap'``."""
        return SelectionStrategy.BOUNDED_HEAP.value

    def select(self, data: Sequence[int], n: int) -> int:
        """Return the *n*-th smallest value of *data*.

        Args:
            data: Non-empty sequence of integers.
            n: Validated 1-based rank.

        Returns:
            The *n*-th smallest value as a Python ``int``.
        """
        heap: list[int] = []
        for item in data:
            # Unsigned numpy scalars wrap on negation.
            value = int(item)
            if len(heap) < n:
                heapq.heappush(heap, -value)
            elif value < -heap[0]:
                heapq.heapreplace(heap, -value)
        return -heap[0]
