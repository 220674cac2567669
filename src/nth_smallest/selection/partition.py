"""Lomuto partitioning around a randomly chosen pivot.

The buffer passed in must be exclusively owned by the current call; it is
rearranged in place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import MutableSequence


class PivotSource(Protocol):
    """Anything that can draw a random index, e.g. ``numpy.random.Generator``."""

    def integers(self, low: int, high: int) -> int:
        """Return a random integer in ``[low, high)``."""
        ...


def lomuto_partition(
    buffer: MutableSequence[int],
    left: int,
    right: int,
    rng: PivotSource,
) -> int:
    """Partition ``buffer[left:right + 1]`` around a random pivot.

    The pivot is swapped to ``right`` first, then a single scan moves every
    element ``<= pivot`` in front of the boundary ``i``. Finally the pivot is
    swapped into ``i``, which is its position in sorted order.

    Args:
        buffer: Mutable buffer rearranged in place.
        left: First index of the range (inclusive).
        right: Last index of the range (inclusive).
        rng: Random source used to pick the pivot index.

    Returns:
        Final index of the pivot. Everything in ``[left, i)`` is ``<= pivot``
        and everything in ``(i, right]`` is ``> pivot``.
    """
    pivot_index = int(rng.integers(left, right + 1))
    buffer[pivot_index], buffer[right] = buffer[right], buffer[pivot_index]

    pivot = buffer[right]
    i = left
    for j in range(left, right):
        if buffer[j] <= pivot:
            buffer[i], buffer[j] = buffer[j], buffer[i]
            i += 1
    buffer[i], buffer[right] = buffer[right], buffer[i]
    return i
