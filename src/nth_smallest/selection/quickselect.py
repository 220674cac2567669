"""Randomised quickselect.

Narrows an index range of a private copy of the data with Lomuto
partitioning until the pivot lands on the target index. The loop replaces
recursion, so adversarial inputs cost time but never stack depth.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from nth_smallest.exceptions import InternalInvariantError
from nth_smallest.selection.base import SelectionStrategy, Selector
from nth_smallest.selection.partition import lomuto_partition
from nth_smallest.selection.registry import SelectorRegistry

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nth_smallest.selection.partition import PivotSource

logger = logging.getLogger("nth_smallest")


@SelectorRegistry.register(SelectionStrategy.QUICKSELECT.value)
class RandomizedQuickSelector(Selector):
    """Quickselect with a uniformly random pivot per partition step.

    Expected time ``O(M)``, worst case ``O(M^2)`` when every pivot is a poor
    split. The caller's sequence is copied before partitioning.

    Args:
        seed: Optional seed for the pivot generator. Ignored if *rng* is given.
        rng: Random source with an ``integers(low, high)`` method. Defaults
            to ``numpy.random.default_rng(seed)``. Tests inject a stub here
            to force a pivot sequence.
    """

    def __init__(self, seed: int | None = None, rng: PivotSource | None = None) -> None:
        self._seed = seed
        self._rng: PivotSource = rng if rng is not None else np.random.default_rng(seed)

    @property
    def name(self) -> str:
        """Return ``'quickselect'``."""
        return SelectionStrategy.QUICKSELECT.value

    def select(self, data: Sequence[int], n: int) -> int:
        """Return the *n*-th smallest value of *data*.

        Args:
            data: Non-empty sequence of integers. Left unmodified.
            n: Validated 1-based rank.

        Returns:
            The *n*-th smallest value as a Python ``int``.

        Raises:
            InternalInvariantError: If the working range ever leaves the
                buffer, which means the engine itself is broken.
        """
        buffer = list(data)
        target = n - 1
        left, right = 0, len(buffer) - 1

        while True:
            if left < 0 or right >= len(buffer) or left > right:
                raise InternalInvariantError(
                    f"quickselect range [{left}, {right}] invalid for buffer "
                    f"of length {len(buffer)} (target index {target})"
                )

            if left == right:
                return int(buffer[left])

            pivot_index = lomuto_partition(buffer, left, right, self._rng)
            logger.debug(
                "quickselect: range=[%d, %d] pivot_index=%d target=%d",
                left,
                right,
                pivot_index,
                target,
            )

            if target == pivot_index:
                return int(buffer[pivot_index])
            if target < pivot_index:
                right = pivot_index - 1
            else:
                left = pivot_index + 1
