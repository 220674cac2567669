"""Selection service: the public entry point of the engine.

Validates the dataset and rank, then delegates to the selector for the
strategy chosen at construction time. There is no fallback between
strategies and no retry.
"""

from __future__ import annotations

import logging
import numbers
import time
from typing import TYPE_CHECKING

from nth_smallest.exceptions import InternalInvariantError, InvalidArgumentError
from nth_smallest.logging.logger import SelectionLogger
from nth_smallest.logging.types import SelectionRecord
from nth_smallest.selection.base import SelectionStrategy
from nth_smallest.selection.registry import SelectorRegistry

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nth_smallest.config import NthSmallestConfig
    from nth_smallest.selection.base import Selector

logger = logging.getLogger("nth_smallest")


class SelectionService:
    """Validate inputs and dispatch to the configured selector.

    Args:
        strategy: Which selector to delegate to. Fixed for the lifetime of
            the service.
        seed: Seed passed to selectors with a random source.
        selector: Pre-built selector; overrides *strategy* and *seed*.
        selection_logger: Destination for per-call records. Defaults to a
            summary-level :class:`SelectionLogger`.
    """

    def __init__(
        self,
        strategy: SelectionStrategy | str = SelectionStrategy.QUICKSELECT,
        *,
        seed: int | None = None,
        selector: Selector | None = None,
        selection_logger: SelectionLogger | None = None,
    ) -> None:
        self._selector = selector if selector is not None else SelectorRegistry.build(strategy, seed)
        self._selection_logger = selection_logger or SelectionLogger()

    @classmethod
    def from_config(cls, config: NthSmallestConfig) -> SelectionService:
        """Build a service from ``selection_strategy``, ``random_seed`` and logging fields."""
        return cls(
            config.strategy,
            seed=config.random_seed,
            selection_logger=SelectionLogger.from_config(config),
        )

    @property
    def strategy(self) -> str:
        """Name of the selector this service delegates to."""
        return self._selector.name

    @property
    def selection_logger(self) -> SelectionLogger:
        """Logger receiving one :class:`SelectionRecord` per successful call."""
        return self._selection_logger

    def find_nth_smallest(self, data: Sequence[int], n: int) -> int:
        """Return the *n*-th smallest value of *data*.

        Args:
            data: Sequence of integers; not modified.
            n: 1-based rank.

        Returns:
            The value at position *n* of ``sorted(data)``.

        Raises:
            InvalidArgumentError: If *data* is empty, *n* is not an integer,
                or *n* is outside ``1..len(data)``.
            InternalInvariantError: If the selector hits an engine defect.
        """
        size = len(data)
        if size == 0:
            raise InvalidArgumentError("dataset must not be empty")
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise InvalidArgumentError("rank must be an integer")
        if n < 1 or n > size:
            raise InvalidArgumentError(f"rank out of range: 1..{size}")

        start = time.perf_counter()
        try:
            value = self._selector.select(data, int(n))
        except InternalInvariantError:
            logger.exception(
                "Selection engine defect: strategy=%s size=%d rank=%d",
                self._selector.name,
                size,
                n,
            )
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        self._selection_logger.log_selection(
            SelectionRecord(
                timestamp_ns=time.time_ns(),
                strategy=self._selector.name,
                dataset_size=size,
                rank=int(n),
                value=value,
                elapsed_ms=elapsed_ms,
            )
        )
        return value
