"""Diagnostic logger for selection calls.

Uses the standard ``logging`` module with the ``"nth_smallest"`` logger.
Supports three verbosity levels and an in-memory diagnostic mode for
post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from nth_smallest.config import NthSmallestConfig
    from nth_smallest.logging.types import SelectionRecord

logger = logging.getLogger("nth_smallest")


class SelectionLogger:
    """Per-call selection logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per call with strategy, size, rank, value
        and elapsed time.

        ``"full"``: Full JSON dump of all record fields.

    Diagnostic mode stores all records in memory for
    ``get_diagnostic_data()`` and ``get_summary_stats()``.
    """

    def __init__(self, log_level: str = "summary", diagnostic_mode: bool = False) -> None:
        """Initialize the logger.

        Args:
            log_level: One of ``"none"``, ``"summary"``, ``"full"``.
            diagnostic_mode: Keep every record in memory.
        """
        self._log_level = log_level
        self._diagnostic_mode = diagnostic_mode
        self._records: list[SelectionRecord] = []

    @classmethod
    def from_config(cls, config: NthSmallestConfig) -> SelectionLogger:
        """Build a logger from ``log_level`` and ``diagnostic_mode``."""
        return cls(log_level=config.log_level, diagnostic_mode=config.diagnostic_mode)

    def log_selection(self, record: SelectionRecord) -> None:
        """Log a single selection call.

        Args:
            record: Immutable record of the call.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "strategy=%s size=%d rank=%d value=%d elapsed=%.3fms",
                record.strategy,
                record.dataset_size,
                record.rank,
                record.value,
                record.elapsed_ms,
            )
        elif self._log_level == "full":
            logger.info("selection_record: %s", json.dumps(asdict(record)))

    def get_diagnostic_data(self) -> list[SelectionRecord]:
        """Return all stored records (requires ``diagnostic_mode=True``).

        Returns:
            List of all SelectionRecord instances logged so far.
            Empty if diagnostic_mode is False.
        """
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        elapsed = [r.elapsed_ms for r in self._records]
        n = len(self._records)
        return {
            "total_selections": n,
            "mean_elapsed_ms": sum(elapsed) / n,
            "max_elapsed_ms": max(elapsed),
            "mean_dataset_size": sum(r.dataset_size for r in self._records) / n,
            "by_strategy": dict(Counter(r.strategy for r in self._records)),
        }
