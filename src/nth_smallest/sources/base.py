"""Abstract base class for tabular number sources.

A source reads one column of a tabular file top to bottom and returns the
integer truncation of every numeric cell, skipping rows whose cell is
missing or non-numeric. Order of appearance is preserved.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class NumberSource(ABC):
    """Abstract base for tabular number sources.

    Args:
        column_index: Zero-based column to read (0 = first column).
    """

    def __init__(self, column_index: int = 0) -> None:
        if column_index < 0:
            raise ValueError(f"column_index must be >= 0, got {column_index}")
        self._column_index = column_index

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'xlsx'``)."""

    @abstractmethod
    def read_numbers(self, path: Path) -> list[int]:
        """Read the configured column of *path*.

        Args:
            path: Existing regular file.

        Returns:
            Integer truncations of the numeric cells, in row order.

        Raises:
            WrongFormatError: If the file content cannot be parsed.
        """


def truncate(value: float) -> int | None:
    """Truncate a finite number toward zero; ``None`` for NaN or infinity."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return int(value)
