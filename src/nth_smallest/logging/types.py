"""Data types for the selection logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SelectionRecord:
    """Immutable record of a single selection call.

    Attributes:
        timestamp_ns: Wall-clock time of the call (nanoseconds since epoch).
        strategy: Name of the selector that computed the value.
        dataset_size: Number of values in the dataset.
        rank: Requested 1-based rank.
        value: The selected value.
        elapsed_ms: Time spent inside the selector (milliseconds).
    """

    timestamp_ns: int
    strategy: str
    dataset_size: int
    rank: int
    value: int
    elapsed_ms: float
