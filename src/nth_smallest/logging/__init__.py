"""Selection logging subsystem for nth-smallest.

Provides immutable per-call selection records and a configurable logger
that supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from nth_smallest.logging.logger import SelectionLogger
from nth_smallest.logging.types import SelectionRecord

__all__ = [
    "SelectionLogger",
    "SelectionRecord",
]
