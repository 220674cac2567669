"""Selection engine for nth-smallest.

Two interchangeable order-statistic selectors behind one interface:
a bounded max-heap and a randomised Lomuto quickselect.
"""

from nth_smallest.selection.base import SelectionStrategy, Selector
from nth_smallest.selection.heap import BoundedHeapSelector
from nth_smallest.selection.partition import lomuto_partition
from nth_smallest.selection.quickselect import RandomizedQuickSelector
from nth_smallest.selection.registry import SelectorRegistry

__all__ = [
    "BoundedHeapSelector",
    "RandomizedQuickSelector",
    "SelectionStrategy",
    "Selector",
    "SelectorRegistry",
    "lomuto_partition",
]
