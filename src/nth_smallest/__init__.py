"""nth-smallest: find the N-th smallest integer in a dataset.

An order-statistic selection engine with two interchangeable strategies,
a bounded max-heap and a randomised Lomuto quickselect, plus thin glue for
reading numbers from spreadsheets and serving the result over HTTP.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("nth-smallest")
except PackageNotFoundError:
    __version__ = "0.0.0"

from nth_smallest.config import NthSmallestConfig
from nth_smallest.exceptions import (
    ConfigValidationError,
    InternalInvariantError,
    InvalidArgumentError,
    NotAFileError,
    NthSmallestError,
    SourceAccessError,
    SourceNotFoundError,
    WrongFormatError,
)
from nth_smallest.selection import (
    BoundedHeapSelector,
    RandomizedQuickSelector,
    SelectionStrategy,
    Selector,
)
from nth_smallest.service import SelectionService
from nth_smallest.sources import load_numbers

__all__ = [
    "BoundedHeapSelector",
    "ConfigValidationError",
    "InternalInvariantError",
    "InvalidArgumentError",
    "NotAFileError",
    "NthSmallestConfig",
    "NthSmallestError",
    "RandomizedQuickSelector",
    "SelectionService",
    "SelectionStrategy",
    "Selector",
    "SourceAccessError",
    "SourceNotFoundError",
    "WrongFormatError",
    "__version__",
    "load_numbers",
]
