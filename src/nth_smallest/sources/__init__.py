"""Tabular data sources for nth-smallest.

Re-exports the ABC, registry, built-in sources and the path loader::

    from nth_smallest.sources import load_numbers
    numbers = load_numbers("numbers.xlsx")
"""

from nth_smallest.sources.base import NumberSource
from nth_smallest.sources.csv_source import CsvNumberSource
from nth_smallest.sources.loader import build_source, load_numbers
from nth_smallest.sources.registry import NumberSourceRegistry, register_number_source
from nth_smallest.sources.xlsx import XlsxNumberSource

__all__ = [
    "CsvNumberSource",
    "NumberSource",
    "NumberSourceRegistry",
    "XlsxNumberSource",
    "build_source",
    "load_numbers",
    "register_number_source",
]
