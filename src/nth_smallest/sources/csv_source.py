"""Comma-separated values source."""

from __future__ import annotations

import csv
import logging
from typing import TYPE_CHECKING

from nth_smallest.exceptions import WrongFormatError
from nth_smallest.sources.base import NumberSource, truncate
from nth_smallest.sources.registry import register_number_source

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger("nth_smallest")


def _parse_cell(cell: str) -> int | None:
    """Parse a cell as an exact integer, else truncate a finite float; ``None`` if neither."""
    try:
        return int(cell)
    except ValueError:
        pass
    try:
        return truncate(float(cell))
    except ValueError:
        return None


@register_number_source(".csv")
class CsvNumberSource(NumberSource):
    """Reads one column of a UTF-8 ``.csv`` file.

    A cell counts as numeric when it parses as a finite float, so a header
    row is skipped like any other text cell.
    """

    @property
    def name(self) -> str:
        """Return ``'csv'``."""
        return "csv"

    def read_numbers(self, path: Path) -> list[int]:
        numbers: list[int] = []
        skipped = 0
        try:
            # utf-8-sig drops the byte-order mark written by Excel's "CSV UTF-8".
            with open(path, newline="", encoding="utf-8-sig") as f:
                for row in csv.reader(f):
                    if len(row) <= self._column_index:
                        skipped += 1
                        continue
                    number = _parse_cell(row[self._column_index])
                    if number is None:
                        skipped += 1
                        continue
                    numbers.append(number)
        except (UnicodeDecodeError, csv.Error) as exc:
            raise WrongFormatError(f"File is not a readable .csv table: {path}") from exc

        logger.debug("Read %d number(s) from %s, skipped %d row(s)", len(numbers), path, skipped)
        return numbers
