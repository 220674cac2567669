"""Excel workbook source backed by openpyxl."""

from __future__ import annotations

import logging
import zipfile
from typing import TYPE_CHECKING

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from nth_smallest.exceptions import WrongFormatError
from nth_smallest.sources.base import NumberSource, truncate
from nth_smallest.sources.registry import register_number_source

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger("nth_smallest")


@register_number_source(".xlsx")
class XlsxNumberSource(NumberSource):
    """Reads one column of one worksheet of an ``.xlsx`` workbook.

    Numeric cells (ints and floats) are kept; booleans, dates, strings and
    empty cells are skipped. Formula cells contribute their cached result,
    so a workbook never saved by a spreadsheet application yields nothing
    for them.

    Args:
        sheet_index: Zero-based worksheet index.
        column_index: Zero-based column index.
    """

    def __init__(self, sheet_index: int = 0, column_index: int = 0) -> None:
        super().__init__(column_index)
        if sheet_index < 0:
            raise ValueError(f"sheet_index must be >= 0, got {sheet_index}")
        self._sheet_index = sheet_index

    @property
    def name(self) -> str:
        """Return ``'xlsx'``."""
        return "xlsx"

    def read_numbers(self, path: Path) -> list[int]:
        try:
            workbook = load_workbook(path, read_only=True, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, KeyError) as exc:
            raise WrongFormatError(f"File is not a readable .xlsx workbook: {path}") from exc

        try:
            if self._sheet_index >= len(workbook.worksheets):
                raise WrongFormatError(
                    f"Workbook has {len(workbook.worksheets)} sheet(s), "
                    f"no sheet at index {self._sheet_index}: {path}"
                )
            sheet = workbook.worksheets[self._sheet_index]
            column = self._column_index + 1

            numbers: list[int] = []
            skipped = 0
            for row in sheet.iter_rows(min_col=column, max_col=column, values_only=True):
                value = row[0] if row else None
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    skipped += 1
                    continue
                number = truncate(value)
                if number is None:
                    skipped += 1
                    continue
                numbers.append(number)
        finally:
            workbook.close()

        logger.debug("Read %d number(s) from %s, skipped %d row(s)", len(numbers), path, skipped)
        return numbers
