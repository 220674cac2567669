"""Resolve a path to a number source and read it.

Checks run in a fixed order: existence, regular file, known extension.
"""

from __future__ import annotations

import inspect
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from nth_smallest.exceptions import NotAFileError, SourceNotFoundError, WrongFormatError
from nth_smallest.sources.registry import NumberSourceRegistry

if TYPE_CHECKING:
    import os

    from nth_smallest.config import NthSmallestConfig
    from nth_smallest.sources.base import NumberSource

logger = logging.getLogger("nth_smallest")


def build_source(path: Path, config: NthSmallestConfig | None = None) -> NumberSource:
    """Instantiate the source registered for the extension of *path*.

    ``sheet_index`` is passed only to sources whose constructor declares it.

    Raises:
        WrongFormatError: If no source handles the extension.
    """
    try:
        source_cls = NumberSourceRegistry.get(path.suffix)
    except KeyError:
        available = ", ".join(NumberSourceRegistry.list_available())
        raise WrongFormatError(f"File must be in one of these formats: {available}") from None

    sheet_index = config.sheet_index if config is not None else 0
    column_index = config.column_index if config is not None else 0
    if "sheet_index" in inspect.signature(source_cls).parameters:
        return source_cls(sheet_index=sheet_index, column_index=column_index)  # type: ignore[call-arg]
    return source_cls(column_index=column_index)


def load_numbers(
    path: str | os.PathLike[str],
    config: NthSmallestConfig | None = None,
) -> list[int]:
    """Read the integers of the configured column of a tabular file.

    Args:
        path: Path to an ``.xlsx`` or ``.csv`` file.
        config: Supplies ``sheet_index`` and ``column_index``; first sheet
            and first column when omitted.

    Returns:
        Integer truncations of the numeric cells, in order of appearance.

    Raises:
        SourceNotFoundError: If *path* does not exist.
        NotAFileError: If *path* is a directory.
        WrongFormatError: If the extension is unknown or the content is
            not a readable table.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise SourceNotFoundError(f"File does not exist: {file_path}")
    if not file_path.is_file():
        raise NotAFileError(f"Path points to a directory, not a file: {file_path}")

    source = build_source(file_path, config)
    numbers = source.read_numbers(file_path)
    logger.info("Loaded %d number(s) from %s via %s source", len(numbers), file_path, source.name)
    return numbers
