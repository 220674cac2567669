"""Shared pytest fixtures for nth-smallest tests.

Provides configuration objects, seeded selectors, a forced-pivot random
source and a workbook factory used across multiple test modules.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from openpyxl import Workbook

from nth_smallest.config import NthSmallestConfig
from nth_smallest.selection.heap import BoundedHeapSelector
from nth_smallest.selection.quickselect import RandomizedQuickSelector


class ScriptedPivots:
    """Random source that returns a fixed pivot choice per call.

    Each entry is either an absolute index or one of the strings
    ``"left"``/``"right"``, resolved against the range being partitioned.
    Once the script is exhausted it keeps picking ``"right"``. Every call is
    recorded in ``calls`` as ``(low, high)``.
    """

    def __init__(self, script: list[Any] | None = None) -> None:
        self._script = list(script or [])
        self.calls: list[tuple[int, int]] = []

    def integers(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        choice = self._script.pop(0) if self._script else "right"
        if choice == "left":
            return low
        if choice == "right":
            return high - 1
        return int(choice)


@pytest.fixture()
def scripted_pivots() -> type[ScriptedPivots]:
    """Return the ScriptedPivots class for building forced pivot sequences."""
    return ScriptedPivots


@pytest.fixture()
def config() -> NthSmallestConfig:
    """Default config that ignores any local .env file."""
    return NthSmallestConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture()
def heap_selector() -> BoundedHeapSelector:
    return BoundedHeapSelector()


@pytest.fixture()
def quick_selector() -> RandomizedQuickSelector:
    """Quickselect with a fixed seed for reproducible pivot sequences."""
    return RandomizedQuickSelector(seed=1234)


@pytest.fixture()
def make_workbook(tmp_path: Path):
    """Return a factory writing rows into a fresh .xlsx file.

    Usage::

        path = make_workbook([[5], ["text"], [None], [2.9]])
    """

    def _make(rows: list[list[Any]], name: str = "numbers.xlsx") -> Path:
        workbook = Workbook()
        sheet = workbook.active
        for row in rows:
            sheet.append(row)
        path = tmp_path / name
        workbook.save(path)
        return path

    return _make
