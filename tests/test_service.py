"""Tests for SelectionService validation and dispatch."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import numpy as np
import pytest

from nth_smallest.config import NthSmallestConfig
from nth_smallest.exceptions import InternalInvariantError, InvalidArgumentError
from nth_smallest.logging.logger import SelectionLogger
from nth_smallest.selection.base import SelectionStrategy
from nth_smallest.selection.heap import BoundedHeapSelector
from nth_smallest.selection.quickselect import RandomizedQuickSelector
from nth_smallest.service import SelectionService


@pytest.fixture(params=[SelectionStrategy.BOUNDED_HEAP, SelectionStrategy.QUICKSELECT])
def service(request: pytest.FixtureRequest) -> SelectionService:
    """A service for each built-in strategy."""
    return SelectionService(request.param, seed=11)


class TestValidation:
    """Inputs are rejected before any computation."""

    @pytest.mark.parametrize("n", [0, 1, 5, -1])
    def test_empty_dataset_rejected_for_any_rank(self, service: SelectionService, n: int) -> None:
        with pytest.raises(InvalidArgumentError, match="dataset must not be empty"):
            service.find_nth_smallest([], n)

    def test_empty_numpy_dataset_rejected(self, service: SelectionService) -> None:
        with pytest.raises(InvalidArgumentError, match="dataset must not be empty"):
            service.find_nth_smallest(np.array([], dtype=np.int64), 1)

    @pytest.mark.parametrize("n", [0, -3, 5, 100])
    def test_rank_out_of_range(self, service: SelectionService, n: int) -> None:
        with pytest.raises(InvalidArgumentError, match=r"rank out of range: 1\.\.4"):
            service.find_nth_smallest([5, 1, 1, 3], n)

    @pytest.mark.parametrize("n", [1.0, "2", True, None])
    def test_non_integer_rank(self, service: SelectionService, n: object) -> None:
        with pytest.raises(InvalidArgumentError, match="rank must be an integer"):
            service.find_nth_smallest([5, 1, 1, 3], n)  # type: ignore[arg-type]

    def test_selector_not_called_on_invalid_input(self) -> None:
        selector = MagicMock()
        service = SelectionService(selector=selector)
        with pytest.raises(InvalidArgumentError):
            service.find_nth_smallest([1, 2], 3)
        selector.select.assert_not_called()


class TestDispatch:
    """Valid calls reach the configured selector unchanged."""

    @pytest.mark.parametrize(
        ("data", "n", "expected"),
        [
            ([5, 1, 1, 3], 2, 1),
            ([7, 2, 9, 4, 1], 3, 4),
            ([10], 1, 10),
            ([3, 3, 3], 2, 3),
        ],
    )
    def test_scenarios(self, service: SelectionService, data: list[int], n: int, expected: int) -> None:
        assert service.find_nth_smallest(data, n) == expected

    def test_min_and_max(self, service: SelectionService) -> None:
        data = [4, -2, 17, 0, 9]
        assert service.find_nth_smallest(data, 1) == -2
        assert service.find_nth_smallest(data, len(data)) == 17

    def test_caller_sequence_unchanged(self, service: SelectionService) -> None:
        data = [9, 4, 7, 1, 8]
        service.find_nth_smallest(data, 3)
        assert data == [9, 4, 7, 1, 8]

    def test_numpy_integer_rank_accepted(self, service: SelectionService) -> None:
        assert service.find_nth_smallest([9, 4, 7], np.int64(2)) == 7

    def test_strategy_selects_implementation(self) -> None:
        assert isinstance(SelectionService(SelectionStrategy.BOUNDED_HEAP)._selector, BoundedHeapSelector)
        assert isinstance(SelectionService("quickselect")._selector, RandomizedQuickSelector)

    def test_default_strategy_is_quickselect(self) -> None:
        assert SelectionService().strategy == "quickselect"

    def test_injected_selector_result_returned_unchanged(self) -> None:
        selector = MagicMock()
        selector.name = "fake"
        selector.select.return_value = 123
        service = SelectionService(selector=selector)
        assert service.find_nth_smallest([1, 2, 3], 2) == 123
        selector.select.assert_called_once_with([1, 2, 3], 2)

    def test_selection_logger_exposed(self) -> None:
        selection_logger = SelectionLogger(log_level="none")
        service = SelectionService(selection_logger=selection_logger)
        assert service.selection_logger is selection_logger
        assert SelectionService.selection_logger.__doc__

    def test_from_config(self) -> None:
        config = NthSmallestConfig(
            _env_file=None,  # type: ignore[call-arg]
            selection_strategy="bounded_heap",
            diagnostic_mode=True,
            log_level="none",
        )
        service = SelectionService.from_config(config)
        assert service.strategy == "bounded_heap"
        service.find_nth_smallest([3, 1, 2], 2)
        assert len(service.selection_logger.get_diagnostic_data()) == 1


class TestRecordsAndDefects:
    """Successful calls are recorded; engine defects are logged and re-raised."""

    def test_record_contents(self) -> None:
        selection_logger = SelectionLogger(log_level="none", diagnostic_mode=True)
        service = SelectionService(SelectionStrategy.BOUNDED_HEAP, selection_logger=selection_logger)
        service.find_nth_smallest([7, 2, 9, 4, 1], 3)
        (record,) = selection_logger.get_diagnostic_data()
        assert record.strategy == "bounded_heap"
        assert record.dataset_size == 5
        assert record.rank == 3
        assert record.value == 4
        assert record.elapsed_ms >= 0.0

    def test_invalid_input_not_recorded(self) -> None:
        selection_logger = SelectionLogger(log_level="none", diagnostic_mode=True)
        service = SelectionService(selection_logger=selection_logger)
        with pytest.raises(InvalidArgumentError):
            service.find_nth_smallest([], 1)
        assert selection_logger.get_diagnostic_data() == []

    def test_invariant_violation_logged_and_reraised(self, caplog: pytest.LogCaptureFixture) -> None:
        selector = MagicMock()
        selector.name = "broken"
        selector.select.side_effect = InternalInvariantError("bad range")
        service = SelectionService(selector=selector)
        with caplog.at_level(logging.ERROR, logger="nth_smallest"):
            with pytest.raises(InternalInvariantError, match="bad range"):
                service.find_nth_smallest([1, 2, 3], 2)
        assert "engine defect" in caplog.text
