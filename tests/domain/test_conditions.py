"""Tests for gol_challenge.domain.conditions module."""

from __future__ import annotations

import pytest

from gol_challenge.domain.board import Board
from gol_challenge.domain.conditions import (
    TestPosition,
    TestRectangle,
    describe,
    evaluate,
    evaluate_all,
    failing_conditions,
)
from gol_challenge.domain.position import Position

BOARD = Board.with_live_cells(6, [Position(1, 1), Position(2, 1), Position(4, 4)])


class TestTestPosition:
    def test_live_cell_matches_live(self) -> None:
        assert evaluate(TestPosition(position=Position(1, 1), is_live=True), BOARD)

    def test_dead_cell_matches_dead(self) -> None:
        assert evaluate(TestPosition(position=Position(0, 0), is_live=False), BOARD)

    def test_mismatch(self) -> None:
        assert not evaluate(TestPosition(position=Position(0, 0), is_live=True), BOARD)
        assert not evaluate(TestPosition(position=Position(4, 4), is_live=False), BOARD)


class TestTestRectangle:
    def test_bounds_are_inclusive(self) -> None:
        assert evaluate(TestRectangle(range(0, 6), range(0, 6), 3, 3), BOARD)
        assert evaluate(TestRectangle(range(0, 6), range(0, 6), 0, 3), BOARD)
        assert evaluate(TestRectangle(range(0, 6), range(0, 6), 3, 10), BOARD)

    def test_count_outside_bounds_fails(self) -> None:
        assert not evaluate(TestRectangle(range(0, 6), range(0, 6), 4, 5), BOARD)
        assert not evaluate(TestRectangle(range(0, 6), range(0, 6), 0, 2), BOARD)

    def test_ranges_are_half_open(self) -> None:
        # x=4 is excluded from 0..4
        assert evaluate(TestRectangle(range(0, 4), range(0, 6), 2, 2), BOARD)
        assert evaluate(TestRectangle(range(4, 5), range(4, 5), 1, 1), BOARD)

    def test_min_above_max_rejected(self) -> None:
        with pytest.raises(ValueError, match="min_live_count"):
            TestRectangle(range(0, 2), range(0, 2), 3, 2)

    def test_non_unit_step_rejected(self) -> None:
        with pytest.raises(ValueError, match="step"):
            TestRectangle(range(0, 6, 2), range(0, 6), 0, 1)

    def test_empty_ranges_at_different_offsets_are_distinct(self) -> None:
        first = TestRectangle(range(3, 3), range(0, 8), 0, 0)
        second = TestRectangle(range(5, 5), range(0, 8), 0, 0)
        assert first != second
        assert len({first, second}) == 2

    def test_equal_bounds_compare_equal(self) -> None:
        first = TestRectangle(range(0, 4), range(2, 6), 1, 3)
        second = TestRectangle(range(0, 4), range(2, 6), 1, 3)
        assert first == second
        assert hash(first) == hash(second)
        assert first != TestRectangle(range(0, 4), range(2, 6), 1, 4)


class TestEvaluateAll:
    def test_empty_sequence_holds(self) -> None:
        assert evaluate_all([], BOARD)

    def test_all_must_hold(self) -> None:
        ok = TestPosition(position=Position(1, 1), is_live=True)
        bad = TestPosition(position=Position(1, 1), is_live=False)
        assert evaluate_all([ok, ok], BOARD)
        assert not evaluate_all([ok, bad], BOARD)

    def test_failing_conditions_reports_indices(self) -> None:
        conditions = [
            TestPosition(position=Position(1, 1), is_live=True),
            TestPosition(position=Position(5, 5), is_live=True),
            TestRectangle(range(0, 6), range(0, 6), 0, 0),
        ]
        assert failing_conditions(conditions, BOARD) == [1, 2]

    def test_unknown_condition_type_raises(self) -> None:
        with pytest.raises(TypeError):
            evaluate("not a condition", BOARD)  # type: ignore[arg-type]


class TestDescribe:
    def test_position(self) -> None:
        text = describe(TestPosition(position=Position(3, 4), is_live=False))
        assert text == "cell (3, 4) is dead"

    def test_exact_rectangle(self) -> None:
        text = describe(TestRectangle(range(0, 8), range(2, 5), 4, 4))
        assert text == "exactly 4 live cells with x in 0..8, y in 2..5"

    def test_bounded_rectangle(self) -> None:
        text = describe(TestRectangle(range(0, 8), range(0, 8), 1, 3))
        assert text.startswith("between 1 and 3 live cells")
