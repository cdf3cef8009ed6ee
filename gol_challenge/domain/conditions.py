"""Declarative predicates over boards.

The variant set is closed: :class:`TestPosition` and :class:`TestRectangle`.
``evaluate`` dispatches over exactly these two shapes.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from gol_challenge.config.constants import MAX_COORDINATE, MAX_LIVE_COUNT
from gol_challenge.domain.position import Position

if TYPE_CHECKING:
    from gol_challenge.domain.board import Board


def _check_range(name: str, value: range) -> None:
    if not isinstance(value, range):
        raise ValueError(f"{name} must be a range, got {type(value).__name__}")
    if value.step != 1:
        raise ValueError(f"{name} must have step 1")
    if not 0 <= value.start <= MAX_COORDINATE or not 0 <= value.stop <= MAX_COORDINATE:
        raise ValueError(f"{name} bounds must be in [0, {MAX_COORDINATE}]")


@dataclass(frozen=True)
class TestPosition:
    """Holds iff the liveness at ``position`` equals ``is_live``."""

    __test__ = False  # not a pytest test class

    position: Position
    is_live: bool


@dataclass(frozen=True, eq=False)
class TestRectangle:
    """Holds iff the live count inside ``x_range x y_range`` is within bounds.

    Ranges are half-open; both count bounds are inclusive. Equality compares
    range bounds, so empty ranges at different offsets stay distinct.
    """

    __test__ = False  # not a pytest test class

    x_range: range
    y_range: range
    min_live_count: int
    max_live_count: int

    def __post_init__(self) -> None:
        _check_range("x_range", self.x_range)
        _check_range("y_range", self.y_range)
        if not 0 <= self.min_live_count <= MAX_LIVE_COUNT:
            raise ValueError(f"min_live_count must be in [0, {MAX_LIVE_COUNT}]")
        if not 0 <= self.max_live_count <= MAX_LIVE_COUNT:
            raise ValueError(f"max_live_count must be in [0, {MAX_LIVE_COUNT}]")
        if self.min_live_count > self.max_live_count:
            raise ValueError("min_live_count must be <= max_live_count")

    def _key(self) -> tuple[int, int, int, int, int, int]:
        return (
            self.x_range.start,
            self.x_range.stop,
            self.y_range.start,
            self.y_range.stop,
            self.min_live_count,
            self.max_live_count,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TestRectangle):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


Condition = Union[TestPosition, TestRectangle]


def evaluate(condition: Condition, board: Board) -> bool:
    """Evaluate a single condition against ``board``."""
    if isinstance(condition, TestPosition):
        return board.is_live(condition.position) == condition.is_live
    if isinstance(condition, TestRectangle):
        count = board.count_live_in(condition.x_range, condition.y_range)
        return condition.min_live_count <= count <= condition.max_live_count
    raise TypeError(f"unsupported condition type: {type(condition).__name__}")


def evaluate_all(conditions: Sequence[Condition], board: Board) -> bool:
    """Return True when every condition holds; an empty sequence holds."""
    return all(evaluate(condition, board) for condition in conditions)


def failing_conditions(conditions: Sequence[Condition], board: Board) -> list[int]:
    """Return indices of the conditions that do not hold on ``board``."""
    return [i for i, condition in enumerate(conditions) if not evaluate(condition, board)]


def _format_range(value: range) -> str:
    return f"{value.start}..{value.stop}"


def describe(condition: Condition) -> str:
    """One-line human-readable description of ``condition``."""
    if isinstance(condition, TestPosition):
        state = "live" if condition.is_live else "dead"
        return f"cell {condition.position} is {state}"
    if isinstance(condition, TestRectangle):
        area = f"x in {_format_range(condition.x_range)}, y in {_format_range(condition.y_range)}"
        if condition.min_live_count == condition.max_live_count:
            bound = f"exactly {condition.min_live_count}"
        else:
            bound = f"between {condition.min_live_count} and {condition.max_live_count}"
        return f"{bound} live cells with {area}"
    raise TypeError(f"unsupported condition type: {type(condition).__name__}")
