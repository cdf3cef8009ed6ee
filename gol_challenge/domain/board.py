"""Bounded Game-of-Life board and its step function.

Cells outside ``[0, size)`` on either axis are permanently dead: they never
contribute neighbors and are never produced as live cells. There is no
wraparound and the grid never grows.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gol_challenge.config.constants import DEAD_CELL_CHAR, LIVE_CELL_CHAR, MAX_BOARD_SIZE
from gol_challenge.domain.conditions import Condition, TestPosition, TestRectangle
from gol_challenge.domain.position import Position

if TYPE_CHECKING:
    from gol_challenge.domain.puzzle import Puzzle


class OutOfBoundsPositionError(ValueError):
    """Raised when a board is built with a live cell outside its grid."""

    def __init__(self, position: Position, size: int) -> None:
        super().__init__(f"position {position} is outside a {size}x{size} board")
        self.position = position
        self.size = size


@dataclass(frozen=True, eq=False)
class Board:
    """A ``size x size`` grid holding only its live cells.

    ``live_cells`` keeps construction order, which fixes the order of
    :meth:`to_exactly_matching_conditions`. Equality ignores that order.
    """

    size: int
    live_cells: tuple[Position, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise ValueError(f"size must be an integer, got {self.size!r}")
        if not 1 <= self.size <= MAX_BOARD_SIZE:
            raise ValueError(f"size must be in [1, {MAX_BOARD_SIZE}], got {self.size}")
        cells = tuple(dict.fromkeys(self.live_cells))
        for position in cells:
            if not position.within(self.size):
                raise OutOfBoundsPositionError(position, self.size)
        object.__setattr__(self, "live_cells", cells)
        object.__setattr__(self, "_cell_set", frozenset(cells))

    @classmethod
    def with_live_cells(cls, size: int, positions: Iterable[Position]) -> Board:
        """Build a board, collapsing duplicate positions."""
        return cls(size=size, live_cells=tuple(positions))

    @classmethod
    def empty(cls, size: int) -> Board:
        return cls(size=size)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def cell_set(self) -> frozenset[Position]:
        return self._cell_set  # type: ignore[attr-defined]

    def is_live(self, position: Position) -> bool:
        return position in self.cell_set

    def count_live_in(self, x_range: range, y_range: range) -> int:
        """Count live cells inside the half-open rectangle ``x_range x y_range``."""
        return sum(1 for p in self.live_cells if p.x in x_range and p.y in y_range)

    def __len__(self) -> int:
        return len(self.live_cells)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.live_cells)

    def __contains__(self, position: object) -> bool:
        return position in self.cell_set

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.cell_set == other.cell_set

    def __hash__(self) -> int:
        return hash((self.size, self.cell_set))

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def advance_once(self) -> Board:
        """Apply one generation of the B3/S23 rule.

        Neighbor counts are accumulated from live cells only, so the cost is
        proportional to the live population rather than the grid area.
        """
        counts: Counter[Position] = Counter()
        for cell in self.live_cells:
            for neighbor in cell.neighbors():
                if neighbor.within(self.size):
                    counts[neighbor] += 1

        alive = self.cell_set
        survivors = sorted(
            p for p, n in counts.items() if n == 3 or (n == 2 and p in alive)
        )
        return Board(size=self.size, live_cells=tuple(survivors))

    def advance(self, steps: int) -> Board:
        """Return the board after ``steps`` generations; ``advance(0)`` is a copy."""
        if steps < 0:
            raise ValueError(f"steps must be >= 0, got {steps}")
        board = self
        for _ in range(steps):
            board = board.advance_once()
        return board

    def generations(self, steps: int) -> Iterator[Board]:
        """Yield the boards at steps ``0..steps`` inclusive."""
        if steps < 0:
            raise ValueError(f"steps must be >= 0, got {steps}")
        board = self
        yield board
        for _ in range(steps):
            board = board.advance_once()
            yield board

    # ------------------------------------------------------------------
    # Conditions and verification
    # ------------------------------------------------------------------

    def to_exactly_matching_conditions(self) -> list[Condition]:
        """Return conditions satisfied by this board and no other of its size.

        One ``TestPosition`` per live cell in ``live_cells`` order, then a
        full-board ``TestRectangle`` pinning the live count. Leading entries
        may be removed by index to weaken the match into a hint.
        """
        conditions: list[Condition] = [
            TestPosition(position=p, is_live=True) for p in self.live_cells
        ]
        n_live = len(self.live_cells)
        conditions.append(
            TestRectangle(
                x_range=range(0, self.size),
                y_range=range(0, self.size),
                min_live_count=n_live,
                max_live_count=n_live,
            )
        )
        return conditions

    def check_puzzle(self, puzzle: Puzzle) -> int:
        """Verify this board against ``puzzle``; see :func:`verify`."""
        from gol_challenge.domain.verification import verify

        return verify(puzzle, self)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        rows = []
        for y in range(self.size):
            rows.append(
                "".join(
                    LIVE_CELL_CHAR if Position(x, y) in self.cell_set else DEAD_CELL_CHAR
                    for x in range(self.size)
                )
            )
        return "\n".join(rows)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        cells = ", ".join(str(p) for p in self.live_cells)
        return f"Board(size={self.size}, live_cells=[{cells}])"
