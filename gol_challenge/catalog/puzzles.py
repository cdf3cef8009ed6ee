"""Authored puzzle catalog.

Every builder returns ``(puzzle, solution)``: the solution board is built
first and the puzzle's conditions are derived from it. Hints are exact-match
condition lists with specific leading entries removed by index, so removal
order matters (remove the higher index first).
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from gol_challenge.domain.board import Board
from gol_challenge.domain.conditions import Condition, TestPosition, TestRectangle
from gol_challenge.domain.position import Position
from gol_challenge.domain.puzzle import Difficulty, Puzzle

PuzzleBuilder = Callable[[], tuple[Puzzle, Board]]


class PuzzleStatus(Enum):
    """Publication status of a catalog entry."""

    DRAFT = "draft"
    ACTIVE = "active"
    RETIRED = "retired"


def _cells(*coords: tuple[int, int]) -> list[Position]:
    return [Position(x, y) for x, y in coords]


def _hints(board: Board, *drop: int) -> list[Condition]:
    """Exact-match conditions of *board* with the entries at *drop* removed."""
    conditions = board.to_exactly_matching_conditions()
    for index in sorted(drop, reverse=True):
        del conditions[index]
    return conditions


def _still_life(
    title: str, summary: str, size: int, cells: list[Position], drop: tuple[int, int]
) -> tuple[Puzzle, Board]:
    target = Board.with_live_cells(size, cells)
    puzzle = Puzzle(
        title=title,
        summary=summary,
        difficulty=Difficulty.TUTORIAL,
        size=size,
        minimal_steps=1,
        maximal_steps=1,
        initial_conditions=_hints(target, *drop),
        final_conditions=target.to_exactly_matching_conditions(),
    )
    return puzzle, target


def _oscillator(
    title: str,
    summary: str,
    difficulty: Difficulty,
    size: int,
    cells: list[Position],
    lead: int,
    drop: tuple[int, int],
) -> tuple[Puzzle, Board]:
    # The solution is the target advanced by `lead` steps; one more step
    # completes the period and lands back on the target.
    target = Board.with_live_cells(size, cells)
    initial = target.advance(lead)
    puzzle = Puzzle(
        title=title,
        summary=summary,
        difficulty=difficulty,
        size=size,
        minimal_steps=1,
        maximal_steps=1,
        initial_conditions=_hints(initial, *drop),
        final_conditions=target.to_exactly_matching_conditions(),
    )
    return puzzle, initial


# ---------------------------------------------------------------------------
# Still lifes
# ---------------------------------------------------------------------------


def create_block_puzzle_and_solution() -> tuple[Puzzle, Board]:
    target = Board.with_live_cells(8, _cells((3, 3), (3, 4), (4, 3), (4, 4)))
    puzzle = Puzzle(
        title="Block",
        summary="Create a stable 2x2 block pattern in the center of the board",
        difficulty=Difficulty.TUTORIAL,
        size=8,
        minimal_steps=1,
        maximal_steps=1,
        initial_conditions=[
            TestRectangle(
                x_range=range(0, 8), y_range=range(0, 8), min_live_count=4, max_live_count=4
            )
        ],
        final_conditions=target.to_exactly_matching_conditions(),
    )
    return puzzle, target


def create_beehive_puzzle_and_solution() -> tuple[Puzzle, Board]:
    #  ●●
    # ●  ●
    #  ●●
    return _still_life(
        "Beehive",
        "Create a stable beehive pattern (6-cell hexagonal shape)",
        9,
        _cells((3, 2), (4, 2), (2, 3), (5, 3), (3, 4), (4, 4)),
        drop=(4, 5),
    )


def create_loaf_puzzle_and_solution() -> tuple[Puzzle, Board]:
    #  ●●
    # ●  ●
    #  ● ●
    #   ●
    return _still_life(
        "Loaf",
        "Create a stable loaf pattern (7-cell bread loaf shape)",
        10,
        _cells((3, 2), (4, 2), (2, 3), (5, 3), (3, 4), (5, 4), (4, 5)),
        drop=(5, 6),
    )


def create_boat_puzzle_and_solution() -> tuple[Puzzle, Board]:
    # ●●
    # ● ●
    #  ●
    return _still_life(
        "Boat",
        "Create a stable boat pattern (5-cell boat shape)",
        8,
        _cells((2, 2), (3, 2), (2, 3), (4, 3), (3, 4)),
        drop=(3, 4),
    )


def create_tub_puzzle_and_solution() -> tuple[Puzzle, Board]:
    #  ●
    # ● ●
    #  ●
    return _still_life(
        "Tub",
        "Create a stable tub pattern (4-cell hollow square)",
        7,
        _cells((3, 2), (2, 3), (4, 3), (3, 4)),
        drop=(2, 3),
    )


# ---------------------------------------------------------------------------
# Oscillators
# ---------------------------------------------------------------------------


def create_blinker_puzzle_and_solution() -> tuple[Puzzle, Board]:
    return _oscillator(
        "Blinker",
        "Create a blinker oscillator pattern (3-cell vertical line that oscillates)",
        Difficulty.TUTORIAL,
        7,
        _cells((3, 2), (3, 3), (3, 4)),
        lead=1,
        drop=(0, 2),
    )


def create_beacon_puzzle_and_solution() -> tuple[Puzzle, Board]:
    # ●●··
    # ●●··
    # ··●●
    # ··●●
    return _oscillator(
        "Beacon",
        "Create a beacon oscillator pattern (two 2x2 blocks that blink diagonally)",
        Difficulty.EASY,
        8,
        _cells((2, 2), (3, 2), (2, 3), (3, 3), (4, 4), (5, 4), (4, 5), (5, 5)),
        lead=1,
        drop=(0, 5),
    )


def create_clock_puzzle_and_solution() -> tuple[Puzzle, Board]:
    # Period 4, so three steps ahead is one step behind.
    return _oscillator(
        "Clock",
        "Create a clock oscillator pattern (period-4 oscillator)",
        Difficulty.EASY,
        8,
        _cells((4, 2), (2, 3), (4, 3), (3, 4), (5, 4), (3, 5)),
        lead=3,
        drop=(0, 5),
    )


# ---------------------------------------------------------------------------
# Multi-step puzzles
# ---------------------------------------------------------------------------


def create_four_blinkers_puzzle_and_solution() -> tuple[Puzzle, Board]:
    size = 16
    offset = size // 2 - 1
    initial = Board.with_live_cells(
        size,
        _cells(
            (offset, offset - 1),
            (offset - 2, offset),
            (offset - 1, offset),
            (offset + 1, offset),
            (offset + 2, offset),
            (offset, offset + 1),
        ),
    )
    final = initial.advance(10)
    puzzle = Puzzle(
        title="Four Blinkers 1",
        summary="Create four blinkers from very few cells",
        difficulty=Difficulty.EASY,
        size=size,
        minimal_steps=10,
        maximal_steps=10,
        # Two cells are left out so the solver has to guess them.
        initial_conditions=_hints(initial, 0, 3),
        final_conditions=final.to_exactly_matching_conditions(),
    )
    return puzzle, initial


def create_four_blinkers_with_initial_conditions_puzzle_and_solution() -> tuple[Puzzle, Board]:
    puzzle, board = create_four_blinkers_puzzle_and_solution()
    puzzle = puzzle.replace(
        title="Four Blinkers 2",
        summary="Create four blinkers from very few cells (strict variant).",
        difficulty=Difficulty.MEDIUM,
        enforce_initial_conditions=True,
    )
    return puzzle, board


def create_robot_face_puzzle_and_solution() -> tuple[Puzzle, Board]:
    size = 60
    offset = size // 2 - 2
    initial = Board.with_live_cells(
        size,
        _cells(
            (offset, offset),
            (offset + 1, offset),
            (offset + 2, offset),
            (offset, offset + 1),
            (offset + 2, offset + 1),
            (offset, offset + 2),
            (offset + 2, offset + 2),
        ),
    )
    # Settled by step 174; the remaining oscillators have even periods.
    final = initial.advance(180)
    puzzle = Puzzle(
        title="Robot face",
        summary="Create a robot-like face from very few cells",
        difficulty=Difficulty.EASY,
        size=size,
        minimal_steps=174,
        maximal_steps=174,
        enforce_initial_conditions=True,
        initial_conditions=_hints(initial, 3),
        final_conditions=final.to_exactly_matching_conditions(),
    )
    return puzzle, initial


def _glider_pair_initial_conditions() -> list[Condition]:
    return [
        # First glider in the top-left area
        TestRectangle(x_range=range(0, 5), y_range=range(0, 5), min_live_count=5, max_live_count=5),
        # Second glider in the bottom-right area
        TestRectangle(
            x_range=range(7, 12), y_range=range(7, 12), min_live_count=5, max_live_count=5
        ),
    ]


# Glider heading down-right from the top-left corner.
_GLIDER_TOP_LEFT = ((2, 1), (3, 2), (1, 3), (2, 3), (3, 3))


def _glider_collision(
    title: str,
    summary: str,
    second_glider: tuple[tuple[int, int], ...],
    steps: int,
) -> tuple[Puzzle, Board]:
    initial = Board.with_live_cells(12, _cells(*_GLIDER_TOP_LEFT, *second_glider))
    final = initial.advance(16)
    puzzle = Puzzle(
        title=title,
        summary=summary,
        difficulty=Difficulty.MEDIUM,
        size=12,
        minimal_steps=steps,
        maximal_steps=steps,
        enforce_initial_conditions=True,
        is_strict=True,
        initial_conditions=_glider_pair_initial_conditions(),
        final_conditions=final.to_exactly_matching_conditions(),
    )
    return puzzle, initial


def create_glider_collision_square_puzzle_and_solution() -> tuple[Puzzle, Board]:
    # Second glider is the first rotated 180 degrees, heading up-left.
    return _glider_collision(
        "Glider Collision 1",
        "Make two gliders collide and create a square",
        ((9, 10), (8, 9), (10, 8), (9, 8), (8, 8)),
        steps=14,
    )


def create_glider_collision_cancel_puzzle_and_solution() -> tuple[Puzzle, Board]:
    return _glider_collision(
        "Glider Collision 2",
        "Make two gliders collide and cancel each other out",
        ((8, 9), (7, 8), (9, 7), (8, 7), (7, 7)),
        steps=16,
    )


def create_glider_migration_puzzle_and_solution() -> tuple[Puzzle, Board]:
    initial = Board.with_live_cells(16, _cells(*_GLIDER_TOP_LEFT))
    final = initial.advance(40)
    puzzle = Puzzle(
        title="Glider Migration",
        summary="Guide a glider from the top-left square to the bottom-right square",
        difficulty=Difficulty.EASY,
        size=16,
        minimal_steps=40,
        maximal_steps=40,
        initial_conditions=[
            TestPosition(position=Position(3, 3), is_live=True),
            # All five cells in the top-left quadrant, none elsewhere.
            TestRectangle(
                x_range=range(0, 8), y_range=range(0, 8), min_live_count=5, max_live_count=5
            ),
            TestRectangle(
                x_range=range(8, 16), y_range=range(0, 8), min_live_count=0, max_live_count=0
            ),
            TestRectangle(
                x_range=range(0, 16), y_range=range(8, 16), min_live_count=0, max_live_count=0
            ),
        ],
        final_conditions=final.to_exactly_matching_conditions(),
    )
    return puzzle, initial


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

CATALOG: tuple[tuple[str, PuzzleBuilder, PuzzleStatus], ...] = (
    ("01_block", create_block_puzzle_and_solution, PuzzleStatus.ACTIVE),
    ("02_beehive", create_beehive_puzzle_and_solution, PuzzleStatus.ACTIVE),
    ("03_loaf", create_loaf_puzzle_and_solution, PuzzleStatus.ACTIVE),
    ("04_boat", create_boat_puzzle_and_solution, PuzzleStatus.ACTIVE),
    ("05_tub", create_tub_puzzle_and_solution, PuzzleStatus.ACTIVE),
    ("06_blinker", create_blinker_puzzle_and_solution, PuzzleStatus.ACTIVE),
    ("07_beacon", create_beacon_puzzle_and_solution, PuzzleStatus.ACTIVE),
    ("10_clock", create_clock_puzzle_and_solution, PuzzleStatus.ACTIVE),
    ("20_glider_migration", create_glider_migration_puzzle_and_solution, PuzzleStatus.ACTIVE),
    ("21_four_blinkers", create_four_blinkers_puzzle_and_solution, PuzzleStatus.ACTIVE),
    (
        "22_four_blinkers_with_initial_conditions",
        create_four_blinkers_with_initial_conditions_puzzle_and_solution,
        PuzzleStatus.ACTIVE,
    ),
    (
        "23_glider_collision_square",
        create_glider_collision_square_puzzle_and_solution,
        PuzzleStatus.ACTIVE,
    ),
    (
        "24_glider_collision_cancel",
        create_glider_collision_cancel_puzzle_and_solution,
        PuzzleStatus.ACTIVE,
    ),
    ("30_robot_face", create_robot_face_puzzle_and_solution, PuzzleStatus.DRAFT),
)
"""Catalog entries in publication order: ``(name, builder, status)``."""


def get_puzzles(include_all: bool = False) -> list[tuple[str, PuzzleBuilder]]:
    """Return ``(name, builder)`` pairs; only active entries unless *include_all*."""
    return [
        (name, builder)
        for name, builder, status in CATALOG
        if include_all or status is PuzzleStatus.ACTIVE
    ]
