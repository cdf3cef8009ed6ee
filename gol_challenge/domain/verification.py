"""Solution verification: initial check, step-window search, final check.

``verify`` is pure. It never mutates the puzzle or the board, never retries,
and iterates only over the step counts chosen by its policy, which are
always drawn from the puzzle's finite step window.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol

from gol_challenge.domain.board import Board
from gol_challenge.domain.conditions import evaluate_all, failing_conditions
from gol_challenge.domain.puzzle import Puzzle

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class VerificationError(Exception):
    """Base class for a board that does not solve a puzzle."""


class BoardSizeMismatch(VerificationError):
    def __init__(self, board_size: int, puzzle_size: int) -> None:
        super().__init__(
            f"board size {board_size} does not match puzzle size {puzzle_size}"
        )
        self.board_size = board_size
        self.puzzle_size = puzzle_size


class InitialConditionsNotMet(VerificationError):
    def __init__(self, failed: list[int]) -> None:
        super().__init__(f"initial conditions not met (failed: {failed})")
        self.failed = failed


class FinalConditionsNotReached(VerificationError):
    def __init__(self, minimal_steps: int, maximal_steps: int) -> None:
        super().__init__(
            "final conditions not reached between "
            f"{minimal_steps} and {maximal_steps} steps"
        )
        self.minimal_steps = minimal_steps
        self.maximal_steps = maximal_steps


# ---------------------------------------------------------------------------
# Step policies
# ---------------------------------------------------------------------------


class StepPolicy(Protocol):
    """Chooses which step counts of a puzzle's window may satisfy it."""

    def candidate_steps(self, puzzle: Puzzle) -> Iterable[int]:
        """Return increasing step counts inside the puzzle's window."""
        ...


class FirstMatchPolicy:
    """Accept the smallest satisfying step anywhere in the window."""

    def candidate_steps(self, puzzle: Puzzle) -> Iterable[int]:
        return puzzle.step_window


class StrictPolicy:
    """Accept only ``minimal_steps``: the first match must open the window."""

    def candidate_steps(self, puzzle: Puzzle) -> Iterable[int]:
        return (puzzle.minimal_steps,)


def policy_for(puzzle: Puzzle) -> StepPolicy:
    """Default policy selected by ``puzzle.is_strict``."""
    return StrictPolicy() if puzzle.is_strict else FirstMatchPolicy()


# ---------------------------------------------------------------------------
# Verification
# ---------------------------------------------------------------------------


def verify(puzzle: Puzzle, board: Board, policy: StepPolicy | None = None) -> int:
    """Return the step count at which ``board`` solves ``puzzle``.

    Raises:
        BoardSizeMismatch: the board and puzzle sizes differ.
        InitialConditionsNotMet: initial conditions are enforced and fail.
        FinalConditionsNotReached: no candidate step satisfies the final
            conditions.
    """
    if board.size != puzzle.size:
        raise BoardSizeMismatch(board.size, puzzle.size)

    if puzzle.enforce_initial_conditions and not evaluate_all(
        puzzle.initial_conditions, board
    ):
        failed = failing_conditions(puzzle.initial_conditions, board)
        logger.debug("Initial conditions failed for %r: %s", puzzle.title, failed)
        raise InitialConditionsNotMet(failed)

    policy = policy or policy_for(puzzle)
    current = board
    current_step = 0
    for steps in policy.candidate_steps(puzzle):
        if steps < current_step:
            raise ValueError("step policy must yield increasing step counts")
        # Advance incrementally from the last evaluated generation.
        current = current.advance(steps - current_step)
        current_step = steps
        if evaluate_all(puzzle.final_conditions, current):
            logger.debug("Puzzle %r solved after %d steps", puzzle.title, steps)
            return steps

    logger.debug(
        "Puzzle %r not solved within %d..=%d steps",
        puzzle.title,
        puzzle.minimal_steps,
        puzzle.maximal_steps,
    )
    raise FinalConditionsNotReached(puzzle.minimal_steps, puzzle.maximal_steps)
