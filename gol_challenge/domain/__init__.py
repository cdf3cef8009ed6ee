"""Domain layer: positions, boards, conditions, puzzles and verification."""

from gol_challenge.domain.board import Board, OutOfBoundsPositionError
from gol_challenge.domain.conditions import (
    Condition,
    TestPosition,
    TestRectangle,
    describe,
    evaluate,
    evaluate_all,
    failing_conditions,
)
from gol_challenge.domain.position import Position
from gol_challenge.domain.puzzle import Difficulty, Puzzle
from gol_challenge.domain.verification import (
    BoardSizeMismatch,
    FinalConditionsNotReached,
    FirstMatchPolicy,
    InitialConditionsNotMet,
    StepPolicy,
    StrictPolicy,
    VerificationError,
    policy_for,
    verify,
)

__all__ = [
    "Board",
    "BoardSizeMismatch",
    "Condition",
    "Difficulty",
    "FinalConditionsNotReached",
    "FirstMatchPolicy",
    "InitialConditionsNotMet",
    "OutOfBoundsPositionError",
    "Position",
    "Puzzle",
    "StepPolicy",
    "StrictPolicy",
    "TestPosition",
    "TestRectangle",
    "VerificationError",
    "describe",
    "evaluate",
    "evaluate_all",
    "failing_conditions",
    "policy_for",
    "verify",
]
