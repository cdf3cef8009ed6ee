"""Conway's Game-of-Life puzzles: authoring, encoding and verification."""

from gol_challenge.domain import (
    Board,
    Condition,
    Difficulty,
    FinalConditionsNotReached,
    InitialConditionsNotMet,
    OutOfBoundsPositionError,
    Position,
    Puzzle,
    TestPosition,
    TestRectangle,
    VerificationError,
    evaluate,
    evaluate_all,
    verify,
)

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Condition",
    "Difficulty",
    "FinalConditionsNotReached",
    "InitialConditionsNotMet",
    "OutOfBoundsPositionError",
    "Position",
    "Puzzle",
    "TestPosition",
    "TestRectangle",
    "VerificationError",
    "evaluate",
    "evaluate_all",
    "verify",
]
