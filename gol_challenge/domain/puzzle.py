"""Puzzle definitions: metadata, step window, strictness and conditions."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import TYPE_CHECKING

from gol_challenge.config.constants import MAX_BOARD_SIZE, MAX_STEPS
from gol_challenge.domain.conditions import Condition, describe

if TYPE_CHECKING:
    from gol_challenge.domain.board import Board


@total_ordering
class Difficulty(Enum):
    """Ordered difficulty levels; the value is the encoding variant index."""

    TUTORIAL = 0
    EASY = 1
    MEDIUM = 2
    HARD = 3

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Difficulty):
            return NotImplemented
        return self.value < other.value

    def to_value(self) -> str:
        """Wire name used by JSON and the frontend metadata."""
        return self.name

    @classmethod
    def from_value(cls, raw: str) -> Difficulty:
        try:
            return cls[raw.upper()]
        except KeyError as exc:
            valid = ", ".join(d.name for d in cls)
            raise ValueError(f"difficulty must be one of {valid}, got {raw!r}") from exc

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass
class Puzzle:
    """A Game-of-Life puzzle.

    A candidate board solves the puzzle when it satisfies
    ``initial_conditions`` (only checked if ``enforce_initial_conditions``)
    and, after some step count in ``minimal_steps..=maximal_steps``,
    satisfies ``final_conditions``. ``is_strict`` narrows the accepted step
    counts; see :func:`gol_challenge.domain.verification.policy_for`.
    """

    title: str
    summary: str
    difficulty: Difficulty
    size: int
    minimal_steps: int
    maximal_steps: int
    metadata: str = ""
    enforce_initial_conditions: bool = False
    is_strict: bool = False
    initial_conditions: list[Condition] = field(default_factory=list)
    final_conditions: list[Condition] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.difficulty, Difficulty):
            raise ValueError(f"difficulty must be a Difficulty, got {self.difficulty!r}")
        if not 1 <= self.size <= MAX_BOARD_SIZE:
            raise ValueError(f"size must be in [1, {MAX_BOARD_SIZE}], got {self.size}")
        if not 0 <= self.minimal_steps <= MAX_STEPS:
            raise ValueError(f"minimal_steps must be in [0, {MAX_STEPS}]")
        if not 0 <= self.maximal_steps <= MAX_STEPS:
            raise ValueError(f"maximal_steps must be in [0, {MAX_STEPS}]")
        if self.minimal_steps > self.maximal_steps:
            raise ValueError("minimal_steps must be <= maximal_steps")
        self.initial_conditions = list(self.initial_conditions)
        self.final_conditions = list(self.final_conditions)

    @property
    def step_window(self) -> range:
        """Inclusive step window as a Python range."""
        return range(self.minimal_steps, self.maximal_steps + 1)

    def replace(self, **changes: object) -> Puzzle:
        """Return a copy with ``changes`` applied; condition lists are copied."""
        changes.setdefault("initial_conditions", list(self.initial_conditions))
        changes.setdefault("final_conditions", list(self.final_conditions))
        return dataclasses.replace(self, **changes)  # type: ignore[arg-type]

    def check_solution(self, board: Board) -> int:
        """Return the satisfying step count for ``board``; see :func:`verify`."""
        from gol_challenge.domain.verification import verify

        return verify(self, board)

    def render(self) -> str:
        lines = [
            f"Title: {self.title}",
            f"Summary: {self.summary}",
            f"Difficulty: {self.difficulty}",
            f"Size: {self.size}x{self.size}",
        ]
        if self.metadata:
            lines.append(f"Metadata: {self.metadata}")
        if self.minimal_steps == self.maximal_steps:
            lines.append(f"Steps: {self.minimal_steps}")
        else:
            lines.append(f"Steps: {self.minimal_steps}..={self.maximal_steps}")
        lines.append(f"Enforce initial conditions: {self.enforce_initial_conditions}")
        lines.append(f"Strict: {self.is_strict}")
        for label, conditions in (
            ("Initial conditions", self.initial_conditions),
            ("Final conditions", self.final_conditions),
        ):
            lines.append(f"{label} ({len(conditions)}):")
            lines.extend(f"  - {describe(c)}" for c in conditions)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
