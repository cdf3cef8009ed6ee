"""Immutable grid coordinates."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from gol_challenge.config.constants import MAX_COORDINATE

# Moore neighborhood offsets, row-major
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)


@dataclass(frozen=True, order=True)
class Position:
    """A cell coordinate; ordering compares ``x`` first, then ``y``."""

    x: int
    y: int

    def __post_init__(self) -> None:
        for name, value in (("x", self.x), ("y", self.y)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if not 0 <= value <= MAX_COORDINATE:
                raise ValueError(f"{name} must be in [0, {MAX_COORDINATE}], got {value}")

    def neighbors(self) -> Iterator[Position]:
        """Yield the Moore-adjacent positions with non-negative coordinates."""
        for dx, dy in NEIGHBOR_OFFSETS:
            nx_, ny_ = self.x + dx, self.y + dy
            if 0 <= nx_ <= MAX_COORDINATE and 0 <= ny_ <= MAX_COORDINATE:
                yield Position(nx_, ny_)

    def within(self, size: int) -> bool:
        """Return True when the position lies on a ``size x size`` board."""
        return self.x < size and self.y < size

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
