"""Centralized domain constants for boards, puzzles and their encodings.

All limits that appear across multiple modules are defined here. Consuming
modules should import from this module rather than defining their own
inline literals.
"""

from __future__ import annotations

MAX_COORDINATE = 0xFFFF
"""Largest coordinate value; positions are encoded as unsigned 16-bit ints."""

MAX_BOARD_SIZE = MAX_COORDINATE
"""Largest board side length (cells are indexed ``0..size-1``)."""

MAX_STEPS = 0xFFFF
"""Largest step count a puzzle window may name (encoded as u16)."""

MAX_LIVE_COUNT = 0xFFFF_FFFF
"""Largest live-cell bound a rectangle condition may carry (encoded as u32)."""

LIVE_CELL_CHAR = "●"
"""Character used for live cells in text renderings."""

DEAD_CELL_CHAR = "·"
"""Character used for dead cells in text renderings."""

PUZZLE_FILE_SUFFIX = "_puzzle.bcs"
"""File-name suffix for encoded puzzles."""

SOLUTION_FILE_SUFFIX = "_solution.bcs"
"""File-name suffix for encoded solution boards."""

MANIFEST_FILE_NAME = "puzzles_manifest.parquet"
"""Name of the Parquet manifest written next to generated puzzle files."""

MANIFEST_SCHEMA_VERSION = 1
"""Version stamped into every manifest row."""

DEFAULT_OUTPUT_DIR = "."
"""Default output directory for generated puzzle files."""
