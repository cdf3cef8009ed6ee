"""Path construction and file helpers for puzzle and solution files.

Centralises the file naming conventions used by the authoring workflows and
the CLI.
"""

from __future__ import annotations

from pathlib import Path

from gol_challenge.config.constants import (
    MANIFEST_FILE_NAME,
    PUZZLE_FILE_SUFFIX,
    SOLUTION_FILE_SUFFIX,
)
from gol_challenge.domain.board import Board
from gol_challenge.domain.puzzle import Puzzle
from gol_challenge.io.codec import (
    board_from_bytes,
    board_to_bytes,
    puzzle_from_bytes,
    puzzle_to_bytes,
)


def resolve_within_base(path: Path, base_dir: Path) -> Path:
    """Resolve *path* and ensure it stays within the trusted *base_dir*.

    Raises :exc:`ValueError` if the resolved path escapes the base directory.
    """
    candidate = path if path.is_absolute() else base_dir / path
    resolved = candidate.resolve()
    base_resolved = base_dir.resolve()
    if resolved != base_resolved and base_resolved not in resolved.parents:
        raise ValueError(f"Path escapes base_dir: {path}")
    return resolved


def puzzle_path(out_dir: Path, name: str) -> Path:
    """Return path to the encoded puzzle file for catalog entry *name*."""
    return resolve_within_base(Path(f"{name}{PUZZLE_FILE_SUFFIX}"), out_dir)


def solution_path(out_dir: Path, name: str) -> Path:
    """Return path to the encoded solution board for catalog entry *name*."""
    return resolve_within_base(Path(f"{name}{SOLUTION_FILE_SUFFIX}"), out_dir)


def manifest_path(out_dir: Path) -> Path:
    """Return path to the Parquet manifest within an output directory."""
    return out_dir / MANIFEST_FILE_NAME


def read_puzzle(path: Path) -> Puzzle:
    return puzzle_from_bytes(Path(path).read_bytes())


def read_board(path: Path) -> Board:
    return board_from_bytes(Path(path).read_bytes())


def write_puzzle(path: Path, puzzle: Puzzle) -> bytes:
    """Encode and write *puzzle*; return the bytes written."""
    data = puzzle_to_bytes(puzzle)
    Path(path).write_bytes(data)
    return data


def write_board(path: Path, board: Board) -> bytes:
    """Encode and write *board*; return the bytes written."""
    data = board_to_bytes(board)
    Path(path).write_bytes(data)
    return data
