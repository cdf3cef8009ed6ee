"""I/O layer: binary and JSON codecs, file paths and Parquet persistence."""

from gol_challenge.io.bcs import DeserializationError
from gol_challenge.io.codec import (
    board_from_bytes,
    board_from_json,
    board_to_bytes,
    board_to_json,
    content_id,
    puzzle_from_bytes,
    puzzle_from_json,
    puzzle_to_bytes,
    puzzle_to_json,
)
from gol_challenge.io.paths import read_board, read_puzzle, write_board, write_puzzle

__all__ = [
    "DeserializationError",
    "board_from_bytes",
    "board_from_json",
    "board_to_bytes",
    "board_to_json",
    "content_id",
    "puzzle_from_bytes",
    "puzzle_from_json",
    "puzzle_to_bytes",
    "puzzle_to_json",
    "read_board",
    "read_puzzle",
    "write_board",
    "write_puzzle",
]
