"""Catalog layer: authored puzzles and the workflows that publish them."""

from gol_challenge.catalog.authoring import (
    AuthoringError,
    create_puzzles,
    generate_metadata,
    self_verify,
)
from gol_challenge.catalog.puzzles import CATALOG, PuzzleStatus, get_puzzles

__all__ = [
    "AuthoringError",
    "CATALOG",
    "PuzzleStatus",
    "create_puzzles",
    "generate_metadata",
    "get_puzzles",
    "self_verify",
]
