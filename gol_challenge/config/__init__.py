"""Configuration layer: constants and typed config dataclasses."""

from gol_challenge.config.constants import (
    DEAD_CELL_CHAR,
    DEFAULT_OUTPUT_DIR,
    LIVE_CELL_CHAR,
    MANIFEST_FILE_NAME,
    MANIFEST_SCHEMA_VERSION,
    MAX_BOARD_SIZE,
    MAX_COORDINATE,
    MAX_LIVE_COUNT,
    MAX_STEPS,
    PUZZLE_FILE_SUFFIX,
    SOLUTION_FILE_SUFFIX,
)
from gol_challenge.config.types import CreatePuzzlesConfig, MetadataConfig

__all__ = [
    "CreatePuzzlesConfig",
    "DEAD_CELL_CHAR",
    "DEFAULT_OUTPUT_DIR",
    "LIVE_CELL_CHAR",
    "MANIFEST_FILE_NAME",
    "MANIFEST_SCHEMA_VERSION",
    "MAX_BOARD_SIZE",
    "MAX_COORDINATE",
    "MAX_LIVE_COUNT",
    "MAX_STEPS",
    "MetadataConfig",
    "PUZZLE_FILE_SUFFIX",
    "SOLUTION_FILE_SUFFIX",
]
