"""Authoring workflows: write puzzle files and export frontend metadata.

A puzzle that fails its own self-verification indicates an inconsistent
definition; that is reported as :class:`AuthoringError` and aborts the run.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from gol_challenge.catalog.puzzles import get_puzzles
from gol_challenge.config.constants import MANIFEST_SCHEMA_VERSION
from gol_challenge.config.types import CreatePuzzlesConfig, MetadataConfig
from gol_challenge.domain.board import Board
from gol_challenge.domain.puzzle import Puzzle
from gol_challenge.domain.verification import VerificationError, verify
from gol_challenge.io.codec import content_id
from gol_challenge.io.paths import (
    manifest_path,
    puzzle_path,
    solution_path,
    write_board,
    write_puzzle,
)
from gol_challenge.io.persistence import write_manifest

logger = logging.getLogger(__name__)


class AuthoringError(AssertionError):
    """A catalog puzzle is not solved by its own solution board."""


def self_verify(name: str, puzzle: Puzzle, solution: Board) -> int:
    """Verify *solution* against *puzzle* with initial conditions enforced.

    The shipped puzzle may leave its hints unenforced; the check still
    requires the solution to satisfy them.
    """
    checked = puzzle.replace(enforce_initial_conditions=True)
    try:
        return verify(checked, solution)
    except VerificationError as exc:
        raise AuthoringError(f"{name}: solution does not solve its puzzle: {exc}") from exc


def create_puzzles(config: CreatePuzzlesConfig) -> list[dict[str, object]]:
    """Encode every selected catalog puzzle and its solution to files.

    Returns one manifest row per puzzle; the rows are also written to the
    Parquet manifest unless ``config.write_manifest`` is false.
    """
    out_dir = Path(config.output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    rows: list[dict[str, object]] = []
    for name, builder in get_puzzles(config.include_all):
        puzzle, solution = builder()
        puzzle_file = puzzle_path(out_dir, name)
        solution_file = solution_path(out_dir, name)
        puzzle_bytes = write_puzzle(puzzle_file, puzzle)
        solution_bytes = write_board(solution_file, solution)
        logger.info("Created puzzle %s and solution %s", puzzle_file, solution_file)

        verified_steps: int | None = None
        if config.verify:
            verified_steps = self_verify(name, puzzle, solution)
            logger.info("Verified %s (and hints): %d steps", name, verified_steps)

        rows.append(
            {
                "schema_version": MANIFEST_SCHEMA_VERSION,
                "name": name,
                "title": puzzle.title,
                "difficulty": puzzle.difficulty.to_value(),
                "size": puzzle.size,
                "minimal_steps": puzzle.minimal_steps,
                "maximal_steps": puzzle.maximal_steps,
                "is_strict": puzzle.is_strict,
                "enforce_initial_conditions": puzzle.enforce_initial_conditions,
                "puzzle_id": content_id(puzzle_bytes),
                "solution_id": content_id(solution_bytes),
                "verified_steps": verified_steps,
            }
        )

    if config.write_manifest:
        write_manifest(rows, manifest_path(out_dir))
    return rows


# ---------------------------------------------------------------------------
# TypeScript metadata
# ---------------------------------------------------------------------------

_METADATA_HEADER = """\
// This file is auto-generated by the gol tool. Do not edit manually.
// To regenerate: gol generate-metadata -o path/to/output.ts --blob-map path/to/blob-mapping.json
//
// To get real blob IDs:
// 1. Run: gol create-puzzles
// 2. Publish each <name>_puzzle.bcs file as a data blob
// 3. Create a blob mapping JSON file and use the --blob-map option

import { PuzzleMetadata, DifficultyLevel } from "@/lib/types/puzzle.types";

// Re-export for backward compatibility
export type { PuzzleMetadata } from "@/lib/types/puzzle.types";

"""

_METADATA_FOOTER = """\
// Helper to get puzzle by ID
export function getPuzzleMetadata(id: string): PuzzleMetadata | undefined {
  return KNOWN_PUZZLES.find((puzzle) => puzzle.id === id);
}

// Helper to get puzzles by difficulty
export function getPuzzlesByDifficulty(difficulty: DifficultyLevel): PuzzleMetadata[] {
  return KNOWN_PUZZLES.filter((puzzle) => puzzle.difficulty === difficulty);
}
"""


def load_blob_map(path: Path) -> dict[str, str]:
    """Load the ``name -> puzzle id`` mapping produced when publishing blobs."""
    if not path.exists():
        raise ValueError(f"Blob map file not found: {path}")
    try:
        raw = json.loads(path.read_text())
    except OSError as exc:
        raise ValueError(f"Could not read blob map {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Blob map is not valid JSON: {path}: {exc}") from exc
    if not isinstance(raw, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in raw.items()
    ):
        raise ValueError(f"Blob map must be a JSON object of strings: {path}")
    return raw


def render_metadata(entries: list[tuple[str, Puzzle]], blob_map: dict[str, str]) -> str:
    """Render the TypeScript metadata module for ``(name, puzzle)`` entries."""
    parts = [_METADATA_HEADER, "export const KNOWN_PUZZLES: PuzzleMetadata[] = [\n"]
    for name, puzzle in entries:
        puzzle_id = blob_map.get(name)
        if puzzle_id is None:
            raise ValueError(f"Puzzle ID for name {name} is missing")
        parts.append(
            "  {\n"
            f"    id: {json.dumps(puzzle_id)},\n"
            f"    title: {json.dumps(puzzle.title)},\n"
            f"    summary: {json.dumps(puzzle.summary)},\n"
            f"    difficulty: {json.dumps(puzzle.difficulty.to_value())},\n"
            f"    size: {puzzle.size},\n"
            "  },\n"
        )
    parts.append("];\n\n")
    parts.append(_METADATA_FOOTER)
    return "".join(parts)


def generate_metadata(config: MetadataConfig) -> Path:
    """Write the TypeScript metadata file and return its path."""
    blob_map = load_blob_map(config.blob_map)
    entries = [(name, builder()[0]) for name, builder in get_puzzles(config.include_all)]
    config.output.parent.mkdir(parents=True, exist_ok=True)
    config.output.write_text(render_metadata(entries, blob_map))
    logger.info("Generated TypeScript metadata at %s", config.output)
    return config.output
