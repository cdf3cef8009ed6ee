"""CLI entrypoint for puzzle creation, inspection and solution checking.

This module owns argument parsing and subcommand dispatch. Domain logic
lives in the extracted modules:

- ``gol_challenge.domain``   – boards, conditions, puzzles and verification
- ``gol_challenge.io``       – binary/JSON codecs and file helpers
- ``gol_challenge.catalog``  – authored puzzles and publishing workflows
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from gol_challenge.catalog.authoring import create_puzzles, generate_metadata
from gol_challenge.config.constants import DEFAULT_OUTPUT_DIR
from gol_challenge.config.types import CreatePuzzlesConfig, MetadataConfig
from gol_challenge.domain.verification import VerificationError, verify
from gol_challenge.io.bcs import DeserializationError
from gol_challenge.io.codec import board_to_json, board_to_payload, puzzle_to_json
from gol_challenge.io.paths import puzzle_path, read_board, read_puzzle, solution_path

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_SOLUTION = 1

T = TypeVar("T")

# ---------------------------------------------------------------------------
# Config resolution helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    """CLI > file > default resolution for boolean flags."""
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    """CLI > file > default resolution for string values."""
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _load_config_file(parser: argparse.ArgumentParser, path: Path | None) -> dict[str, object]:
    if path is None:
        return {}
    try:
        raw = json.loads(Path(path).read_text())
    except FileNotFoundError:
        parser.error(f"Config file not found: {path}")
    except OSError as exc:
        parser.error(f"Could not read config file {path}: {exc}")
    except json.JSONDecodeError as exc:
        parser.error(f"Config file is not valid JSON: {path}: {exc}")
    if not isinstance(raw, dict):
        parser.error(f"Config file must contain a JSON object: {path}")
    return raw


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


def _load_or_exit(
    parser: argparse.ArgumentParser, loader: Callable[[Path], T], path: Path
) -> T:
    try:
        return loader(path)
    except FileNotFoundError:
        parser.error(f"File not found: {path}")
    except OSError as exc:
        parser.error(f"Could not read {path}: {exc}")
    except DeserializationError as exc:
        parser.error(f"Could not decode {path}: {exc}")


def _handle_create_puzzles(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    file_cfg = _load_config_file(parser, args.config)
    try:
        config = CreatePuzzlesConfig(
            output_dir=Path(_get_str(args.output_dir, "output_dir", file_cfg, DEFAULT_OUTPUT_DIR)),
            include_all=_get_bool(args.all, "all", file_cfg, False),
            write_manifest=_get_bool(args.manifest, "manifest", file_cfg, True),
        )
    except ValueError as exc:
        parser.error(str(exc))

    rows = create_puzzles(config)
    for row in rows:
        name = str(row["name"])
        puzzle_file = puzzle_path(config.output_dir, name)
        solution_file = solution_path(config.output_dir, name)
        print(f"Created puzzle: {puzzle_file}")
        print(read_puzzle(puzzle_file))
        print(f"Created solution: {solution_file}")
        print(read_board(solution_file))
        print(f"Verified solution (and hints): {row['verified_steps']} steps")
        print()
    return EXIT_OK


def _handle_generate_metadata(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    try:
        config = MetadataConfig(output=args.output, blob_map=args.blob_map, include_all=args.all)
        output = generate_metadata(config)
    except ValueError as exc:
        parser.error(str(exc))
    print(f"Generated TypeScript metadata at: {output}")
    return EXIT_OK


def _handle_print_puzzle(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    puzzle = _load_or_exit(parser, read_puzzle, args.path)
    print(puzzle_to_json(puzzle) if args.json else puzzle)
    return EXIT_OK


def _handle_print_board(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    board = _load_or_exit(parser, read_board, args.path)
    if args.steps is None:
        if args.json:
            print(board_to_json(board))
        else:
            print("Board:")
            print(board)
        return EXIT_OK

    if args.steps < 0:
        parser.error("--steps must be >= 0")
    history = board.generations(args.steps)
    if args.json:
        print(json.dumps([board_to_payload(b) for b in history], ensure_ascii=False, indent=2))
    else:
        for step, generation in enumerate(history):
            print(f"Step {step}:")
            print(generation)
            print()
    return EXIT_OK


def _handle_check_solution(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    puzzle = _load_or_exit(parser, read_puzzle, args.puzzle)
    board = _load_or_exit(parser, read_board, args.board)
    logger.debug("Checking %s against %s", args.board, args.puzzle)
    try:
        steps = verify(puzzle, board)
    except VerificationError as exc:
        print("❌ Solution is INVALID!")
        print(f"   Error: {exc}")
        return EXIT_INVALID_SOLUTION
    print("✅ Solution is VALID!")
    print("   Initial board passes all initial conditions")
    print(f"   After {steps} steps, board passes all final conditions")
    return EXIT_OK


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="gol", description="Game of Life puzzle creation and management tool"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser(
        "create-puzzles", help="Generate puzzle files with their solutions"
    )
    create.add_argument("-o", "--output-dir", type=Path, default=None)
    create.add_argument(
        "--all", action=argparse.BooleanOptionalAction, default=None, help="Include draft puzzles"
    )
    create.add_argument(
        "--manifest",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Write the Parquet manifest next to the puzzle files",
    )
    create.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    create.set_defaults(handler=_handle_create_puzzles)

    metadata = sub.add_parser(
        "generate-metadata", help="Generate TypeScript metadata for puzzles"
    )
    metadata.add_argument("-o", "--output", type=Path, required=True)
    metadata.add_argument(
        "--blob-map", type=Path, required=True, help="JSON file mapping puzzle names to blob IDs"
    )
    metadata.add_argument("--all", action="store_true", help="Include draft puzzles")
    metadata.set_defaults(handler=_handle_generate_metadata)

    print_puzzle = sub.add_parser("print-puzzle", help="Print the contents of a puzzle file")
    print_puzzle.add_argument("path", type=Path)
    print_puzzle.add_argument("--json", action="store_true")
    print_puzzle.set_defaults(handler=_handle_print_puzzle)

    print_board = sub.add_parser("print-board", help="Print the contents of a board file")
    print_board.add_argument("path", type=Path)
    print_board.add_argument("--json", action="store_true")
    print_board.add_argument(
        "--steps", type=int, default=None, help="Also print the next N generations"
    )
    print_board.set_defaults(handler=_handle_print_board)

    check = sub.add_parser("check-solution", help="Check if a board solves a puzzle")
    check.add_argument("puzzle", type=Path)
    check.add_argument("board", type=Path)
    check.set_defaults(handler=_handle_check_solution)

    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint; returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.handler(args, parser)


if __name__ == "__main__":
    sys.exit(main())
