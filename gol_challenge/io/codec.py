"""Binary and JSON encodings for boards and puzzles.

The binary form is canonical and deterministic: hashing it yields the
content identifier under which a puzzle or solution is published. Field
order is part of that contract and must not change. The JSON form is for
inspection and debugging only.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any

from gol_challenge.domain.board import Board
from gol_challenge.domain.conditions import Condition, TestPosition, TestRectangle
from gol_challenge.domain.position import Position
from gol_challenge.domain.puzzle import Difficulty, Puzzle
from gol_challenge.io.bcs import DeserializationError, Reader, Writer

CONDITION_TEST_POSITION = 0
CONDITION_TEST_RECTANGLE = 1


# ---------------------------------------------------------------------------
# Binary encoding
# ---------------------------------------------------------------------------


def _write_position(writer: Writer, position: Position) -> None:
    writer.write_u16(position.x)
    writer.write_u16(position.y)


def _write_range(writer: Writer, value: range) -> None:
    writer.write_u16(value.start)
    writer.write_u16(value.stop)


def _write_board(writer: Writer, board: Board) -> None:
    writer.write_u16(board.size)
    writer.write_uleb128(len(board.live_cells))
    for position in board.live_cells:
        _write_position(writer, position)


def _write_condition(writer: Writer, condition: Condition) -> None:
    if isinstance(condition, TestPosition):
        writer.write_uleb128(CONDITION_TEST_POSITION)
        _write_position(writer, condition.position)
        writer.write_bool(condition.is_live)
    elif isinstance(condition, TestRectangle):
        writer.write_uleb128(CONDITION_TEST_RECTANGLE)
        _write_range(writer, condition.x_range)
        _write_range(writer, condition.y_range)
        writer.write_u32(condition.min_live_count)
        writer.write_u32(condition.max_live_count)
    else:
        raise TypeError(f"unsupported condition type: {type(condition).__name__}")


def _write_conditions(writer: Writer, conditions: list[Condition]) -> None:
    writer.write_uleb128(len(conditions))
    for condition in conditions:
        _write_condition(writer, condition)


def _write_puzzle(writer: Writer, puzzle: Puzzle) -> None:
    writer.write_str(puzzle.title)
    writer.write_str(puzzle.summary)
    writer.write_uleb128(puzzle.difficulty.value)
    writer.write_u16(puzzle.size)
    writer.write_str(puzzle.metadata)
    writer.write_u16(puzzle.minimal_steps)
    writer.write_u16(puzzle.maximal_steps)
    writer.write_bool(puzzle.enforce_initial_conditions)
    writer.write_bool(puzzle.is_strict)
    _write_conditions(writer, puzzle.initial_conditions)
    _write_conditions(writer, puzzle.final_conditions)


def _read_position(reader: Reader) -> Position:
    x = reader.read_u16()
    y = reader.read_u16()
    return Position(x, y)


def _read_range(reader: Reader) -> range:
    start = reader.read_u16()
    stop = reader.read_u16()
    return range(start, stop)


def _read_board(reader: Reader) -> Board:
    size = reader.read_u16()
    count = reader.read_uleb128()
    cells = [_read_position(reader) for _ in range(count)]
    return Board.with_live_cells(size, cells)


def _read_condition(reader: Reader) -> Condition:
    variant = reader.read_uleb128()
    if variant == CONDITION_TEST_POSITION:
        position = _read_position(reader)
        return TestPosition(position=position, is_live=reader.read_bool())
    if variant == CONDITION_TEST_RECTANGLE:
        x_range = _read_range(reader)
        y_range = _read_range(reader)
        min_live_count = reader.read_u32()
        max_live_count = reader.read_u32()
        return TestRectangle(
            x_range=x_range,
            y_range=y_range,
            min_live_count=min_live_count,
            max_live_count=max_live_count,
        )
    raise DeserializationError(f"unknown condition variant {variant}")


def _read_conditions(reader: Reader) -> list[Condition]:
    count = reader.read_uleb128()
    return [_read_condition(reader) for _ in range(count)]


def _read_difficulty(reader: Reader) -> Difficulty:
    variant = reader.read_uleb128()
    try:
        return Difficulty(variant)
    except ValueError as exc:
        raise DeserializationError(f"unknown difficulty variant {variant}") from exc


def _read_puzzle(reader: Reader) -> Puzzle:
    title = reader.read_str()
    summary = reader.read_str()
    difficulty = _read_difficulty(reader)
    size = reader.read_u16()
    metadata = reader.read_str()
    minimal_steps = reader.read_u16()
    maximal_steps = reader.read_u16()
    enforce_initial_conditions = reader.read_bool()
    is_strict = reader.read_bool()
    initial_conditions = _read_conditions(reader)
    final_conditions = _read_conditions(reader)
    return Puzzle(
        title=title,
        summary=summary,
        difficulty=difficulty,
        size=size,
        metadata=metadata,
        minimal_steps=minimal_steps,
        maximal_steps=maximal_steps,
        enforce_initial_conditions=enforce_initial_conditions,
        is_strict=is_strict,
        initial_conditions=initial_conditions,
        final_conditions=final_conditions,
    )


def _decode(data: bytes, read: Any, label: str) -> Any:
    reader = Reader(data)
    try:
        value = read(reader)
    except DeserializationError:
        raise
    except ValueError as exc:
        # Structurally valid bytes that violate a domain invariant.
        raise DeserializationError(f"invalid {label}: {exc}") from exc
    reader.finish()
    return value


def board_to_bytes(board: Board) -> bytes:
    writer = Writer()
    _write_board(writer, board)
    return writer.getvalue()


def board_from_bytes(data: bytes) -> Board:
    return _decode(data, _read_board, "board")


def puzzle_to_bytes(puzzle: Puzzle) -> bytes:
    writer = Writer()
    _write_puzzle(writer, puzzle)
    return writer.getvalue()


def puzzle_from_bytes(data: bytes) -> Puzzle:
    return _decode(data, _read_puzzle, "puzzle")


def content_id(data: bytes) -> str:
    """Return the SHA-256 hex digest identifying encoded ``data``."""
    return hashlib.sha256(data).hexdigest()


# ---------------------------------------------------------------------------
# JSON encoding
# ---------------------------------------------------------------------------


def _position_payload(position: Position) -> dict[str, int]:
    return {"x": position.x, "y": position.y}


def _range_payload(value: range) -> dict[str, int]:
    return {"start": value.start, "end": value.stop}


def board_to_payload(board: Board) -> dict[str, Any]:
    return {
        "size": board.size,
        "live_cells": [_position_payload(p) for p in board.live_cells],
    }


def condition_to_payload(condition: Condition) -> dict[str, Any]:
    if isinstance(condition, TestPosition):
        return {
            "TestPosition": {
                "position": _position_payload(condition.position),
                "is_live": condition.is_live,
            }
        }
    if isinstance(condition, TestRectangle):
        return {
            "TestRectangle": {
                "x_range": _range_payload(condition.x_range),
                "y_range": _range_payload(condition.y_range),
                "min_live_count": condition.min_live_count,
                "max_live_count": condition.max_live_count,
            }
        }
    raise TypeError(f"unsupported condition type: {type(condition).__name__}")


def puzzle_to_payload(puzzle: Puzzle) -> dict[str, Any]:
    return {
        "title": puzzle.title,
        "summary": puzzle.summary,
        "difficulty": puzzle.difficulty.to_value(),
        "size": puzzle.size,
        "metadata": puzzle.metadata,
        "minimal_steps": puzzle.minimal_steps,
        "maximal_steps": puzzle.maximal_steps,
        "enforce_initial_conditions": puzzle.enforce_initial_conditions,
        "is_strict": puzzle.is_strict,
        "initial_conditions": [condition_to_payload(c) for c in puzzle.initial_conditions],
        "final_conditions": [condition_to_payload(c) for c in puzzle.final_conditions],
    }


def _require(payload: Any, key: str, kind: type | tuple[type, ...]) -> Any:
    if not isinstance(payload, dict):
        raise DeserializationError(f"expected an object holding {key!r}")
    if key not in payload:
        raise DeserializationError(f"missing field {key!r}")
    value = payload[key]
    # bool is an int subclass; only accept it where bool is requested.
    if isinstance(value, bool) and bool not in (kind if isinstance(kind, tuple) else (kind,)):
        raise DeserializationError(f"field {key!r} must not be a boolean")
    if not isinstance(value, kind):
        raise DeserializationError(f"field {key!r} has unexpected type {type(value).__name__}")
    return value


def _position_from_payload(payload: Any) -> Position:
    return Position(_require(payload, "x", int), _require(payload, "y", int))


def _range_from_payload(payload: Any) -> range:
    return range(_require(payload, "start", int), _require(payload, "end", int))


def board_from_payload(payload: Any) -> Board:
    try:
        size = _require(payload, "size", int)
        cells = _require(payload, "live_cells", list)
        return Board.with_live_cells(size, [_position_from_payload(c) for c in cells])
    except DeserializationError:
        raise
    except ValueError as exc:
        raise DeserializationError(f"invalid board: {exc}") from exc


def _condition_from_payload(payload: Any) -> Condition:
    if not isinstance(payload, dict) or len(payload) != 1:
        raise DeserializationError("condition must be an object with exactly one variant key")
    variant, body = next(iter(payload.items()))
    if variant == "TestPosition":
        return TestPosition(
            position=_position_from_payload(_require(body, "position", dict)),
            is_live=_require(body, "is_live", bool),
        )
    if variant == "TestRectangle":
        return TestRectangle(
            x_range=_range_from_payload(_require(body, "x_range", dict)),
            y_range=_range_from_payload(_require(body, "y_range", dict)),
            min_live_count=_require(body, "min_live_count", int),
            max_live_count=_require(body, "max_live_count", int),
        )
    raise DeserializationError(f"unknown condition variant {variant!r}")


def condition_from_payload(payload: Any) -> Condition:
    try:
        return _condition_from_payload(payload)
    except DeserializationError:
        raise
    except ValueError as exc:
        raise DeserializationError(f"invalid condition: {exc}") from exc


def puzzle_from_payload(payload: Any) -> Puzzle:
    try:
        return Puzzle(
            title=_require(payload, "title", str),
            summary=_require(payload, "summary", str),
            difficulty=Difficulty.from_value(_require(payload, "difficulty", str)),
            size=_require(payload, "size", int),
            metadata=_require(payload, "metadata", str),
            minimal_steps=_require(payload, "minimal_steps", int),
            maximal_steps=_require(payload, "maximal_steps", int),
            enforce_initial_conditions=_require(payload, "enforce_initial_conditions", bool),
            is_strict=_require(payload, "is_strict", bool),
            initial_conditions=[
                _condition_from_payload(c) for c in _require(payload, "initial_conditions", list)
            ],
            final_conditions=[
                _condition_from_payload(c) for c in _require(payload, "final_conditions", list)
            ],
        )
    except DeserializationError:
        raise
    except ValueError as exc:
        raise DeserializationError(f"invalid puzzle: {exc}") from exc


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DeserializationError(f"invalid JSON: {exc}") from exc


def board_to_json(board: Board) -> str:
    return json.dumps(board_to_payload(board), ensure_ascii=False, indent=2)


def board_from_json(text: str) -> Board:
    return board_from_payload(_loads(text))


def puzzle_to_json(puzzle: Puzzle) -> str:
    return json.dumps(puzzle_to_payload(puzzle), ensure_ascii=False, indent=2)


def puzzle_from_json(text: str) -> Puzzle:
    return puzzle_from_payload(_loads(text))
