"""Tests for gol_challenge.io.codec module."""

from __future__ import annotations

import json

import pytest

from gol_challenge.catalog.puzzles import (
    create_glider_collision_square_puzzle_and_solution,
    create_glider_migration_puzzle_and_solution,
)
from gol_challenge.domain.board import Board
from gol_challenge.domain.conditions import TestPosition, TestRectangle
from gol_challenge.domain.position import Position
from gol_challenge.domain.puzzle import Difficulty, Puzzle
from gol_challenge.io.bcs import DeserializationError
from gol_challenge.io.codec import (
    board_from_bytes,
    board_from_json,
    board_to_bytes,
    board_to_json,
    condition_from_payload,
    condition_to_payload,
    content_id,
    puzzle_from_bytes,
    puzzle_from_json,
    puzzle_to_bytes,
    puzzle_to_json,
)

SMALL_BOARD = Board.with_live_cells(8, [Position(3, 3), Position(3, 4)])

SMALL_PUZZLE = Puzzle(
    title="A",
    summary="",
    difficulty=Difficulty.EASY,
    size=8,
    minimal_steps=1,
    maximal_steps=2,
    enforce_initial_conditions=True,
    initial_conditions=[TestPosition(position=Position(1, 2), is_live=True)],
    final_conditions=[TestRectangle(range(0, 8), range(0, 8), 4, 4)],
)


class TestBinaryBoard:
    def test_field_layout(self) -> None:
        assert board_to_bytes(SMALL_BOARD) == (
            b"\x08\x00"  # size
            b"\x02"  # live cell count
            b"\x03\x00\x03\x00"
            b"\x03\x00\x04\x00"
        )

    def test_decode_preserves_cell_order(self) -> None:
        board = Board.with_live_cells(6, [Position(5, 0), Position(0, 5), Position(2, 2)])
        decoded = board_from_bytes(board_to_bytes(board))
        assert decoded.live_cells == board.live_cells

    def test_empty_board(self) -> None:
        assert board_to_bytes(Board.empty(3)) == b"\x03\x00\x00"

    def test_out_of_bounds_cell_rejected(self) -> None:
        with pytest.raises(DeserializationError, match="board"):
            board_from_bytes(b"\x02\x00\x01\x02\x00\x00\x00")

    def test_zero_size_rejected(self) -> None:
        with pytest.raises(DeserializationError):
            board_from_bytes(b"\x00\x00\x00")

    def test_trailing_bytes_rejected(self) -> None:
        with pytest.raises(DeserializationError, match="trailing"):
            board_from_bytes(board_to_bytes(SMALL_BOARD) + b"\x00")

    def test_truncated_rejected(self) -> None:
        with pytest.raises(DeserializationError):
            board_from_bytes(board_to_bytes(SMALL_BOARD)[:-1])


class TestBinaryPuzzle:
    def test_field_layout(self) -> None:
        assert puzzle_to_bytes(SMALL_PUZZLE) == (
            b"\x01A"  # title
            b"\x00"  # summary
            b"\x01"  # difficulty EASY
            b"\x08\x00"  # size
            b"\x00"  # metadata
            b"\x01\x00\x02\x00"  # minimal, maximal steps
            b"\x01\x00"  # enforce, strict
            b"\x01"  # one initial condition
            b"\x00\x01\x00\x02\x00\x01"
            b"\x01"  # one final condition
            b"\x01\x00\x00\x08\x00\x00\x00\x08\x00"
            b"\x04\x00\x00\x00\x04\x00\x00\x00"
        )

    def test_catalog_puzzle_survives_decoding(self) -> None:
        puzzle, _ = create_glider_migration_puzzle_and_solution()
        assert puzzle_from_bytes(puzzle_to_bytes(puzzle)) == puzzle

    def test_encoding_is_deterministic(self) -> None:
        first, _ = create_glider_collision_square_puzzle_and_solution()
        second, _ = create_glider_collision_square_puzzle_and_solution()
        assert puzzle_to_bytes(first) == puzzle_to_bytes(second)
        assert content_id(puzzle_to_bytes(first)) == content_id(puzzle_to_bytes(second))

    def test_empty_rectangles_at_different_offsets_encode_differently(self) -> None:
        def with_final(x_range: range) -> Puzzle:
            return SMALL_PUZZLE.replace(
                final_conditions=[TestRectangle(x_range, range(0, 8), 0, 0)]
            )

        first, second = with_final(range(3, 3)), with_final(range(5, 5))
        assert first != second
        assert puzzle_to_bytes(first) != puzzle_to_bytes(second)
        assert puzzle_from_bytes(puzzle_to_bytes(second)) == second

    def test_unknown_condition_variant(self) -> None:
        data = bytearray(puzzle_to_bytes(SMALL_PUZZLE))
        data[14] = 0x07  # variant byte of the initial condition
        with pytest.raises(DeserializationError, match="variant"):
            puzzle_from_bytes(bytes(data))

    def test_unknown_difficulty(self) -> None:
        data = bytearray(puzzle_to_bytes(SMALL_PUZZLE))
        data[3] = 0x09
        with pytest.raises(DeserializationError, match="difficulty"):
            puzzle_from_bytes(bytes(data))

    def test_invalid_window_rejected(self) -> None:
        data = bytearray(puzzle_to_bytes(SMALL_PUZZLE))
        data[7] = 0x05  # minimal_steps above maximal_steps
        with pytest.raises(DeserializationError, match="puzzle"):
            puzzle_from_bytes(bytes(data))


class TestContentId:
    def test_is_sha256_hex(self) -> None:
        digest = content_id(b"")
        assert digest == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"

    def test_distinguishes_boards(self) -> None:
        other = Board.with_live_cells(8, [Position(3, 3)])
        assert content_id(board_to_bytes(SMALL_BOARD)) != content_id(board_to_bytes(other))


class TestJson:
    def test_board_shape(self) -> None:
        payload = json.loads(board_to_json(SMALL_BOARD))
        assert payload == {"size": 8, "live_cells": [{"x": 3, "y": 3}, {"x": 3, "y": 4}]}

    def test_board_from_json(self) -> None:
        assert board_from_json(board_to_json(SMALL_BOARD)) == SMALL_BOARD

    def test_conditions_are_externally_tagged(self) -> None:
        payload = condition_to_payload(TestRectangle(range(1, 3), range(0, 8), 0, 2))
        assert payload == {
            "TestRectangle": {
                "x_range": {"start": 1, "end": 3},
                "y_range": {"start": 0, "end": 8},
                "min_live_count": 0,
                "max_live_count": 2,
            }
        }

    def test_puzzle_fields(self) -> None:
        payload = json.loads(puzzle_to_json(SMALL_PUZZLE))
        assert payload["difficulty"] == "EASY"
        assert payload["initial_conditions"] == [
            {"TestPosition": {"position": {"x": 1, "y": 2}, "is_live": True}}
        ]
        assert puzzle_from_json(puzzle_to_json(SMALL_PUZZLE)) == SMALL_PUZZLE

    def test_invalid_json(self) -> None:
        with pytest.raises(DeserializationError, match="JSON"):
            board_from_json("{not json")

    def test_missing_field(self) -> None:
        with pytest.raises(DeserializationError, match="live_cells"):
            board_from_json('{"size": 4}')

    def test_bool_rejected_for_integer_field(self) -> None:
        with pytest.raises(DeserializationError, match="boolean"):
            board_from_json('{"size": true, "live_cells": []}')

    def test_out_of_bounds_cell(self) -> None:
        with pytest.raises(DeserializationError, match="board"):
            board_from_json('{"size": 2, "live_cells": [{"x": 2, "y": 0}]}')

    def test_unknown_condition_variant(self) -> None:
        with pytest.raises(DeserializationError, match="variant"):
            condition_from_payload({"TestCircle": {}})

    def test_condition_domain_error_wrapped(self) -> None:
        bad = {
            "TestRectangle": {
                "x_range": {"start": 0, "end": 2},
                "y_range": {"start": 0, "end": 2},
                "min_live_count": 3,
                "max_live_count": 1,
            }
        }
        with pytest.raises(DeserializationError, match="condition"):
            condition_from_payload(bad)
