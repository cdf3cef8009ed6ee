import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from gol_challenge.catalog.puzzles import create_block_puzzle_and_solution
from gol_challenge.cli import EXIT_INVALID_SOLUTION, EXIT_OK, main
from gol_challenge.domain.board import Board
from gol_challenge.domain.position import Position
from gol_challenge.io.paths import write_board, write_puzzle


@pytest.fixture
def block_files(tmp_path: Path) -> tuple[Path, Path]:
    puzzle, solution = create_block_puzzle_and_solution()
    puzzle_file = tmp_path / "01_block_puzzle.bcs"
    solution_file = tmp_path / "01_block_solution.bcs"
    write_puzzle(puzzle_file, puzzle)
    write_board(solution_file, solution)
    return puzzle_file, solution_file


def test_check_solution_valid(
    block_files: tuple[Path, Path], capsys: pytest.CaptureFixture[str]
) -> None:
    puzzle_file, solution_file = block_files
    assert main(["check-solution", str(puzzle_file), str(solution_file)]) == EXIT_OK
    out = capsys.readouterr().out
    assert "Solution is VALID!" in out
    assert "After 1 steps, board passes all final conditions" in out


def test_check_solution_invalid(
    block_files: tuple[Path, Path], tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    puzzle_file, _ = block_files
    empty = tmp_path / "empty.bcs"
    write_board(empty, Board.empty(8))
    assert main(["check-solution", str(puzzle_file), str(empty)]) == EXIT_INVALID_SOLUTION
    out = capsys.readouterr().out
    assert "Solution is INVALID!" in out
    assert "final conditions not reached" in out


def test_check_solution_size_mismatch(
    block_files: tuple[Path, Path], tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    puzzle_file, _ = block_files
    board_file = tmp_path / "big.bcs"
    write_board(board_file, Board.with_live_cells(9, [Position(3, 3)]))
    assert main(["check-solution", str(puzzle_file), str(board_file)]) == EXIT_INVALID_SOLUTION
    assert "does not match puzzle size" in capsys.readouterr().out


def test_check_solution_missing_file_is_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["check-solution", str(tmp_path / "nope.bcs"), str(tmp_path / "nope2.bcs")])
    assert excinfo.value.code == 2


def test_print_board_json(
    block_files: tuple[Path, Path], capsys: pytest.CaptureFixture[str]
) -> None:
    _, solution_file = block_files
    assert main(["print-board", str(solution_file), "--json"]) == EXIT_OK
    payload = json.loads(capsys.readouterr().out)
    assert payload["size"] == 8
    assert {"x": 3, "y": 3} in payload["live_cells"]


def test_print_board_grid(
    block_files: tuple[Path, Path], capsys: pytest.CaptureFixture[str]
) -> None:
    _, solution_file = block_files
    main(["print-board", str(solution_file)])
    out = capsys.readouterr().out
    assert out.startswith("Board:\n")
    assert "···●●···" in out


def test_print_puzzle(block_files: tuple[Path, Path], capsys: pytest.CaptureFixture[str]) -> None:
    puzzle_file, _ = block_files
    main(["print-puzzle", str(puzzle_file)])
    assert "Title: Block" in capsys.readouterr().out
    main(["print-puzzle", str(puzzle_file), "--json"])
    assert json.loads(capsys.readouterr().out)["title"] == "Block"


def test_print_puzzle_corrupt_file(tmp_path: Path) -> None:
    bad = tmp_path / "bad.bcs"
    bad.write_bytes(b"\xff")
    with pytest.raises(SystemExit) as excinfo:
        main(["print-puzzle", str(bad)])
    assert excinfo.value.code == 2


def test_create_puzzles_writes_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out_dir = tmp_path / "puzzles"
    assert main(["create-puzzles", "--output-dir", str(out_dir), "--no-manifest"]) == EXIT_OK
    assert (out_dir / "01_block_puzzle.bcs").exists()
    assert (out_dir / "24_glider_collision_cancel_solution.bcs").exists()
    assert not (out_dir / "30_robot_face_puzzle.bcs").exists()
    assert not (out_dir / "puzzles_manifest.parquet").exists()
    out = capsys.readouterr().out
    assert "Verified solution (and hints): 14 steps" in out


def test_create_puzzles_reads_config_file(tmp_path: Path) -> None:
    out_dir = tmp_path / "from_config"
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"output_dir": str(out_dir), "manifest": "yes"}))
    assert main(["create-puzzles", "--config", str(config)]) == EXIT_OK
    assert (out_dir / "puzzles_manifest.parquet").exists()


def test_create_puzzles_cli_overrides_config(tmp_path: Path) -> None:
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"output_dir": str(tmp_path / "ignored")}))
    out_dir = tmp_path / "chosen"
    main(["create-puzzles", "--config", str(config), "-o", str(out_dir), "--no-manifest"])
    assert out_dir.exists()
    assert not (tmp_path / "ignored").exists()


def test_create_puzzles_bad_config_value(tmp_path: Path) -> None:
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"all": "sometimes"}))
    with pytest.raises(SystemExit):
        main(["create-puzzles", "--config", str(config)])


def test_generate_metadata(tmp_path: Path) -> None:
    blob_map = tmp_path / "blobs.json"
    blob_map.write_text(json.dumps({"01_block": "0x1"}))
    output = tmp_path / "puzzles.ts"
    # Only the block has an id, so the full catalog is rejected.
    with pytest.raises(SystemExit):
        main(["generate-metadata", "-o", str(output), "--blob-map", str(blob_map)])
    assert not output.exists()


def test_subcommand_required() -> None:
    with patch.object(sys, "argv", ["gol"]):
        with pytest.raises(SystemExit) as excinfo:
            main()
    assert excinfo.value.code == 2


def test_print_board_directory_is_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["print-board", str(tmp_path)])
    assert excinfo.value.code == 2


def test_check_solution_directory_is_usage_error(
    block_files: tuple[Path, Path], tmp_path: Path
) -> None:
    puzzle_file, _ = block_files
    with pytest.raises(SystemExit) as excinfo:
        main(["check-solution", str(puzzle_file), str(tmp_path)])
    assert excinfo.value.code == 2


def test_create_puzzles_config_directory_is_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["create-puzzles", "--config", str(tmp_path)])
    assert excinfo.value.code == 2


@pytest.fixture
def blinker_file(tmp_path: Path) -> Path:
    path = tmp_path / "blinker.bcs"
    write_board(path, Board.with_live_cells(5, [Position(2, 1), Position(2, 2), Position(2, 3)]))
    return path


def test_print_board_steps_grid(blinker_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["print-board", str(blinker_file), "--steps", "2"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "Step 0:" in out
    assert "Step 2:" in out
    assert "Step 3:" not in out


def test_print_board_steps_json(blinker_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["print-board", str(blinker_file), "--steps", "1", "--json"]) == EXIT_OK
    history = json.loads(capsys.readouterr().out)
    assert len(history) == 2
    assert history[0]["live_cells"] == [{"x": 2, "y": 1}, {"x": 2, "y": 2}, {"x": 2, "y": 3}]
    assert history[1]["live_cells"] == [{"x": 1, "y": 2}, {"x": 2, "y": 2}, {"x": 3, "y": 2}]


def test_print_board_negative_steps(blinker_file: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["print-board", str(blinker_file), "--steps", "-1"])
    assert excinfo.value.code == 2
