import logging

import pytest
from click.testing import CliRunner

from sudoku_backtrack.cli import main

from conftest import CLASSIC_SOLUTION

SOLVED_LINES = [
    " ".join(CLASSIC_SOLUTION[i:i + 9]) for i in range(0, 81, 9)
]


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logging.basicConfig(force=True, level=logging.WARNING)


def test_solves_puzzle_file(runner, puzzles_dir):
    result = runner.invoke(main, [str(puzzles_dir / "classic.txt"), "--display", "none"])

    assert result.exit_code == 0, result.output
    lines = result.output.split("\n")
    assert lines[:9] == SOLVED_LINES
    assert "Finished in" in result.output


def test_ansi_display(runner, puzzles_dir):
    result = runner.invoke(main, [str(puzzles_dir / "one_blank.txt")])

    assert result.exit_code == 0, result.output
    assert "\x1b[9A" in result.output
    assert "(5 steps)" in result.output
    assert "\n".join(SOLVED_LINES) in result.output


def test_progress_display(runner, puzzles_dir):
    result = runner.invoke(
        main, [str(puzzles_dir / "one_blank.txt"), "0", "--display", "progress"]
    )

    assert result.exit_code == 0, result.output
    assert "\n".join(SOLVED_LINES) in result.output


def test_delay_argument(runner, puzzles_dir, monkeypatch):
    sleeps = []
    monkeypatch.setattr("sudoku_backtrack.display.time.sleep", sleeps.append)
    result = runner.invoke(main, [str(puzzles_dir / "one_blank.txt"), "20"])

    assert result.exit_code == 0, result.output
    assert sleeps == [0.02] * 5


def test_missing_puzzle_argument(runner):
    result = runner.invoke(main, [])
    assert result.exit_code == 2
    assert "Missing argument" in result.output


def test_nonexistent_puzzle(runner, tmp_path):
    result = runner.invoke(main, [str(tmp_path / "nope.txt")])
    assert result.exit_code == 2


@pytest.mark.parametrize("delay", ["soon", "-5", "1.5"])
def test_bad_delay(runner, puzzles_dir, delay):
    result = runner.invoke(main, [str(puzzles_dir / "classic.txt"), delay])
    assert result.exit_code == 2


def test_malformed_puzzle(runner, tmp_path):
    puzzle = tmp_path / "bad.txt"
    puzzle.write_text("12x" + "0" * 78)
    result = runner.invoke(main, [str(puzzle)])

    assert result.exit_code == 1
    assert "Failed to parse char" in result.output


def test_short_puzzle(runner, tmp_path):
    puzzle = tmp_path / "short.txt"
    puzzle.write_text("0" * 80)
    result = runner.invoke(main, [str(puzzle)])

    assert result.exit_code == 1
    assert "Wrong number of parsed cells: 80" in result.output


def test_unsolvable(runner, puzzles_dir):
    result = runner.invoke(main, [str(puzzles_dir / "unsolvable.txt"), "--display", "none"])

    assert result.exit_code == 1
    assert "No solution exists for this puzzle" in result.output


def test_unsolvable_strict(runner, puzzles_dir):
    result = runner.invoke(
        main, [str(puzzles_dir / "unsolvable.txt"), "--display", "none", "--strict"]
    )

    assert result.exit_code == 1
    assert "Backtracked beyond the start" in result.output


def test_log_file(runner, puzzles_dir, tmp_path):
    log_file = tmp_path / "solve.log"
    result = runner.invoke(
        main,
        [
            str(puzzles_dir / "unsolvable.txt"),
            "--display",
            "none",
            "--log-file",
            str(log_file),
            "--log-level",
            "debug",
        ],
    )

    assert result.exit_code == 1
    logging.shutdown()
    contents = log_file.read_text()
    assert "sudoku_backtrack.solver DEBUG" in contents
    assert "Backtracked beyond the start after 20 steps" in contents


def test_curses_display(runner, puzzles_dir, monkeypatch):
    screen_lines = {}

    class Screen:
        def erase(self):
            pass

        def addstr(self, y, x, text):
            screen_lines[y] = text

        def refresh(self):
            pass

    monkeypatch.setattr(
        "sudoku_backtrack.display.curses.wrapper",
        lambda func, *args, **kwargs: func(Screen(), *args, **kwargs),
    )
    result = runner.invoke(
        main, [str(puzzles_dir / "one_blank.txt"), "--display", "curses"]
    )

    assert result.exit_code == 0, result.output
    assert screen_lines[0].startswith("=== STEP ")
    assert result.output.split("\n")[:9] == SOLVED_LINES
    assert "(5 steps)" in result.output
