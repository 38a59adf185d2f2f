from pathlib import Path

import pytest

from sudoku_backtrack import Grid

PUZZLES = Path(__file__).resolve().parents[1] / "puzzles"

CLASSIC = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

CLASSIC_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


@pytest.fixture
def classic():
    return Grid.from_text(CLASSIC)


@pytest.fixture
def solved():
    return Grid.from_text(CLASSIC_SOLUTION)


@pytest.fixture
def puzzles_dir():
    return PUZZLES
