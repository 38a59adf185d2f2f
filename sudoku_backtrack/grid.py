from __future__ import annotations

import numbers

import numpy as np

from .constraints import DIGITS
from .exceptions import InvalidCellValue, ParseError

CELL_COUNT = 9 * 9
BLANK = 0


class Grid:
    """81 cells in row-major order; 0 is a blank, 1-9 a filled digit.

    Cells are addressed either by flat position (0-80) or, as on a
    printed puzzle, by 1-based ``grid[row, column]``.
    """

    def __init__(self, cells=None):
        if cells is None:
            cells = [BLANK] * CELL_COUNT
        cells = np.array(list(cells))
        if cells.shape != (CELL_COUNT,):
            raise ValueError(
                "A grid is {} flat cells, got shape {}".format(
                    CELL_COUNT, cells.shape
                )
            )
        if not np.issubdtype(cells.dtype, np.integer):
            raise TypeError(f"Cell values must be ints, not {cells.dtype}")
        if np.any((cells < BLANK) | (cells > max(DIGITS))):
            raise ValueError("Cell values must be between 0 and 9")
        self.cells = cells.astype(np.int8)

    @classmethod
    def from_text(cls, text: str) -> Grid:
        digits = []
        for offset, char in enumerate(text):
            if char.isspace():
                continue
            if char not in "0123456789":
                raise ParseError(
                    f"Failed to parse char into a number: {char!r} "
                    f"at offset {offset}"
                )
            digits.append(int(char))

        if len(digits) != CELL_COUNT:
            raise ParseError(f"Wrong number of parsed cells: {len(digits)}")
        return cls(digits)

    @classmethod
    def from_file(cls, path) -> Grid:
        with open(path, encoding="utf-8") as f:
            return cls.from_text(f.read())

    @staticmethod
    def cell_index(row, col):
        return (row - 1) * 9 + (col - 1)

    def _position(self, key):
        if isinstance(key, tuple):
            row, col = key
            if not (1 <= row <= 9 and 1 <= col <= 9):
                raise IndexError(f"No cell at R{row}C{col}")
            return self.cell_index(row, col)
        if not isinstance(key, numbers.Integral):
            raise TypeError(f"Cell positions are ints, not {type(key).__name__}")
        if not 0 <= key < CELL_COUNT:
            raise IndexError(f"Cell position {key} out of range")
        return key

    def __getitem__(self, key):
        return int(self.cells[self._position(key)])

    def __setitem__(self, key, value):
        if not isinstance(value, numbers.Integral):
            raise TypeError(f"Cell values are ints, not {type(value).__name__}")
        if not BLANK <= value <= max(DIGITS):
            raise ValueError(f"Cell values must be between 0 and 9, not {value}")
        self.cells[self._position(key)] = value

    def __len__(self):
        return CELL_COUNT

    def __iter__(self):
        return (int(value) for value in self.cells)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    def __repr__(self):
        return f"Grid({self.to_text()!r})"

    def __str__(self):
        output = ""
        for row in range(9):
            output += " ".join(
                self._digit_char(9 * row + col) for col in range(9)
            )
            output += "\n"
        return output

    def _digit_char(self, position):
        value = int(self.cells[position])
        if not BLANK <= value <= max(DIGITS):
            raise InvalidCellValue(
                f"NOT A DIGIT: {value} at position {position}"
            )
        return str(value)

    def to_text(self):
        return "".join(self._digit_char(i) for i in range(CELL_COUNT))

    def simple_draw(self):
        output = ""
        for row in range(9):
            for col in range(9):
                output += self._digit_char(9 * row + col)
                if col in {2, 5}:
                    output += " | "
                elif col != 8:
                    output += " "
            if row in {2, 5}:
                output += "\n" + "-" * (9 * 2 + 3) + "\n"
            elif row != 8:
                output += "\n"

        return output

    def copy(self):
        return Grid(self.cells.copy())

    def blank_positions(self):
        return [int(i) for i in np.flatnonzero(self.cells == BLANK)]

