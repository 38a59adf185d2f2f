from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .grid import Grid

DIGITS = list(range(1, 10))
GROUP_INDICES = range(9)


class Constraint(ABC):

    def __init__(self, cells: list[int]):
        self.cells = np.array(cells, dtype=np.intp)
        self.cells.setflags(write=False)

    @abstractmethod
    def is_satisfied_at(self, grid: Grid, position: int) -> bool:
        """
        Check whether the value placed at `position` is allowed by this
        constraint, given the rest of the grid.
        """
        ...


class NoRepeatsConstraint(Constraint):

    def is_satisfied_at(self, grid, position):
        value = grid.cells[position]
        return np.count_nonzero(grid.cells[self.cells] == value) == 1


class Row(NoRepeatsConstraint):

    def __init__(self, row):
        super().__init__([9 * row + i for i in GROUP_INDICES])


class Column(NoRepeatsConstraint):

    def __init__(self, column):
        super().__init__([9 * i + column for i in GROUP_INDICES])


class Box(NoRepeatsConstraint):

    def __init__(self, box):
        rows = [(box // 3) * 3 + i for i in range(3)]
        cols = [(box % 3) * 3 + i for i in range(3)]
        super().__init__([9 * i + j for i in rows for j in cols])


def _index_table(constraint_cls):
    table = np.array([constraint_cls(i).cells for i in GROUP_INDICES])
    table.setflags(write=False)
    return table


ROW_INDICES = _index_table(Row)
COLUMN_INDICES = _index_table(Column)
BOX_INDICES = _index_table(Box)

ROWS = [Row(i) for i in GROUP_INDICES]
COLUMNS = [Column(i) for i in GROUP_INDICES]
BOXES = [Box(i) for i in GROUP_INDICES]


def box_index(row, col):
    return col // 3 + 3 * (row // 3)


def groups_for(position):
    """Row, column and box index of the cell at flat `position`."""
    row, col = divmod(position, 9)
    return row, col, box_index(row, col)
