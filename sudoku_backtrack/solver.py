from __future__ import annotations

import collections
import logging

from .constraints import BOXES, COLUMNS, ROWS, groups_for
from .exceptions import SudokuContradiction
from .grid import BLANK

EXHAUSTED = 10

SolveResult = collections.namedtuple("SolveResult", "grid solved steps")

_file_logger = logging.getLogger(__name__)


class BacktrackingSolver:
    """Chronological backtracking over the blank cells of a grid.

    Blank cells are visited in ascending position order and digits are
    tried in ascending order, so the search, and the solution it finds,
    are fully deterministic. The grid is filled in place.

    ``observer``, if given, is called as ``observer(grid, step)`` before
    every trial step, ``step`` counting the trial steps already made. It
    receives the live grid and must not modify it.
    """

    def __init__(self, grid, observer=None):
        self.grid = grid
        self.observer = observer
        self.blanks = grid.blank_positions()
        self.cursor = 0
        self.steps = 0

        # Row, column and box of each blank, looked up once.
        self._constraints = [
            (ROWS[row], COLUMNS[col], BOXES[box])
            for row, col, box in map(groups_for, self.blanks)
        ]

    @property
    def finished(self):
        return self.cursor == len(self.blanks)

    def solve(self, raise_on_exhaustion=False) -> SolveResult:
        _file_logger.info("Solving %d blank cells", len(self.blanks))
        while not self.finished:
            if self.observer is not None:
                self.observer(self.grid, self.steps)

            if not self.trial_step():
                _file_logger.info(
                    "Backtracked beyond the start after %d steps", self.steps
                )
                if raise_on_exhaustion:
                    raise SudokuContradiction("Backtracked beyond the start")
                return SolveResult(self.grid, False, self.steps)

        _file_logger.info("Solution found in %d steps", self.steps)
        return SolveResult(self.grid, True, self.steps)

    def trial_step(self):
        """Try the next digit at the cursor.

        Returns False if that meant backtracking before the first blank,
        i.e. the search space is exhausted. Must not be called once the
        solver is finished.
        """
        if self.finished:
            raise RuntimeError("Every blank cell is already filled")

        cells = self.grid.cells
        position = self.blanks[self.cursor]
        value = cells[position] + 1
        self.steps += 1

        if value == EXHAUSTED:
            cells[position] = BLANK
            _file_logger.debug(
                "%sBacktracking from position %d",
                " " * self.cursor,
                position,
            )
            if self.cursor == 0:
                return False
            self.cursor -= 1
            return True

        cells[position] = value
        if all(
            constraint.is_satisfied_at(self.grid, position)
            for constraint in self._constraints[self.cursor]
        ):
            self.cursor += 1
        return True


def solve(grid, observer=None, raise_on_exhaustion=False) -> SolveResult:
    return BacktrackingSolver(grid, observer).solve(raise_on_exhaustion)
