from .constraints import (
    BOX_INDICES,
    COLUMN_INDICES,
    DIGITS,
    ROW_INDICES,
    Box,
    Column,
    Row,
)
from .exceptions import InvalidCellValue, ParseError, SudokuContradiction
from .grid import Grid
from .solver import BacktrackingSolver, SolveResult, solve
