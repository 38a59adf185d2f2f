class ParseError(ValueError):
    """Indicates puzzle text could not be read into a grid."""


class InvalidCellValue(ValueError):
    """Indicates a cell holds something other than a digit 0-9."""


class SudokuContradiction(Exception):
    """Indicates a puzzle is not solvable."""
