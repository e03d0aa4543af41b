"""Algorithms on square grids."""

from typing import MutableSequence, Sequence

_SUDOKU_SIZE = 9
_BOX = 3
_EMPTY = "."
_DIGITS = frozenset("123456789")


def rotate_image(matrix: MutableSequence[list[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise, in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    matrix[:] = [list(row) for row in zip(*reversed(matrix))]


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Tell whether the filled cells of a 9x9 board break no Sudoku rule.

    Cells hold "1" to "9" or "." for empty; only rows, columns and 3x3
    boxes are checked for repeats, not whether the board can be solved.
    """
    if len(board) != _SUDOKU_SIZE or any(len(row) != _SUDOKU_SIZE for row in board):
        raise ValueError("board must be 9x9")
    seen: set[tuple] = set()
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == _EMPTY:
                continue
            if cell not in _DIGITS:
                raise ValueError(f"invalid cell {cell!r} at row {r}, column {c}")
            marks = {
                ("row", r, cell),
                ("col", c, cell),
                ("box", r // _BOX, c // _BOX, cell),
            }
            if marks & seen:
                return False
            seen |= marks
    return True