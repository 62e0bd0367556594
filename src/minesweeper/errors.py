"""
Errors raised by the Minesweeper board.

All board errors derive from ValueError so callers that only care about
bad input can catch that.
"""


class BoardError(ValueError):
    """Base class for invalid board construction or access."""


class InvalidDimensionsError(BoardError):
    """Width or height is not a positive integer."""


class InvalidMineCountError(BoardError):
    """Mine count is negative."""


class TooManyMinesError(BoardError):
    """More mines requested than the board has cells."""


class OutOfBoundsError(BoardError, IndexError):
    """A (row, col) position lies outside the grid."""

    def __init__(self, row: int, col: int, height: int, width: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside the {height}x{width} board"
        )
        self.row = row
        self.col = col
