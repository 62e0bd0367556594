"""
Minesweeper board module.

Provides the board model: mine placement, cell state and neighbor counts.
"""
from .cell import Cell, CellState, CellValue, CellView
from .board import Board, BoardConfig, RevealResult
from .errors import (
    BoardError,
    InvalidDimensionsError,
    InvalidMineCountError,
    OutOfBoundsError,
    TooManyMinesError,
)

__all__ = [
    "Cell",
    "CellState",
    "CellValue",
    "CellView",
    "Board",
    "BoardConfig",
    "RevealResult",
    "BoardError",
    "InvalidDimensionsError",
    "InvalidMineCountError",
    "OutOfBoundsError",
    "TooManyMinesError",
]
