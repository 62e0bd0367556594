"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(closed/flagged/revealed) and content (mine/empty), plus the read-only
snapshot handed out for rendering.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellValue(Enum):
    """What a cell holds. Neighbor counts are derived, never stored."""

    MINE = auto()
    EMPTY = auto()


class CellState(Enum):
    """Possible visual states of a cell."""

    CLOSED = auto()
    FLAGGED = auto()
    REVEALED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        value: Whether this cell holds a mine.
        state: Current visual state (closed, flagged or revealed).
    """

    value: CellValue = CellValue.EMPTY
    state: CellState = CellState.CLOSED

    def reveal(self) -> None:
        """Reveal this cell. Overrides a flag; revealing twice is harmless."""
        self.state = CellState.REVEALED

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.CLOSED:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.CLOSED
        return True

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self.value == CellValue.MINE

    @property
    def is_closed(self) -> bool:
        """Check if cell is closed."""
        return self.state == CellState.CLOSED

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED


# ============================================================================
# Read-only Snapshot
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    Immutable snapshot of one cell as a renderer may see it.

    ``value`` is only filled in once the cell is revealed, and
    ``mine_count`` only for a revealed empty cell.
    """

    row: int
    col: int
    state: CellState
    value: Optional[CellValue] = None
    mine_count: Optional[int] = None

    @property
    def symbol(self) -> str:
        """Text symbol: '*', '0'-'8', 'F' or '#'."""
        if self.state == CellState.FLAGGED:
            return "F"
        if self.state == CellState.CLOSED:
            return "#"
        if self.value == CellValue.MINE:
            return "*"
        return str(self.mine_count)

    def to_observation(self) -> int:
        """
        Convert cell to observation value.

        Returns:
            -1: Closed cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.state == CellState.CLOSED:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.value == CellValue.MINE:
            return 9
        return self.mine_count
