"""
Board module for Minesweeper game.

Implements the game board with mine placement, cell revealing,
flag toggling and neighbor counting. Win/loss tracking and cascading
reveals are left to the host.
"""
import logging
import numbers
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell, CellState, CellValue, CellView
from .errors import (
    InvalidDimensionsError,
    InvalidMineCountError,
    OutOfBoundsError,
    TooManyMinesError,
)

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

def _is_int(value) -> bool:
    """True for integers (numpy ones included), False for bools and floats."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board. Frozen, so a board's
    dimensions and mine count cannot change after construction.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_count: Total mines to place.
    """

    width: int = 9
    height: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if not (_is_int(self.width) and _is_int(self.height)):
            raise InvalidDimensionsError(
                f"Board dimensions must be integers, got {self.width!r}x{self.height!r}"
            )
        if self.width < 1 or self.height < 1:
            raise InvalidDimensionsError(
                f"Board dimensions must be positive, got {self.width}x{self.height}"
            )
        if not _is_int(self.mine_count):
            raise InvalidMineCountError(
                f"Number of mines must be an integer, got {self.mine_count!r}"
            )
        if self.mine_count < 0:
            raise InvalidMineCountError("Number of mines cannot be negative")
        max_mines = self.width * self.height
        if self.mine_count > max_mines:
            raise TooManyMinesError(
                f"Too many mines: {self.mine_count} requested (max {max_mines})"
            )

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.width * self.height


@dataclass(frozen=True)
class RevealResult:
    """
    Outcome of revealing a cell.

    Attributes:
        value: MINE if the cell held a mine, EMPTY otherwise.
        mine_count: Live count of neighboring mines, only for EMPTY cells.
    """

    value: CellValue
    mine_count: Optional[int] = None

    @property
    def is_mine(self) -> bool:
        """Check if the revealed cell was a mine."""
        return self.value == CellValue.MINE


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Cells are stored densely in row-major order. Mines are placed once,
    on construction, and never move; every later call only changes
    cell state.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[random.Random] = field(default=None, repr=False, compare=False)
    _cells: List[Cell] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        """Initialize the grid and place mines after dataclass creation."""
        if self.rng is None:
            self.rng = random.Random()
        self._init_grid()
        self._place_mines()

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        mine_count: int,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Build a board from plain dimensions.

        Args:
            width: Number of columns.
            height: Number of rows.
            mine_count: Mines to place, at most width * height.
            seed: Seed for a fresh random source, ignored if rng is given.
            rng: Random source to draw mine positions from.

        Returns:
            A fully initialized board with every cell closed.
        """
        if rng is None:
            rng = random.Random(seed)
        return cls(BoardConfig(width, height, mine_count), rng=rng)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create closed, mine-free cells."""
        self._cells = [Cell() for _ in range(self.config.size)]

    def _place_mines(self) -> None:
        """
        Place mines by rejection sampling.

        Positions are drawn uniformly with replacement until the set holds
        exactly mine_count distinct cells. BoardConfig guarantees the
        target is reachable.
        """
        mines: Set[Position] = set()
        draws = 0
        while len(mines) < self.config.mine_count:
            row = self.rng.randrange(self.config.height)
            col = self.rng.randrange(self.config.width)
            mines.add((row, col))
            draws += 1

        for row, col in mines:
            self._cells[row * self.config.width + col].value = CellValue.MINE

        logger.debug(
            "Placed %d mines on %dx%d board in %d draws",
            len(mines), self.config.height, self.config.width, draws,
        )

    def _index(self, row: int, col: int) -> int:
        """Flat index of a position, raising OutOfBoundsError if invalid."""
        if not (_is_int(row) and _is_int(col)) or not self._is_valid_position(row, col):
            raise OutOfBoundsError(row, col, self.config.height, self.config.width)
        return row * self.config.width + col

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _iter_neighbors(self, row: int, col: int) -> Iterator[Position]:
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    yield new_row, new_col

    def neighbors(self, row: int, col: int) -> Iterator[Position]:
        """
        Get valid neighboring cell positions.

        Corners have 3 neighbors, other edge cells 5, interior cells 8.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            Iterator of (row, col) tuples for valid neighbors.
        """
        self._index(row, col)
        return self._iter_neighbors(row, col)

    def count_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell, scanning live state."""
        self._index(row, col)
        width = self.config.width
        return sum(
            1 for neighbor_row, neighbor_col in self._iter_neighbors(row, col)
            if self._cells[neighbor_row * width + neighbor_col].is_mine
        )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealResult:
        """
        Reveal a cell at the given position.

        The cell becomes REVEALED whatever its prior state, flags included.
        Neighbors are never revealed.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            RevealResult holding MINE, or EMPTY with the adjacent mine count.

        Raises:
            OutOfBoundsError: If the position is outside the board.
        """
        cell = self._cells[self._index(row, col)]
        cell.reveal()
        logger.debug("Revealed (%d, %d)", row, col)

        if cell.is_mine:
            return RevealResult(CellValue.MINE)
        return RevealResult(CellValue.EMPTY, self.count_mines(row, col))

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False if the cell is already revealed.

        Raises:
            OutOfBoundsError: If the position is outside the board.
        """
        toggled = self._cells[self._index(row, col)].toggle_flag()
        logger.debug("Flag toggle at (%d, %d): %s", row, col, toggled)
        return toggled

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def mine_count(self) -> int:
        return self.config.mine_count

    @property
    def num_flagged(self) -> int:
        """Number of flagged cells."""
        return sum(1 for cell in self._cells if cell.is_flagged)

    @property
    def num_revealed(self) -> int:
        """Number of revealed cells."""
        return sum(1 for cell in self._cells if cell.is_revealed)

    def cell_state(self, row: int, col: int) -> CellState:
        """Get the state of the cell at position."""
        return self._cells[self._index(row, col)].state

    def closed_positions(self) -> List[Position]:
        """
        Get list of cells still closed.

        Returns:
            List of (row, col) positions neither revealed nor flagged.
        """
        width = self.config.width
        return [
            divmod(index, width)
            for index, cell in enumerate(self._cells)
            if cell.is_closed
        ]

    def _view(self, row: int, col: int, cell: Cell) -> CellView:
        if not cell.is_revealed:
            return CellView(row, col, cell.state)
        if cell.is_mine:
            return CellView(row, col, cell.state, CellValue.MINE)
        return CellView(
            row, col, cell.state, CellValue.EMPTY, self.count_mines(row, col)
        )

    def cells(self) -> List[CellView]:
        """
        Snapshot every cell in row-major order.

        Hidden information stays hidden: value and mine count are only
        set on revealed cells.
        """
        width = self.config.width
        return [
            self._view(index // width, index % width, cell)
            for index, cell in enumerate(self._cells)
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D int8 array where:
                -1 = closed
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for view in self.cells():
            obs[view.row, view.col] = view.to_observation()
        return obs

    def render(self) -> str:
        """Render board as text, one line per row."""
        views = self.cells()
        width = self.config.width
        lines = []
        for start in range(0, len(views), width):
            lines.append(" ".join(view.symbol for view in views[start:start + width]))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
