"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, CellValue


# ============================================================================
# Random Source Helpers
# ============================================================================

class ScriptedRandom:
    """Stand-in random source returning a fixed sequence of draws."""

    def __init__(self, draws: Iterable[int]) -> None:
        self._draws: List[int] = list(draws)
        self.calls = 0

    def randrange(self, stop: int) -> int:
        value = self._draws[self.calls]
        self.calls += 1
        assert 0 <= value < stop
        return value


@pytest.fixture
def scripted_board() -> Callable[..., Board]:
    """Factory building a board whose mines land at the given positions."""
    def make(width: int, height: int, mines: Iterable[tuple]) -> Board:
        mines = list(mines)
        draws = [value for position in mines for value in position]
        return Board(
            BoardConfig(width, height, len(set(mines))),
            rng=ScriptedRandom(draws),
        )
    return make


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board.create(9, 9, 10, seed=1234)


@pytest.fixture
def empty_board() -> Board:
    """Create a 10x10 board with no mines."""
    return Board.create(10, 10, 0)


@pytest.fixture
def full_board() -> Board:
    """Create a 2x2 board where every cell is a mine."""
    return Board.create(2, 2, 4)


@pytest.fixture
def corner_mine_board(scripted_board) -> Board:
    """3x3 board with a single mine at (0, 0)."""
    return scripted_board(3, 3, [(0, 0)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def closed_cell() -> Cell:
    """Create a closed empty cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(value=CellValue.MINE)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
