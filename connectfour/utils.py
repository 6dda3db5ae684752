"""
utils.py - Constants, value types and helpers for the Connect Four engine

This module provides the default board dimensions, the win directions,
the Player and MoveResult value types and ASCII rendering of a grid.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

# Game constants
DEFAULT_HEIGHT = 6
DEFAULT_WIDTH = 7
CONNECT_N = 4  # Number of pieces in a line to win

# Grid cell values; player pieces are stored as index + 1
EMPTY = 0
PIECE_VALUES = (1, 2)


class Direction(Enum):
    """Directions a winning line may run from its anchor cell."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col) for each direction
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


class InvalidColumnError(ValueError):
    """Raised when a column index falls outside the board."""

    def __init__(self, column: int, width: int):
        super().__init__(f"Column {column} is out of range [0, {width})")
        self.column = column
        self.width = width


@dataclass(frozen=True)
class Player:
    """A participant in the game. The color is only used for display."""
    name: str
    color: str = ""

    def __str__(self) -> str:
        return self.name


class MoveStatus(Enum):
    """Outcome of a drop_piece call."""
    CONTINUE = auto()
    WIN = auto()
    TIE = auto()
    COLUMN_FULL = auto()
    GAME_ALREADY_OVER = auto()
    INVALID_COLUMN = auto()

    def is_terminal(self) -> bool:
        """Check if this outcome ends the game."""
        return self in (MoveStatus.WIN, MoveStatus.TIE)

    def is_accepted(self) -> bool:
        """Check if a piece was placed."""
        return self in (MoveStatus.CONTINUE, MoveStatus.WIN, MoveStatus.TIE)


@dataclass(frozen=True)
class MoveResult:
    """
    Result of attempting a move.

    For accepted moves, player is the mover (the winner on WIN) and
    row/column locate the placed piece. Rejected moves carry only the
    requested column.
    """
    status: MoveStatus
    player: Optional[Player] = None
    row: Optional[int] = None
    column: Optional[int] = None

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal()

    @property
    def accepted(self) -> bool:
        return self.status.is_accepted()


def render_board_ascii(grid: np.ndarray, symbols: Sequence[str] = ("X", "O")) -> str:
    """
    Render a grid as ASCII art.

    Args:
        grid: 2D array of cell values (EMPTY or a value from PIECE_VALUES)
        symbols: Display character for the first and second player

    Returns:
        ASCII representation with column numbers underneath
    """
    rows, cols = grid.shape
    lookup = {EMPTY: " ", PIECE_VALUES[0]: symbols[0], PIECE_VALUES[1]: symbols[1]}
    # Column labels wrap past 9 so every label stays one character wide
    labels = [str(i % 10) for i in range(cols)]
    border = "|" + "-" * max(cols * 2 - 1, 0) + "|"

    result = [border]
    for row in range(rows):
        result.append("|" + " ".join(lookup[int(cell)] for cell in grid[row]) + "|")
    result.append(border)
    result.append("|" + " ".join(labels) + "|")

    return "\n".join(result)
