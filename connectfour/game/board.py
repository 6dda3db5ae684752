"""
board.py - Board representation for Connect Four

This module implements the Board class, a fixed-size grid backed by a
single numpy array. It knows where a piece dropped into a column would
land, and scans the whole grid for four-in-a-row lines.
"""

import numpy as np
from typing import List, Optional, Sequence, Tuple

from connectfour.debug import debug
from connectfour.utils import (CONNECT_N, DIRECTION_VECTORS, EMPTY,
                               PIECE_VALUES, InvalidColumnError, render_board_ascii)


class Board:
    """
    A Connect Four grid of fixed height and width.

    Row 0 is the top row; dropped pieces settle in the highest-indexed
    empty row of their column. Cells hold EMPTY or a player's piece value.
    """

    def __init__(self, height: int, width: int):
        """
        Create an empty board.

        Args:
            height: Number of rows (at least 1)
            width: Number of columns (at least 1)

        Raises:
            ValueError: If either dimension is below 1
        """
        if height < 1 or width < 1:
            raise ValueError(f"Board dimensions must be at least 1x1, got {height}x{width}")

        debug.debug(f"Initializing {height}x{width} board", "board")
        self._grid = np.zeros((height, width), dtype=np.int8)

    @property
    def height(self) -> int:
        return self._grid.shape[0]

    @property
    def width(self) -> int:
        return self._grid.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._grid.shape

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if a position lies within the board."""
        return 0 <= row < self.height and 0 <= col < self.width

    def _check_position(self, row: int, col: int):
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside the {self.height}x{self.width} board")

    def get(self, row: int, col: int) -> int:
        """Return the value stored at a cell."""
        self._check_position(row, col)
        return int(self._grid[row, col])

    def set(self, row: int, col: int, value: int):
        """
        Occupy an empty cell.

        Raises:
            IndexError: If the cell is outside the board
            ValueError: If the cell is already occupied or value is not a
                player piece
        """
        self._check_position(row, col)
        if value == EMPTY:
            raise ValueError("Cells cannot be cleared")
        if value not in PIECE_VALUES:
            raise ValueError(f"Unknown piece value {value}")
        if self._grid[row, col] != EMPTY:
            raise ValueError(f"Cell ({row}, {col}) is already occupied")
        self._grid[row, col] = value

    def drop_row(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped into a column would land in.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            The lowest empty row, or None if the column is full

        Raises:
            InvalidColumnError: If the column is outside the board
        """
        if not 0 <= column < self.width:
            raise InvalidColumnError(column, self.width)

        for row in range(self.height - 1, -1, -1):
            if self._grid[row, column] == EMPTY:
                return row
        return None

    def valid_columns(self) -> List[int]:
        """Get the columns that still have room for a piece."""
        return [col for col in range(self.width) if self.drop_row(col) is not None]

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self._grid))

    def is_full(self) -> bool:
        return bool(np.all(self._grid != EMPTY))

    def _is_line(self, cells: Sequence[Tuple[int, int]], value: int) -> bool:
        """Check that every cell is on the board and holds value."""
        return all(self.in_bounds(r, c) and self._grid[r, c] == value for r, c in cells)

    def _lines_from(self, row: int, col: int):
        """Yield the candidate lines anchored at a cell, one per direction."""
        for dr, dc in DIRECTION_VECTORS.values():
            yield [(row + dr * i, col + dc * i) for i in range(CONNECT_N)]

    def winning_line(self, value: int) -> List[Tuple[int, int]]:
        """
        Scan every cell for a line of CONNECT_N pieces with the given value.

        Cells are visited top-to-bottom, left-to-right. Lines running off
        the board are rejected.

        Returns:
            The (row, col) cells of the first winning line found, or []
        """
        if value == EMPTY:
            return []

        for row in range(self.height):
            for col in range(self.width):
                for cells in self._lines_from(row, col):
                    if self._is_line(cells, value):
                        return cells
        return []

    def has_win(self, value: int) -> bool:
        """Check if the pieces with the given value form a winning line."""
        return bool(self.winning_line(value))

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the underlying 2D grid
        """
        return self._grid.copy()

    def render(self, symbols: Sequence[str] = ("X", "O")) -> str:
        return render_board_ascii(self._grid, symbols)

    def __str__(self) -> str:
        return self.render()
