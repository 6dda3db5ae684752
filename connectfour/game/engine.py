"""
engine.py - Game state management for Connect Four

This module provides GameEngine, which owns the board and the two
players, accepts moves, alternates turns and detects wins and ties.
The engine is synchronous and performs no I/O; presentation layers
drive it through the MoveResult values it returns.
"""

from typing import List, Optional, Tuple

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.utils import (EMPTY, PIECE_VALUES, InvalidColumnError,
                               MoveResult, MoveStatus, Player)


class GameEngine:
    """
    Connect Four state machine.

    The active player is tracked as an index (0 or 1) into the player
    pair. Once a win or tie is reached the engine accepts no more moves.
    """

    def __init__(self, board: Board, players: Tuple[Player, Player]):
        if len(players) != 2:
            raise ValueError(f"Connect Four needs exactly two players, got {len(players)}")
        # A supplied board may hold pieces, but only from a game still in progress
        if any(board.has_win(value) for value in PIECE_VALUES):
            raise ValueError("Board already contains a winning line")
        if board.is_full():
            raise ValueError("Board has no empty cells left")

        self.board = board
        self.players = tuple(players)
        self._active = 0
        self._game_over = False
        self._winner_index: Optional[int] = None
        debug.info(f"New {board.height}x{board.width} game: "
                   f"{self.players[0]} vs {self.players[1]}", "engine")

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def active_index(self) -> int:
        return self._active

    def get_active_player(self) -> Player:
        return self.players[self._active]

    def is_over(self) -> bool:
        return self._game_over

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None while in progress or after a tie."""
        if self._winner_index is None:
            return None
        return self.players[self._winner_index]

    def get_cell(self, row: int, col: int) -> Optional[Player]:
        """
        Get the player occupying a cell.

        Returns:
            The occupying Player, or None for an empty cell

        Raises:
            IndexError: If the cell is outside the board
        """
        value = self.board.get(row, col)
        if value == EMPTY:
            return None
        return self.players[PIECE_VALUES.index(value)]

    def column_drop_row(self, column: int) -> Optional[int]:
        """
        Find where a piece dropped into a column would land.

        Pure query, safe to call before deciding whether to play a column.

        Returns:
            The landing row, or None if the column is full

        Raises:
            InvalidColumnError: If the column is outside the board
        """
        return self.board.drop_row(column)

    def valid_columns(self) -> List[int]:
        if self._game_over:
            return []
        return self.board.valid_columns()

    def has_win(self, player_index: int) -> bool:
        """Check whether the given player has four in a line anywhere."""
        return self.board.has_win(PIECE_VALUES[player_index])

    def is_tie(self) -> bool:
        """A tie is a full board on which nobody has a line."""
        return (self.board.is_full()
                and not self.has_win(0)
                and not self.has_win(1))

    def winning_line(self) -> List[Tuple[int, int]]:
        """Cells of the winning line, or [] if nobody has won."""
        if self._winner_index is None:
            return []
        return self.board.winning_line(PIECE_VALUES[self._winner_index])

    def drop_piece(self, column: int) -> MoveResult:
        """
        Drop the active player's piece into a column.

        This is the only operation that changes game state. Rejected moves
        (game over, bad column, full column) leave everything untouched.

        Args:
            column: The column to play (0-indexed)

        Returns:
            MoveResult describing what happened
        """
        if self._game_over:
            debug.debug(f"Rejected move in column {column}: game is over", "engine")
            return MoveResult(MoveStatus.GAME_ALREADY_OVER, column=column)

        try:
            row = self.column_drop_row(column)
        except InvalidColumnError as e:
            debug.debug(f"Rejected move: {e}", "engine")
            return MoveResult(MoveStatus.INVALID_COLUMN, column=column)

        if row is None:
            debug.debug(f"Rejected move: column {column} is full", "engine")
            return MoveResult(MoveStatus.COLUMN_FULL, column=column)

        # The mover is fixed here; the swap below must not affect the win check
        mover_index = self._active
        mover = self.players[mover_index]
        self.board.set(row, column, PIECE_VALUES[mover_index])
        debug.trace(f"{mover} placed a piece at ({row}, {column})", "engine")

        debug.start_timer("win_check")
        won = self.has_win(mover_index)
        debug.end_timer("win_check", "engine")

        if won:
            self._game_over = True
            self._winner_index = mover_index
            debug.info(f"Player {mover} won with a move at ({row}, {column})", "engine")
            return MoveResult(MoveStatus.WIN, player=mover, row=row, column=column)

        if self.board.is_full():
            self._game_over = True
            debug.info("Game ends in a tie", "engine")
            return MoveResult(MoveStatus.TIE, player=mover, row=row, column=column)

        self._active = 1 - mover_index
        debug.debug(f"Switching to player {self.get_active_player()}", "engine")
        return MoveResult(MoveStatus.CONTINUE, player=mover, row=row, column=column)

    def render(self) -> str:
        return self.board.render()


def new_game(height: int, width: int, player1: Player, player2: Player) -> GameEngine:
    """
    Start a game on an empty height x width board.

    Boards smaller than 4 in both directions are accepted; they can only
    end in a tie.

    Raises:
        ValueError: If either dimension is below 1
    """
    return GameEngine(Board(height, width), (player1, player2))
