"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation and the game engine
that manages turns and detects wins and ties.
"""

from connectfour.game.board import Board
from connectfour.game.engine import GameEngine, new_game

__all__ = ['Board', 'GameEngine', 'new_game']
