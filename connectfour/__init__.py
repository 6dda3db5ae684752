"""
connectfour - Two-player Connect Four game engine

This package provides the game-state engine for Connect Four (board
representation, move legality, turn sequencing and win/tie detection)
together with a terminal interface that drives it.
"""

# Version number
__version__ = '0.1.0'
