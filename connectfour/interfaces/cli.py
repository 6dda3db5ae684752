"""
cli.py - Command-line interface for playing Connect Four

This module provides a terminal front end for two local players. It
collects player names and colors, turns typed column numbers into
engine moves, and reports each MoveResult back to the players.
"""

import argparse
import sys
from typing import Callable, List, Optional, TextIO, Tuple

from connectfour.debug import debug
from connectfour.game.engine import GameEngine, new_game
from connectfour.utils import (DEFAULT_HEIGHT, DEFAULT_WIDTH, MoveResult,
                               MoveStatus, Player)

DEFAULT_PLAYERS = (("Player 1", "red"), ("Player 2", "yellow"))

# Commands accepted at the column prompt
QUIT = "q"
NEW_GAME = "n"


class SimpleCLI:
    """Simple command-line interface for two-player Connect Four."""

    def __init__(self, input_func: Callable[[str], str] = input, output: TextIO = None):
        """
        Initialize the CLI.

        Args:
            input_func: Function used to read a line of user input
            output: Stream to write to (defaults to stdout)
        """
        self._input = input_func
        self._out = output if output is not None else sys.stdout
        self.args = None

    def say(self, message: str = ""):
        print(message, file=self._out)

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four CLI')
        parser.add_argument('--debug-level', default='warning',
                            choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
                            help='Logging verbosity')
        parser.add_argument('--log-file', default=None, help='Also write logs to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a two-player game')
        self._add_board_arguments(play_parser)
        for number in range(1, len(DEFAULT_PLAYERS) + 1):
            play_parser.add_argument(f'--p{number}-name', help=f'Name of player {number}')
            play_parser.add_argument(f'--p{number}-color', help=f'Color of player {number}')

        show_parser = subparsers.add_parser('show', help='Print an empty board')
        self._add_board_arguments(show_parser)

        return parser

    @staticmethod
    def _add_board_arguments(parser: argparse.ArgumentParser):
        parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT, help='Number of rows')
        parser.add_argument('--width', type=int, default=DEFAULT_WIDTH, help='Number of columns')

    def parse_args(self, argv: Optional[List[str]] = None):
        """Parse command-line arguments and apply logging settings."""
        parser = self.build_parser()
        self.args = parser.parse_args(argv)

        if self.args.command in ('play', 'show') and (self.args.height < 1 or self.args.width < 1):
            parser.error("--height and --width must be at least 1")

        debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the command given on the command line and return an exit code."""
        self.parse_args(argv)

        if self.args.command == 'play':
            players = self.read_players()
            if players is None:
                self.say("Quitting game.")
                return 1
            engine = new_game(self.args.height, self.args.width, *players)
            self.play_game(engine)
        elif self.args.command == 'show':
            engine = new_game(self.args.height, self.args.width, *self._default_players())
            self.say(engine.render())
        else:
            self.say("Please specify a command. Use --help for options.")
            return 1

        return 0

    @staticmethod
    def _default_players() -> Tuple[Player, Player]:
        return tuple(Player(name, color) for name, color in DEFAULT_PLAYERS)

    def read_players(self) -> Optional[Tuple[Player, Player]]:
        """
        Build both players from command-line flags, prompting for any
        name or color that was not given. Blank answers take the default.

        Returns:
            The two players, or None if input ran out during the prompts
        """
        players = []
        try:
            for number, (default_name, default_color) in enumerate(DEFAULT_PLAYERS, start=1):
                players.append(self._read_player(number, default_name, default_color))
        except EOFError:
            return None
        return players[0], players[1]

    def _read_player(self, number: int, default_name: str, default_color: str) -> Player:
        name = getattr(self.args, f'p{number}_name', None)
        color = getattr(self.args, f'p{number}_color', None)
        if name is None:
            name = self._input(f"Player {number} name [{default_name}]: ").strip() or default_name
        if color is None:
            color = self._input(f"Player {number} color [{default_color}]: ").strip() or default_color
        return Player(name, color)

    def describe_players(self, engine: GameEngine) -> str:
        symbols = ("X", "O")
        return ", ".join(f"{symbol} = {player.name} ({player.color})"
                         for symbol, player in zip(symbols, engine.players))

    def get_command(self, engine: GameEngine) -> Optional[str]:
        """
        Prompt the active player for a column.

        Returns:
            The raw command ('q', 'n' or a column number as text), or None
            once input runs out
        """
        player = engine.get_active_player()
        prompt = f"{player.name} ({player.color}), choose a column 0-{engine.width - 1} (q/n): "
        try:
            return self._input(prompt).strip().lower()
        except EOFError:
            return None

    def play_game(self, engine: GameEngine) -> Optional[MoveResult]:
        """
        Play a game on the given engine until it ends or the players quit.

        Returns:
            The terminal MoveResult, or None if the game was abandoned
        """
        self.say("Starting a new Connect Four game!")
        self.say(self.describe_players(engine))
        self.say(engine.render())

        while not engine.is_over():
            command = self.get_command(engine)

            if command is None or command == QUIT:
                self.say("Quitting game.")
                return None

            if command == NEW_GAME:
                engine = new_game(engine.height, engine.width, *engine.players)
                self.say("Game restarted.")
                self.say(engine.render())
                continue

            try:
                column = int(command)
            except ValueError:
                self.say("Invalid input. Please enter a column number, 'q' or 'n'.")
                continue

            result = engine.drop_piece(column)
            if self.report(engine, result):
                return result

        return None

    def report(self, engine: GameEngine, result: MoveResult) -> bool:
        """
        Tell the players what a move did.

        Returns:
            True if the game has ended
        """
        status = result.status

        if status == MoveStatus.INVALID_COLUMN:
            self.say(f"Column must be between 0 and {engine.width - 1}.")
        elif status == MoveStatus.COLUMN_FULL:
            self.say(f"Column {result.column} is full. Pick another one.")
        elif status == MoveStatus.GAME_ALREADY_OVER:
            self.say("The game is already over.")
            return True
        else:
            self.say(engine.render())

        if status == MoveStatus.WIN:
            self.say(f"Player {result.player.name} won!")
        elif status == MoveStatus.TIE:
            self.say("Tie!")

        return result.is_terminal


def main(argv: Optional[List[str]] = None) -> int:
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
