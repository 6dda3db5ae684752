"""Tests for the terminal interface, driven with scripted input."""

import io

import pytest

from connectfour.game.engine import new_game
from connectfour.interfaces.cli import SimpleCLI
from connectfour.utils import MoveStatus, Player

PLAYER_FLAGS = ['--p1-name', 'Ann', '--p1-color', 'red',
                '--p2-name', 'Bob', '--p2-color', 'blue']


def scripted(*answers):
    """Return an input function that replays answers, then signals EOF."""
    remaining = list(answers)
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    fake_input.prompts = prompts
    return fake_input


def make_cli(*answers):
    output = io.StringIO()
    return SimpleCLI(input_func=scripted(*answers), output=output), output


def test_play_until_horizontal_win():
    cli, output = make_cli('0', '6', '1', '6', '2', '6', '3')
    assert cli.run(['play'] + PLAYER_FLAGS) == 0
    text = output.getvalue()
    assert "X = Ann (red), O = Bob (blue)" in text
    assert text.rstrip().endswith("Player Ann won!")


def test_play_until_tie():
    cli, output = make_cli('0', '0', '1', '1')
    cli.run(['play', '--height', '2', '--width', '2'] + PLAYER_FLAGS)
    assert output.getvalue().rstrip().endswith("Tie!")


def test_play_loop_returns_terminal_result():
    cli, _ = make_cli('0', '1', '0', '1', '0', '1', '0')
    result = cli.play_game(new_game(6, 7, Player("A", "red"), Player("B", "blue")))
    assert result.status == MoveStatus.WIN
    assert result.player.name == "A"


def test_prompts_name_the_active_player():
    cli, _ = make_cli('0', 'q')
    cli.run(['play'] + PLAYER_FLAGS)
    prompts = cli._input.prompts
    assert prompts[0].startswith("Ann (red), choose a column 0-6")
    assert prompts[1].startswith("Bob (blue)")


def test_bad_input_is_reported_and_reprompted():
    cli, output = make_cli('abc', '9', 'q')
    assert cli.play_game(new_game(6, 7, Player("A"), Player("B"))) is None
    text = output.getvalue()
    assert "Invalid input" in text
    assert "Column must be between 0 and 6." in text
    assert "Quitting game." in text


def test_full_column_is_reported():
    cli, output = make_cli('0', '0', 'q')
    cli.play_game(new_game(1, 2, Player("A"), Player("B")))
    assert "Column 0 is full" in output.getvalue()


def test_new_game_command_restarts_with_same_players():
    cli, output = make_cli('0', 'n', '0', '1', '0', '1', '0', '1', '0')
    result = cli.play_game(new_game(6, 7, Player("A"), Player("B")))
    assert "Game restarted." in output.getvalue()
    assert result.status == MoveStatus.WIN
    assert result.player.name == "A"


def test_end_of_input_quits():
    cli, output = make_cli()
    assert cli.play_game(new_game(6, 7, Player("A"), Player("B"))) is None
    assert "Quitting game." in output.getvalue()


def test_end_of_input_during_player_intake_quits():
    cli, output = make_cli()
    assert cli.run(['play']) == 1
    assert output.getvalue().strip() == "Quitting game."


def test_end_of_input_after_first_player_quits():
    cli, output = make_cli('Zed', 'green')
    assert cli.run(['play']) == 1
    assert len(cli._input.prompts) == 3
    assert "Starting a new Connect Four game!" not in output.getvalue()


def test_players_are_prompted_when_flags_are_missing():
    cli, _ = make_cli('Zed', '', '', 'green', 'q')
    cli.parse_args(['play'])
    p1, p2 = cli.read_players()
    assert p1 == Player("Zed", "red")
    assert p2 == Player("Player 2", "green")


def test_show_prints_empty_board():
    cli, output = make_cli()
    assert cli.run(['show', '--height', '4', '--width', '5']) == 0
    lines = output.getvalue().splitlines()
    assert lines[0] == "|---------|"
    assert lines[-1] == "|0 1 2 3 4|"
    assert len(lines) == 7


def test_missing_command_fails():
    cli, output = make_cli()
    assert cli.run([]) == 1
    assert "Please specify a command" in output.getvalue()


def test_non_positive_dimensions_are_rejected():
    cli, _ = make_cli()
    with pytest.raises(SystemExit):
        cli.run(['play', '--height', '0'])
