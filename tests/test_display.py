import io

from rpsgame.display import (
    display_choices,
    display_final_results,
    display_goodbye,
    display_round_info,
    display_round_result,
    display_welcome,
)
from rpsgame.game_logic import Choice


def test_welcome_shows_rules_and_title():
    out = io.StringIO()
    display_welcome(out=out)
    text = out.getvalue()
    assert "ROCK, PAPER, SCISSORS GAME" in text
    assert "GAME RULES" in text
    assert "  *     Rock     crushes    Scissors              *\n" in text
    assert text.endswith("Are you ready to test your luck and strategy?\n\n")


def test_welcome_banner_art():
    out = io.StringIO()
    display_welcome(out=out)
    text = out.getvalue()
    assert " (__)  (__)(__)  (__)(_\") (\"_)   (__)  (_\")(\"_)    (__) (__) \n" in text


def test_round_info_contents():
    round_number, total, player, computer = 2, 5, 1, 0
    out = io.StringIO()
    display_round_info(round_number, total, player, computer, out=out)
    lines = out.getvalue().splitlines()
    assert f"Round {round_number} of {total}" in lines
    assert f"Score: You {player} - {computer} Computer" in lines
    assert lines.count("===================================") == 2


def test_choices_use_names():
    out = io.StringIO()
    display_choices(Choice.ROCK, Choice.SCISSORS, out=out)
    assert out.getvalue() == "\nYou chose: Rock\nComputer chose: Scissors\n"


def test_choices_unknown_value():
    out = io.StringIO()
    display_choices(9, Choice.PAPER, out=out)
    text = out.getvalue()
    assert "You chose: Unknown" in text
    assert "Computer chose: Paper" in text


def test_round_result_preceded_by_blank_line():
    message = "You win this round!"
    out = io.StringIO()
    display_round_result(message, out=out)
    assert out.getvalue() == "\n" + message + "\n"


def test_final_results_player_wins():
    out = io.StringIO()
    display_final_results(3, 1, out=out)
    text = out.getvalue()
    assert "FINAL RESULTS" in text
    assert "Player Score: 3\n" in text
    assert "Computer Score: 1\n" in text
    assert text.endswith("Congratulations! You win the game!\n")


def test_final_results_computer_wins():
    out = io.StringIO()
    display_final_results(0, 2, out=out)
    assert out.getvalue().endswith("Computer wins the game! Better luck next time!\n")


def test_final_results_tie():
    out = io.StringIO()
    display_final_results(1, 1, out=out)
    assert out.getvalue().endswith("The game ends in a tie!\n")


def test_goodbye():
    out = io.StringIO()
    display_goodbye(out=out)
    text = out.getvalue()
    assert "Thank you for playing Rock, Paper, Scissors!\n" in text
    assert "Goodbye!\n" in text