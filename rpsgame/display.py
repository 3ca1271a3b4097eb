"""Text shown to the player."""

from __future__ import annotations

import sys

from .game_logic import choice_to_string

_BANNER = (
    "",
    "   ____        _       _   _    _   _    _            ____   ",
    r"""U |  _"\  u U  /"\  u  |'| |'|U |"\|u| |  |"\|        U | __")u """,
    r" \\| |_) |/  \\/ _ \\/  /| |_| |\\\| |\\| |U | | u       \\|  _ \\/ ",
    r"  |  _ <    / ___ \\  U|  _  |u | |_| | \\| |/__       | |_) | ",
    r"  |_| \_\\  /_/   \_\\  |_| |_| <<\\___/   |_____|      |____/  ",
    r"  //   \\_  \\\    >>  //   \\\(__) )(    //  \\\      _|| \\_  ",
    r""" (__)  (__)(__)  (__)(_") ("_)   (__)  (_")("_)    (__) (__) """,
    "",
    "  ========================================================",
    "  ||           ROCK, PAPER, SCISSORS GAME               ||",
    "  ========================================================",
    "",
    "  *************************************************",
    "  *                 GAME RULES                     *",
    "  *-----------------------------------------------*",
    "  *     Rock     crushes    Scissors              *",
    "  *     Scissors cuts       Paper                 *",
    "  *     Paper    covers     Rock                  *",
    "  *************************************************",
    "",
    "  Welcome to the ultimate Rock, Paper, Scissors challenge!",
    "  Are you ready to test your luck and strategy?",
    "",
)

_RULE = "==================================="


def _emit(out, *lines: str) -> None:
    out = out if out is not None else sys.stdout
    for line in lines:
        out.write(line + "\n")


def display_welcome(out=None) -> None:
    """Show the banner and the rules."""
    _emit(out, *_BANNER)


def display_round_info(round_number, total_rounds, player_score, computer_score, out=None) -> None:
    """Show which round is being played and the running score."""
    _emit(
        out,
        "",
        _RULE,
        f"Round {round_number} of {total_rounds}",
        _RULE,
        f"Score: You {player_score} - {computer_score} Computer",
        "",
    )


def display_choices(player_choice, computer_choice, out=None) -> None:
    """Show the moves both sides made."""
    _emit(
        out,
        "",
        f"You chose: {choice_to_string(player_choice)}",
        f"Computer chose: {choice_to_string(computer_choice)}",
    )


def display_round_result(result: str, out=None) -> None:
    """Show the outcome of a round."""
    _emit(out, "", result)


def display_final_results(player_score, computer_score, out=None) -> None:
    """Show the final scores and who won the game."""
    if player_score > computer_score:
        verdict = "Congratulations! You win the game!"
    elif computer_score > player_score:
        verdict = "Computer wins the game! Better luck next time!"
    else:
        verdict = "The game ends in a tie!"
    _emit(
        out,
        "",
        _RULE,
        "          FINAL RESULTS            ",
        _RULE,
        f"Player Score: {player_score}",
        f"Computer Score: {computer_score}",
        "",
        verdict,
    )


def display_goodbye(out=None) -> None:
    """Say goodbye."""
    _emit(
        out,
        "",
        "Thank you for playing Rock, Paper, Scissors!",
        "Goodbye!",
        "",
    )