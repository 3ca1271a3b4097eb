"""Prompting the player and reading answers.

Input is read line by line. Lines holding only whitespace are skipped
without prompting again, and anything after the value read on a line is
discarded. Running out of input raises :class:`EOFError`.
"""

from __future__ import annotations

import re
import sys

from .game_logic import Choice

_INTEGER = re.compile(r"[+-]?\d+")


def _prompt(out, text: str) -> None:
    out.write(text)
    out.flush()


def _next_line(source) -> str:
    """Next line that holds something other than whitespace, left-stripped."""
    while True:
        line = source.readline()
        if not line:
            raise EOFError("input ended")
        stripped = line.lstrip()
        if stripped:
            return stripped


def _ask_int(source, out, prompt: str, low: int, high: int, out_of_range: str) -> int:
    while True:
        _prompt(out, prompt)
        match = _INTEGER.match(_next_line(source))
        if match is None:
            out.write("Invalid input. Please enter a number.\n")
            continue
        value = int(match.group())
        if low <= value <= high:
            return value
        out.write(out_of_range)


def get_player_choice(source=None, out=None) -> Choice:
    """Ask for a move until a number from 1 to 3 is given."""
    source = source if source is not None else sys.stdin
    out = out if out is not None else sys.stdout
    value = _ask_int(
        source,
        out,
        "\nEnter your choice (1 for Rock, 2 for Paper, 3 for Scissors): ",
        1,
        3,
        "Invalid choice. Please enter 1, 2, or 3.\n",
    )
    return Choice(value)


def get_rounds_input(source=None, out=None) -> int:
    """Ask how many rounds to play until a number from 1 to 5 is given."""
    source = source if source is not None else sys.stdin
    out = out if out is not None else sys.stdout
    return _ask_int(
        source,
        out,
        "How many rounds would you like to play? (1-5): ",
        1,
        5,
        "Please enter a number between 1 and 5.\n",
    )


def get_play_again_choice(source=None, out=None) -> bool:
    """Ask whether to play again until the answer starts with y or n."""
    source = source if source is not None else sys.stdin
    out = out if out is not None else sys.stdout
    while True:
        _prompt(out, "\nWould you like to play again? (y/n): ")
        answer = _next_line(source)[0]
        if answer in "yY":
            return True
        if answer in "nN":
            return False
        out.write("Invalid input. Please enter 'y' or 'n'.\n")