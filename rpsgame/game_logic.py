"""Core rules of rock, paper, scissors."""

from __future__ import annotations

import random
from enum import IntEnum


class Choice(IntEnum):
    """A move in the game, numbered as the player enters it."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    def __str__(self) -> str:
        return self.name.capitalize()


_BEATS = {
    Choice.ROCK: Choice.SCISSORS,
    Choice.PAPER: Choice.ROCK,
    Choice.SCISSORS: Choice.PAPER,
}


def generate_computer_choice(rng=None) -> Choice:
    """Pick a random move; ``rng`` needs a ``randint`` method."""
    rng = rng if rng is not None else random
    return Choice(rng.randint(1, 3))


def determine_winner(player_choice: int, computer_choice: int) -> int:
    """Return 1 if the player wins, 0 for a tie and -1 if the computer wins."""
    if player_choice == computer_choice:
        return 0
    if _BEATS.get(player_choice) == computer_choice:
        return 1
    return -1


def choice_to_string(choice: int) -> str:
    """Name of a move, or ``"Unknown"`` for a value that is not a move."""
    try:
        return str(Choice(choice))
    except ValueError:
        return "Unknown"