"""Interactive rock, paper, scissors game."""

from __future__ import annotations

import argparse
import random
import sys

from .display import (
    display_choices,
    display_final_results,
    display_goodbye,
    display_round_info,
    display_round_result,
    display_welcome,
)
from .game_logic import determine_winner, generate_computer_choice
from .input_handler import get_play_again_choice, get_player_choice, get_rounds_input

_ROUND_MESSAGES = {
    1: "You win this round!",
    -1: "Computer wins this round!",
    0: "It's a tie!",
}


def _wait_for_enter(source, out) -> None:
    # The pause takes the rest of a line and then one more character.
    out.write("\nPress Enter to continue...")
    out.flush()
    if not source.readline():
        raise EOFError("input ended")
    source.read(1)


def _play_game(source, out, rng) -> tuple[int, int]:
    total_rounds = get_rounds_input(source, out)
    player_score = computer_score = 0
    for round_number in range(1, total_rounds + 1):
        display_round_info(round_number, total_rounds, player_score, computer_score, out)
        player_choice = get_player_choice(source, out)
        computer_choice = generate_computer_choice(rng)
        display_choices(player_choice, computer_choice, out)
        result = determine_winner(player_choice, computer_choice)
        if result == 1:
            player_score += 1
        elif result == -1:
            computer_score += 1
        display_round_result(_ROUND_MESSAGES[result], out)
        _wait_for_enter(source, out)
    display_final_results(player_score, computer_score, out)
    return player_score, computer_score


def run(source=None, out=None, rng=None) -> list[tuple[int, int]]:
    """Play games until the player stops; return each game's final scores."""
    source = source if source is not None else sys.stdin
    out = out if out is not None else sys.stdout
    rng = rng if rng is not None else random.Random()

    display_welcome(out)
    results = []
    while True:
        results.append(_play_game(source, out, rng))
        if not get_play_again_choice(source, out):
            break
    display_goodbye(out)
    return results


def main(argv=None) -> int:
    """Start the game on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="rpsgame", description="Play rock, paper, scissors against the computer."
    )
    parser.parse_args(argv)
    try:
        run()
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())