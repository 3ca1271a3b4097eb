"""Rock, Paper, Scissors played in the terminal against the computer."""

__version__ = "1.0.0"