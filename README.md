# rpsgame

Play Rock, Paper, Scissors against the computer in your terminal.

## Install

```
pip install .
```

## Play

```
rpsgame
```

The game first asks how many rounds you want to play, from 1 to 5. In each round you pick a move:

- `1` for Rock
- `2` for Paper
- `3` for Scissors

The computer picks its move at random. The game then shows both moves and says who won the round, and waits for you to press Enter before going on. After the last round it shows the final score and who won the game, then asks whether you want to play again. Answer `y` or `n`. Only the first character of the answer counts, and upper case works too.

If you type something the game does not accept, it tells you so and asks again. Blank lines are ignored. If the input ends or you press Ctrl-C, the game stops and the command exits with status 1.

Rules:

- Rock crushes Scissors
- Scissors cuts Paper
- Paper covers Rock

## Using the logic from Python

```python
from rpsgame.game_logic import Choice, determine_winner, choice_to_string

determine_winner(Choice.ROCK, Choice.SCISSORS)   # 1: the player wins
determine_winner(Choice.PAPER, Choice.SCISSORS)  # -1: the computer wins
determine_winner(Choice.ROCK, Choice.ROCK)       # 0: a tie
choice_to_string(Choice.PAPER)                   # "Paper"
choice_to_string(4)                              # "Unknown"
```

`generate_computer_choice(rng)` returns a random `Choice`. `rng` can be any object with a `randint` method, such as `random.Random(seed)`. If you leave it out, the `random` module is used.

`rpsgame.cli.run(source, out, rng)` plays a whole session. It reads lines from `source`, writes to `out`, and uses `rng` for the computer's moves. It returns a list of `(player_score, computer_score)` pairs, one for each game played. If `source` runs out of input, it raises `EOFError`. This lets you script a game or test it:

```python
import io
import random

from rpsgame.cli import run

answers = io.StringIO("1\n2\n\nn\n")
scores = run(answers, io.StringIO(), random.Random(0))
```

The prompts and screens are in `rpsgame.input_handler` and `rpsgame.display`. Each function there takes an optional input stream and output stream.

## Tests

```
pip install ".[test]"
pytest
```