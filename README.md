# dicecard

A console dice game played on a thirteen-row scorecard. Each turn you roll five
dice up to three times, keep the ones you like and pick a row to score. The
package also has a small solver for "star battle" colour-region puzzles.

## Installing

```
pip install .
```

## Playing

Start a game with a seed taken from the current time:

```
dicecard
```

Replay a particular game by giving its seed, which must be an integer:

```
dicecard 12345
```

On each roll you are asked which values to keep. Type the face values, for
example `556` to keep two fives and a six, or press Enter to reroll all five
dice. If you name a value you do not have, or type anything other than the
digits 1 to 6, you are asked again. When the rolling is over, the scorecard is
shown with the points each open row would earn and its number. Type that number
to score the row. After thirteen turns the final card and total are printed,
along with the seed.

The upper section earns a 25 point bonus once its subtotal reaches 63. Once
the Yahtzee row holds a score above zero, every further five of a kind adds
100 to the Yahtzee Bonus row, and scores as a joker in Full House, Small
Straight and Large Straight.

## Other commands

Play many games from random seeds, print a histogram of the scores in bands of
ten, and save `seed:score` lines to a `<timestamp>.games` file (5000 games when
no count is given):

```
dicecard mass 500
```

Replay the seeds in a saved file, print the old score, the new score and the
change for each, then the mean change and a side-by-side histogram. The
histogram is sized by the `WIDTH` environment variable, which defaults to 121
and must be at least 16:

```
dicecard regress 1700000000.games
```

These commands play their games with the same terminal player as above, so
each game still waits for answers on standard input.

Solve the built-in 5×5 star battle puzzle, or the larger 10×10 one, and print
the grid it ends with:

```
dicecard star
dicecard star hard
```

## Using it as a library

Score a hand by hand:

```python
from dicecard.scorecard import Scorecard, ScorableName, scoreable_by_name

card = Scorecard()
card.score((3, 3, 3, 5, 5), scoreable_by_name(ScorableName.FULL_HOUSE))
print(card.render())
```

Let the computer player (`dicecard.ai.AIPlayer`) play a whole seeded game. It
prints its reasoning and the card after every turn:

```python
from dicecard.ai import AIPlayer
from dicecard.game import Game

game = Game(players=[AIPlayer()], seed=7)
winner = game.play()[0]
print(winner.scorecard.total())
```

Solve a star battle puzzle. `solve` works on a copy and leaves the puzzle it is
given unchanged; `parse_puzzle` builds a puzzle from rows of coloured squares,
at most ten columns wide, and raises `PuzzleError` for rows of unequal length:

```python
from dicecard.starbattle import make_easy_puzzle, solve

puzzle, solved = solve(make_easy_puzzle())
print(puzzle.render("solution" if solved else "last attempt"))
```

## What it does not do

The command line only plays single-player games with the terminal player;
the computer player is reachable from the library alone. Games are not saved
part way through and cannot be resumed.

## Running the tests

```
pip install .[test]
pytest
```