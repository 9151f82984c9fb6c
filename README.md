# learnbox

A handful of small programs for the terminal: four arcade games (two of
them tetris variants) and a few text and number exercises.

## Installing

    pip install .

For the test suite:

    pip install ".[test]"
    pytest

## Games

The games draw with `curses`, so they need a POSIX terminal.

| Command | What it does |
|---|---|
| `learnbox-snake` | Snake on a 26×25 bordered field; the snake goes through the walls and grows by one for each piece of food, worth 10 points. Arrow keys steer, `q` quits. Running into itself ends the game; a banner then waits for `q`. |
| `learnbox-tennis` | Knock out three rows of bricks with a ball and a platform. `a` and `d` set the platform moving left or right, `q` quits. When the ball reaches the floor, play stops and "Game Over" is shown until `q` is pressed. |
| `learnbox-tetris` | Tetris on a 26×28 field with a preview of the next figure. Left and right arrows move, up rotates, down speeds the fall, `q` quits. "GAME OVER" appears once blocks reach each of the top four rows. |
| `learnbox-tetris-classic` | A compact tetris on an 11×20 board. `a`/`d` move, `s` drops one row, `w` rotates; every full line is worth 100 points and each locked piece speeds the fall a little. The game ends when a new shape no longer fits at the top. |

## Exercises

| Command | What it does |
|---|---|
| `learnbox-hello` | Prints `Hello, World!`. |
| `learnbox-bin2dec` | Reads binary numbers of up to 64 characters and prints the bit count, the digits and the decimal value; any character other than `1` counts as `0`. `q` (or end of input) exits. |
| `learnbox-rotate` | Five times picks a random figure, turns it a quarter clockwise and prints it. |
| `learnbox-sort` | Prints a 5×5 grid before and after sorting it. `--method flat` (the default) sorts all values in row-major order; `--method rows` uses a row-by-row swapping sort. |
| `learnbox-split` | Replaces punctuation in a sample sentence with spaces, collapses the spaces and prints its words, numbered. |

## Using the library

The game logic lives apart from the drawing, so it can be driven directly:

```python
import random
from learnbox.snake import SnakeGame, Direction

game = SnakeGame(26, 25, random.Random(1))
alive = game.step(Direction.UP)
print(game.head, game.food, game.score)
```

```python
from learnbox.binary import parse_binary
from learnbox.strproc import replace_chars, trim_separators, split_words

parse_binary("101")          # BinaryReading(bits=3, digits='101', value=5)
text = trim_separators(replace_chars("Hello, world!", " ", ",!"), " ")
split_words(text, " ", 10)   # ['Hello', 'world']
```

`learnbox.tetris.TetrisGame`, `learnbox.tetris_classic.Board` and
`learnbox.tennis.TennisGame` can be stepped and inspected the same way
(`advance`, `handle`, `move_ball`/`move_platform`, and `render` where
there is one). Each game module also has a `run(screen)` function that
plays it on a `curses` window.

## What it does not do

The games keep no high scores and have no settings: field sizes, speeds
and keys are fixed. There is no pause, and the compact tetris has no quit
key; it runs until the game ends.