"""Snake on a bordered field that wraps through its walls."""

from __future__ import annotations

import curses
import random
import sys
import time
from dataclasses import dataclass
from enum import Enum

DEFAULT_COLS = 26
DEFAULT_ROWS = 25
FOOD_SYMBOL = "@"
BODY_SYMBOL = "#"
FRAME_SYMBOL = "#"
START_LENGTH = 3
FOOD_SCORE = 10
TICK_SECONDS = 0.1

GAME_OVER_BANNER = (
    "              ",
    "**************",
    "* GAME OVER! *",
    "**************",
    "              ",
)


class Direction(Enum):
    """A direction of travel as a (dx, dy) step."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class Point:
    """A cell on the field."""

    x: int
    y: int

    def shifted(self, dx: int, dy: int) -> Point:
        """Return the point moved by ``dx`` and ``dy``."""
        return Point(self.x + dx, self.y + dy)


class SnakeGame:
    """The state of one game: the snake, the food and the score.

    The frame occupies columns ``0`` and ``cols`` and rows ``0`` and ``rows``;
    the snake and the food live strictly inside it.
    """

    def __init__(
        self,
        cols: int = DEFAULT_COLS,
        rows: int = DEFAULT_ROWS,
        rng: random.Random | None = None,
    ) -> None:
        if cols < 3 or rows < 3:
            raise ValueError("the field must be at least 3 by 3")
        self.cols = cols
        self.rows = rows
        self.rng = rng if rng is not None else random.Random()
        self.direction = Direction.RIGHT
        self.score = 0
        self.alive = True
        # Segments not yet laid down sit in the frame corner.
        self.body: list[Point] = [Point(cols // 3, rows // 2)] + [
            Point(0, 0) for _ in range(START_LENGTH - 1)
        ]
        self.food = Point(-1, -1)
        self.place_food()

    @property
    def head(self) -> Point:
        return self.body[0]

    @property
    def length(self) -> int:
        return len(self.body)

    def _is_free(self, point: Point) -> bool:
        return (
            point not in self.body
            and 0 < point.x < self.cols
            and 0 < point.y < self.rows
        )

    def place_food(self) -> Point:
        """Put food on a random free cell inside the frame and return it."""
        interior = (self.cols - 1) * (self.rows - 1)
        occupied = {
            p for p in self.body if 0 < p.x < self.cols and 0 < p.y < self.rows
        }
        if len(occupied) >= interior:
            raise RuntimeError("no free cell left for food")
        while True:
            candidate = Point(
                self.rng.randrange(self.cols), self.rng.randrange(self.rows)
            )
            if self._is_free(candidate):
                self.food = candidate
                return candidate

    def _wrap(self, point: Point) -> Point:
        x, y = point.x, point.y
        if x >= self.cols:
            x = 1
        elif x <= 0:
            x = self.cols - 1
        elif y >= self.rows:
            y = 1
        elif y <= 0:
            y = self.rows - 1
        return Point(x, y)

    def step(self, direction: Direction | None = None) -> bool:
        """Advance the snake one cell and return whether it is still alive.

        ``direction`` changes the heading; ``None`` keeps the current one.
        """
        if not self.alive:
            raise RuntimeError("the game is over")
        if direction is not None:
            self.direction = direction

        target = self.head.shifted(self.direction.dx, self.direction.dy)
        grew = target == self.food
        if grew:
            self.score += FOOD_SCORE
            self.place_food()

        new_head = self._wrap(target)
        tail = self.body if grew else self.body[:-1]
        self.body = [new_head] + tail

        for segment in self.body[1:]:
            if segment == new_head:
                self.alive = False
            elif segment == self.food:
                self.place_food()
        return self.alive


def _put(screen, y: int, x: int, text: str) -> None:
    try:
        screen.addstr(y, x, text)
    except curses.error:
        pass


def _hide_cursor() -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass


def _draw(screen, game: SnakeGame) -> None:
    screen.erase()
    for segment in game.body:
        _put(screen, segment.y, segment.x, BODY_SYMBOL)
    for y in range(game.rows + 1):
        _put(screen, y, 0, FRAME_SYMBOL)
        _put(screen, y, game.cols, FRAME_SYMBOL)
    for x in range(game.cols + 1):
        _put(screen, 0, x, FRAME_SYMBOL)
        _put(screen, game.rows, x, FRAME_SYMBOL)
    _put(screen, game.food.y, game.food.x, FOOD_SYMBOL)
    _put(screen, game.rows + 1, game.cols // 2 - 9, "press 'q' to quit")
    _put(screen, 1, game.cols + 2, f"score: {game.score}")
    screen.refresh()


_KEYS = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
}


def run(screen) -> int:
    """Play one game on a curses window; return the final score."""
    _hide_cursor()
    screen.keypad(True)
    screen.nodelay(True)
    game = SnakeGame()
    _draw(screen, game)

    while game.alive:
        time.sleep(TICK_SECONDS)
        key = screen.getch()
        if key == ord("q"):
            break
        game.step(_KEYS.get(key))
        _draw(screen, game)

    screen.nodelay(False)
    top = game.rows // 3
    for offset, line in enumerate(GAME_OVER_BANNER):
        _put(screen, top + offset, game.cols // 2 - 7, line)
    screen.refresh()
    while screen.getch() != ord("q"):
        pass
    return game.score


def main(argv: list[str] | None = None) -> int:
    """Start the game in the terminal."""
    curses.wrapper(run)
    return 0


if __name__ == "__main__":
    sys.exit(main())