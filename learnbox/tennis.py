"""A brick-breaking tennis game: bounce the ball off a platform into bricks."""

from __future__ import annotations

import curses
import sys
import time
from enum import IntEnum

MAP_ROWS = 20
MAP_COLS = 24
PLATFORM_SIZE = 7
BRICK_ROWS = 3
BALL_DELAY = 0.15
FRAME_DELAY = 0.025

_SYMBOLS = (" ", "#", "%", "*", "@")


class Cell(IntEnum):
    """What occupies one cell of the field."""

    FREE = 0
    BORDER = 1
    PLATFORM = 2
    BALL = 3
    BRICK = 4

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


class TennisGame:
    """The field, the platform and the ball."""

    def __init__(self) -> None:
        self.rows = MAP_ROWS
        self.cols = MAP_COLS
        self.grid: list[list[Cell]] = [
            [
                Cell.BORDER
                if y in (0, self.rows - 1) or x in (0, self.cols - 1)
                else Cell.FREE
                for x in range(self.cols)
            ]
            for y in range(self.rows)
        ]
        for row in self.grid[1 : BRICK_ROWS + 1]:
            row[1 : self.cols - 1] = [Cell.BRICK] * (self.cols - 2)

        self.platform_x = 1
        self.platform_dx = 0
        self.ball_x = self.cols // 2
        self.ball_y = self.cols // 2
        self.ball_dx = 1
        self.ball_dy = -1
        self.running = True
        self.move_platform()

    @property
    def platform_row(self) -> int:
        return self.rows - 2

    def steer(self, key: str) -> None:
        """Set the platform moving left on 'a' or right on 'd'."""
        if key == "a":
            self.platform_dx = -1
        elif key == "d":
            self.platform_dx = 1

    def move_platform(self) -> None:
        """Move the platform one step, stopping it at the walls."""
        if not self.running:
            return
        if self.platform_x + self.platform_dx < 1:
            self.platform_dx = 0
        elif self.platform_x + self.platform_dx + PLATFORM_SIZE >= self.cols:
            self.platform_dx = 0

        row = self.grid[self.platform_row]
        row[self.platform_x] = Cell.FREE
        self.platform_x += self.platform_dx
        right = self.platform_x + PLATFORM_SIZE
        row[self.platform_x : right] = [Cell.PLATFORM] * PLATFORM_SIZE
        if right < self.cols - 1:
            row[right] = Cell.FREE

    def move_ball(self) -> None:
        """Move the ball one step, bouncing off walls, bricks and the platform."""
        if not self.running:
            return
        if self.ball_x + self.ball_dx >= self.cols - 1:
            self.ball_dx = -1
        elif self.ball_x + self.ball_dx <= 1:
            self.ball_dx = 1

        next_y = self.ball_y + self.ball_dy
        if next_y >= self.rows - 1:
            self.running = False
            return
        if next_y < 1:
            self.ball_dy = 1
        elif self.grid[next_y][self.ball_x + self.ball_dx] == Cell.BRICK:
            self.grid[next_y][self.ball_x + self.ball_dx] = Cell.FREE
            self.ball_dy = 1
        elif self.grid[next_y][self.ball_x] == Cell.PLATFORM:
            self.ball_dy = -1
            self.ball_dx += self.platform_dx

        self.grid[self.ball_y][self.ball_x] = Cell.FREE
        self.ball_x += self.ball_dx
        self.ball_y += self.ball_dy
        self.grid[self.ball_y][self.ball_x] = Cell.BALL

    def render(self) -> list[str]:
        """Return the field as text rows."""
        return ["".join(cell.symbol for cell in row) for row in self.grid]


def _put(screen, y: int, x: int, text: str) -> None:
    try:
        screen.addstr(y, x, text)
    except curses.error:
        pass


def _draw(screen, game: TennisGame) -> None:
    for y, line in enumerate(game.render()):
        _put(screen, y, 0, line)
    _put(screen, game.rows, game.cols // 2 - 11, "Press 'a', 'd' to move")
    _put(screen, game.rows + 1, game.cols // 2 - 9, "Press 'q' to exit")
    if not game.running:
        _put(screen, game.rows // 2, game.cols // 2 - 5, "Game Over")
    screen.refresh()


def run(screen) -> None:
    """Play on a curses window until 'q' is pressed."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    curses.halfdelay(1)
    game = TennisGame()
    last_ball = time.monotonic()

    while True:
        key = screen.getch()
        if key == ord("q"):
            break
        time.sleep(FRAME_DELAY)
        if 0 <= key < 256:
            game.steer(chr(key))
        game.move_platform()
        now = time.monotonic()
        if now - last_ball >= BALL_DELAY:
            game.move_ball()
            last_ball = now
        _draw(screen, game)
    curses.nocbreak()


def main(argv: list[str] | None = None) -> int:
    """Start the game in the terminal."""
    curses.wrapper(run)
    return 0


if __name__ == "__main__":
    sys.exit(main())