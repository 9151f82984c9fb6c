"""A compact falling-blocks game with line clearing and scoring."""

from __future__ import annotations

import curses
import random
import sys
import time
from dataclasses import dataclass, replace

ROWS = 20
COLS = 11
START_TIMER_US = 500_000
TIMER_STEP_US = 1000
LINE_SCORE = 100

Cells = tuple[tuple[int, ...], ...]

SHAPES: tuple[Cells, ...] = (
    ((0, 1, 1), (1, 1, 0), (0, 0, 0)),  # S
    ((1, 1, 0), (0, 1, 1), (0, 0, 0)),  # Z
    ((0, 1, 0), (1, 1, 1), (0, 0, 0)),  # T
    ((0, 0, 1), (1, 1, 1), (0, 0, 0)),  # L
    ((1, 0, 0), (1, 1, 1), (0, 0, 0)),  # mirrored L
    ((1, 1), (1, 1)),  # square
    ((0, 0, 0, 0), (1, 1, 1, 1), (0, 0, 0, 0), (0, 0, 0, 0)),  # line
)


@dataclass(frozen=True)
class Shape:
    """A square shape whose top-left corner sits at ``(row, col)``."""

    cells: Cells
    row: int = 0
    col: int = 0

    @property
    def width(self) -> int:
        return len(self.cells)

    def rotated(self) -> Shape:
        """Return a copy turned a quarter turn clockwise."""
        cells = tuple(tuple(column) for column in zip(*reversed(self.cells)))
        return replace(self, cells=cells)

    def blocks(self):
        """Yield the table coordinates ``(row, col)`` of filled cells."""
        for i, line in enumerate(self.cells):
            for j, value in enumerate(line):
                if value:
                    yield self.row + i, self.col + j


class Board:
    """The table of settled blocks, the falling shape and the score."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.table: list[list[int]] = [[0] * COLS for _ in range(ROWS)]
        self.score = 0
        self.game_on = True
        self.timer_us = START_TIMER_US
        self.current: Shape
        self.spawn()

    def fits(self, shape: Shape) -> bool:
        """Return whether the shape lies inside the table on free cells."""
        for i, line in enumerate(shape.cells):
            for j, value in enumerate(line):
                r, c = shape.row + i, shape.col + j
                if c < 0 or c >= COLS or r >= ROWS or r < 0:
                    if value:
                        return False
                elif self.table[r][c] and value:
                    return False
        return True

    def spawn(self) -> Shape:
        """Put a random shape at the top; the game ends if it does not fit."""
        cells = SHAPES[self.rng.randrange(len(SHAPES))]
        col = self.rng.randrange(COLS - len(cells) + 1)
        self.current = Shape(cells, row=0, col=col)
        if not self.fits(self.current):
            self.game_on = False
        return self.current

    def _lock(self) -> None:
        for r, c in self.current.blocks():
            if 0 <= r < ROWS and 0 <= c < COLS:
                self.table[r][c] = 1

    def clear_full_lines(self) -> int:
        """Remove full rows, score them, speed up and return how many went."""
        kept = [row for row in self.table if not all(row)]
        count = ROWS - len(kept)
        self.table = [[0] * COLS for _ in range(count)] + kept
        self.timer_us -= TIMER_STEP_US
        self.score += LINE_SCORE * count
        return count

    def handle(self, action: str) -> None:
        """Apply a key: 's' down, 'a' left, 'd' right, 'w' rotate."""
        current = self.current
        if action == "s":
            moved = replace(current, row=current.row + 1)
            if self.fits(moved):
                self.current = moved
            else:
                self._lock()
                self.clear_full_lines()
                self.spawn()
        elif action in ("a", "d"):
            step = 1 if action == "d" else -1
            moved = replace(current, col=current.col + step)
            if self.fits(moved):
                self.current = moved
        elif action == "w":
            turned = current.rotated()
            if self.fits(turned):
                self.current = turned

    def render(self) -> str:
        """Return the table with the falling shape, followed by the score."""
        falling = {
            (r, c) for r, c in self.current.blocks() if 0 <= r < ROWS and 0 <= c < COLS
        }
        lines = [
            "".join(
                "O " if value or (r, c) in falling else ". "
                for c, value in enumerate(row)
            )
            + "\n"
            for r, row in enumerate(self.table)
        ]
        return "".join(lines) + f"\nScore: {self.score}\n"


def _show(screen, text: str) -> None:
    screen.erase()
    try:
        screen.addstr(0, 0, text)
    except curses.error:
        pass
    screen.refresh()


def run(screen) -> int:
    """Play on a curses window until the game ends; return the score."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    curses.halfdelay(1)

    board = Board()
    before = time.monotonic()
    _show(screen, board.render())
    while board.game_on:
        key = screen.getch()
        if 0 <= key < 256:
            board.handle(chr(key))
            _show(screen, board.render())
        now = time.monotonic()
        if (now - before) * 1_000_000 > board.timer_us:
            before = now
            board.handle("s")
            _show(screen, board.render())
    _show(screen, board.render() + "\nGame over\n")
    return board.score


def main(argv: list[str] | None = None) -> int:
    """Start the game in the terminal."""
    curses.wrapper(run)
    return 0


if __name__ == "__main__":
    sys.exit(main())