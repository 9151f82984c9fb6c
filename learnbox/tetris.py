"""A falling-blocks game with a preview of the next figure."""

from __future__ import annotations

import curses
import random
import sys
import time
from dataclasses import dataclass

MAP_LINES = 28
MAP_COLS = 26
FREE = 0
BORDER = 1
FIGURE_CELL = 3
GAME_OVER_LINES = 4
SPEED = 3
TICK_SECONDS = 0.05
SYMBOLS = (" ", "#", "#", "O")

Cells = tuple[tuple[int, ...], ...]

FIGURES: tuple[Cells, ...] = (
    ((0, 0, 0, 0), (0, 3, 3, 0), (0, 3, 3, 0), (0, 0, 0, 0)),  # square
    ((0, 0, 0, 0), (0, 3, 3, 3), (0, 0, 3, 0), (0, 0, 0, 0)),  # T
    ((0, 0, 0, 0), (0, 0, 3, 3), (0, 3, 3, 0), (0, 0, 0, 0)),  # S
    ((0, 0, 0, 0), (0, 3, 3, 0), (0, 0, 3, 3), (0, 0, 0, 0)),  # Z
    ((0, 0, 0, 0), (0, 3, 0, 0), (0, 3, 3, 3), (0, 0, 0, 0)),  # mirrored L
    ((0, 0, 0, 0), (0, 0, 0, 3), (0, 3, 3, 3), (0, 0, 0, 0)),  # L
    ((0, 0, 0, 0), (3, 3, 3, 3), (0, 0, 0, 0), (0, 0, 0, 0)),  # I
)


@dataclass
class Figure:
    """A figure placed with its top-left corner at ``(x, y)``."""

    x: int
    y: int
    cells: Cells
    size: int = 4

    def cell(self, row: int, col: int) -> int:
        """Return the figure's value at ``(row, col)``, 0 outside it."""
        if 0 <= row < len(self.cells) and 0 <= col < len(self.cells[row]):
            return self.cells[row][col]
        return FREE

    def rotated(self) -> Figure:
        """Return a copy turned a quarter turn clockwise."""
        cells = tuple(tuple(column) for column in zip(*reversed(self.cells)))
        return Figure(self.x, self.y, cells, self.size)

    def occupied(self):
        """Yield the field coordinates ``(y, x, value)`` of non-empty cells."""
        for r, row in enumerate(self.cells):
            for c, value in enumerate(row):
                if value:
                    yield self.y + r, self.x + c, value


class TetrisGame:
    """The field, the falling figure and the preview of the next one."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.grid: list[list[int]] = [
            [FREE] * MAP_COLS for _ in range(MAP_LINES)
        ]
        self._restore_border()
        self.next_index = self.rng.randrange(len(FIGURES))
        self.current: Figure
        self.preview: Figure
        self.new_iteration()

    def _restore_border(self) -> None:
        for y, row in enumerate(self.grid):
            for x in range(MAP_COLS):
                if x in (0, MAP_COLS - 1) or y in (0, MAP_LINES - 1):
                    row[x] = BORDER

    def _spawn(self, index: int) -> Figure:
        template = FIGURES[index]
        size = len(template)
        x = self.rng.randrange(MAP_COLS - size - 1) + 1
        return Figure(x=x, y=0, cells=template, size=size)

    def new_iteration(self) -> None:
        """Make the previewed figure current and pick a new preview."""
        upcoming = self.rng.randrange(len(FIGURES))
        self.preview = self._spawn(upcoming)
        self.current = self._spawn(self.next_index)
        self.next_index = upcoming

    def check_collision(self, figure: Figure, dx: int = 0) -> bool:
        """Push the figure back from walls and blocks; return whether it landed.

        A figure that overlaps a wall or a block after moving ``dx`` columns
        is moved back by ``dx``.
        """
        landed = False
        for i in range(figure.y, figure.y + figure.size):
            fy = i - figure.y
            my = min(i, MAP_LINES - 2)
            j = figure.x
            while j <= figure.x + figure.size - 1:
                if j >= MAP_COLS - 1:
                    mx = MAP_COLS - 1
                    if figure.cell(fy, j - figure.x):
                        figure.x -= dx
                elif j <= 0:
                    mx = 0
                    if figure.cell(fy, j - figure.x):
                        figure.x -= dx
                else:
                    mx = j
                value = figure.cell(fy, j - figure.x)
                if self.grid[my][mx] + value >= 2 * FIGURE_CELL:
                    figure.x -= dx
                elif self.grid[my + 1][mx] + value > FIGURE_CELL:
                    landed = True
                j += 1
        return landed

    def figure_to_map(self, figure: Figure) -> None:
        """Write the figure's blocks into the field."""
        for y, x, value in figure.occupied():
            if 0 <= y < MAP_LINES and 0 <= x < MAP_COLS:
                self.grid[y][x] = value
        self._restore_border()

    def rotate(self) -> None:
        """Rotate the current figure clockwise unless the rotation would land."""
        rotated = self.current.rotated()
        if not self.check_collision(rotated, 0):
            self.current.cells = rotated.cells

    def advance(self, dx: int, dy: int) -> bool:
        """Move the current figure and return whether it has landed."""
        self.current.y += dy
        self.current.x += dx
        return self.check_collision(self.current, dx)

    def is_game_over(self) -> bool:
        """Return whether blocks reach every one of the top rows."""
        return all(
            any(value > 2 for value in self.grid[y])
            for y in range(1, GAME_OVER_LINES + 1)
        )


def _put(screen, y: int, x: int, text: str) -> None:
    try:
        screen.addstr(y, x, text)
    except curses.error:
        pass


def _draw(screen, game: TetrisGame, show_preview: bool) -> None:
    for y, row in enumerate(game.grid):
        _put(screen, y, 0, "".join(SYMBOLS[value] for value in row))
    for y, x, value in game.current.occupied():
        _put(screen, y, x, SYMBOLS[value])
    if show_preview:
        top, left = 1, MAP_COLS + 2
        for i in range(5):
            _put(screen, top + i, left, " " * 5)
        preview = Figure(left, top, game.preview.cells, game.preview.size)
        for y, x, value in preview.occupied():
            _put(screen, y, x, SYMBOLS[value])
    screen.refresh()


def run(screen) -> None:
    """Play on a curses window until 'q' is pressed."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    screen.keypad(True)
    curses.halfdelay(1)

    game = TetrisGame()
    dx, dy = 0, 1
    ticks = 0
    settle = 0
    show_preview = True
    _draw(screen, game, show_preview)

    while True:
        time.sleep(TICK_SECONDS)
        key = screen.getch()
        if key == ord("q"):
            break
        if key == curses.KEY_UP:
            game.rotate()
            landed = game.advance(dx, 0)
            dx, dy = 0, (0 if landed else 1)
        elif key == curses.KEY_DOWN:
            ticks = SPEED
        elif key == curses.KEY_LEFT:
            dx, dy = -1, 0
        elif key == curses.KEY_RIGHT:
            dx, dy = 1, 0

        if game.is_game_over():
            _put(screen, MAP_LINES + 1, 0, "GAME OVER")
            screen.refresh()
            continue

        if ticks >= SPEED or dx != 0:
            landed = game.advance(dx, dy)
            dx, dy = 0, (0 if landed else 1)
            if landed:
                if settle >= 1:
                    settle = 0
                    game.figure_to_map(game.current)
                    game.new_iteration()
                settle += 1
                show_preview = False
            else:
                settle = 0
                show_preview = True
            ticks = 0
        ticks += 1
        curses.flushinp()
        _draw(screen, game, show_preview)


def main(argv: list[str] | None = None) -> int:
    """Start the game in the terminal."""
    curses.wrapper(run)
    return 0


if __name__ == "__main__":
    sys.exit(main())