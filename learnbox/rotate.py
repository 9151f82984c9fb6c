"""Clockwise rotation of small block figures."""

from __future__ import annotations

import random
import sys
import time

Grid = tuple[str, ...]

FIGURES: tuple[Grid, ...] = (
    ("    ", " #  ", " ###", "    "),
    ("    ", "  # ", " ###", "    "),
    (" #  ", " #  ", " #  ", " #  "),
    (" #  ", " #  ", "  # ", "  # "),
    ("  # ", "  # ", " #  ", " #  "),
)


def rotate_clockwise(grid: Grid) -> Grid:
    """Return the grid turned a quarter turn clockwise."""
    return tuple("".join(column) for column in zip(*reversed(grid)))


def render(grid: Grid) -> str:
    """Return the grid as text, one line per row."""
    return "".join(f"{row}\n" for row in grid)


class FigureSet:
    """The set of figures, each of which can be rotated in place."""

    def __init__(self) -> None:
        self.figures: list[Grid] = list(FIGURES)

    def rotate(self, index: int) -> Grid:
        """Rotate figure ``index`` clockwise, store and return it."""
        rotated = rotate_clockwise(self.figures[index])
        self.figures[index] = rotated
        return rotated


def main(argv: list[str] | None = None) -> int:
    """Rotate randomly chosen figures five times, printing each result."""
    figures = FigureSet()
    for _ in range(5):
        rng = random.Random(int(time.time()))
        grid = figures.rotate(rng.randrange(len(FIGURES) - 1))
        print(render(grid), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())