"""Sorting the values of a two-dimensional grid."""

from __future__ import annotations

import argparse
import sys
from itertools import chain

SAMPLE: list[list[int]] = [
    [24, 23, 25, 22, 21],
    [14, 13, 15, 12, 11],
    [20, 19, 18, 17, 16],
    [2, 4, 3, 5, 1],
    [10, 6, 8, 7, 9],
]


def sort_by_rows(grid: list[list[int]]) -> list[list[int]]:
    """Sort row by row, swapping with the row below, repeated once per cell.

    Returns a new grid; the input is left untouched.
    """
    cells = [list(row) for row in grid]
    rows = len(cells)
    cols = len(cells[0]) if cells else 0
    if any(len(row) != cols for row in cells):
        raise ValueError("grid rows must all have the same length")

    for _ in range(rows * cols):
        for r, (row, below) in enumerate(zip(cells, cells[1:] + [None])):
            for c in range(cols):
                for j in range(c + 1, cols):
                    if row[c] > row[j]:
                        row[c], row[j] = row[j], row[c]
                    if below is None:
                        continue
                    if row[j] > below[c]:
                        row[j], below[c] = below[c], row[j]
    return cells


def sort_flat(grid: list[list[int]]) -> list[list[int]]:
    """Sort all values ascending in row-major order, keeping the grid's shape."""
    values = iter(sorted(chain.from_iterable(grid)))
    return [[next(values) for _ in row] for row in grid]


def format_grid(grid: list[list[int]]) -> str:
    """Return the grid as text, each value three characters wide."""
    return "".join("".join(f"{value:3d}" for value in row) + "\n" for row in grid)


def main(argv: list[str] | None = None) -> int:
    """Print the sample grid before and after sorting."""
    parser = argparse.ArgumentParser(description="Sort a two-dimensional grid.")
    parser.add_argument(
        "--method",
        choices=("rows", "flat"),
        default="flat",
        help="row-by-row sort or flat sort (default: flat)",
    )
    args = parser.parse_args(argv)
    sorter = sort_by_rows if args.method == "rows" else sort_flat
    print(format_grid(SAMPLE), end="")
    print("-" * 15)
    print(format_grid(sorter(SAMPLE)), end="")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())