"""Tree visibility in a grid of tree heights."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

EXAMPLE = "30373\n25512\n65332\n33549\n35390"

Grid = list[list[int]]


def parse_grid(text: str) -> Grid:
    """Parse lines of single-digit heights into rows of integers."""
    grid = []
    for line in text.split("\n"):
        if not (line.isascii() and line.isdigit()):
            raise ValueError(f"not a row of digits: {line!r}")
        grid.append([int(char) for char in line])
    return grid


def is_visible(grid: Sequence[Sequence[int]], x: int, y: int) -> bool:
    """Whether the tree at row ``x``, column ``y`` counts as visible.

    Trees on the border never count. An interior tree counts when every tree
    before it in its column, or every tree before it in its row, is shorter.
    """
    if not (0 <= x < len(grid) and 0 <= y < len(grid[x])):
        raise IndexError(f"no tree at ({x}, {y})")
    last_row = len(grid) - 1
    last_col = len(grid[x]) - 1
    if x in (0, last_row) or y in (0, last_col):
        return False
    height = grid[x][y]
    from_top = all(grid[p][y] < height for p in range(x))
    from_left = all(grid[x][p] < height for p in range(y))
    return from_top or from_left


def count_visible(grid: Sequence[Sequence[int]]) -> int:
    """Number of trees for which :func:`is_visible` holds."""
    return sum(
        is_visible(grid, x, y) for x, row in enumerate(grid) for y in range(len(row))
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count visible trees.")
    parser.add_argument("input", nargs="?", default="input.data")
    parser.add_argument("--example", action="store_true", help="use the built-in example")
    args = parser.parse_args(argv)
    if args.example:
        text = EXAMPLE
    else:
        text = Path(args.input).read_text(encoding="utf-8")
        if not text:
            raise ValueError("input file is empty")
        text = text[:-1]
    grid = parse_grid(text)
    for x, row in enumerate(grid):
        for y, height in enumerate(row):
            if is_visible(grid, x, y):
                print(f"({x}, {y}) is visible (value: {height})")
    print(f"Answer: {count_visible(grid)}")
    return 0