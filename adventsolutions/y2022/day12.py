"""Greedy climb across a padded height map."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from adventsolutions.aoc_input import INPUT_URL, get_input

DAY = 12
PADDING = "@"
OUTSIDE = "a"
EXAMPLE = "Sabqponm\nabcryxxl\naccszExk\nacctuvwj\nabdefghi"

Point = tuple[int, int]
Grid = list[list[str]]


class Direction(Enum):
    """Neighbour offsets, in the order the neighbours are examined."""

    UP_LEFT = (-1, -1)
    UP = (0, -1)
    UP_RIGHT = (1, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    DOWN_LEFT = (-1, 1)
    DOWN = (0, 1)
    DOWN_RIGHT = (1, 1)

    @property
    def is_diagonal(self) -> bool:
        dx, dy = self.value
        return dx != 0 and dy != 0

    @property
    def cost(self) -> int:
        return 2 if self.is_diagonal else 1

    def step(self, position: Point) -> Point:
        """Where a move in this direction leads; diagonal moves stay put."""
        dx, dy = _STEPS.get(self, (0, 0))
        x, y = position
        return x + dx, y + dy


_STEPS = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


def parse_map(text: str) -> Grid:
    """Parse the map and surround it with a border of padding cells."""
    rows = [list(PADDING + line + PADDING) for line in text.splitlines()]
    if not rows:
        raise ValueError("empty map")
    border = [PADDING] * len(rows[0])
    return [border, *rows, list(border)]


def find_char(grid: Sequence[Sequence[str]], char: str) -> Point:
    """Position ``(x, y)`` of the first cell holding ``char``."""
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell == char:
                return x, y
    raise ValueError(f"{char!r} not found")


def letter_to_height(letter: str) -> int:
    """Height of a cell: its code point measured from ``'0'``."""
    if len(letter) != 1 or not "0" <= letter <= "\xff":
        raise ValueError(f"not a map cell: {letter!r}")
    return ord(letter) - ord("0")


def _inside(grid: Sequence[Sequence[str]], position: Point) -> bool:
    x, y = position
    return 0 <= y < len(grid) and 0 <= x < len(grid[y])


def _height_at(grid: Sequence[Sequence[str]], position: Point) -> int:
    if _inside(grid, position):
        x, y = position
        return letter_to_height(grid[y][x])
    return letter_to_height(OUTSIDE)


def _first_candidate(
    grid: Sequence[Sequence[str]], position: Point, visited: set[Point]
) -> Direction | None:
    x, y = position
    wanted = letter_to_height(grid[y][x]) + 1
    for direction in Direction:
        dx, dy = direction.value
        neighbour = (x + dx, y + dy)
        if neighbour not in visited and _height_at(grid, neighbour) == wanted:
            return direction
    return None


def find_path_length(
    grid: Sequence[Sequence[str]], start: Point, end: Point
) -> int | None:
    """Follow the first climbable neighbour each time until ``end``.

    Returns the accumulated cost (diagonals cost 2), or ``None`` when the walk
    gets stuck. Raises when the walk leaves the map or can only repeat itself.
    """
    visited: set[Point] = set()
    states: set[tuple[Point, int]] = set()
    position = start
    length = 0
    while position != end:
        if not _inside(grid, position):
            raise IndexError(f"walk left the map at {position}")
        visited.add(position)
        state = (position, len(visited))
        if state in states:
            raise RuntimeError(f"walk repeats itself at {position}")
        states.add(state)
        direction = _first_candidate(grid, position, visited)
        if direction is None:
            return None
        length += direction.cost
        position = direction.step(position)
    return length


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Climb the height map.")
    parser.add_argument("input", nargs="?", help="input file; downloaded if omitted")
    parser.add_argument("--example", action="store_true", help="use the built-in example")
    args = parser.parse_args(argv)
    if args.example:
        text = EXAMPLE
    elif args.input is None:
        text = get_input(INPUT_URL.format(year=2022, day=DAY))
    else:
        text = Path(args.input).read_text(encoding="utf-8")
    grid = parse_map(text)
    start = find_char(grid, "S")
    end = find_char(grid, "E")
    grid[start[1]][start[0]] = "a"
    grid[end[1]][end[0]] = "z"
    result = find_path_length(grid, start, end)
    print(grid)
    if result is None:
        raise ValueError("no path found")
    print(f"Result: {result}")
    return 0