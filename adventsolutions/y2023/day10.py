"""Pipe maze: marking distances along the loop from the start tile."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from adventsolutions.aoc_input import load_input

DAY = 10
UNMARKED = "·"

EXAMPLE = """.....
.S-7.
.|.|.
.L-J.
....."""

Position = tuple[int, int]


class Pipe(Enum):
    """Tile kinds: the six pipes, ground and the starting tile."""

    NS = "|"
    EW = "-"
    NE = "L"
    NW = "J"
    SW = "7"
    SE = "F"
    GROUND = "."
    START = "S"


class Direction(Enum):
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)


_CAN_LEAVE = {
    Direction.LEFT: {Pipe.START, Pipe.NW, Pipe.SW, Pipe.EW},
    Direction.RIGHT: {Pipe.START, Pipe.NE, Pipe.SE, Pipe.EW},
    Direction.UP: {Pipe.START, Pipe.NE, Pipe.NW, Pipe.NS},
    Direction.DOWN: {Pipe.START, Pipe.SE, Pipe.SW, Pipe.NS},
}
_CAN_ENTER = {
    Direction.LEFT: {Pipe.NE, Pipe.SE, Pipe.EW},
    Direction.RIGHT: {Pipe.NW, Pipe.SW, Pipe.EW},
    Direction.UP: {Pipe.SE, Pipe.SW, Pipe.NS},
    Direction.DOWN: {Pipe.NE, Pipe.NW, Pipe.NS},
}


def parse_tile(char: str) -> Pipe:
    """Tile kind for a map character."""
    try:
        return Pipe(char)
    except ValueError:
        raise ValueError(f"unrecognized symbol: {char!r}") from None


def pipe_dir_is_valid(direction: Direction, current: Pipe, following: Pipe) -> bool:
    """Whether one can leave ``current`` towards ``direction`` and enter ``following``."""
    return current in _CAN_LEAVE[direction] and following in _CAN_ENTER[direction]


def pos_plus_dir(position: Position, direction: Direction, width: int) -> Position | None:
    """Neighbour in ``direction``, or None past the edge.

    Both the right and the bottom edge are taken to lie at ``width - 1``.
    """
    x, y = position
    if direction is Direction.LEFT:
        return None if x == 0 else (x - 1, y)
    if direction is Direction.RIGHT:
        return None if x == width - 1 else (x + 1, y)
    if direction is Direction.UP:
        return None if y == 0 else (x, y - 1)
    return None if y == width - 1 else (x, y + 1)


@dataclass
class _MarkedTile:
    tile: Pipe
    distance: int | None = None
    seen: bool = False


@dataclass
class MarkedGrid:
    tiles: list[_MarkedTile]
    width: int = field(default=0)

    @classmethod
    def from_text(cls, text: str) -> MarkedGrid:
        """Grid of the characters in ``text``, one row per line."""
        lines = text.splitlines()
        if not lines or not lines[0]:
            raise ValueError("empty grid")
        tiles = [_MarkedTile(parse_tile(char)) for char in text if char != "\n"]
        return cls(tiles, len(lines[0]))

    def _index(self, position: Position) -> int:
        x, y = position
        index = x + y * self.width
        if x < 0 or y < 0 or index >= len(self.tiles):
            raise IndexError(f"position {position} is outside the grid")
        return index

    def __getitem__(self, position: Position) -> _MarkedTile:
        return self.tiles[self._index(position)]

    def start(self) -> Position:
        """Position ``(x, y)`` of the starting tile."""
        for index, marked in enumerate(self.tiles):
            if marked.tile is Pipe.START:
                return index % self.width, index // self.width
        raise ValueError("no starting tile")

    def mark(self, position: Position, value: int) -> None:
        """Record a distance at ``position``."""
        self[position].distance = value

    def render(self) -> str:
        """Rows of first distance digits, with a dot for unmarked tiles."""
        out = []
        for index, marked in enumerate(self.tiles):
            if index % self.width == 0:
                out.append("\n")
            out.append(UNMARKED if marked.distance is None else str(marked.distance)[0])
        return "".join(out)

    def __str__(self) -> str:
        return self.render()


def _reachable(grid: MarkedGrid, position: Position) -> Iterator[Position]:
    for direction in Direction:
        neighbour = pos_plus_dir(position, direction, grid.width)
        if neighbour is None:
            continue
        if not grid[neighbour].seen and pipe_dir_is_valid(
            direction, grid[position].tile, grid[neighbour].tile
        ):
            yield neighbour


def _enter(grid: MarkedGrid, position: Position) -> Iterator[Position]:
    marked = grid[position]
    if marked.distance is None:
        raise ValueError(f"no distance marked at {position}")
    marked.seen = True
    for neighbour in list(_reachable(grid, position)):
        grid.mark(neighbour, marked.distance + 1)
    # Neighbours are checked again lazily, after earlier branches have run.
    return _reachable(grid, position)


def find_longest_path(grid: MarkedGrid, position: Position) -> int:
    """Walk depth-first from ``position``, marking distances; return their sum."""
    stack = [_enter(grid, position)]
    while stack:
        following = next(stack[-1], None)
        if following is None:
            stack.pop()
        else:
            stack.append(_enter(grid, following))
    return sum(marked.distance for marked in grid.tiles if marked.distance is not None)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Follow the pipe loop.")
    parser.add_argument("input", nargs="?", help="input file; cached download if omitted")
    parser.add_argument("--example", action="store_true", help="use the built-in example")
    args = parser.parse_args(argv)
    if args.example:
        text = EXAMPLE
    elif args.input is None:
        text = load_input(1, DAY)
    else:
        text = Path(args.input).read_text(encoding="utf-8")
    grid = MarkedGrid.from_text(text)
    start = grid.start()
    print(f"S is at ({start[0]}, {start[1]})")
    grid.mark(start, 0)
    grid[start].seen = True
    answer = find_longest_path(grid, start)
    print(f"Final grid: {grid.render()}")
    print(f"Answer is: {answer}")
    return 0