"""Rope bridge simulation in which every knot chases the head."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

EXAMPLE = "R 5\nU 8\nL 8\nD 3\nR 17\nD 10\nL 25\nU 20\n"
KNOTS = 10
GRID_WIDTH = 27
GRID_HEIGHT = 22
EMPTY_CELL = "· "
KNOT_CELL = "B "
SEPARATOR = "-------------"

_DELTAS = {"U": (0, 1), "D": (0, -1), "L": (-1, 0), "R": (1, 0)}


@dataclass(frozen=True)
class Position:
    x: int
    y: int


DEFAULT_START = Position(11, 5)


def parse_moves(text: str) -> list[tuple[str, int]]:
    """Parse lines like ``"R 4"`` into ``(direction, count)`` pairs."""
    moves = []
    for line in text.splitlines():
        parts = line.split(" ")
        if len(parts) < 2 or parts[0][:1] not in _DELTAS:
            raise ValueError(f"malformed move: {line!r}")
        moves.append((parts[0][0], int(parts[1])))
    return moves


def move_head(position: Position, direction: str) -> Position:
    """Move one step: U raises y, D lowers it, L lowers x, R raises it."""
    try:
        dx, dy = _DELTAS[direction]
    except KeyError:
        raise ValueError(f"unknown direction: {direction!r}") from None
    return Position(position.x + dx, position.y + dy)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def move_tail(head: Position, tail: Position) -> Position:
    """Step the tail once toward the head, diagonally when off-axis."""
    if head == tail:
        return tail
    return Position(tail.x + _sign(head.x - tail.x), tail.y + _sign(head.y - tail.y))


def simulate_rope(
    moves: Iterable[tuple[str, int]], start: Position = DEFAULT_START
) -> tuple[list[Position], list[Position]]:
    """Run the moves; return the final rope and the last knot's visited cells.

    The knots all follow the head directly, and on the last step of each move
    they stay where they are.
    """
    rope = [start] * KNOTS
    visited: list[Position] = []
    seen: set[Position] = set()
    for direction, count in moves:
        for step in range(count):
            rope[0] = move_head(rope[0], direction)
            if step != count - 1:
                head = rope[0]
                rope[1:] = [move_tail(head, knot) for knot in rope[1:]]
            if rope[-1] not in seen:
                seen.add(rope[-1])
                visited.append(rope[-1])
    return rope, visited


def render_grid(rope: Iterable[Position]) -> str:
    """Draw the knots on the fixed-size debugging grid."""
    grid = [[EMPTY_CELL] * GRID_HEIGHT for _ in range(GRID_WIDTH)]
    for knot in rope:
        if not (0 <= knot.x < GRID_WIDTH and 0 <= knot.y < GRID_HEIGHT):
            raise ValueError(f"knot outside the grid: ({knot.x}, {knot.y})")
        grid[knot.x][knot.y] = KNOT_CELL
    lines = [
        "".join(grid[x][y] for x in range(GRID_WIDTH - 1)) for y in range(GRID_HEIGHT - 1)
    ]
    lines.append(SEPARATOR)
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate the rope.")
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
    rope, visited = simulate_rope(parse_moves(text))
    print(render_grid(rope))
    print(f"Part 1 answer: {len(visited)}")
    return 0