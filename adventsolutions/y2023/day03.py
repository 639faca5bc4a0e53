"""Engine schematic: part numbers and gear ratios."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from adventsolutions.aoc_input import load_input

DAY = 3
DIGITS = "0123456789"
EMPTY = "."
GEAR = "*"

EXAMPLE = """467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598.."""

Position = tuple[int, int]

_DELTAS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


@dataclass(frozen=True)
class NumberItem:
    value: int
    positions: tuple[Position, ...]


@dataclass(frozen=True)
class SymbolItem:
    symbol: str
    position: Position


def parse_schematic(text: str) -> list[NumberItem | SymbolItem]:
    """Numbers (with the cells of their digits) and symbols, in reading order.

    Numbers whose value is zero are left out.
    """
    items: list[NumberItem | SymbolItem] = []
    for y, line in enumerate(text.splitlines()):
        value = 0
        positions: list[Position] = []
        for x, char in enumerate(line):
            if char in DIGITS:
                value = value * 10 + int(char)
                positions.append((x, y))
                continue
            if value:
                items.append(NumberItem(value, tuple(positions)))
            value = 0
            positions = []
            if char != EMPTY:
                items.append(SymbolItem(char, (x, y)))
        if value:
            items.append(NumberItem(value, tuple(positions)))
    return items


def _width(text: str) -> int:
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty schematic")
    return len(lines[0])


def _neighbours(position: Position, width: int) -> Iterator[Position]:
    x, y = position
    for dx, dy in _DELTAS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and ny >= 0:
            yield nx, ny


def part_number_sum(text: str) -> int:
    """Sum of the numbers with a symbol next to any of their digits."""
    width = _width(text)
    items = parse_schematic(text)
    symbols = {item.position for item in items if isinstance(item, SymbolItem)}
    return sum(
        item.value
        for item in items
        if isinstance(item, NumberItem)
        and any(
            neighbour in symbols
            for position in item.positions
            for neighbour in _neighbours(position, width)
        )
    )


def gear_ratio_sum(text: str) -> int:
    """Sum of products of the two numbers next to each ``*`` with exactly two."""
    width = _width(text)
    items = parse_schematic(text)
    numbers = [item for item in items if isinstance(item, NumberItem)]
    total = 0
    for item in items:
        if not (isinstance(item, SymbolItem) and item.symbol == GEAR):
            continue
        around = set(_neighbours(item.position, width))
        adjacent = [
            number.value
            for number in numbers
            if any(position in around for position in number.positions)
        ]
        if len(adjacent) == 2:
            total += adjacent[0] * adjacent[1]
    return total


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Read the engine schematic.")
    parser.add_argument("input", nargs="?", help="input file; cached download if omitted")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    parser.add_argument("--example", action="store_true", help="use the built-in example")
    args = parser.parse_args(argv)
    if args.example:
        text = EXAMPLE
    elif args.input is None:
        text = load_input(args.part, DAY)
    else:
        text = Path(args.input).read_text(encoding="utf-8")
    answer = part_number_sum(text) if args.part == 1 else gear_ratio_sum(text)
    print(f"Sum is: {answer}")
    return 0