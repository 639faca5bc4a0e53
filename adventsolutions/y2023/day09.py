"""Mirage maintenance: extrapolating histories by repeated differences."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from adventsolutions.aoc_input import load_input

DAY = 9

EXAMPLE = """0 3 6 9 12 15
1 3 6 10 15 21
10 13 16 21 30 45"""


def parse_histories(text: str) -> list[list[int]]:
    """One list of numbers per line, separated by single spaces."""
    return [[int(word) for word in line.split(" ")] for line in text.splitlines()]


def _difference_levels(sequence: Sequence[int]) -> list[list[int]]:
    levels = [list(sequence)]
    while any(levels[-1]):
        last = levels[-1]
        levels.append([b - a for a, b in zip(last, last[1:])])
    return levels


def next_value(sequence: Sequence[int]) -> int:
    """The value that continues the sequence."""
    return sum(level[-1] for level in _difference_levels(sequence)[:-1])


def previous_value(sequence: Sequence[int]) -> int:
    """The value that comes before the sequence."""
    result = 0
    for level in reversed(_difference_levels(sequence)[:-1]):
        result = level[0] - result
    return result


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Extrapolate sensor histories.")
    parser.add_argument("input", nargs="?", help="input file; cached download if omitted")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    parser.add_argument("--example", action="store_true", help="use the built-in example")
    args = parser.parse_args(argv)
    if args.example:
        text = EXAMPLE
    elif args.input is None:
        text = load_input(1, DAY)
    else:
        text = Path(args.input).read_text(encoding="utf-8")
    extrapolate = next_value if args.part == 1 else previous_value
    answer = sum(extrapolate(history) for history in parse_histories(text))
    print(f"The answer is: {answer}")
    return 0