"""Calorie counting per elf."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from adventsolutions.aoc_input import INPUT_URL, get_input


def elf_totals(text: str) -> list[int]:
    """Sum each blank-line separated block of numbers."""
    totals = []
    current = 0
    for line in text.split("\n"):
        if line:
            current += int(line)
        else:
            totals.append(current)
            current = 0
    totals.append(current)
    return totals


def max_calories(totals: Sequence[int]) -> int:
    """The largest single total."""
    return max(totals)


def top_three(totals: Sequence[int]) -> int:
    """Sum of the three largest totals."""
    if len(totals) < 3:
        raise ValueError("need at least three elves")
    return sum(sorted(totals, reverse=True)[:3])


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count elf calories.")
    parser.add_argument("input", nargs="?", help="input file; downloaded if omitted")
    args = parser.parse_args(argv)
    if args.input is None:
        text = get_input(INPUT_URL.format(year=2022, day=1))
    else:
        text = Path(args.input).read_text(encoding="utf-8")
    totals = elf_totals(text)
    print(f"Part 1: {max_calories(totals)}")
    print(f"Part 2: {top_three(totals)}")
    return 0