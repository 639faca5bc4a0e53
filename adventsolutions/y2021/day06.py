"""Lanternfish population growth."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from pathlib import Path

MAX_AGE = 8
RESET_AGE = 6


def _read_input(path: str) -> str:
    text = Path(path).read_text(encoding="utf-8")
    if not text:
        raise ValueError("input file is empty")
    return text[:-1]


def parse_fish(text: str) -> list[int]:
    """Parse a comma separated list of fish timers."""
    return [int(part) for part in text.split(",")]


def simulate_lanternfish(ages: Iterable[int], days: int = 256) -> int:
    """Return the number of fish after ``days`` days."""
    counts = [0] * (MAX_AGE + 1)
    for age in ages:
        if not 0 <= age <= MAX_AGE:
            raise ValueError(f"fish timer out of range: {age}")
        counts[age] += 1
    for _ in range(days):
        spawning = counts[0]
        counts = counts[1:] + [spawning]
        counts[RESET_AGE] += spawning
    return sum(counts)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count lanternfish.")
    parser.add_argument("input", nargs="?", default="input.data")
    parser.add_argument("--days", type=int, default=256)
    args = parser.parse_args(argv)
    ages = parse_fish(_read_input(args.input))
    print(f"Final result: {simulate_lanternfish(ages, args.days)}")
    return 0