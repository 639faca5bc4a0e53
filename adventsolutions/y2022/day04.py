"""Overlapping section assignments."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from pathlib import Path

Assignment = tuple[int, int]


def _parse_range(text: str) -> Assignment:
    start, end = text.split("-")
    return int(start), int(end)


def parse_pair(line: str) -> tuple[Assignment, Assignment]:
    """Parse ``"2-4,6-8"`` into ``((2, 4), (6, 8))``."""
    first, second = line.split(",")
    return _parse_range(first), _parse_range(second)


def overlaps(first: Assignment, second: Assignment) -> bool:
    """Whether the two inclusive ranges share at least one section."""
    a, b = first
    c, d = second
    return a <= b and c <= d and a <= d and c <= b


def count_overlaps(lines: Iterable[str]) -> int:
    """Number of pairs whose assignments overlap."""
    return sum(overlaps(*parse_pair(line)) for line in lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count overlapping assignments.")
    parser.add_argument("input", nargs="?", default="input.data")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text(encoding="utf-8")
    if not text:
        raise ValueError("input file is empty")
    print(f"Answer: {count_overlaps(text[:-1].split(chr(10)))}")
    return 0