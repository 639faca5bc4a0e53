"""Crab alignment with increasing fuel cost."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

FUEL_BOUND = 100_000_000


def _read_input(path: str) -> str:
    text = Path(path).read_text(encoding="utf-8")
    if not text:
        raise ValueError("input file is empty")
    return text[:-1]


def parse_positions(text: str) -> list[int]:
    """Parse comma separated crab positions."""
    positions = [int(part) for part in text.split(",")]
    if any(position < 0 for position in positions):
        raise ValueError("positions must not be negative")
    return positions


def crab_distance(steps: int) -> int:
    """Fuel needed to move ``steps`` positions: 1 + 2 + ... + steps."""
    return steps * (steps + 1) // 2


def min_fuel(positions: Sequence[int]) -> int:
    """Cheapest total fuel over target positions 0 .. len(positions) - 1."""
    costs = (
        sum(crab_distance(abs(target - position)) for position in positions)
        for target in range(len(positions))
    )
    return min(FUEL_BOUND, *costs) if positions else FUEL_BOUND


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Align the crabs.")
    parser.add_argument("input", nargs="?", default="input.data")
    args = parser.parse_args(argv)
    positions = parse_positions(_read_input(args.input))
    print(f"Minimum fuel: {min_fuel(positions)}")
    return 0