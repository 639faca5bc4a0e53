"""Boat races: ways to beat the record distance."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from math import prod
from pathlib import Path

from adventsolutions.aoc_input import load_input

DAY = 6

EXAMPLE = """Time:      7  15   30
Distance:  9  40  200"""

_SPACE = r"[ \t\r\n]+"
_NUMBERS = rf"\d+(?:{_SPACE}\d+)*"
_INPUT = re.compile(rf"Time:{_SPACE}({_NUMBERS})\nDistance:{_SPACE}({_NUMBERS})")


@dataclass(frozen=True)
class Race:
    dist: int
    time: int

    def __post_init__(self) -> None:
        if self.dist < 0 or self.time < 0:
            raise ValueError("race time and distance must not be negative")


def _parse_columns(text: str) -> tuple[list[str], list[str]]:
    match = _INPUT.match(text)
    if match is None:
        raise ValueError("expected a 'Time:' line followed by a 'Distance:' line")
    times, distances = (group.split() for group in match.groups())
    if len(distances) < len(times):
        raise ValueError("fewer distances than times")
    return times, distances


def parse_races(text: str) -> list[Race]:
    """One race per column of the time and distance lines."""
    times, distances = _parse_columns(text)
    return [Race(dist=int(dist), time=int(time)) for time, dist in zip(times, distances)]


def parse_single_race(text: str) -> Race:
    """A single race whose time and distance are the columns written together."""
    times, distances = _parse_columns(text)
    return Race(dist=int("".join(distances)), time=int("".join(times)))


def ways_to_win(race: Race) -> int:
    """Number of whole hold times in 0 .. time - 1 that go beyond the record."""
    time, dist = race.time, race.dist
    half = time // 2
    if half * (time - half) <= dist:
        return 0
    low, high = 0, half
    while low < high:
        middle = (low + high) // 2
        if middle * (time - middle) > dist:
            high = middle
        else:
            low = middle + 1
    return time - 2 * low + 1


def product_of_ways(races: Iterable[Race]) -> int:
    """Product of :func:`ways_to_win` over all races."""
    return prod(ways_to_win(race) for race in races)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count ways to win the boat races.")
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
    if args.part == 1:
        answer = product_of_ways(parse_races(text))
    else:
        answer = ways_to_win(parse_single_race(text))
    print(f"Answer is: {answer}")
    return 0