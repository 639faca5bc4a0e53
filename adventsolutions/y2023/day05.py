"""Seed almanac: pushing seed numbers through the category maps."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from adventsolutions.aoc_input import load_input

DAY = 5
VALUE_LIMIT = 2**128 - 1
CATEGORIES = (
    "seed",
    "soil",
    "fertilizer",
    "water",
    "light",
    "temperature",
    "humidity",
    "location",
)

EXAMPLE = """seeds: 79 14 55 13

seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15

fertilizer-to-water map:
49 53 8
0 11 42
42 0 7
57 7 4

water-to-light map:
88 18 7
18 25 70

light-to-temperature map:
45 77 23
81 45 19
68 64 13

temperature-to-humidity map:
0 69 1
1 0 69

humidity-to-location map:
60 56 37
56 93 4"""

_HEADER = re.compile(r"([^-\s]+)-to-(\S+) map:")


@dataclass(frozen=True)
class MapRange:
    dest_start: int
    source_start: int
    length: int

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and (
            self.source_start <= value < self.source_start + self.length
        )


@dataclass(frozen=True)
class AlmanacMap:
    source: str
    dest: str
    ranges: list[MapRange] = field(default_factory=list)

    def __str__(self) -> str:
        return f"- S: '{self.source}'; D: '{self.dest}': {self.ranges!r}"


def word_to_idx(word: str) -> int:
    """Position of a category name in the chain seed -> ... -> location."""
    try:
        return CATEGORIES.index(word)
    except ValueError:
        raise ValueError(f"unknown category: {word!r}") from None


def idx_to_word(index: int) -> str:
    """Category name at ``index`` in the chain."""
    if not 0 <= index < len(CATEGORIES):
        raise ValueError(f"no category at index {index}")
    return CATEGORIES[index]


def _parse_unsigned(word: str) -> int:
    if not (word.isascii() and word.isdigit()):
        raise ValueError(f"not an unsigned number: {word!r}")
    value = int(word)
    if value > VALUE_LIMIT:
        raise ValueError(f"number too large: {word!r}")
    return value


def _parse_map(block: str) -> AlmanacMap:
    header, *lines = block.strip().split("\n")
    match = _HEADER.fullmatch(header.strip())
    if match is None:
        raise ValueError(f"malformed map header: {header!r}")
    if not lines:
        raise ValueError(f"map without ranges: {header!r}")
    ranges = []
    for line in lines:
        words = line.split()
        if len(words) != 3:
            raise ValueError(f"malformed range: {line!r}")
        dest, source, length = (_parse_unsigned(word) for word in words)
        ranges.append(MapRange(dest, source, length))
    return AlmanacMap(match.group(1), match.group(2), ranges)


def parse_almanac(text: str) -> tuple[list[int], list[AlmanacMap]]:
    """Parse the seed list and the maps that follow it."""
    blocks = re.split(r"\n[ \t]*\n", text.strip())
    seeds_block = blocks[0]
    if not seeds_block.startswith("seeds: "):
        raise ValueError("almanac must start with 'seeds: '")
    seeds = [_parse_unsigned(word) for word in seeds_block[len("seeds: "):].split()]
    if not seeds:
        raise ValueError("no seeds listed")
    maps = [_parse_map(block) for block in blocks[1:] if block.strip()]
    if not maps:
        raise ValueError("no maps found")
    return seeds, maps


def map_seeds(
    seeds: Iterable[int], maps: Sequence[AlmanacMap]
) -> list[tuple[str, list[int]]]:
    """Carry the values through each category and record them after every step.

    Step ``i`` applies the maps whose source is the ``i``-th category. A value
    inside a range grows by ``value + dest_start - source_start``, and later
    ranges of the same step see the grown value.
    """
    values = list(seeds)
    history = [(idx_to_word(0), list(values))]
    for index in range(1, len(CATEGORIES)):
        word = idx_to_word(index)
        step_maps = [mapping for mapping in maps if mapping.source == word]
        updated = []
        for value in values:
            for mapping in step_maps:
                for rang in mapping.ranges:
                    if value in rang:
                        value += value + rang.dest_start - rang.source_start
                        if value > VALUE_LIMIT:
                            raise OverflowError(f"value out of range: {value}")
            updated.append(value)
        values = updated
        history.append((word, list(values)))
    return history


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Follow seeds through the almanac.")
    parser.add_argument("input", nargs="?", help="input file; cached download if omitted")
    parser.add_argument("--example", action="store_true", help="use the built-in example")
    args = parser.parse_args(argv)
    if args.example:
        text = EXAMPLE
    elif args.input is None:
        text = load_input(1, DAY)
    else:
        text = Path(args.input).read_text(encoding="utf-8")
    seeds, maps = parse_almanac(text)
    for mapping in maps:
        print(mapping)
    history = map_seeds(seeds, maps)
    print(f"Final values are: {history[-1][1]}")
    return 0