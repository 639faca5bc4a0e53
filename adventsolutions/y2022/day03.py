"""Rucksack badge priorities."""

from __future__ import annotations

import argparse
import string
from collections.abc import Sequence
from pathlib import Path

_SEARCH_ORDER = string.ascii_lowercase + string.ascii_uppercase


def score_item(item: str) -> int:
    """Priority of an item: a-z are 1-26, A-Z are 27-52."""
    if len(item) != 1 or item not in _SEARCH_ORDER:
        raise ValueError(f"not an item: {item!r}")
    if item.islower():
        return ord(item) - ord("a") + 1
    return 26 + ord(item) - ord("A") + 1


def common_badge(group: Sequence[str]) -> str:
    """The first item (lowercase first) carried by every elf of the group."""
    for item in _SEARCH_ORDER:
        if all(item in rucksack for rucksack in group):
            return item
    raise ValueError("group shares no item")


def badge_priority_sum(lines: Sequence[str]) -> int:
    """Sum of badge priorities over consecutive groups of three."""
    if len(lines) % 3:
        raise ValueError("the number of rucksacks must be a multiple of three")
    rucksacks = iter(lines)
    return sum(score_item(common_badge(group)) for group in zip(rucksacks, rucksacks, rucksacks))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum badge priorities.")
    parser.add_argument("input", nargs="?", default="input.data")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text(encoding="utf-8")
    if not text:
        raise ValueError("input file is empty")
    print(f"Answer: {badge_priority_sum(text[:-1].split(chr(10)))}")
    return 0