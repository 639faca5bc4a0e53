"""Scratchcards: points and copies won."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from adventsolutions.aoc_input import load_input

DAY = 4

EXAMPLE = """Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11"""

_NUMBER = r"[+-]?\d+"
_NUMBERS = rf"{_NUMBER}(?:\s+{_NUMBER})*"
_CARD = re.compile(rf"Card\s+({_NUMBER}):\s+({_NUMBERS})\s+\|\s+({_NUMBERS})")


@dataclass(frozen=True)
class Card:
    id: int
    winning_nums: list[int]
    gotten_nums: list[int]

    def matches(self) -> int:
        """How many of the gotten numbers are winning numbers."""
        return sum(number in self.winning_nums for number in self.gotten_nums)


def parse_cards(text: str) -> list[Card]:
    """Parse cards line by line, stopping at the first line that is not a card."""
    cards = []
    for line in text.split("\n"):
        match = _CARD.fullmatch(line)
        if match is None:
            break
        card_id, winning, gotten = match.groups()
        cards.append(
            Card(int(card_id), [int(n) for n in winning.split()], [int(n) for n in gotten.split()])
        )
    if not cards:
        raise ValueError("no cards found")
    return cards


def total_points(cards: Iterable[Card]) -> int:
    """Each card with n matches is worth 2 ** (n - 1) points."""
    return sum(2 ** (matches - 1) for matches in (card.matches() for card in cards) if matches)


def total_scratchcards(cards: Sequence[Card]) -> int:
    """Total cards held once every card has won copies of the following ones."""
    if not cards:
        raise ValueError("no cards")
    copies = [1] * (cards[-1].id + 1)
    copies[0] = 0
    for card in cards:
        if not 0 <= card.id < len(copies):
            raise ValueError(f"card {card.id} is past the last card")
        won = card.matches()
        if card.id + won >= len(copies):
            raise ValueError(f"card {card.id} wins copies past the last card")
        for offset in range(1, won + 1):
            copies[card.id + offset] += copies[card.id]
    return sum(copies)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score scratchcards.")
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
    cards = parse_cards(text)
    answer = total_points(cards) if args.part == 1 else total_scratchcards(cards)
    print(f"Answer: {answer}")
    return 0