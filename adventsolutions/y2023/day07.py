"""Camel Cards: ranking hands, with or without jokers."""

from __future__ import annotations

import argparse
import re
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from enum import IntEnum
from functools import cmp_to_key
from pathlib import Path

from adventsolutions.aoc_input import load_input

DAY = 7
CARD_ORDER = "AKQJT98765432"
JOKER_CARD_ORDER = "AKQT98765432J"
JOKER = "J"

EXAMPLE = """32T3K 765
T55J5 684
KK677 28
KTJJT 220
QQQJA 483"""

_PLAY = re.compile(r"([A-Z0-9]+)\s+(\d+)")


class HandValue(IntEnum):
    FIVE_OF_A_KIND = 7
    FOUR_OF_A_KIND = 6
    FULL_HOUSE = 5
    THREE_OF_A_KIND = 4
    TWO_PAIR = 3
    ONE_PAIR = 2
    HIGH_CARD = 1


@dataclass
class Play:
    hand: str
    bid: int
    rank: int | None = None

    def __str__(self) -> str:
        return f"H: {self.hand}  B: {self.bid}  (R: {self.rank})"


def card_worth(label: str, jokers: bool = False) -> int:
    """Strength of a card; the joker is the weakest card when ``jokers``."""
    order = JOKER_CARD_ORDER if jokers else CARD_ORDER
    if len(label) != 1 or label not in order:
        raise ValueError(f"unknown card: {label!r}")
    return len(order) - order.index(label)


def _plain_value(hand: str) -> HandValue:
    if not hand:
        raise ValueError("empty hand")
    counts = sorted(Counter(hand).values(), reverse=True)
    top = counts[0]
    if top >= 5:
        return HandValue.FIVE_OF_A_KIND
    if top == 4:
        return HandValue.FOUR_OF_A_KIND
    if top == 3:
        return HandValue.FULL_HOUSE if 2 in counts else HandValue.THREE_OF_A_KIND
    if top == 2:
        return HandValue.ONE_PAIR if counts.count(2) == 1 else HandValue.TWO_PAIR
    return HandValue.HIGH_CARD


def evaluate_hand(hand: str, jokers: bool = False) -> HandValue:
    """Type of a hand; with ``jokers`` each J becomes whatever card is best."""
    if not jokers:
        return _plain_value(hand)
    return max(_plain_value(hand.replace(JOKER, card)) for card in JOKER_CARD_ORDER)


def compare_hands(first: str, second: str, jokers: bool = False) -> int:
    """-1, 0 or 1: by hand type, then card by card from the left."""
    a, b = evaluate_hand(first, jokers), evaluate_hand(second, jokers)
    if a != b:
        return -1 if a < b else 1
    for c, d in zip(first, second):
        wc, wd = card_worth(c, jokers), card_worth(d, jokers)
        if wc != wd:
            return -1 if wc < wd else 1
    return 0


def parse_plays(text: str) -> list[Play]:
    """Parse ``hand bid`` lines, stopping at the first line that is not a play."""
    plays = []
    for line in text.split("\n"):
        match = _PLAY.fullmatch(line)
        if match is None:
            break
        plays.append(Play(match.group(1), int(match.group(2))))
    if not plays:
        raise ValueError("no plays found")
    return plays


def rank_plays(plays: Iterable[Play], jokers: bool = False) -> list[Play]:
    """Plays from weakest to strongest, each given its rank starting at 1."""
    key = cmp_to_key(lambda p, q: compare_hands(p.hand, q.hand, jokers))
    ordered = sorted(plays, key=key)
    return [replace(play, rank=rank) for rank, play in enumerate(ordered, start=1)]


def total_winnings(plays: Iterable[Play], jokers: bool = False) -> int:
    """Sum of bid times rank over all plays."""
    return sum(play.bid * play.rank for play in rank_plays(plays, jokers))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rank Camel Cards hands.")
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
    jokers = args.part == 2
    ranked = rank_plays(parse_plays(text), jokers)
    for play in ranked:
        print(play)
    print(f"Answer is: {sum(play.bid * play.rank for play in ranked)}")
    return 0