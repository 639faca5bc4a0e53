"""Rock, paper, scissors strategy guide."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from enum import Enum
from pathlib import Path


class Outcome(Enum):
    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"


# Opponent shape and wanted result (X lose, Y draw, Z win) -> shape to play.
_SHAPE_FOR_RESULT = {
    ("A", "X"): "C", ("A", "Y"): "A", ("A", "Z"): "B",
    ("B", "X"): "A", ("B", "Y"): "B", ("B", "Z"): "C",
    ("C", "X"): "B", ("C", "Y"): "C", ("C", "Z"): "A",
}

_BATTLE = {
    ("A", "X"): Outcome.DRAW, ("A", "Y"): Outcome.WIN, ("A", "Z"): Outcome.LOSS,
    ("B", "X"): Outcome.LOSS, ("B", "Y"): Outcome.DRAW, ("B", "Z"): Outcome.WIN,
    ("C", "X"): Outcome.WIN, ("C", "Y"): Outcome.LOSS, ("C", "Z"): Outcome.DRAW,
}

_SHAPE_POINTS = {"A": 1, "B": 2, "C": 3}
_RESULT_POINTS = {"Z": 6, "Y": 3, "X": 0}


def _round_key(round_line: str) -> tuple[str, str]:
    if len(round_line) < 3:
        raise ValueError(f"malformed round: {round_line!r}")
    return round_line[0], round_line[2]


def chosen_shape(round_line: str) -> str:
    """Shape to play so the round ends as the second column asks."""
    try:
        return _SHAPE_FOR_RESULT[_round_key(round_line)]
    except KeyError:
        raise ValueError(f"malformed round: {round_line!r}") from None


def battle(round_line: str) -> Outcome:
    """Outcome when the second column is read as our own shape."""
    try:
        return _BATTLE[_round_key(round_line)]
    except KeyError:
        raise ValueError(f"malformed round: {round_line!r}") from None


def total_score(text: str) -> int:
    """Score for following the guide: shape points plus result points."""
    selected = sum(_SHAPE_POINTS[chosen_shape(line)] for line in text.split("\n"))
    winning = sum(text.count(letter) * points for letter, points in _RESULT_POINTS.items())
    return selected + winning


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score a strategy guide.")
    parser.add_argument("input", nargs="?", default="input.data")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text(encoding="utf-8")
    if not text:
        raise ValueError("input file is empty")
    print(f"Answer: {total_score(text[:-1])}")
    return 0