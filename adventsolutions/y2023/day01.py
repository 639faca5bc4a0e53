"""Trebuchet calibration values hidden in lines of text."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from adventsolutions.aoc_input import load_input

DAY = 1
DIGITS = "0123456789"

SPELLED = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}
_SPELLED_BACKWARDS = {word[::-1]: value for word, value in SPELLED.items()}


def first_last_digits(line: str) -> int:
    """The two-digit number made of the first and the last digit of ``line``."""
    digits = [char for char in line if char in DIGITS]
    if not digits:
        raise ValueError(f"no digit in line: {line!r}")
    return int(digits[0] + digits[-1])


def calibration_sum(text: str) -> int:
    """Sum of :func:`first_last_digits` over every line."""
    return sum(first_last_digits(line) for line in text.splitlines())


def first_number(line: str, reversed: bool = False) -> int:
    """First digit or spelled-out number in ``line``; from the end if ``reversed``."""
    text = line[::-1] if reversed else line
    words = _SPELLED_BACKWARDS if reversed else SPELLED
    best: tuple[int, int] | None = None
    for index, char in enumerate(text):
        if char in DIGITS:
            best = (index, int(char))
            break
    for word, value in words.items():
        index = text.find(word)
        if index != -1 and (best is None or index < best[0]):
            best = (index, value)
    if best is None:
        raise ValueError(f"no number in line: {line!r}")
    return best[1]


def spelled_calibration_sum(text: str) -> int:
    """Calibration sum where spelled-out numbers count as digits too."""
    return sum(
        10 * first_number(line) + first_number(line, True) for line in text.splitlines()
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum calibration values.")
    parser.add_argument("input", nargs="?", help="input file; cached download if omitted")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    if args.input is None:
        text = load_input(args.part, DAY)
    else:
        text = Path(args.input).read_text(encoding="utf-8")
    solve = calibration_sum if args.part == 1 else spelled_calibration_sum
    print(f"Answer: {solve(text)}")
    return 0