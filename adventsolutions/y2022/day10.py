"""Cathode-ray tube: signal strengths and the drawn screen."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

SCREEN_WIDTH = 40
SCREEN_HEIGHT = 6
SAMPLE_OFFSET = 20
LIT = "#"
DARK = "."

EXAMPLE = """addx 15
addx -11
addx 6
addx -3
addx 5
addx -1
addx -8
addx 13
addx 4
noop
addx -1
addx 5
addx -1
addx 5
addx -1
addx 5
addx -1
addx 5
addx -1
addx -35
addx 1
addx 24
addx -19
addx 1
addx 16
addx -11
noop
noop
addx 21
addx -15
noop
noop
addx -3
addx 9
addx 1
addx -3
addx 8
addx 1
addx 5
noop
noop
noop
noop
noop
addx -36
noop
addx 1
addx 7
noop
noop
noop
addx 2
addx 6
noop
noop
noop
noop
noop
addx 1
noop
noop
addx 7
addx 1
noop
addx -13
addx 13
addx 7
noop
addx 1
addx -33
noop
noop
noop
addx 2
noop
noop
noop
addx 8
noop
addx -1
addx 2
addx 1
noop
addx 17
addx -9
addx 1
addx 1
addx -3
addx 11
noop
noop
addx 1
noop
addx 1
noop
noop
addx -13
addx -19
addx 1
addx 3
addx 26
addx -30
addx 12
addx -1
addx 3
addx 1
noop
noop
noop
addx -9
addx 18
addx 1
addx 2
noop
noop
addx 9
noop
noop
noop
addx -1
addx 2
addx -37
addx 1
addx 3
noop
addx 15
addx -21
addx 22
addx -6
addx 1
noop
addx 2
addx 1
noop
addx -10
noop
noop
addx 20
addx 1
addx 2
addx 2
addx -6
addx -11
noop
noop
noop"""


def _register_per_cycle(instructions: Iterable[str]) -> Iterator[int]:
    register = 1
    for instruction in instructions:
        words = instruction.split(" ")
        if words[0] == "noop":
            yield register
        elif words[0] == "addx" and len(words) > 1:
            delta = int(words[1])
            yield register
            yield register
            register += delta
        else:
            raise ValueError(f"unknown instruction: {instruction!r}")


def execute(instructions: Iterable[str]) -> tuple[int, str]:
    """Run the program; return the summed signal strength and the screen.

    Signal strength is sampled on every cycle whose number is 20 modulo 40.
    The screen holds one pixel per cycle with a newline after each row.
    """
    signal = 0
    pixels = []
    for cycle, register in enumerate(_register_per_cycle(instructions)):
        column = cycle % SCREEN_WIDTH
        pixels.append(LIT if abs(register - column) <= 1 else DARK)
        number = cycle + 1
        if number % SCREEN_WIDTH == 0:
            pixels.append("\n")
        if number % SCREEN_WIDTH == SAMPLE_OFFSET:
            signal += number * register
    return signal, "".join(pixels)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the CRT program.")
    parser.add_argument("input", nargs="?", default="input.data")
    parser.add_argument("--example", action="store_true", help="use the built-in example")
    args = parser.parse_args(argv)
    if args.example:
        text = EXAMPLE
    else:
        text = Path(args.input).read_text(encoding="utf-8")
        if not text:
            raise ValueError("input file is empty")
        text = text[:-1]
    signal, screen = execute(text.splitlines())
    print("Part 2:")
    print(screen, end="")
    print()
    print(f"Part 1: {signal}")
    return 0