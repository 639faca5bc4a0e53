"""Crate stacks rearranged by a crane that moves several crates at once."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from pathlib import Path

Move = tuple[int, int, int]

INITIAL_STACKS = (
    "STHFWR",
    "SGDQW",
    "BTW",
    "DRWTNQZJ",
    "FBHGLVTZ",
    "LPTCVBSG",
    "ZBRTWGP",
    "NGMTCJR",
    "LGBW",
)
PICTURE_LINES = 10


def parse_instruction(line: str) -> Move:
    """Parse ``"move 1 from 2 to 1"`` into ``(count, origin, destination)``."""
    words = line.split(" ")
    if len(words) < 6:
        raise ValueError(f"malformed instruction: {line!r}")
    return int(words[1]), int(words[3]), int(words[5])


def apply_moves(stacks: Sequence[Sequence[str]], instructions: Iterable[Move]) -> list[list[str]]:
    """Return new stacks (bottom first) after applying every move in order."""
    result = [list(stack) for stack in stacks]
    for count, origin, destination in instructions:
        if not (1 <= origin <= len(result) and 1 <= destination <= len(result)):
            raise ValueError(f"no such stack in move {count} {origin} {destination}")
        source = result[origin - 1]
        if count > len(source):
            raise ValueError(f"stack {origin} holds fewer than {count} crates")
        split = len(source) - count
        moved = source[split:]
        del source[split:]
        result[destination - 1].extend(moved)
    return result


def top_crates(stacks: Iterable[Sequence[str]]) -> str:
    """Concatenate the top crate of every stack."""
    tops = []
    for stack in stacks:
        if not stack:
            raise ValueError("an empty stack has no top crate")
        tops.append(stack[-1])
    return "".join(tops)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rearrange crates.")
    parser.add_argument("input", nargs="?", default="input.data")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text(encoding="utf-8")
    if not text:
        raise ValueError("input file is empty")
    lines = text[:-1].split("\n")[PICTURE_LINES:]
    stacks = apply_moves(INITIAL_STACKS, (parse_instruction(line) for line in lines))
    print(f"Answer: {top_crates(stacks)}")
    return 0