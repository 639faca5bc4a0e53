"""Haunted wasteland: following left/right instructions through a network."""

from __future__ import annotations

import argparse
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from functools import reduce
from itertools import cycle
from pathlib import Path

from adventsolutions.aoc_input import load_input

DAY = 8
START = "AAA"
GOAL = "ZZZ"

EXAMPLE = """RL

AAA = (BBB, CCC)
BBB = (DDD, EEE)
CCC = (ZZZ, GGG)
DDD = (DDD, DDD)
EEE = (EEE, EEE)
GGG = (GGG, GGG)
ZZZ = (ZZZ, ZZZ)"""

GHOST_EXAMPLE = """LR

11A = (11B, XXX)
11B = (XXX, 11Z)
11Z = (11B, XXX)
22A = (22B, XXX)
22B = (22C, 22C)
22C = (22Z, 22Z)
22Z = (22B, 22B)
XXX = (XXX, XXX)"""

_STEPS = re.compile(r"[A-Za-z]+")
_LABEL = r"[A-Za-z0-9]+"
_RULE = re.compile(rf"({_LABEL}) = \(({_LABEL}), ({_LABEL})\)")


class Direction(Enum):
    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class Network:
    steps: tuple[Direction, ...]
    nodes: dict[str, tuple[str, str]] = field(default_factory=dict)

    def follow(self, node: str, direction: Direction) -> str:
        """The node reached from ``node`` by going ``direction``."""
        try:
            left, right = self.nodes[node]
        except KeyError:
            raise KeyError(f"node {node!r} is not in the network") from None
        return left if direction is Direction.LEFT else right


def parse_network(text: str) -> Network:
    """Parse the instruction line and the node lines that follow it."""
    match = _STEPS.match(text)
    if match is None:
        raise ValueError("input must start with the left/right instructions")
    steps = tuple(
        Direction.LEFT if char == "L" else Direction.RIGHT for char in match.group()
    )
    rest = text[match.end():]
    body = rest.lstrip(" \t\r\n")
    if len(body) == len(rest):
        raise ValueError("expected whitespace after the instructions")
    nodes: dict[str, tuple[str, str]] = {}
    for line in body.split("\n"):
        rule = _RULE.match(line)
        if rule is None:
            break
        source, left, right = rule.groups()
        nodes.setdefault(source, (left, right))
        if rule.end() != len(line):
            break
    if not nodes:
        raise ValueError("no nodes found")
    return Network(steps, nodes)


def _walk(network: Network, start: str, arrived: Callable[[str], bool]) -> int:
    if not network.steps:
        raise ValueError("no instructions to follow")
    seen: set[tuple[str, int]] = set()
    node = start
    for count, (index, direction) in enumerate(cycle(enumerate(network.steps))):
        if arrived(node):
            return count
        state = (node, index)
        if state in seen:
            raise ValueError(f"the walk from {start!r} never arrives")
        seen.add(state)
        node = network.follow(node, direction)
    raise AssertionError("unreachable")


def steps_to_zzz(network: Network) -> int:
    """Steps needed to go from AAA to ZZZ."""
    return _walk(network, START, lambda node: node == GOAL)


def mcd(a: int, b: int) -> int:
    """Greatest common divisor."""
    if a == b:
        return a
    if b > a:
        a, b = b, a
    while b > 0:
        a, b = b, a % b
    return a


def mcm(a: int, b: int) -> int:
    """Least common multiple."""
    return a * b // mcd(a, b)


def ghost_steps(network: Network) -> int:
    """Steps until every node ending in A is at a node ending in Z at once."""
    starts = [node for node in network.nodes if node.endswith("A")]
    lengths = (_walk(network, start, lambda node: node.endswith("Z")) for start in starts)
    return reduce(mcm, lengths, 1)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Walk the desert network.")
    parser.add_argument("input", nargs="?", help="input file; cached download if omitted")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    parser.add_argument("--example", action="store_true", help="use the built-in example")
    args = parser.parse_args(argv)
    if args.example:
        text = EXAMPLE if args.part == 1 else GHOST_EXAMPLE
    elif args.input is None:
        text = load_input(1, DAY)
    else:
        text = Path(args.input).read_text(encoding="utf-8")
    network = parse_network(text)
    answer = steps_to_zzz(network) if args.part == 1 else ghost_steps(network)
    print(f"Answer is: {answer}")
    return 0