"""Monkeys tossing items around by worry level."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from adventsolutions.aoc_input import INPUT_URL, get_input

DAY = 11
DEFAULT_ROUNDS = 10_000
LINES_PER_MONKEY = 7
WORD_LIMIT = 2**64 - 1

EXAMPLE = """Monkey 0:
  Starting items: 79, 98
  Operation: new = old * 19
  Test: divisible by 23
    If true: throw to monkey 2
    If false: throw to monkey 3

Monkey 1:
  Starting items: 54, 65, 75, 74
  Operation: new = old + 6
  Test: divisible by 19
    If true: throw to monkey 2
    If false: throw to monkey 0

Monkey 2:
  Starting items: 79, 60, 97
  Operation: new = old * old
  Test: divisible by 13
    If true: throw to monkey 1
    If false: throw to monkey 3

Monkey 3:
  Starting items: 74
  Operation: new = old + 3
  Test: divisible by 17
    If true: throw to monkey 0
    If false: throw to monkey 1"""


class Operator(Enum):
    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIVIDE = "/"
    SQUARE = "^2"

    @classmethod
    def from_symbol(cls, symbol: str) -> Operator:
        """Operator for ``+``, ``-``, ``*`` or ``/``."""
        if symbol not in ("+", "-", "*", "/"):
            raise ValueError(f"unknown operator: {symbol!r}")
        return cls(symbol)


Operation = tuple[Operator, "int | None"]


@dataclass
class Monkey:
    index: int
    items: list[int]
    operation: Operation
    test_number: int
    when_true: int
    when_false: int
    items_inspected: int = field(default=0)


def _parse_operation(line: str) -> Operation:
    words = line.split(" ")
    operator = Operator.from_symbol(words[6])
    operand = int(words[7]) if words[7].isdigit() else None
    if operator is Operator.TIMES and operand is None:
        return Operator.SQUARE, None
    return operator, operand


def _parse_monkey(block: Sequence[str]) -> Monkey:
    index = int(block[0].replace(":", "").split(" ")[1])
    items = [int(word) for word in block[1].replace(",", "").split(" ")[4:]]
    return Monkey(
        index=index,
        items=items,
        operation=_parse_operation(block[2]),
        test_number=int(block[3].split(" ")[5]),
        when_true=int(block[4].split(" ")[9]),
        when_false=int(block[5].split(" ")[9]),
    )


def parse_monkeys(text: str) -> list[Monkey]:
    """Parse the blocks of monkey notes, seven lines apart."""
    lines = text.splitlines()
    monkeys = []
    for start in range(0, len(lines), LINES_PER_MONKEY):
        block = lines[start:start + LINES_PER_MONKEY]
        try:
            monkeys.append(_parse_monkey(block))
        except (IndexError, ValueError) as exc:
            raise ValueError(f"malformed monkey notes at line {start + 1}") from exc
    return monkeys


def apply_operation(item: int, operation: Operation) -> int:
    """New worry level after inspection; raises when it leaves 0 .. 2**64 - 1."""
    operator, operand = operation
    if operator is Operator.SQUARE:
        result = item * item
    else:
        if operand is None:
            raise ValueError(f"operator {operator.value} needs a number")
        if operator is Operator.PLUS:
            result = item + operand
        elif operator is Operator.MINUS:
            result = item - operand
        elif operator is Operator.TIMES:
            result = item * operand
        else:
            result = item // operand
    if not 0 <= result <= WORD_LIMIT:
        raise OverflowError(f"worry level out of range: {result}")
    return result


def play_rounds(monkeys: list[Monkey], rounds: int = DEFAULT_ROUNDS) -> list[Monkey]:
    """Play ``rounds`` rounds in place and return the same list."""
    for _ in range(rounds):
        for monkey in monkeys:
            held = list(monkey.items)
            for item in held:
                worry = apply_operation(item, monkey.operation)
                monkey.items_inspected += 1
                target = monkey.when_true if worry % monkey.test_number == 0 else monkey.when_false
                monkeys[target].items.append(worry)
            monkey.items = []
    return monkeys


def monkey_business(monkeys: Iterable[Monkey]) -> int:
    """Product of the two largest inspection counts."""
    counts = sorted((monkey.items_inspected for monkey in monkeys), reverse=True)
    if len(counts) < 2:
        raise ValueError("need at least two monkeys")
    return counts[0] * counts[1]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Watch the monkeys.")
    parser.add_argument("input", nargs="?", help="input file; downloaded if omitted")
    parser.add_argument("--example", action="store_true", help="use the built-in example")
    parser.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS)
    args = parser.parse_args(argv)
    if args.example:
        text = EXAMPLE
    elif args.input is None:
        text = get_input(INPUT_URL.format(year=2022, day=DAY))
    else:
        text = Path(args.input).read_text(encoding="utf-8")
    monkeys = play_rounds(parse_monkeys(text), args.rounds)
    print(f"Answer: {monkey_business(monkeys)}")
    return 0