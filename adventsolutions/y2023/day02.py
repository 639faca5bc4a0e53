"""Cube game records: possible games and minimum cube power."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from adventsolutions.aoc_input import load_input

DAY = 2
MAX_RED = 12
MAX_GREEN = 13
MAX_BLUE = 14
ID_OFFSET = len("Game ")

EXAMPLE = """Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green"""


@dataclass(frozen=True)
class Throw:
    red: int = 0
    green: int = 0
    blue: int = 0


@dataclass(frozen=True)
class Game:
    id: int
    throws: list[Throw]


def _count(dice: str, colour: str) -> int | None:
    index = dice.find(colour)
    if index == -1:
        return None
    if index == 0:
        raise ValueError(f"no count before {colour!r}: {dice!r}")
    return int(dice[: index - 1])


def _parse_throw(text: str) -> Throw:
    counts = {"red": 0, "green": 0, "blue": 0}
    for dice in text.split(","):
        dice = dice.strip()
        for colour in counts:
            value = _count(dice, colour)
            if value is not None:
                counts[colour] = value
    return Throw(**counts)


def parse_games(text: str) -> list[Game]:
    """Parse one game per line."""
    games = []
    for line in text.splitlines():
        colon = line.find(":")
        if colon == -1:
            raise ValueError(f"missing ':' in game: {line!r}")
        game_id = int(line[ID_OFFSET:colon])
        throws = [_parse_throw(part) for part in line[colon + 1:].split(";")]
        games.append(Game(game_id, throws))
    return games


def possible_id_sum(games: Iterable[Game]) -> int:
    """Sum of ids of games possible with 12 red, 13 green and 14 blue cubes."""
    return sum(
        game.id
        for game in games
        if all(
            throw.red <= MAX_RED and throw.green <= MAX_GREEN and throw.blue <= MAX_BLUE
            for throw in game.throws
        )
    )


def power_sum(games: Iterable[Game]) -> int:
    """Sum over games of the product of the fewest cubes of each colour."""
    total = 0
    for game in games:
        red = max((throw.red for throw in game.throws), default=0)
        green = max((throw.green for throw in game.throws), default=0)
        blue = max((throw.blue for throw in game.throws), default=0)
        total += red * green * blue
    return total


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check cube games.")
    parser.add_argument("input", nargs="?", help="input file; cached download if omitted")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    parser.add_argument("--example", action="store_true", help="use the built-in example")
    args = parser.parse_args(argv)
    if args.example:
        text = EXAMPLE
    elif args.input is None:
        text = load_input(args.part, DAY)
    else:
        text = Path(args.input).read_text(encoding="utf-8")
    games = parse_games(text)
    answer = possible_id_sum(games) if args.part == 1 else power_sum(games)
    print(f"Answer: {answer}")
    return 0