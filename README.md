# adventsolutions

Solvers for a selection of Advent of Code puzzles, grouped by year:

- `adventsolutions.y2021` — days 6 and 7
- `adventsolutions.y2022` — days 1 to 6 and 8 to 12
- `adventsolutions.y2023` — days 1 to 10

Each day lives in its own module (for example `adventsolutions.y2023.day07`).
It has small functions for parsing the puzzle input and computing the
answers, and a `main` function that the matching command runs.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install .[test]
pytest
```

## Commands

Every solved day has a command named `aoc-<year>-day<NN>`:

```
aoc-2021-day06 input.data --days 80
aoc-2022-day10 --example
aoc-2023-day07 my_input.txt --part 2
```

Where the input comes from depends on the day:

- 2021 days 6 and 7 and 2022 days 2 to 6 and 8 to 10 read a file named by
  the first argument, `input.data` by default. The last character of the
  file (its final newline) is dropped before parsing.
- 2022 days 1, 11 and 12 read the named file, or download the day's input
  with `get_input` when no file is given.
- The 2023 days read the named file, or use `load_input` (see below) when no
  file is given.

Options found on some commands:

- `--part {1,2}` picks the part of the puzzle (2023 days 1 to 4 and 6 to 9).
- `--example` uses the example input built into the module (2022 days 8 to
  12, 2023 days 2 to 10 except day 1).
- `--days` (2021 day 6, default 256), `--window` (2022 day 6, default 14)
  and `--rounds` (2022 day 11, default 10000).

## Fetching puzzle input

`adventsolutions.aoc_input` downloads puzzle input with a session cookie and
caches it on disk:

```python
from adventsolutions.aoc_input import load_input

text = load_input(1, 7, session="placeholder", cache_dir=".")
```

`load_input(part_num, day, session=None, cache_dir=".")` reads
`input<part_num>.txt` from the cache directory when it is there. Otherwise it
downloads the 2023 input for `day` with `get_input` and writes it to that
file.

`get_input(url, session=None)` fetches a URL and sends the session as a
`Cookie` header. When `session` is `None`, the value comes from the
`AOC_SESSION` environment variable, or else from a `.env` file in the current
directory. A bare value is sent as `session=<value>`. `ValueError` is raised
when none of these supplies a cookie.

## Using the solvers as a library

```python
from adventsolutions.y2023.day07 import parse_plays, total_winnings

sample = """32T3K 765
T55J5 684
KK677 28
KTJJT 220
QQQJA 483"""

plays = parse_plays(sample)
print(total_winnings(plays, jokers=False))  # part 1
print(total_winnings(plays, jokers=True))   # part 2, with J as a joker
```

Other days follow the same pattern. Some examples:

- `adventsolutions.y2023.day09.next_value` and `previous_value` extrapolate a
  sequence.
- `adventsolutions.y2022.day06.first_marker` finds the first run of distinct
  characters in a signal.
- `adventsolutions.y2023.day08.ghost_steps` combines walk lengths with `mcm`.

Malformed input raises `ValueError`, or `IndexError` / `KeyError` where a
position or node is missing.

## What it does not do

- There are no solvers for 2021 days 8 and 9, 2022 days 7 and 13, the second
  part of 2023 day 5, or the second part of 2023 day 10.
- Several solvers compute their own variant of the puzzle rather than the
  official answer:
  - `y2022.day08.count_visible` skips border trees and only looks from the
    top and the left.
  - `y2022.day09.simulate_rope` has every knot follow the head directly.
  - `y2022.day12.find_path_length` follows the first climbable neighbour
    greedily.
  - `y2023.day05.map_seeds` grows each mapped value by
    `value + dest_start - source_start`.
  - `y2023.day10.find_longest_path` returns the sum of all marked distances.
- 2022 day 5 starts from a fixed set of crate stacks (`INITIAL_STACKS`) and
  skips the first ten input lines instead of reading the stack picture.