[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventsolutions"
version = "0.1.0"
description = "Solvers for a selection of Advent of Code puzzles from 2021, 2022 and 2023"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "solutions", "aoc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc-2021-day06 = "adventsolutions.y2021.day06:main"
aoc-2021-day07 = "adventsolutions.y2021.day07:main"
aoc-2022-day01 = "adventsolutions.y2022.day01:main"
aoc-2022-day02 = "adventsolutions.y2022.day02:main"
aoc-2022-day03 = "adventsolutions.y2022.day03:main"
aoc-2022-day04 = "adventsolutions.y2022.day04:main"
aoc-2022-day05 = "adventsolutions.y2022.day05:main"
aoc-2022-day06 = "adventsolutions.y2022.day06:main"
aoc-2022-day08 = "adventsolutions.y2022.day08:main"
aoc-2022-day09 = "adventsolutions.y2022.day09:main"
aoc-2022-day10 = "adventsolutions.y2022.day10:main"
aoc-2022-day11 = "adventsolutions.y2022.day11:main"
aoc-2022-day12 = "adventsolutions.y2022.day12:main"
aoc-2023-day01 = "adventsolutions.y2023.day01:main"
aoc-2023-day02 = "adventsolutions.y2023.day02:main"
aoc-2023-day03 = "adventsolutions.y2023.day03:main"
aoc-2023-day04 = "adventsolutions.y2023.day04:main"
aoc-2023-day05 = "adventsolutions.y2023.day05:main"
aoc-2023-day06 = "adventsolutions.y2023.day06:main"
aoc-2023-day07 = "adventsolutions.y2023.day07:main"
aoc-2023-day08 = "adventsolutions.y2023.day08:main"
aoc-2023-day09 = "adventsolutions.y2023.day09:main"
aoc-2023-day10 = "adventsolutions.y2023.day10:main"

[tool.hatch.build.targets.wheel]
packages = ["adventsolutions"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
