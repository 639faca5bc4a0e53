"""Start-of-message marker detection."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path


def first_marker(data: str, window_size: int = 14) -> int:
    """Characters processed when the first window of distinct characters ends."""
    if window_size < 1:
        raise ValueError("window size must be positive")
    windows = (data[start:start + window_size] for start in range(len(data) - window_size + 1))
    for start, window in enumerate(windows):
        if len(set(window)) == window_size:
            return start + window_size
    raise ValueError("no marker found")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the first marker.")
    parser.add_argument("input", nargs="?", default="input.data")
    parser.add_argument("--window", type=int, default=14)
    args = parser.parse_args(argv)
    text = Path(args.input).read_text(encoding="utf-8")
    if not text:
        raise ValueError("input file is empty")
    print(f"Answer: {first_marker(text[:-1], args.window)}")
    return 0