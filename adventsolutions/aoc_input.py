"""Fetch puzzle input over HTTP and cache it on disk."""

from __future__ import annotations

import os
import urllib.request
from pathlib import Path

INPUT_URL = "https://adventofcode.com/{year}/day/{day}/input"
SESSION_ENV_VAR = "AOC_SESSION"
SESSION_FILE = ".env"


def _resolve_session(session: str | None) -> str:
    if session is None:
        session = os.environ.get(SESSION_ENV_VAR)
    if session is None:
        env_file = Path(SESSION_FILE)
        if env_file.is_file():
            session = env_file.read_text(encoding="utf-8")
    if session is None or not session.strip():
        raise ValueError(
            f"no session cookie: pass one, set {SESSION_ENV_VAR} or create {SESSION_FILE}"
        )
    session = session.strip()
    if "=" not in session:
        session = f"session={session}"
    return session


def get_input(url: str, session: str | None = None) -> str:
    """Download the text at ``url``, sending the session cookie."""
    request = urllib.request.Request(url)
    request.add_header("Cookie", _resolve_session(session))
    with urllib.request.urlopen(request) as response:
        body = response.read()
    return body.decode("utf-8")


def load_input(
    part_num: int,
    day: int,
    session: str | None = None,
    cache_dir: str | os.PathLike[str] = ".",
) -> str:
    """Return the cached input for a part, downloading and caching it if missing."""
    path = Path(cache_dir) / f"input{part_num}.txt"
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        print("Input not downloaded, getting...")
        text = get_input(INPUT_URL.format(year=2023, day=day), session)
        path.write_text(text, encoding="utf-8")
        return text
    print("Using cached input...")
    return text