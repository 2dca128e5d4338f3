"""Line-oriented prompts that re-ask until the answer is well formed."""

from __future__ import annotations

import re

_INT_PATTERN = re.compile(r"\s*[+-]?\d+")


def _parse_int(line: str) -> int | None:
    if _INT_PATTERN.fullmatch(line) is None:
        return None
    return int(line)


def read_int(prompt: str) -> int:
    """Ask for an integer until one is given; raise EOFError when input ends."""
    while True:
        value = _parse_int(input(prompt))
        if value is not None:
            return value
        print("ValueError: Invalid literal for int\nLets try again...")


def read_size(prompt: str) -> int:
    """Ask for a non-negative integer until one is given; raise EOFError when input ends."""
    while True:
        value = _parse_int(input(prompt))
        if value is None:
            print("ValueError: Invalid literal for size_t\nLets try again...")
        elif value < 0:
            print("ValueError: invalid literal for size_t\nLets try again...")
        else:
            return value


def read_line(prompt: str) -> str:
    """Ask for one line of text; raise EOFError when input ends."""
    return input(prompt)