"""Small text helpers used by the scene parser."""

from __future__ import annotations

import os

_SPACES = frozenset(" \t\n\v\f\r")


def is_space(ch: str) -> bool:
    """Return True if ``ch`` is a single blank character (space or \\t..\\r)."""
    return len(ch) == 1 and ch in _SPACES


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading blanks.

    An optional sign is accepted; parsing stops at the first non-digit.
    Returns 0 when no digits are found.
    """
    pos = 0
    length = len(text)
    while pos < length and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < length and "0" <= text[pos] <= "9":
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return sign * value


def split_fields(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep`` and drop empty fields."""
    return [field for field in text.split(sep) if field]


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read a file and return its lines, each keeping its trailing newline.

    The last line has no newline if the file does not end with one.
    An empty file gives an empty list.
    """
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        data = handle.read()
    *complete, tail = data.split("\n")
    lines = [line + "\n" for line in complete]
    if tail:
        lines.append(tail)
    return lines