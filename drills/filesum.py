"""Summing integers stored one per line in a text file."""

import os
import re

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int64(token: str) -> int | None:
    if not _INTEGER.fullmatch(token):
        return None
    value = int(token)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def sum_file_numbers(path: str | os.PathLike[str]) -> int:
    """Return the sum of the integers in the file at ``path``, one per line.

    Blank lines are skipped. A line that is not a 64-bit signed integer
    raises ``ValueError`` naming its 1-based line number. Errors opening or
    reading the file propagate as ``OSError``; invalid UTF-8 raises
    ``UnicodeDecodeError``.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        contents = handle.read()

    total = 0
    for number, line in enumerate(contents.split("\n"), start=1):
        trimmed = line.strip()
        if not trimmed:
            continue
        value = _parse_int64(trimmed)
        if value is None:
            raise ValueError(f"invalid number on line {number}: {trimmed}")
        total += value
    return total