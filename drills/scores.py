"""Parsing of comma-separated score lines."""

import re

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


class ParseScoreError(ValueError):
    """Raised when a score line cannot be parsed."""


class EmptyScoreLineError(ParseScoreError):
    """Raised when the line holds nothing but whitespace."""

    def __init__(self) -> None:
        super().__init__("score line is empty")


class InvalidScoreTokenError(ParseScoreError):
    """Raised when a token is not a 32-bit signed integer."""

    def __init__(self, token: str) -> None:
        super().__init__(f"invalid score: {token!r}")
        self.token = token

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidScoreTokenError):
            return NotImplemented
        return self.token == other.token

    def __hash__(self) -> int:
        return hash(self.token)


def _parse_int32(token: str) -> int:
    if not _INTEGER.fullmatch(token):
        raise InvalidScoreTokenError(token)
    value = int(token)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise InvalidScoreTokenError(token)
    return value


def parse_score_line(line: str) -> list[int]:
    """Split ``line`` on commas and parse each trimmed token as an integer.

    Raises :class:`EmptyScoreLineError` for a blank line and
    :class:`InvalidScoreTokenError` for the first token that is not a
    32-bit signed integer.
    """
    if not line.strip():
        raise EmptyScoreLineError()
    return [_parse_int32(token.strip()) for token in line.split(",")]