"""Plain-text encoding of integer sequences.

The same format stores a puzzle's tile positions and a game's move
history, so both functions must round-trip exactly::

    parse_sequence(format_sequence([3, 0, 12])) == [3, 0, 12]
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from npuzzle.models.errors import ParseError

MAX_VALUE = 2**31 - 1

_TOKEN = re.compile(r"[0-9]+")


def parse_sequence(text: str) -> list[int]:
    """Split *text* on runs of whitespace and parse each token.

    An empty (or blank) string yields an empty list.
    """
    values: list[int] = []
    for token in text.split():
        if not _TOKEN.fullmatch(token):
            raise ParseError(f"Not a non-negative integer: {token!r}")
        value = int(token)
        if value > MAX_VALUE:
            raise ParseError(f"Value out of range: {token}")
        values.append(value)
    return values


def format_sequence(values: Iterable[int]) -> str:
    return " ".join(str(v) for v in values)
