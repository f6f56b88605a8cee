"""Readers for whitespace-separated unsigned 32-bit integers."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

_UINT32_LIMIT = 1 << 32


def _parse(token: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise ValueError(f"not an integer: {token!r}") from None
    if not 0 <= value < _UINT32_LIMIT:
        raise ValueError(f"value out of unsigned 32-bit range: {value}")
    return value


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def read_sized(stream: TextIO) -> list[int]:
    """Read a count ``n`` followed by ``n`` integers, across any line breaks.

    Tokens left on the line holding the last integer are consumed.
    """
    tokens = _tokens(stream)
    try:
        count = _parse(next(tokens))
        return [_parse(next(tokens)) for _ in range(count)]
    except StopIteration:
        raise EOFError("input ended before all integers were read") from None


def read_line(stream: TextIO) -> list[int]:
    """Read every integer on the next non-blank line."""
    for line in stream:
        fields = line.split()
        if fields:
            return [_parse(field) for field in fields]
    raise EOFError("no more input")