"""Command line front end: read a problem from standard input, print the answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from algodrills.grid_paths import max_two_paths
from algodrills.problems import (
    a_plus_b,
    all_subarray_sum,
    banner,
    horse_paths,
    top_carpet,
)


class _Tokens:
    """Integers pulled lazily from whitespace-separated text."""

    def __init__(self, lines: Iterator[str]) -> None:
        self._words = (word for line in lines for word in line.split())

    def int(self) -> int:
        try:
            word = next(self._words)
        except StopIteration:
            raise EOFError("input ended too early") from None
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"not an integer: {word!r}") from None

    def ints(self, count: int) -> list[int]:
        return [self.int() for _ in range(count)]


def _count(tokens: _Tokens) -> int:
    n = tokens.int()
    if n < 0:
        raise ValueError(f"count must be non-negative, got {n}")
    return n


def _run_banner(tokens: _Tokens) -> str:
    return banner()


def _run_a_plus_b(tokens: _Tokens) -> str:
    a, b = tokens.ints(2)
    return f"{a_plus_b(a, b)}\n"


def _run_horse(tokens: _Tokens) -> str:
    tx, ty, mx, my = tokens.ints(4)
    return f"{horse_paths(tx, ty, mx, my)}\n"


def _run_carpet(tokens: _Tokens) -> str:
    n = _count(tokens)
    carpets = [tokens.ints(4) for _ in range(n)]
    x, y = tokens.ints(2)
    return f"{top_carpet(carpets, x, y)}\n"


def _run_grid(tokens: _Tokens) -> str:
    n = _count(tokens)
    grid = [[0] * n for _ in range(n)]
    while True:
        x, y, value = tokens.ints(3)
        if x == 0 and y == 0 and value == 0:
            break
        if not (1 <= x <= n and 1 <= y <= n):
            raise ValueError(f"cell ({x}, {y}) outside a {n}x{n} grid")
        grid[x - 1][y - 1] = value
    return f"{max_two_paths(grid)}\n"


def _run_subarray(tokens: _Tokens) -> str:
    n = _count(tokens)
    return f"{all_subarray_sum(tokens.ints(n))}\n"


_COMMANDS: dict[str, tuple[str, Callable[[_Tokens], str]]] = {
    "banner": ("print the ASCII-art picture", _run_banner),
    "a-plus-b": ("read a b, print their sum", _run_a_plus_b),
    "horse": ("read tx ty mx my, count paths avoiding the horse", _run_horse),
    "carpet": ("read n carpets and a point, print the topmost carpet", _run_carpet),
    "grid": ("read n and x y v triples ending in 0 0 0, print the best two-walk sum", _run_grid),
    "subarray": ("read n and n integers, print the sum over all subarrays", _run_subarray),
}


def main(argv: list[str] | None = None) -> int:
    """Run one command on standard input and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="algodrills",
        description="Solve a small problem read from standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (help_text, _) in _COMMANDS.items():
        commands.add_parser(name, help=help_text)
    args = parser.parse_args(argv)

    _, handler = _COMMANDS[args.command]
    try:
        output = handler(_Tokens(iter(sys.stdin)))
    except (ValueError, EOFError) as exc:
        print(f"algodrills: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())