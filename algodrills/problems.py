"""Small counting and lookup problems on integers and grids."""

from __future__ import annotations

from collections.abc import Sequence

_BANNER_LINES = (
    "                ********",
    "               ************",
    "               ####....#.",
    "             #..###.....##....",
    "             ###.......######              ###            ###",
    "                ...........               #...#          #...#",
    "               ##*#######                 #.#.#          #.#.#",
    "            ####*******######             #.#.#          #.#.#",
    "           ...#***.****.*###....          #...#          #...#",
    "           ....**********##.....           ###            ###",
    "           ....****    *****....",
    "             ####        ####",
    "           ######        ######",
    "##############################################################",
    "#...#......#.##...#......#.##...#......#.##------------------#",
    "###########################################------------------#",
    "#..#....#....##..#....#....##..#....#....#####################",
    "##########################################    #----------#",
    "#.....#......##.....#......##.....#......#    #----------#",
    "##########################################    #----------#",
    "#.#..#....#..##.#..#....#..##.#..#....#..#    #----------#",
    "##########################################    ############",
)

# The horse's own square followed by the eight squares it attacks.
_HORSE_REACH = (
    (0, 0),
    (-1, -2),
    (-2, -1),
    (-2, 1),
    (-1, 2),
    (1, -2),
    (2, -1),
    (2, 1),
    (1, 2),
)


def banner() -> str:
    """Return the fixed ASCII-art picture, one newline after each line."""
    return "".join(f"{line}\n" for line in _BANNER_LINES)


def a_plus_b(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return a + b


def horse_paths(tx: int, ty: int, mx: int, my: int) -> int:
    """Count monotone lattice paths from (0, 0) to (tx, ty) avoiding a horse.

    The horse stands on (mx, my); its square and every square it attacks
    are closed. Moves go one step along either axis in the positive direction.
    """
    if min(tx, ty, mx, my) < 0:
        raise ValueError("coordinates must be non-negative")

    blocked = {
        (mx + dx, my + dy)
        for dx, dy in _HORSE_REACH
        if 0 <= mx + dx <= tx and 0 <= my + dy <= ty
    }

    counts = [[0] * (ty + 1) for _ in range(tx + 1)]
    for j in range(ty + 1):
        if (0, j) in blocked:
            break
        counts[0][j] = 1
    for i in range(tx + 1):
        if (i, 0) in blocked:
            break
        counts[i][0] = 1

    for i in range(1, tx + 1):
        row, above = counts[i], counts[i - 1]
        for j in range(1, ty + 1):
            row[j] = 0 if (i, j) in blocked else above[j] + row[j - 1]
    return counts[tx][ty]


def top_carpet(carpets: Sequence[Sequence[int]], x: int, y: int) -> int:
    """Return the 1-based number of the topmost carpet covering (x, y), or -1.

    Each carpet is ``(a, b, g, k)``: its corner at (a, b), spanning ``g``
    along x and ``k`` along y, edges included. Later carpets lie on top.
    """
    answer = -1
    for number, carpet in enumerate(carpets, start=1):
        if len(carpet) != 4:
            raise ValueError(f"carpet {number} needs four values, got {len(carpet)}")
        a, b, g, k = carpet
        if a <= x <= a + g and b <= y <= b + k:
            answer = number
    return answer


def all_subarray_sum(values: Sequence[int]) -> int:
    """Return the total of the sums of every contiguous subarray of ``values``."""
    n = len(values)
    return sum(value * (i + 1) * (n - i) for i, value in enumerate(values))