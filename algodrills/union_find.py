"""Weighted quick-union disjoint sets over the integers ``0 .. n-1``."""

from __future__ import annotations


class _QuickUnion:
    """Parent links and per-root weights shared by the union-find classes.

    Every node starts as its own root. Its weight starts at its own index,
    and a union attaches the lighter root below the heavier one.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"number of nodes must be non-negative, got {n}")
        self._count = n
        self._ids = list(range(n))
        self._sizes = list(range(n))

    def __len__(self) -> int:
        return self._count

    def _check(self, p: int) -> None:
        if not 0 <= p < self._count:
            raise IndexError(f"node {p} out of range 0..{self._count - 1}")

    def _root(self, p: int) -> int:
        self._check(p)
        while p != self._ids[p]:
            p = self._ids[p]
        return p

    def _merge(self, p: int, q: int) -> None:
        i = self._root(p)
        j = self._root(q)
        if i == j:
            return
        if self._sizes[i] < self._sizes[j]:
            self._ids[i] = j
            self._sizes[j] += self._sizes[i]
        else:
            self._ids[j] = i
            self._sizes[i] += self._sizes[j]


class UnionFind(_QuickUnion):
    """Compact union-find with parent links and per-root weights."""

    def __init__(self, n: int) -> None:
        super().__init__(n)

    def find(self, p: int) -> int:
        """Return the root of the set holding ``p``."""
        return self._root(p)

    def union(self, p: int, q: int) -> None:
        """Merge the sets holding ``p`` and ``q``."""
        self._merge(p, q)

    def connected(self, p: int, q: int) -> bool:
        """Tell whether ``p`` and ``q`` are in the same set."""
        return self._root(p) == self._root(q)

    def ids(self) -> list[int]:
        """Return a copy of the parent links."""
        return list(self._ids)

    def sizes(self) -> list[int]:
        """Return a copy of the root weights."""
        return list(self._sizes)


class WeightedQuickUnionUF(_QuickUnion):
    """Union-find that can also report on its connected components."""

    def __init__(self, n: int) -> None:
        super().__init__(n)

    def find(self, p: int) -> int:
        """Return the root of the set holding ``p``."""
        return self._root(p)

    def union(self, p: int, q: int) -> None:
        """Merge the sets holding ``p`` and ``q``."""
        self._merge(p, q)

    def connected(self, p: int, q: int) -> bool:
        """Tell whether ``p`` and ``q`` are in the same set."""
        return self._root(p) == self._root(q)

    def ids(self) -> list[int]:
        """Return a copy of the parent links."""
        return list(self._ids)

    def union_count(self) -> int:
        """Return the number of sets, single nodes included."""
        return sum(1 for node, parent in enumerate(self._ids) if node == parent)

    def components(self) -> dict[int, list[int]]:
        """Map each root to the nodes of its set, in order of first appearance."""
        groups: dict[int, list[int]] = {}
        for node in range(self._count):
            groups.setdefault(self._root(node), []).append(node)
        return groups

    def info(self) -> str:
        """Describe the total set count and every set with more than one node."""
        groups = self.components()
        lines = [f"Total graph count: {len(groups)}.\n"]
        lines.extend(
            f"{root} graph count: {len(members)}.\n"
            for root, members in groups.items()
            if len(members) > 1
        )
        return "".join(lines)