"""Merge several ranked candidate queues by weight into one list."""

from __future__ import annotations

from collections.abc import Sequence


def _div_toward_zero(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def merge_recall_queues(
    queues: Sequence[Sequence[str]],
    weights: Sequence[int],
    final_size: int,
) -> list[str]:
    """Take items from each queue, heaviest weight first, without duplicates.

    Each queue's quota is its share of the remaining weight applied to the
    remaining size, rounded up. Items already taken are skipped.
    """
    if len(weights) > len(queues):
        raise ValueError("every weight needs a queue")

    total_weight = sum(weights)
    order = sorted(range(len(weights)), key=lambda idx: -weights[idx])

    merged: list[str] = []
    seen: set[str] = set()
    previous_weight = 0
    for idx in order:
        weight = weights[idx]
        total_weight -= previous_weight
        final_size -= len(merged)
        quota = _div_toward_zero(final_size * weight + total_weight - 1, total_weight)

        taken = 0
        for item in queues[idx]:
            if taken >= quota:
                break
            if item not in seen:
                merged.append(item)
                seen.add(item)
                taken += 1

        previous_weight = weight
    return merged