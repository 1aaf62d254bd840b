from __future__ import annotations

from typing import Callable, Sequence, TypeVar

T = TypeVar("T")


def pick_n(pool: Sequence[T], n: int, rng: Callable[[], float]) -> list[T]:
    """Sample up to ``n`` distinct elements without replacement.

    Draws ``floor(rng() * remaining)`` once per pick and removes that element,
    so exactly ``min(n, len(pool))`` values are consumed from ``rng``. When the
    pool is smaller than ``n`` the whole pool comes back in shuffled order.
    """
    remaining = list(pool)
    picked: list[T] = []
    while len(picked) < n and remaining:
        index = int(rng() * len(remaining))
        picked.append(remaining.pop(index))
    return picked
