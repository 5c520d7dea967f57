"""Random selection over word pools.

All helpers read the pool and return new sequences; the pool itself is never
mutated. Randomness comes from a :class:`RandomSource` so tests can feed a
fixed sequence of values instead of the system generator.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence, TypeVar

from lerndeutsch.core.words import WordEntry

T = TypeVar("T")


class SamplingError(ValueError):
    """The pool cannot satisfy a sampling request."""


class RandomSource(ABC):
    """Producer of uniform values in ``[0, 1)``."""

    @abstractmethod
    def next(self) -> float:
        pass


class SystemRandomSource(RandomSource):
    """Unseeded source backed by :class:`random.Random`."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def next(self) -> float:
        return self._rng.random()


def _pick_index(source: RandomSource, size: int) -> int:
    # clamp guards against sources that return exactly 1.0
    return min(int(source.next() * size), size - 1)


def shuffled_copy(pool: Sequence[T], source: RandomSource) -> List[T]:
    """Fisher-Yates shuffle of a copy of ``pool``."""
    items = list(pool)
    for i in range(len(items) - 1, 0, -1):
        j = _pick_index(source, i + 1)
        items[i], items[j] = items[j], items[i]
    return items


def sample_one(pool: Sequence[WordEntry], source: RandomSource) -> WordEntry:
    """Uniform pick; repeated calls may return the same entry."""
    if not pool:
        raise SamplingError("Cannot sample from an empty pool")
    return pool[_pick_index(source, len(pool))]


def sample_distinct(
    pool: Sequence[WordEntry],
    n: int,
    source: RandomSource,
    excluding: Iterable[WordEntry] = (),
) -> List[WordEntry]:
    """Draw ``n`` entries with distinct keys, none of them in ``excluding``.

    Entries are compared by ``key``. Raises :class:`SamplingError` when the
    pool holds fewer than ``n`` eligible entries.
    """
    excluded = {entry.key for entry in excluding}
    eligible = {entry.key for entry in pool} - excluded
    if len(eligible) < n:
        raise SamplingError(
            f"Need {n} distinct entries but only {len(eligible)} are available"
        )

    picked: List[WordEntry] = []
    seen = set(excluded)
    while len(picked) < n:
        entry = sample_one(pool, source)
        if entry.key in seen:
            continue
        seen.add(entry.key)
        picked.append(entry)
    return picked


def sample_subset(pool: Sequence[WordEntry], n: int, source: RandomSource) -> List[WordEntry]:
    """Up to ``n`` entries in random order; fewer when the pool is smaller."""
    return shuffled_copy(pool, source)[:n]
