"""Shared fakes: manual scheduler, fixed random source, word factories."""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

import pytest

from lerndeutsch.core.sampling import RandomSource
from lerndeutsch.core.timers import Scheduler
from lerndeutsch.core.words import WordEntry


class ManualScheduler(Scheduler):
    """Collects callbacks and fires them when the test advances the clock."""

    def __init__(self) -> None:
        self.now = 0
        self._pending: List[Tuple[int, int, Callable[[], None]]] = []
        self._seq = 0

    @property
    def pending(self) -> int:
        return len(self._pending)

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self._pending.append((self.now + delay_ms, self._seq, callback))
        self._seq += 1

    def advance(self, ms: int) -> None:
        target = self.now + ms
        while True:
            due = sorted(p for p in self._pending if p[0] <= target)
            if not due:
                break
            item = due[0]
            self._pending.remove(item)
            self.now = item[0]
            item[2]()
        self.now = target


class SequenceRandom(RandomSource):
    """Cycles through a fixed list of values."""

    def __init__(self, values: Sequence[float]) -> None:
        self._values = list(values)
        self._i = 0

    def next(self) -> float:
        value = self._values[self._i % len(self._values)]
        self._i += 1
        return value


def make_words(n: int) -> List[WordEntry]:
    return [WordEntry(key=i, german=f"Wort{i}", czech=f"slovo{i}") for i in range(n)]


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture()
def rng() -> SequenceRandom:
    # zeros make every shuffle and pick deterministic
    return SequenceRandom([0.0])


@pytest.fixture()
def cycling_rng() -> SequenceRandom:
    return SequenceRandom([0.0, 0.3, 0.55, 0.8, 0.1, 0.65, 0.4, 0.95])


@pytest.fixture()
def sample_pool() -> List[WordEntry]:
    return [
        WordEntry(key=0, german="Hund", czech="pes"),
        WordEntry(key=1, german="Katze", czech="kočka"),
        WordEntry(key=2, german="Baum", czech="strom"),
        WordEntry(key=3, german="Buch", czech="kniha"),
    ]
