from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Sequence

from lerndeutsch.core.config import (
    MEMORY_MISMATCH_DELAY_MS,
    MEMORY_PAIR_COUNT,
    MEMORY_VICTORY_DELAY_MS,
)
from lerndeutsch.core.sampling import RandomSource, sample_subset, shuffled_copy
from lerndeutsch.core.session import GameSession
from lerndeutsch.core.timers import Scheduler
from lerndeutsch.core.words import WordEntry


class CardState(Enum):
    HIDDEN = "hidden"
    REVEALED = "revealed"
    WRONG = "wrong"
    MATCHED = "matched"


@dataclass
class MemoryCard:
    pair_key: int
    text: str
    language: str
    state: CardState = CardState.HIDDEN

    @property
    def face_up(self) -> bool:
        return self.state is not CardState.HIDDEN

    @property
    def matched(self) -> bool:
        return self.state is CardState.MATCHED


class MemorySession(GameSession):
    """Pair-matching board: each chosen word yields a german and a czech card.

    At most two unmatched cards are face up. While a pair is being evaluated
    the board is locked. A match is permanent and unlocks at once; a
    mismatch shows both cards as wrong, then hides them after a delay.
    """

    def __init__(
        self,
        words: Sequence[WordEntry],
        scheduler: Scheduler,
        random_source: RandomSource,
    ) -> None:
        super().__init__(words, scheduler, random_source)
        chosen = sample_subset(self._words, MEMORY_PAIR_COUNT, random_source)
        cards: List[MemoryCard] = []
        for entry in chosen:
            cards.append(MemoryCard(pair_key=entry.key, text=entry.german, language="de"))
            cards.append(MemoryCard(pair_key=entry.key, text=entry.czech, language="cz"))
        self._cards = shuffled_copy(cards, random_source)
        self._selection: List[int] = []
        self._locked = False
        self._moves = 0
        self._victory_fired = False
        self._victory_listeners: List[Callable[[], None]] = []

    @property
    def cards(self) -> List[MemoryCard]:
        return self._cards

    @property
    def selection(self) -> List[int]:
        return list(self._selection)

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def moves(self) -> int:
        return self._moves

    @property
    def pairs_found(self) -> int:
        return sum(1 for card in self._cards if card.matched) // 2

    @property
    def pair_count(self) -> int:
        return len(self._cards) // 2

    @property
    def is_won(self) -> bool:
        return bool(self._cards) and all(card.matched for card in self._cards)

    def add_victory_listener(self, listener: Callable[[], None]) -> None:
        self._victory_listeners.append(listener)

    def reveal(self, index: int) -> bool:
        """Turn a card face up. Returns False when the click is ignored.

        Raises IndexError for an index outside the board.
        """
        if not 0 <= index < len(self._cards):
            raise IndexError(f"card index out of range: {index}")
        if not self.is_active or self._locked:
            return False
        card = self._cards[index]
        if card.matched or index in self._selection:
            return False

        card.state = CardState.REVEALED
        self._selection.append(index)
        if len(self._selection) == 2:
            self._evaluate()
        self._notify()
        return True

    def _evaluate(self) -> None:
        self._locked = True
        self._moves += 1
        first, second = (self._cards[i] for i in self._selection)
        if first.pair_key == second.pair_key:
            first.state = second.state = CardState.MATCHED
            self._selection = []
            self._locked = False
            if self.is_won:
                self._schedule(MEMORY_VICTORY_DELAY_MS, self._fire_victory)
        else:
            first.state = second.state = CardState.WRONG
            self._schedule(MEMORY_MISMATCH_DELAY_MS, self._hide_mismatch)

    def _hide_mismatch(self) -> None:
        for i in self._selection:
            self._cards[i].state = CardState.HIDDEN
        self._selection = []
        self._locked = False
        self._notify()

    def _fire_victory(self) -> None:
        if self._victory_fired:
            return
        self._victory_fired = True
        for listener in list(self._victory_listeners):
            listener()

    def _on_close(self) -> None:
        self._victory_listeners.clear()
