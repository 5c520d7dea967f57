from __future__ import annotations

from typing import List, Optional, Sequence

from lerndeutsch.core.config import FLASHCARD_CONTENT_DELAY_MS
from lerndeutsch.core.keyboard import (
    KEY_ENTER,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_SPACE,
    KeyboardDispatcher,
    Subscription,
)
from lerndeutsch.core.sampling import RandomSource, shuffled_copy
from lerndeutsch.core.session import GameSession
from lerndeutsch.core.timers import Scheduler
from lerndeutsch.core.words import WordEntry


class FlashcardSession(GameSession):
    """Shuffled deck with a cursor and a front/back flag.

    ``next`` wraps from the last card to the first; ``prev`` stops at the
    first card. Moving resets the card to its front immediately, while the
    displayed content (``shown``) follows after a short delay so the flip
    back can render first.
    """

    def __init__(
        self,
        words: Sequence[WordEntry],
        scheduler: Scheduler,
        random_source: RandomSource,
        keyboard: Optional[KeyboardDispatcher] = None,
    ) -> None:
        super().__init__(words, scheduler, random_source)
        self._deck: List[WordEntry] = shuffled_copy(self._words, random_source)
        self._index = 0
        self._flipped = False
        self._shown: Optional[WordEntry] = self._deck[0] if self._deck else None
        self._subscription: Optional[Subscription] = None
        if keyboard is not None:
            self._subscription = keyboard.subscribe(self.handle_key)

    @property
    def deck(self) -> List[WordEntry]:
        return list(self._deck)

    @property
    def index(self) -> int:
        return self._index

    @property
    def flipped(self) -> bool:
        return self._flipped

    @property
    def current(self) -> Optional[WordEntry]:
        return self._deck[self._index] if self._deck else None

    @property
    def shown(self) -> Optional[WordEntry]:
        """Entry whose text the card currently displays."""
        return self._shown

    @property
    def counter_text(self) -> str:
        return f"{self._index + 1} / {len(self._deck)}"

    def flip(self) -> None:
        if not self.is_active or not self._deck:
            return
        self._flipped = not self._flipped
        self._notify()

    def next(self) -> None:
        if not self.is_active or not self._deck:
            return
        if self._index < len(self._deck) - 1:
            self._index += 1
        else:
            self._index = 0
        self._reset_card()

    def prev(self) -> None:
        if not self.is_active or self._index == 0:
            return
        self._index -= 1
        self._reset_card()

    def handle_key(self, key: str) -> bool:
        if not self.is_active:
            return False
        if key == KEY_RIGHT:
            self.next()
        elif key == KEY_LEFT:
            self.prev()
        elif key in (KEY_SPACE, KEY_ENTER):
            self.flip()
        else:
            return False
        return True

    def _reset_card(self) -> None:
        self._flipped = False
        self._notify()
        self._schedule(FLASHCARD_CONTENT_DELAY_MS, self._show_current)

    def _show_current(self) -> None:
        self._shown = self._deck[self._index]
        self._notify()

    def _on_close(self) -> None:
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None
