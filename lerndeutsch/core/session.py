from __future__ import annotations

import logging
from typing import Callable, List, Sequence, Tuple

from lerndeutsch.core.sampling import RandomSource
from lerndeutsch.core.timers import Scheduler
from lerndeutsch.core.words import WordEntry

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class GameSession:
    """One running game over a fixed snapshot of words.

    Every delayed transition is scheduled through :meth:`_schedule`, which
    captures the session's active token. :meth:`close` bumps the token, so
    callbacks that fire after teardown do nothing.
    """

    def __init__(
        self,
        words: Sequence[WordEntry],
        scheduler: Scheduler,
        random_source: RandomSource,
    ) -> None:
        self._words: Tuple[WordEntry, ...] = tuple(words)
        self._scheduler = scheduler
        self._random = random_source
        self._token = 0
        self._closed = False
        self._listeners: List[Listener] = []

    @property
    def words(self) -> Tuple[WordEntry, ...]:
        return self._words

    @property
    def is_active(self) -> bool:
        return not self._closed

    @property
    def token(self) -> int:
        return self._token

    def add_listener(self, listener: Listener) -> None:
        """Call ``listener`` after every state change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def close(self) -> None:
        """Tear the session down. Pending timers become no-ops."""
        if self._closed:
            return
        self._closed = True
        self._token += 1
        self._listeners.clear()
        self._on_close()
        logger.debug("Closed %s", type(self).__name__)

    def _on_close(self) -> None:
        pass

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    def _schedule(self, delay_ms: int, callback: Callable[[], None]) -> None:
        token = self._token

        def _guarded() -> None:
            if self._closed or token != self._token:
                logger.debug("Dropping stale timer for %s", type(self).__name__)
                return
            callback()

        self._scheduler.call_later(delay_ms, _guarded)
