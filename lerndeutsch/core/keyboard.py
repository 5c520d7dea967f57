"""Window-wide key handling with explicit subscribe/unsubscribe."""

from __future__ import annotations

import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

KEY_LEFT = "ArrowLeft"
KEY_RIGHT = "ArrowRight"
KEY_SPACE = " "
KEY_ENTER = "Enter"

KeyHandler = Callable[[str], bool]


class Subscription:
    """Handle returned by :meth:`KeyboardDispatcher.subscribe`."""

    def __init__(self, dispatcher: "KeyboardDispatcher", handler: KeyHandler) -> None:
        self._dispatcher = dispatcher
        self._handler = handler
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        self._dispatcher._remove(self._handler)


class KeyboardDispatcher:
    """Routes key names to the handlers currently subscribed.

    Handlers return True when they consumed the key. Dispatch stops at the
    first handler that does.
    """

    def __init__(self) -> None:
        self._handlers: List[KeyHandler] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    def subscribe(self, handler: KeyHandler) -> Subscription:
        self._handlers.append(handler)
        return Subscription(self, handler)

    def dispatch(self, key: str) -> bool:
        for handler in list(self._handlers):
            if handler(key):
                return True
        return False

    def _remove(self, handler: KeyHandler) -> None:
        try:
            self._handlers.remove(handler)
        except ValueError:
            logger.debug("Key handler %r was already removed", handler)
