from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable


class Scheduler(ABC):
    """Fire-and-forget delayed callbacks on the UI event loop."""

    @abstractmethod
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        """Run ``callback`` once after ``delay_ms`` milliseconds."""
        pass
