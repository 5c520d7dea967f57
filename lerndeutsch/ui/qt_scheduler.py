"""Scheduler backed by the Qt event loop."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QTimer

from lerndeutsch.core.timers import Scheduler


class QtScheduler(Scheduler):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        QTimer.singleShot(max(0, int(delay_ms)), callback)
