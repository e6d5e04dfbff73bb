from __future__ import annotations

"""Периодический источник тиков на базе QTimer для IntervalTimer."""

import logging
from typing import Callable

from PyQt6.QtCore import QObject, QTimer


log = logging.getLogger(__name__)


class QtTickHandle:
    """Владеет одним повторяющимся QTimer; `cancel()` останавливает его навсегда."""

    def __init__(self, timer: QTimer) -> None:
        self._timer: QTimer | None = timer

    @property
    def active(self) -> bool:
        if self._timer is None:
            return False
        try:
            return self._timer.isActive()
        except RuntimeError:
            return False

    def cancel(self) -> None:
        timer, self._timer = self._timer, None
        if timer is None:
            return
        try:
            timer.stop()
            timer.timeout.disconnect()
            timer.deleteLater()
        except RuntimeError:
            # underlying C++ object already destroyed with its parent
            log.debug("tick timer already deleted")


class QtTickDriver:
    """Планирует тики в event loop Qt."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def schedule(self, interval_ms: int, callback: Callable[[], None]) -> QtTickHandle:
        timer = QTimer(self._parent)
        timer.setInterval(interval_ms)
        timer.timeout.connect(callback)
        timer.start()
        log.debug("tick timer scheduled every %sms", interval_ms)
        return QtTickHandle(timer)
