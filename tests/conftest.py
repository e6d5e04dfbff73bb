from __future__ import annotations

import os
from typing import Callable

import pytest


os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeHandle:
    def __init__(self) -> None:
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeDriver:
    """Collects scheduled callbacks; tests fire ticks by hand."""

    def __init__(self) -> None:
        self.handles: list[FakeHandle] = []
        self.intervals: list[int] = []
        self._callbacks: list[Callable[[], None]] = []

    def schedule(self, interval_ms: int, callback: Callable[[], None]) -> FakeHandle:
        handle = FakeHandle()
        self.handles.append(handle)
        self.intervals.append(interval_ms)
        self._callbacks.append(callback)
        return handle

    @property
    def active(self) -> bool:
        return bool(self.handles) and not self.handles[-1].cancelled

    def fire(self, times: int = 1) -> int:
        """Deliver up to ``times`` ticks while a handle is live; returns ticks delivered."""
        fired = 0
        for _ in range(times):
            if not self.active:
                break
            self._callbacks[-1]()
            fired += 1
        return fired


@pytest.fixture
def driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
