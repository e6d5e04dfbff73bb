from PyQt6.QtTest import QTest

from boxtimer.core.driver import QtTickDriver
from boxtimer.core.timer import IntervalTimer, Phase


def test_schedule_fires_repeatedly_until_cancelled(qapp) -> None:
    driver = QtTickDriver(qapp)
    calls: list[int] = []

    handle = driver.schedule(10, lambda: calls.append(1))
    assert handle.active
    QTest.qWait(100)
    handle.cancel()
    fired = len(calls)
    QTest.qWait(50)

    assert fired >= 2
    assert len(calls) == fired
    assert not handle.active


def test_cancel_twice_is_safe(qapp) -> None:
    handle = QtTickDriver().schedule(1000, lambda: None)

    handle.cancel()
    handle.cancel()

    assert not handle.active


def test_timer_stops_ticking_after_pause(qapp) -> None:
    timer = IntervalTimer(QtTickDriver(qapp), work_duration=60)
    timer.start()
    timer.pause()
    QTest.qWait(50)

    assert timer.phase == Phase.WORKING
    assert timer.time_remaining == 60
    assert not timer.is_running
