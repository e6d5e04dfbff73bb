from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Protocol


TICK_INTERVAL_MS = 1000

log = logging.getLogger(__name__)


class Phase(str, Enum):
    IDLE = "idle"
    WORKING = "working"
    RESTING = "resting"


@dataclass(frozen=True)
class TimerSnapshot:
    phase: Phase
    current_round: int
    total_rounds: int
    time_remaining: float
    phase_duration: float
    progress: float
    is_running: bool

    @property
    def rounds_left(self) -> int:
        return self.total_rounds - (self.current_round - 1)


class TickHandle(Protocol):
    def cancel(self) -> None:
        ...


class TickDriver(Protocol):
    def schedule(self, interval_ms: int, callback: Callable[[], None]) -> TickHandle:
        ...


Observer = Callable[[TimerSnapshot], None]


class IntervalTimer:
    """Work/rest round countdown driven by a 1-second tick.

    Configuration may be changed at any time; new values are picked up at
    the next phase transition. Control calls outside their preconditions
    are ignored.
    """

    def __init__(
        self,
        driver: TickDriver | None = None,
        *,
        total_rounds: int = 3,
        work_duration: float = 10,
        rest_duration: float = 5,
        logger: logging.Logger | None = None,
    ) -> None:
        self._driver = driver
        self._logger = logger or log
        self._handle: TickHandle | None = None
        self._observers: list[Observer] = []
        self._finished_listeners: list[Callable[[], None]] = []

        self._total_rounds = total_rounds
        self._work_duration = work_duration
        self._rest_duration = rest_duration

        self._current_round = 1
        self._phase = Phase.IDLE
        self._time_remaining: float = 0
        self._is_running = False

    # configuration

    @property
    def total_rounds(self) -> int:
        return self._total_rounds

    @total_rounds.setter
    def total_rounds(self, value: int) -> None:
        self._total_rounds = value
        self._notify()

    @property
    def work_duration(self) -> float:
        return self._work_duration

    @work_duration.setter
    def work_duration(self, value: float) -> None:
        self._work_duration = value
        self._notify()

    @property
    def rest_duration(self) -> float:
        return self._rest_duration

    @rest_duration.setter
    def rest_duration(self, value: float) -> None:
        self._rest_duration = value
        self._notify()

    # runtime state

    @property
    def current_round(self) -> int:
        return self._current_round

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def time_remaining(self) -> float:
        return self._time_remaining

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def is_working(self) -> bool:
        return self._phase == Phase.WORKING

    @property
    def is_resting(self) -> bool:
        return self._phase == Phase.RESTING

    @property
    def current_phase_duration(self) -> float:
        if self._phase == Phase.WORKING:
            return self._work_duration
        if self._phase == Phase.RESTING:
            return self._rest_duration
        return 0

    @property
    def progress(self) -> float:
        duration = self.current_phase_duration
        if duration == 0:
            return 0.0
        return 1 - self._time_remaining / duration

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            phase=self._phase,
            current_round=self._current_round,
            total_rounds=self._total_rounds,
            time_remaining=self._time_remaining,
            phase_duration=self.current_phase_duration,
            progress=self.progress,
            is_running=self._is_running,
        )

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register ``observer`` for snapshots after every change; returns an unsubscribe callable."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def add_finished_listener(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Call ``listener`` after the final round's rest completes and the timer resets."""
        self._finished_listeners.append(listener)

        def remove() -> None:
            if listener in self._finished_listeners:
                self._finished_listeners.remove(listener)

        return remove

    # controls

    def start(self) -> None:
        if self._is_running:
            self._logger.debug("start ignored: already running")
            return
        self._phase = Phase.WORKING
        self._is_running = True
        self._time_remaining = self._work_duration
        self._start_ticking()
        self._logger.info(
            "Interval timer started: round=%s/%s work=%ss",
            self._current_round,
            self._total_rounds,
            self._work_duration,
        )
        self._notify()

    def resume(self) -> None:
        if self._is_running or self._time_remaining <= 0:
            self._logger.debug("resume ignored: running=%s remaining=%s", self._is_running, self._time_remaining)
            return
        self._is_running = True
        self._start_ticking()
        self._logger.info("Interval timer resumed: phase=%s remaining=%ss", self._phase.value, self._time_remaining)
        self._notify()

    def pause(self) -> None:
        self._stop_ticking()
        if not self._is_running:
            return
        self._is_running = False
        self._logger.info("Interval timer paused: phase=%s remaining=%ss", self._phase.value, self._time_remaining)
        self._notify()

    def reset(self) -> None:
        self._stop_ticking()
        if self._is_idle():
            return
        self._is_running = False
        self._phase = Phase.IDLE
        self._current_round = 1
        self._time_remaining = 0
        self._logger.info("Interval timer reset")
        self._notify()

    def tick(self) -> None:
        """Advance one second. Called by the tick driver while running."""
        if self._time_remaining > 0:
            self._time_remaining -= 1
            self._logger.debug("tick: phase=%s remaining=%s", self._phase.value, self._time_remaining)
        elif self._phase == Phase.WORKING:
            self._phase = Phase.RESTING
            self._time_remaining = self._rest_duration
            self._logger.info("Round %s work finished, resting %ss", self._current_round, self._rest_duration)
        elif self._phase == Phase.RESTING:
            self._current_round += 1
            if self._current_round > self._total_rounds:
                self._logger.info("Session complete after %s rounds", self._total_rounds)
                self.reset()
                for listener in list(self._finished_listeners):
                    listener()
                return
            self._phase = Phase.WORKING
            self._time_remaining = self._work_duration
            self._logger.info("Round %s/%s started", self._current_round, self._total_rounds)
        else:
            return
        self._notify()

    def _is_idle(self) -> bool:
        return (
            self._phase == Phase.IDLE
            and self._current_round == 1
            and self._time_remaining == 0
            and not self._is_running
        )

    def _start_ticking(self) -> None:
        self._stop_ticking()
        if self._driver is not None:
            self._handle = self._driver.schedule(TICK_INTERVAL_MS, self.tick)

    def _stop_ticking(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.cancel()

    def _notify(self) -> None:
        if not self._observers:
            return
        snapshot = self.snapshot()
        for observer in list(self._observers):
            observer(snapshot)
