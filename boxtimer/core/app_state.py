from __future__ import annotations

import logging
from dataclasses import replace

from PyQt6.QtCore import QObject, pyqtSignal

from boxtimer.core.config import WorkoutConfig
from boxtimer.core.timer import IntervalTimer, Phase, TimerSnapshot


log = logging.getLogger(__name__)


class TimerModel(QObject):
    """Re-publishes IntervalTimer changes as Qt signals for the widgets."""

    state_changed = pyqtSignal(object)
    phase_changed = pyqtSignal(str)
    round_changed = pyqtSignal(int)
    running_changed = pyqtSignal(bool)
    config_changed = pyqtSignal(object)
    session_finished = pyqtSignal()

    def __init__(self, timer: IntervalTimer, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.timer = timer
        self._last: TimerSnapshot = timer.snapshot()
        self._config = WorkoutConfig.from_timer(timer)
        self._unsubscribe = timer.subscribe(self._on_timer_changed)
        self._remove_finished = timer.add_finished_listener(self.session_finished.emit)

    @property
    def snapshot(self) -> TimerSnapshot:
        return self._last

    @property
    def config(self) -> WorkoutConfig:
        return self._config

    def configure(
        self,
        total_rounds: int | None = None,
        work_duration: float | None = None,
        rest_duration: float | None = None,
    ) -> WorkoutConfig:
        current = WorkoutConfig.from_timer(self.timer)
        config = WorkoutConfig(
            total_rounds=current.total_rounds if total_rounds is None else total_rounds,
            work_duration=current.work_duration if work_duration is None else work_duration,
            rest_duration=current.rest_duration if rest_duration is None else rest_duration,
        ).clamped()
        if self.timer.phase != Phase.IDLE and config.total_rounds < self.timer.current_round:
            # the round in progress stays within the total
            config = replace(config, total_rounds=self.timer.current_round)
        if config != current:
            config.apply_to(self.timer)
        return config

    def start(self) -> None:
        self.timer.start()

    def pause(self) -> None:
        self.timer.pause()

    def resume(self) -> None:
        self.timer.resume()

    def reset(self) -> None:
        self.timer.reset()

    def primary_action(self) -> None:
        self.timer.start()

    def secondary_action(self) -> None:
        if self.timer.is_running:
            self.timer.pause()
        else:
            self.timer.reset()

    def toggle(self) -> None:
        if self.timer.is_running:
            self.timer.pause()
        elif self.timer.phase == Phase.IDLE:
            self.timer.start()
        else:
            self.timer.resume()

    def detach(self) -> None:
        self._unsubscribe()
        self._remove_finished()

    def _on_timer_changed(self, snapshot: TimerSnapshot) -> None:
        previous, self._last = self._last, snapshot
        config = WorkoutConfig.from_timer(self.timer)
        if config != self._config:
            self._config = config
            log.debug("workout config changed: %s", config)
            self.config_changed.emit(config)
        if snapshot.phase != previous.phase:
            self.phase_changed.emit(snapshot.phase.value)
        if snapshot.current_round != previous.current_round:
            self.round_changed.emit(snapshot.current_round)
        if snapshot.is_running != previous.is_running:
            self.running_changed.emit(snapshot.is_running)
        self.state_changed.emit(snapshot)
