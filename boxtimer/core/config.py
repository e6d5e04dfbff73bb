from __future__ import annotations

"""Настройки тренировки: количество раундов, длительности работы и отдыха."""

from dataclasses import dataclass, replace

from boxtimer.core.timer import IntervalTimer


MIN_ROUNDS = 1
MAX_ROUNDS = 20
MIN_PHASE_SECONDS = 0
MAX_PHASE_SECONDS = 120 * 60


@dataclass(frozen=True)
class WorkoutConfig:
    total_rounds: int = 3
    work_duration: float = 10
    rest_duration: float = 5

    @property
    def total_duration(self) -> float:
        """Planned session length: every round works, rests sit only between rounds."""
        return self.total_rounds * self.work_duration + (self.total_rounds - 1) * self.rest_duration

    def clamped(self) -> WorkoutConfig:
        return replace(
            self,
            total_rounds=_clamp(int(self.total_rounds), MIN_ROUNDS, MAX_ROUNDS),
            work_duration=_clamp(self.work_duration, MIN_PHASE_SECONDS, MAX_PHASE_SECONDS),
            rest_duration=_clamp(self.rest_duration, MIN_PHASE_SECONDS, MAX_PHASE_SECONDS),
        )

    def apply_to(self, timer: IntervalTimer) -> None:
        timer.total_rounds = self.total_rounds
        timer.work_duration = self.work_duration
        timer.rest_duration = self.rest_duration

    @classmethod
    def from_timer(cls, timer: IntervalTimer) -> WorkoutConfig:
        return cls(
            total_rounds=timer.total_rounds,
            work_duration=timer.work_duration,
            rest_duration=timer.rest_duration,
        )


def _clamp(value, low, high):
    return max(low, min(high, value))
