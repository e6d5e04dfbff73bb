from __future__ import annotations

"""План сессии: чередующиеся сегменты работы и отдыха для полосы прогресса."""

from dataclasses import dataclass

from boxtimer.core.config import WorkoutConfig
from boxtimer.core.timer import Phase, TimerSnapshot


@dataclass(frozen=True)
class Segment:
    phase: Phase
    fraction: float

    @property
    def is_work(self) -> bool:
        return self.phase == Phase.WORKING


def session_segments(config: WorkoutConfig) -> list[Segment]:
    total = config.total_duration
    if config.total_rounds < 1 or total <= 0:
        return []
    segments: list[Segment] = []
    for index in range(config.total_rounds * 2 - 1):
        if index % 2 == 0:
            segments.append(Segment(Phase.WORKING, config.work_duration / total))
        else:
            segments.append(Segment(Phase.RESTING, config.rest_duration / total))
    return segments


def fill_fractions(segments: list[Segment], progress: float) -> list[float]:
    """Distribute ``progress`` over the segments left to right."""
    remaining = max(0.0, progress)
    fills: list[float] = []
    for segment in segments:
        fill = min(remaining, segment.fraction)
        remaining -= fill
        fills.append(fill)
    return fills


def session_progress(config: WorkoutConfig, snapshot: TimerSnapshot) -> float:
    total = config.total_duration
    if snapshot.phase == Phase.IDLE or total <= 0:
        return 0.0

    elapsed = (snapshot.current_round - 1) * (config.work_duration + config.rest_duration)
    if snapshot.phase == Phase.WORKING:
        elapsed += _phase_elapsed(config.work_duration, snapshot.time_remaining)
    else:
        elapsed += config.work_duration + _phase_elapsed(config.rest_duration, snapshot.time_remaining)
    return max(0.0, min(1.0, elapsed / total))


def _phase_elapsed(duration: float, remaining: float) -> float:
    return max(0.0, min(duration, duration - remaining))
