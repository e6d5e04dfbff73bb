import pytest

from boxtimer.core.config import WorkoutConfig
from boxtimer.core.plan import fill_fractions, session_progress, session_segments
from boxtimer.core.timer import IntervalTimer, Phase


def test_segments_alternate_and_sum_to_one() -> None:
    segments = session_segments(WorkoutConfig(total_rounds=3, work_duration=2, rest_duration=1))

    assert [s.phase for s in segments] == [
        Phase.WORKING,
        Phase.RESTING,
        Phase.WORKING,
        Phase.RESTING,
        Phase.WORKING,
    ]
    assert segments[0].fraction == pytest.approx(0.25)
    assert segments[1].fraction == pytest.approx(0.125)
    assert sum(s.fraction for s in segments) == pytest.approx(1.0)


def test_segments_empty_for_zero_length_session() -> None:
    assert session_segments(WorkoutConfig(total_rounds=2, work_duration=0, rest_duration=0)) == []


def test_fill_fractions_fill_left_to_right() -> None:
    segments = session_segments(WorkoutConfig(total_rounds=2, work_duration=2, rest_duration=1))

    assert fill_fractions(segments, 0.5) == pytest.approx([0.4, 0.1, 0.0])
    assert fill_fractions(segments, 1.0) == pytest.approx([0.4, 0.2, 0.4])
    assert fill_fractions(segments, -1.0) == [0.0, 0.0, 0.0]


def test_session_progress_tracks_rounds() -> None:
    config = WorkoutConfig(total_rounds=2, work_duration=4, rest_duration=2)
    timer = IntervalTimer(total_rounds=2, work_duration=4, rest_duration=2)
    assert session_progress(config, timer.snapshot()) == 0.0

    timer.start()
    assert session_progress(config, timer.snapshot()) == 0.0
    timer.tick()
    timer.tick()
    assert session_progress(config, timer.snapshot()) == pytest.approx(2 / 10)

    for _ in range(4):
        timer.tick()
    assert timer.phase == Phase.RESTING
    assert session_progress(config, timer.snapshot()) == pytest.approx(5 / 10)

    for _ in range(2):
        timer.tick()
    assert timer.current_round == 2
    assert session_progress(config, timer.snapshot()) == pytest.approx(6 / 10)
