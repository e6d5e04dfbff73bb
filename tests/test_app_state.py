from boxtimer.core.app_state import TimerModel
from boxtimer.core.config import MAX_PHASE_SECONDS, MAX_ROUNDS, WorkoutConfig
from boxtimer.core.timer import IntervalTimer, Phase


def make_model(driver, **kwargs) -> TimerModel:
    return TimerModel(IntervalTimer(driver, **kwargs))


def test_signals_follow_timer_changes(qapp, driver) -> None:
    model = make_model(driver, total_rounds=2, work_duration=1, rest_duration=1)
    phases: list[str] = []
    rounds: list[int] = []
    running: list[bool] = []
    states = []
    model.phase_changed.connect(phases.append)
    model.round_changed.connect(rounds.append)
    model.running_changed.connect(running.append)
    model.state_changed.connect(states.append)

    model.start()
    driver.fire(4)

    assert phases == ["working", "resting", "working"]
    assert rounds == [2]
    assert running == [True]
    assert len(states) == 5
    assert model.snapshot.current_round == 2


def test_session_finished_only_on_auto_reset(qapp, driver) -> None:
    model = make_model(driver, total_rounds=1, work_duration=1, rest_duration=1)
    finished: list[bool] = []
    model.session_finished.connect(lambda: finished.append(True))

    model.start()
    model.reset()
    assert finished == []

    model.start()
    driver.fire(4)

    assert finished == [True]
    assert model.snapshot.phase == Phase.IDLE
    assert not model.snapshot.is_running


def test_configure_clamps_and_publishes(qapp, driver) -> None:
    model = make_model(driver)
    configs = []
    model.config_changed.connect(configs.append)

    config = model.configure(total_rounds=99, work_duration=10_000, rest_duration=-4)

    assert config == WorkoutConfig(total_rounds=MAX_ROUNDS, work_duration=MAX_PHASE_SECONDS, rest_duration=0)
    assert model.timer.total_rounds == MAX_ROUNDS
    assert model.timer.work_duration == MAX_PHASE_SECONDS
    assert model.timer.rest_duration == 0
    assert configs[-1] == config
    assert model.config == config


def test_configure_keeps_unspecified_values(qapp, driver) -> None:
    model = make_model(driver, total_rounds=4, work_duration=30, rest_duration=15)

    config = model.configure(work_duration=45)

    assert config == WorkoutConfig(total_rounds=4, work_duration=45, rest_duration=15)


def test_secondary_action_pauses_then_resets(qapp, driver) -> None:
    model = make_model(driver, work_duration=5)
    model.primary_action()
    driver.fire(2)

    model.secondary_action()
    assert not model.timer.is_running
    assert model.timer.phase == Phase.WORKING
    assert model.timer.time_remaining == 3

    model.secondary_action()
    assert model.timer.phase == Phase.IDLE
    assert model.timer.time_remaining == 0


def test_toggle_starts_pauses_and_resumes(qapp, driver) -> None:
    model = make_model(driver, work_duration=5)

    model.toggle()
    assert model.timer.is_running
    driver.fire()

    model.toggle()
    assert not model.timer.is_running

    model.toggle()
    assert model.timer.is_running
    assert model.timer.time_remaining == 4


def test_detach_stops_publishing(qapp, driver) -> None:
    model = make_model(driver)
    states = []
    model.state_changed.connect(states.append)

    model.detach()
    model.timer.start()

    assert states == []


def test_configure_keeps_rounds_at_or_above_current_round(qapp, driver) -> None:
    model = make_model(driver, total_rounds=5, work_duration=1, rest_duration=1)
    model.start()
    driver.fire(8)
    assert model.timer.current_round == 3

    config = model.configure(total_rounds=1)

    assert config.total_rounds == 3
    assert model.timer.total_rounds == 3
    assert model.snapshot.rounds_left == 1

    model.reset()
    assert model.configure(total_rounds=1).total_rounds == 1
