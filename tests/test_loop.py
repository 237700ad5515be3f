import pytest

from bubble_shooter import GameLoop, Phase


class FakeClock:
    """Stand-in for pyglet.clock that lets the test fire callbacks by hand"""

    def __init__(self):
        self.scheduled = {}

    def schedule_interval(self, func, interval):
        self.scheduled[func] = interval

    def unschedule(self, func):
        self.scheduled.pop(func, None)

    def fire(self, interval, times=1):
        for _ in range(times):
            for func, every in list(self.scheduled.items()):
                if every == interval:
                    func(every)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def loop(quiet_sim, clock):
    game_loop = GameLoop(quiet_sim, clock, fps=60)
    game_loop.start()
    return game_loop


def test_start_schedules_frame_and_timer(loop, clock):
    assert sorted(clock.scheduled.values()) == [pytest.approx(1 / 60), 1.0]
    assert loop.active


def test_frame_callback_steps_the_simulation(loop, clock):
    clock.fire(1 / 60, times=3)
    assert loop.simulation.frame_count == 3


def test_timer_callback_ends_the_match(loop, clock):
    clock.fire(1.0, times=60)
    assert loop.simulation.phase is Phase.OVER
    assert loop.simulation.time_left == 0

    clock.fire(1 / 60, times=5)
    assert loop.simulation.frame_count == 0


def test_stop_twice_is_harmless(loop, clock):
    loop.stop()
    loop.stop()

    assert clock.scheduled == {}
    assert not loop.active
    assert loop.simulation.disposed


def test_stale_callbacks_after_stop_do_nothing(loop, clock):
    stale = list(clock.scheduled)
    clock.fire(1 / 60, times=2)
    loop.stop()

    for func in stale:
        func(0.0)

    assert loop.simulation.frame_count == 2
    assert loop.simulation.time_left == 60


def test_start_after_stop_is_ignored(loop, clock):
    loop.stop()
    loop.start()
    assert clock.scheduled == {}


def test_restart_rearms_the_timer(loop, clock):
    clock.fire(1.0, times=60)
    assert loop.simulation.phase is Phase.OVER

    loop.restart()

    assert loop.simulation.phase is Phase.RUNNING
    assert loop.simulation.time_left == 60
    assert sorted(clock.scheduled.values()) == [pytest.approx(1 / 60), 1.0]


def test_match_over_is_reported_once(quiet_sim, clock):
    reports = []
    game_loop = GameLoop(quiet_sim, clock, fps=60, on_match_over=reports.append)
    game_loop.start()

    clock.fire(1.0, times=59)
    assert reports == []

    clock.fire(1.0, times=3)
    assert len(reports) == 1
    assert reports[0].phase is Phase.OVER

    game_loop.restart()
    clock.fire(1.0, times=60)
    assert len(reports) == 2
