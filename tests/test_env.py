import numpy as np
import pytest

from bubble_shooter import Bubble, BubbleShooterEnv, Bullet, GameConfig
from rl.wrappers import MultiDiscreteToDiscreteWrapper

STAY, LEFT, RIGHT = 0, 1, 2


@pytest.fixture
def env():
    e = BubbleShooterEnv(game_config={"game_time": 1, "fps": 10}, k_bubbles=3)
    yield e
    e.close()


def test_spaces(env):
    assert env.action_space.nvec.tolist() == [3, 2]
    assert env.observation_space.shape == (3 + 3 * 4,)


def test_reset_returns_observation_in_space(env):
    obs, info = env.reset(seed=0)

    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert info["score"] == 0
    assert info["time_left"] == 1
    assert info["step"] == 0


def test_episode_truncates_when_the_timer_runs_out(env):
    env.reset(seed=0)
    for _ in range(9):
        _, _, terminated, truncated, _ = env.step([STAY, 0])
        assert not terminated and not truncated

    obs, _, terminated, truncated, info = env.step([STAY, 0])

    assert truncated and not terminated
    assert info["time_left"] == 0
    assert env.observation_space.contains(obs)


def test_firing_costs_the_shot_penalty(env):
    env.reset(seed=0)
    _, reward, _, _, info = env.step([STAY, 1])

    assert reward == pytest.approx(-env.reward_config["R_SHOT"])
    assert info["num_bullets"] == 1


def test_popping_and_escaping_bubbles_shape_the_reward(env):
    env.reset(seed=0)
    # bullet meets the first bubble this frame; the second one drops out the bottom
    env.sim.store.add_bullet(Bullet(x=96, y=212))
    env.sim.store.add_bubble(Bubble(x=100, y=199, radius=10, speed=1.0))
    env.sim.store.add_bubble(Bubble(x=500, y=614, radius=15, speed=1.0))

    _, reward, _, _, info = env.step([STAY, 0])

    rc = env.reward_config
    assert reward == pytest.approx(rc["R_POP"] - rc["R_ESCAPE"])
    assert info["popped"] == 1
    assert info["bubbles_escaped"] == 1
    assert info["score"] == 1


def test_human_render_waits_for_the_next_frame(env, monkeypatch):
    naps = []
    monkeypatch.setattr("bubble_shooter.env.time.perf_counter", lambda: 10.005)
    monkeypatch.setattr("bubble_shooter.env.time.sleep", naps.append)
    env._last_render = 10.0

    env._wait_for_next_frame()

    assert naps == [pytest.approx(1 / env.metadata["render_fps"] - 0.005)]
    assert env._last_render == 10.005


def test_render_without_mode_is_a_no_op(env):
    env.reset(seed=0)
    assert env.render() is None
    assert env._window is None


def test_move_left_lowers_aircraft_x(env):
    obs0, _ = env.reset(seed=0)
    obs1, *_ = env.step([LEFT, 0])
    assert obs1[0] < obs0[0]


def test_invalid_action_raises(env):
    env.reset(seed=0)
    with pytest.raises(ValueError):
        env.step([3, 0])


def test_step_before_reset_raises():
    with pytest.raises(RuntimeError):
        BubbleShooterEnv().step([STAY, 0])


def test_same_seed_same_trajectory():
    cfg = GameConfig(game_time=2, fps=30, spawn_probability=0.5)
    runs = []
    for _ in range(2):
        e = BubbleShooterEnv(game_config=cfg)
        e.reset(seed=7)
        observations = [e.step([i % 3, i % 2])[0] for i in range(40)]
        runs.append(np.stack(observations))
        e.close()

    np.testing.assert_array_equal(runs[0], runs[1])


def test_unsupported_render_mode():
    with pytest.raises(AssertionError):
        BubbleShooterEnv(render_mode="rgb_array")


def test_discrete_wrapper_decodes_flat_actions(env):
    wrapped = MultiDiscreteToDiscreteWrapper(env)

    assert wrapped.action_space.n == 6
    assert wrapped.action(0).tolist() == [0, 0]
    assert wrapped.action(3).tolist() == [1, 1]
    assert wrapped.action(5).tolist() == [2, 1]
