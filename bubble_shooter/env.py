"""
BubbleShooterEnv - Gymnasium wrapper around the bubble shooter simulation
-------------------------------------------------------------------------
- One env step = one simulation frame; every `fps` frames a second elapses
- Discrete MultiDiscrete action space: [move(3), fire(2)]
- Vector observation: aircraft state + K nearest bubbles
- Episode truncates when the match timer runs out

Quick test:
    python -m bubble_shooter.env
"""

from __future__ import annotations

import time
from typing import Any, Dict, Optional, Union

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import GameConfig
from .intents import KEY_FIRE, KEY_LEFT, KEY_RIGHT
from .match import Phase
from .simulation import FrameReport, Simulation
from .utils import clamp, seed_everything

DEFAULT_REWARD_CONFIG = {
    "R_POP": 1.0,  # per bubble destroyed
    "R_SHOT": 0.01,  # per bullet fired
    "R_ESCAPE": 0.1,  # per bubble reaching the bottom
}


class BubbleShooterEnv(gym.Env):
    """Bubble shooter as a Gymnasium environment"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        game_config: Optional[Union[GameConfig, Dict[str, Any]]] = None,
        k_bubbles: int = 5,
        reward_config: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode: {render_mode}"
        self.render_mode = render_mode

        if game_config is None:
            game_config = GameConfig()
        elif isinstance(game_config, dict):
            game_config = GameConfig.from_dict(game_config)
        self.config: GameConfig = game_config

        self.k_bubbles = k_bubbles
        self.reward_config = dict(DEFAULT_REWARD_CONFIG)
        if reward_config:
            self.reward_config.update(reward_config)

        # move: 0 stay, 1 left, 2 right
        # fire: 0/1
        self.action_space = spaces.MultiDiscrete([3, 2])

        # Aircraft: x(1) cooldown(1) time_left(1)
        # Each bubble: rel pos(2) radius(1) speed(1)
        obs_dim = 3 + self.k_bubbles * 4
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self._last_render: Optional[float] = None
        self.sim: Simulation = None  # type: ignore

        self._step_count = 0
        self._popped = 0
        self._escaped = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        self.sim = Simulation(self.config, rng=self.np_random)
        self._step_count = 0
        self._popped = 0
        self._escaped = 0

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, info

    def step(self, action):
        if self.sim is None:
            raise RuntimeError("Call reset() before step()")

        action = np.asarray(action, dtype=np.int64)
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action: {action!r}")

        move, fire = int(action[0]), int(action[1])
        self.sim.input.set_held(KEY_LEFT, move == 1)
        self.sim.input.set_held(KEY_RIGHT, move == 2)
        self.sim.input.set_held(KEY_FIRE, fire == 1)

        frames_before = self.sim.frame_count
        self.sim.frame()
        report = self.sim.last_frame if self.sim.frame_count != frames_before else FrameReport()

        self._step_count += 1
        if self._step_count % self.config.fps == 0:
            self.sim.second_elapsed()

        self._popped += report.hits
        self._escaped += report.bubbles_escaped

        reward = self._compute_reward(report)
        terminated = False
        truncated = self.sim.phase is Phase.OVER

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        cfg = self.config
        a = self.sim.store.aircraft

        ax = a.x / cfg.aircraft_max_x if cfg.aircraft_max_x > 0 else 0.5
        cooldown = a.cooldown / max(1, cfg.fire_cooldown_frames)
        time_left = self.sim.time_left / cfg.game_time

        obs_parts = [ax * 2 - 1, cooldown * 2 - 1, time_left * 2 - 1]

        # Bubbles: top-K nearest to the aircraft nose
        nose_x, nose_y = a.center_x, a.y
        bubbles_sorted = sorted(
            self.sim.store.bubbles,
            key=lambda b: (b.x - nose_x) ** 2 + (b.y - nose_y) ** 2
        )
        max_radius = cfg.bubble_radius + cfg.bubble_radius_jitter
        max_speed = cfg.bubble_min_speed + cfg.bubble_speed_jitter
        for i in range(self.k_bubbles):
            if i < len(bubbles_sorted):
                b = bubbles_sorted[i]
                obs_parts += [
                    clamp((b.x - nose_x) / cfg.arena_width, -1, 1),
                    clamp((b.y - nose_y) / cfg.arena_height, -1, 1),
                    clamp(b.radius / max_radius, -1, 1),
                    clamp(b.speed / max_speed, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        return np.clip(np.array(obs_parts, dtype=np.float32), -1.0, 1.0)

    def _compute_reward(self, report: FrameReport) -> float:
        rc = self.reward_config
        reward = 0.0
        reward += rc["R_POP"] * report.hits
        reward -= rc["R_SHOT"] * float(report.fired)
        reward -= rc["R_ESCAPE"] * report.bubbles_escaped
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.sim.score,
            "time_left": self.sim.time_left,
            "num_bubbles": self.sim.store.num_bubbles,
            "num_bullets": self.sim.store.num_bullets,
            "step": self._step_count,
            "popped": self._popped,
            "bubbles_escaped": self._escaped,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            # arcade needs a display; keep it out of headless runs
            from .render import ArenaWindow
            self._window = ArenaWindow(self.config.arena_width, self.config.arena_height,
                                       "BubbleShooterEnv - Arcade")

        self._window.show(self.sim.snapshot())
        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        self._wait_for_next_frame()
        return None

    def _wait_for_next_frame(self):
        """Hold human rendering to metadata["render_fps"]"""
        interval = 1.0 / self.metadata["render_fps"]
        if self._last_render is not None:
            remaining = interval - (time.perf_counter() - self._last_render)
            if remaining > 0:
                time.sleep(remaining)
        self._last_render = time.perf_counter()

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None
        if self.sim is not None:
            self.sim.dispose()


def run_random_episode(render: bool = True, seed: Optional[int] = 42):
    """Run a random episode for testing"""
    env = BubbleShooterEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.2f}, score: {info['score']}")
    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
