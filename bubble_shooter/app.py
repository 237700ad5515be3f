"""
Playable desktop front end

Install:
    pip install -e .

Run:
    python -m bubble_shooter
"""

from __future__ import annotations

import argparse
import random
from typing import Optional

import arcade
import pyglet

from .config import GameConfig
from .intents import KEY_FIRE, KEY_LEFT, KEY_RIGHT
from .loop import GameLoop
from .match import Phase
from .render import ArenaWindow
from .simulation import Simulation, Snapshot

KEY_MAP = {
    arcade.key.LEFT: KEY_LEFT,
    arcade.key.RIGHT: KEY_RIGHT,
    arcade.key.SPACE: KEY_FIRE,
}
RESTART_KEYS = (arcade.key.R, arcade.key.ENTER)


class BubbleShooterWindow(ArenaWindow):
    """Window that forwards keys into a Simulation driven by a GameLoop"""

    def __init__(self, config: GameConfig, seed: Optional[int] = None, verbose: int = 1):
        super().__init__(config.arena_width, config.arena_height, "Aircraft Bubble Shooter")
        self.verbose = verbose
        self.simulation = Simulation(config, rng=random.Random(seed), renderer=self.show)
        self.loop = GameLoop(self.simulation, pyglet.clock, fps=config.fps,
                             on_match_over=self._report_match_over)

        self.show(self.simulation.snapshot())
        self.loop.start()

    def hud_snapshot(self) -> Snapshot:
        # Entities freeze on the last running frame; score/time/phase stay live
        return self.simulation.snapshot()

    def _report_match_over(self, snapshot: Snapshot):
        if self.verbose > 0:
            print(f"Game over! Final score: {snapshot.score}")

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in KEY_MAP:
            self.simulation.press(KEY_MAP[symbol])
        elif symbol in RESTART_KEYS and self.simulation.phase is Phase.OVER:
            self.loop.restart()
            self.show(self.simulation.snapshot())
            if self.verbose > 0:
                print("Restarted")

    def on_key_release(self, symbol: int, modifiers: int):
        if symbol in KEY_MAP:
            self.simulation.release(KEY_MAP[symbol])

    def on_close(self):
        self.loop.stop()
        super().on_close()


def main():
    parser = argparse.ArgumentParser(description="Aircraft bubble shooter")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for bubble spawning (default: unseeded)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=60,
        help="Simulation frames per second (default: 60)",
    )
    parser.add_argument(
        "--game-time",
        type=int,
        default=60,
        help="Match duration in seconds (default: 60)",
    )
    args = parser.parse_args()

    config = GameConfig(fps=args.fps, game_time=args.game_time)

    print("Move: Left/Right arrows, Shoot: Space, Restart: R")
    BubbleShooterWindow(config, seed=args.seed)
    arcade.run()


if __name__ == "__main__":
    main()
