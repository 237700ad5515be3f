"""
Bubble spawner
"""

from __future__ import annotations

from typing import Optional, Protocol

from .config import GameConfig
from .entities import Bubble
from .store import EntityStore


class RandomSource(Protocol):
    """Anything with random() and uniform(); random.Random and numpy Generators both fit"""

    def random(self) -> float: ...

    def uniform(self, low: float, high: float) -> float: ...


class BubbleSpawner:
    """Creates at most one bubble per call, with fixed probability.

    The spawn band uses the base radius, so a bubble drawn with a larger
    radius may overlap the side edges by up to the jitter amount.
    """

    def __init__(self, config: GameConfig, rng: RandomSource):
        self.config = config
        self.rng = rng

    def maybe_spawn(self, store: EntityStore) -> Optional[Bubble]:
        cfg = self.config
        if self.rng.random() >= cfg.spawn_probability:
            return None

        base = cfg.bubble_radius
        x = float(self.rng.uniform(base, cfg.arena_width - base))
        radius = float(self.rng.uniform(base, base + cfg.bubble_radius_jitter))
        speed = float(self.rng.uniform(cfg.bubble_min_speed, cfg.bubble_min_speed + cfg.bubble_speed_jitter))

        return store.add_bubble(Bubble(x=x, y=-base, radius=radius, speed=speed))
