"""
Per-frame movement: aircraft, firing, bullets, bubbles
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import GameConfig
from .entities import Bullet
from .intents import Intents
from .store import EntityStore
from .utils import clamp


@dataclass
class MoveReport:
    """What happened during one movement step"""
    fired: bool = False
    bullets_expired: int = 0
    bubbles_escaped: int = 0


class MovementStep:
    """Advances every entity by one frame, in a fixed order."""

    def __init__(self, config: GameConfig):
        self.config = config

    def step(self, store: EntityStore, intents: Intents) -> MoveReport:
        report = MoveReport()
        self._move_aircraft(store, intents)
        report.fired = self._apply_fire(store, intents)
        report.bullets_expired = self._update_bullets(store)
        report.bubbles_escaped = self._update_bubbles(store)
        return report

    # ----------------------------
    # Core mechanics
    # ----------------------------

    def _move_aircraft(self, store: EntityStore, intents: Intents):
        cfg = self.config
        a = store.aircraft

        # Both directions held cancel out
        if intents.move_left and a.x > 0:
            a.x -= cfg.aircraft_step
        if intents.move_right and a.x < cfg.aircraft_max_x:
            a.x += cfg.aircraft_step

        a.x = clamp(a.x, 0.0, cfg.aircraft_max_x)

    def _apply_fire(self, store: EntityStore, intents: Intents) -> bool:
        cfg = self.config
        a = store.aircraft
        fired = False

        if intents.fire and a.cooldown <= 0:
            # Spawn at the nose, centered on the fuselage
            store.add_bullet(Bullet(
                x=a.center_x - cfg.bullet_width / 2,
                y=a.y - cfg.bullet_height / 2,
                width=cfg.bullet_width,
                height=cfg.bullet_height,
            ))
            a.cooldown = cfg.fire_cooldown_frames
            fired = True

        if a.cooldown > 0:
            a.cooldown -= 1

        return fired

    def _update_bullets(self, store: EntityStore) -> int:
        for b in store.bullets:
            b.y -= self.config.bullet_speed

        expired = store.remove_bullets(lambda b: b.y + b.height <= 0)
        return len(expired)

    def _update_bubbles(self, store: EntityStore) -> int:
        height = self.config.arena_height
        for bubble in store.bubbles:
            bubble.y += bubble.speed

        escaped = store.remove_bubbles(lambda bubble: bubble.y - bubble.radius >= height)
        return len(escaped)
