"""
Gameplay configuration
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict


@dataclass(frozen=True)
class GameConfig:
    """All gameplay constants. Defaults reproduce the reference pacing."""

    # Arena
    arena_width: int = 900
    arena_height: int = 600

    # Aircraft
    aircraft_width: int = 40
    aircraft_height: int = 40
    aircraft_margin: int = 10  # gap between aircraft and bottom edge
    aircraft_step: float = 7.0  # px per frame

    # Bullets
    bullet_width: int = 8
    bullet_height: int = 16
    bullet_speed: float = 12.0  # px per frame
    fire_cooldown_frames: int = 15

    # Bubbles
    bubble_radius: float = 15.0
    bubble_radius_jitter: float = 10.0
    bubble_min_speed: float = 1.0
    bubble_speed_jitter: float = 1.5
    spawn_probability: float = 0.03  # per frame

    # Match
    game_time: int = 60  # seconds
    fps: int = 60

    def __post_init__(self):
        positive = (
            "arena_width", "arena_height", "aircraft_width", "aircraft_height",
            "aircraft_step", "bullet_width", "bullet_height", "bullet_speed",
            "bubble_radius", "bubble_min_speed", "game_time", "fps",
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")

        for name in ("bubble_radius_jitter", "bubble_speed_jitter", "fire_cooldown_frames", "aircraft_margin"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)!r}")

        if not 0.0 <= self.spawn_probability <= 1.0:
            raise ValueError(f"spawn_probability must be in [0, 1], got {self.spawn_probability!r}")
        if self.aircraft_width > self.arena_width:
            raise ValueError("aircraft is wider than the arena")
        if self.aircraft_height + self.aircraft_margin > self.arena_height:
            raise ValueError("aircraft does not fit in the arena height")
        if 2 * self.bubble_radius > self.arena_width:
            raise ValueError("bubble spawn band is empty: bubble_radius too large for arena_width")

    @property
    def aircraft_start_x(self) -> float:
        return self.arena_width / 2 - self.aircraft_width / 2

    @property
    def aircraft_y(self) -> float:
        return self.arena_height - self.aircraft_height - self.aircraft_margin

    @property
    def aircraft_max_x(self) -> float:
        return self.arena_width - self.aircraft_width

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        """Build a config from a plain dict, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_CONFIG = GameConfig()
