"""
Game entity dataclasses
"""

from dataclasses import dataclass


@dataclass
class Aircraft:
    """Player aircraft; (x, y) is the top-left corner"""
    x: float
    y: float
    width: float = 40.0
    height: float = 40.0
    cooldown: int = 0  # frames until the next shot is allowed

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


@dataclass
class Bullet:
    """Projectile; x is the left edge, y is the nose"""
    x: float
    y: float
    width: float = 8.0
    height: float = 16.0
    eid: int = -1  # assigned by the store

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


@dataclass
class Bubble:
    """Falling circular target; (x, y) is the center"""
    x: float
    y: float
    radius: float = 15.0
    speed: float = 1.0  # px per frame
    eid: int = -1  # assigned by the store
