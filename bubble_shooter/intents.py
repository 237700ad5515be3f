"""
Held-key tracking and per-frame intents
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

KEY_LEFT = "ArrowLeft"
KEY_RIGHT = "ArrowRight"
KEY_FIRE = "Space"


@dataclass(frozen=True)
class Intents:
    """What the player wants to do this frame"""
    move_left: bool = False
    move_right: bool = False
    fire: bool = False


class InputMapper:
    """Live set of held keys, updated by key-down / key-up events.

    Keys outside the three logical keys are tracked but ignored when
    deriving intents. There is no memory of earlier frames.
    """

    def __init__(self):
        self._held: Dict[str, bool] = {}

    def press(self, key: str):
        self._held[key] = True

    def release(self, key: str):
        self._held[key] = False

    def set_held(self, key: str, held: bool):
        self._held[key] = bool(held)

    def is_held(self, key: str) -> bool:
        return self._held.get(key, False)

    def reset(self):
        self._held.clear()

    def intents(self) -> Intents:
        return Intents(
            move_left=self.is_held(KEY_LEFT),
            move_right=self.is_held(KEY_RIGHT),
            fire=self.is_held(KEY_FIRE),
        )
