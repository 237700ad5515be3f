"""
Entity store - single source of truth for live entities
"""

from __future__ import annotations

import itertools
from typing import Callable, Dict, Iterable, List

from .entities import Aircraft, Bubble, Bullet


class EntityStore:
    """Holds the aircraft plus the live bubbles and bullets.

    Bubbles and bullets are kept in insertion-ordered mappings keyed by a
    store-assigned id, so removing one entity never shifts the others.
    There is no cap on how many entities may be live.
    """

    def __init__(self, aircraft: Aircraft):
        self.aircraft = aircraft
        self._bubbles: Dict[int, Bubble] = {}
        self._bullets: Dict[int, Bullet] = {}
        self._ids = itertools.count(1)

    # ----------------------------
    # Append
    # ----------------------------

    def add_bubble(self, bubble: Bubble) -> Bubble:
        bubble.eid = next(self._ids)
        self._bubbles[bubble.eid] = bubble
        return bubble

    def add_bullet(self, bullet: Bullet) -> Bullet:
        bullet.eid = next(self._ids)
        self._bullets[bullet.eid] = bullet
        return bullet

    # ----------------------------
    # Iteration
    # ----------------------------

    @property
    def bubbles(self) -> List[Bubble]:
        return list(self._bubbles.values())

    @property
    def bullets(self) -> List[Bullet]:
        return list(self._bullets.values())

    @property
    def num_bubbles(self) -> int:
        return len(self._bubbles)

    @property
    def num_bullets(self) -> int:
        return len(self._bullets)

    # ----------------------------
    # Removal
    # ----------------------------

    def remove_bubbles(self, predicate: Callable[[Bubble], bool]) -> List[Bubble]:
        removed = [b for b in self._bubbles.values() if predicate(b)]
        for b in removed:
            del self._bubbles[b.eid]
        return removed

    def remove_bullets(self, predicate: Callable[[Bullet], bool]) -> List[Bullet]:
        removed = [b for b in self._bullets.values() if predicate(b)]
        for b in removed:
            del self._bullets[b.eid]
        return removed

    def discard_bubbles(self, ids: Iterable[int]) -> int:
        """Remove bubbles by id; unknown ids are ignored. Returns count removed."""
        return sum(self._bubbles.pop(i, None) is not None for i in set(ids))

    def discard_bullets(self, ids: Iterable[int]) -> int:
        """Remove bullets by id; unknown ids are ignored. Returns count removed."""
        return sum(self._bullets.pop(i, None) is not None for i in set(ids))

    def clear(self):
        self._bubbles.clear()
        self._bullets.clear()
