"""
Bullet vs bubble collision resolution
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .entities import Bubble, Bullet
from .store import EntityStore
from .utils import point_in_circle


def find_hits(bullets: Sequence[Bullet], bubbles: Sequence[Bubble]) -> List[Tuple[int, int]]:
    """Match bullets to bubbles without touching either collection.

    Bullets are scanned in order; each one claims the first unclaimed bubble
    whose center is closer than its radius to the bullet's nose point.
    Returns (bullet_id, bubble_id) pairs; every id appears at most once.
    """
    hits: List[Tuple[int, int]] = []
    claimed = set()

    for bullet in bullets:
        px, py = bullet.center_x, bullet.y
        for bubble in bubbles:
            if bubble.eid in claimed:
                continue
            if point_in_circle(px, py, bubble.x, bubble.y, bubble.radius):
                # One-hit kill regardless of size
                claimed.add(bubble.eid)
                hits.append((bullet.eid, bubble.eid))
                break

    return hits


def resolve_collisions(store: EntityStore) -> int:
    """Remove every matched bullet/bubble pair. Returns the number of bubbles destroyed."""
    hits = find_hits(store.bullets, store.bubbles)
    if not hits:
        return 0

    store.discard_bullets(bullet_id for bullet_id, _ in hits)
    store.discard_bubbles(bubble_id for _, bubble_id in hits)
    return len(hits)
