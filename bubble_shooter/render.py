"""
Arcade rendering of simulation snapshots

The simulation uses a y-down arena; arcade draws y-up, so every y coordinate
is flipped on the way out. Nothing here feeds back into the simulation.
"""

from __future__ import annotations

from typing import Optional

import arcade

from .match import Phase
from .simulation import Snapshot

BG_C = (255, 255, 255)
BORDER_C = (0, 0, 0)
AIRCRAFT_C = (51, 51, 51)
BUBBLE_FILL_C = (255, 0, 0, 128)
BUBBLE_EDGE_C = (255, 0, 0)
BULLET_C = (0, 0, 0)
HUD_C = (20, 20, 20)


def draw_aircraft(snapshot: Snapshot):
    a = snapshot.aircraft
    h = snapshot.arena_height
    cx = a.x + a.width / 2
    cy = a.y + a.height / 2
    w2, h2 = a.width / 2, a.height / 2

    # Segments relative to the aircraft center, y-down
    segments = (
        ((0, -h2), (0, h2)),  # fuselage
        ((0, 0), (-w2, a.height / 6)),  # left wing
        ((0, 0), (w2, a.height / 6)),  # right wing
        ((0, h2), (-a.width / 6, a.height / 3)),  # tail
        ((0, h2), (a.width / 6, a.height / 3)),
    )
    for (x0, y0), (x1, y1) in segments:
        arcade.draw_line(cx + x0, h - (cy + y0), cx + x1, h - (cy + y1), AIRCRAFT_C, 3)


def draw_bubbles(snapshot: Snapshot):
    h = snapshot.arena_height
    for b in snapshot.bubbles:
        arcade.draw_circle_filled(b.x, h - b.y, b.radius, BUBBLE_FILL_C)
        arcade.draw_circle_outline(b.x, h - b.y, b.radius, BUBBLE_EDGE_C, 1)


def draw_bullets(snapshot: Snapshot):
    h = snapshot.arena_height
    for b in snapshot.bullets:
        arcade.draw_triangle_outline(
            b.x, h - b.y,
            b.x + b.width, h - b.y,
            b.x + b.width / 2, h - (b.y - b.height),
            BULLET_C, 1,
        )


def draw_snapshot(snapshot: Snapshot):
    """Draw arena border, bubbles, bullets and the aircraft."""
    arcade.draw_lrbt_rectangle_outline(
        0, snapshot.arena_width, 0, snapshot.arena_height, BORDER_C, 4
    )
    draw_aircraft(snapshot)
    draw_bubbles(snapshot)
    draw_bullets(snapshot)


def draw_hud(snapshot: Snapshot):
    w, h = snapshot.arena_width, snapshot.arena_height
    arcade.draw_text(
        f"Score: {snapshot.score}    Time: {snapshot.time_left}s",
        12, h - 28, HUD_C, 16,
    )
    if snapshot.phase is Phase.OVER:
        arcade.draw_text(
            f"Game Over! Final Score: {snapshot.score}",
            w / 2, h / 2 + 10, HUD_C, 28, anchor_x="center",
        )
        arcade.draw_text(
            "Press R to restart",
            w / 2, h / 2 - 30, HUD_C, 16, anchor_x="center",
        )


class ArenaWindow(arcade.Window):
    """Arcade window that displays the latest snapshot it was given"""

    def __init__(self, width: int, height: int, title: str = "Bubble Shooter"):
        super().__init__(width, height, title)
        self.background_color = BG_C
        self.snapshot: Optional[Snapshot] = None

    def show(self, snapshot: Snapshot):
        self.snapshot = snapshot

    def on_draw(self):
        self.clear()
        if self.snapshot is None:
            return
        draw_snapshot(self.snapshot)
        draw_hud(self.hud_snapshot())

    def hud_snapshot(self) -> Snapshot:
        return self.snapshot
