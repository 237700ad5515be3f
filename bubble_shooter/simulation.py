"""
Simulation context - owns all game state and applies events one at a time
"""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Deque, Optional, Tuple

from .collisions import resolve_collisions
from .config import DEFAULT_CONFIG, GameConfig
from .entities import Aircraft, Bubble, Bullet
from .intents import InputMapper, Intents
from .match import MatchController, MatchState, Phase
from .movement import MovementStep
from .spawner import BubbleSpawner, RandomSource
from .store import EntityStore


class EventKind(Enum):
    FRAME = "frame"
    SECOND = "second"
    RESTART = "restart"


@dataclass(frozen=True)
class Snapshot:
    """Immutable copy of everything a renderer or HUD reads"""
    arena_width: int
    arena_height: int
    aircraft: Aircraft
    bubbles: Tuple[Bubble, ...]
    bullets: Tuple[Bullet, ...]
    score: int
    time_left: int
    phase: Phase


@dataclass(frozen=True)
class FrameReport:
    """Events of the most recent frame"""
    fired: bool = False
    bullets_expired: int = 0
    bubbles_escaped: int = 0
    hits: int = 0
    spawned: bool = False


Renderer = Callable[[Snapshot], None]


class Simulation:
    """Explicit game context: entity store, systems and match state.

    All mutation happens in pump(), which drains the event queue in FIFO
    order. The frame callback, the one-second timer and restart requests only
    post events, so their relative ordering is whatever order they were
    posted in and a restart is applied as a single step.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[RandomSource] = None,
        renderer: Optional[Renderer] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.rng = rng if rng is not None else random.Random()
        self.renderer = renderer

        self.input = InputMapper()
        self.movement = MovementStep(self.config)
        self.store = EntityStore(self._new_aircraft())
        self.spawner = BubbleSpawner(self.config, self.rng)
        self.match = MatchController(self.config.game_time)

        self.frame_count = 0
        self.last_frame = FrameReport()

        self._queue: Deque[EventKind] = deque()
        self._pumping = False
        self._disposed = False

    # ----------------------------
    # Public state
    # ----------------------------

    @property
    def state(self) -> MatchState:
        return self.match.state

    @property
    def score(self) -> int:
        return self.match.state.score

    @property
    def time_left(self) -> int:
        return self.match.state.time_left

    @property
    def phase(self) -> Phase:
        return self.match.state.phase

    @property
    def disposed(self) -> bool:
        return self._disposed

    def snapshot(self) -> Snapshot:
        cfg = self.config
        s = self.match.state
        return Snapshot(
            arena_width=cfg.arena_width,
            arena_height=cfg.arena_height,
            aircraft=replace(self.store.aircraft),
            bubbles=tuple(replace(b) for b in self.store.bubbles),
            bullets=tuple(replace(b) for b in self.store.bullets),
            score=s.score,
            time_left=s.time_left,
            phase=s.phase,
        )

    # ----------------------------
    # Input
    # ----------------------------

    def press(self, key: str):
        self.input.press(key)

    def release(self, key: str):
        self.input.release(key)

    # ----------------------------
    # Events
    # ----------------------------

    def post(self, kind: EventKind):
        if self._disposed:
            return
        self._queue.append(kind)

    def pump(self):
        # Events posted from inside a handler (e.g. by the renderer) are
        # drained by the outer call
        if self._pumping:
            return
        self._pumping = True
        try:
            while self._queue and not self._disposed:
                self._handle(self._queue.popleft())
        finally:
            self._pumping = False

    def frame(self):
        self.post(EventKind.FRAME)
        self.pump()

    def second_elapsed(self):
        self.post(EventKind.SECOND)
        self.pump()

    def restart(self):
        self.post(EventKind.RESTART)
        self.pump()

    def dispose(self):
        """Drop all entities and ignore every later event. Safe to call twice."""
        if self._disposed:
            return
        self._disposed = True
        self._queue.clear()
        self.store.clear()
        self.renderer = None

    # ----------------------------
    # Handlers
    # ----------------------------

    def _handle(self, kind: EventKind):
        if kind is EventKind.FRAME:
            self._on_frame()
        elif kind is EventKind.SECOND:
            self.match.second_elapsed()
        elif kind is EventKind.RESTART:
            self._on_restart()
        else:
            raise ValueError(f"Unknown event: {kind!r}")

    def _on_frame(self):
        # A tick scheduled before the match ended must not touch state
        if not self.match.running:
            return

        intents: Intents = self.input.intents()
        moved = self.movement.step(self.store, intents)
        hits = resolve_collisions(self.store)
        self.match.award(hits)
        spawned = self.spawner.maybe_spawn(self.store) is not None

        self.frame_count += 1
        self.last_frame = FrameReport(
            fired=moved.fired,
            bullets_expired=moved.bullets_expired,
            bubbles_escaped=moved.bubbles_escaped,
            hits=hits,
            spawned=spawned,
        )

        if self.renderer is not None:
            self.renderer(self.snapshot())

    def _on_restart(self):
        self.store.clear()
        self.store.aircraft = self._new_aircraft()
        self.match.restart()
        self.frame_count = 0
        self.last_frame = FrameReport()

    def _new_aircraft(self) -> Aircraft:
        cfg = self.config
        return Aircraft(
            x=cfg.aircraft_start_x,
            y=cfg.aircraft_y,
            width=cfg.aircraft_width,
            height=cfg.aircraft_height,
        )
