"""
Game loop - drives a Simulation from a clock
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from .match import Phase
from .simulation import Simulation, Snapshot


class Clock(Protocol):
    """The subset of pyglet.clock used here"""

    def schedule_interval(self, func: Callable[[float], None], interval: float) -> None: ...

    def unschedule(self, func: Callable[[float], None]) -> None: ...


class GameLoop:
    """Schedules the frame tick and the one-second timer on a clock.

    Both callbacks are cancelled together by stop(). A callback the clock
    still delivers after stop() is ignored.
    """

    TIMER_INTERVAL = 1.0

    def __init__(
        self,
        simulation: Simulation,
        clock: Clock,
        fps: int = 60,
        on_match_over: Optional[Callable[[Snapshot], None]] = None,
    ):
        self.simulation = simulation
        self.on_match_over = on_match_over
        self.clock = clock
        self.frame_interval = 1.0 / fps
        self._active = False
        self._stopped = False

    @property
    def active(self) -> bool:
        return self._active

    def start(self):
        if self._active or self._stopped:
            return
        self.clock.schedule_interval(self._on_frame, self.frame_interval)
        self.clock.schedule_interval(self._on_second, self.TIMER_INTERVAL)
        self._active = True

    def stop(self):
        """Cancel both callbacks and dispose the simulation. Idempotent."""
        if self._active:
            self.clock.unschedule(self._on_frame)
            self.clock.unschedule(self._on_second)
            self._active = False
        self._stopped = True
        self.simulation.dispose()

    def restart(self):
        """Restart the match and re-arm the timer for a full first second."""
        if not self._active:
            return
        self.simulation.restart()
        self.clock.unschedule(self._on_second)
        self.clock.schedule_interval(self._on_second, self.TIMER_INTERVAL)

    # ----------------------------
    # Clock callbacks
    # ----------------------------

    def _on_frame(self, dt: float):
        if not self._active:
            return
        self.simulation.frame()

    def _on_second(self, dt: float):
        if not self._active:
            return
        was_running = self.simulation.phase is Phase.RUNNING
        self.simulation.second_elapsed()
        if was_running and self.simulation.phase is Phase.OVER and self.on_match_over:
            self.on_match_over(self.simulation.snapshot())
