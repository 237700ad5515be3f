"""
Match lifecycle: score, countdown, phase
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Phase(str, Enum):
    RUNNING = "running"
    OVER = "over"


@dataclass(frozen=True)
class MatchState:
    score: int = 0
    time_left: int = 60
    phase: Phase = Phase.RUNNING


class MatchController:
    """Owns score, time left and phase.

    State is an immutable MatchState that is swapped as a whole, so a reader
    never sees a partially updated match.
    """

    def __init__(self, game_time: int = 60):
        self.game_time = game_time
        self.state = MatchState(time_left=game_time)

    @property
    def running(self) -> bool:
        return self.state.phase is Phase.RUNNING

    def award(self, hits: int):
        """Add one point per destroyed bubble."""
        if hits <= 0 or not self.running:
            return
        s = self.state
        self.state = MatchState(score=s.score + hits, time_left=s.time_left, phase=s.phase)

    def second_elapsed(self) -> bool:
        """Count down one second. Returns True if this ended the match."""
        if not self.running:
            return False

        s = self.state
        if s.time_left <= 1:
            self.state = MatchState(score=s.score, time_left=0, phase=Phase.OVER)
            return True

        self.state = MatchState(score=s.score, time_left=s.time_left - 1, phase=s.phase)
        return False

    def restart(self):
        self.state = MatchState(score=0, time_left=self.game_time, phase=Phase.RUNNING)
