"""Aircraft bubble shooter - simulation core, Gymnasium env and arcade front end"""

from .config import DEFAULT_CONFIG, GameConfig
from .entities import Aircraft, Bubble, Bullet
from .intents import KEY_FIRE, KEY_LEFT, KEY_RIGHT, InputMapper, Intents
from .loop import GameLoop
from .match import MatchController, MatchState, Phase
from .simulation import EventKind, FrameReport, Simulation, Snapshot
from .store import EntityStore
from .env import BubbleShooterEnv, run_random_episode

__all__ = [
    'GameConfig', 'DEFAULT_CONFIG',
    'Aircraft', 'Bubble', 'Bullet',
    'InputMapper', 'Intents', 'KEY_LEFT', 'KEY_RIGHT', 'KEY_FIRE',
    'EntityStore', 'MatchController', 'MatchState', 'Phase',
    'Simulation', 'Snapshot', 'FrameReport', 'EventKind', 'GameLoop',
    'BubbleShooterEnv', 'run_random_episode',
]
