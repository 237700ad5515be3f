"""
Shared fixtures for the bubble shooter tests
"""

import random

import pytest

from bubble_shooter import Aircraft, EntityStore, GameConfig, Simulation


class ScriptedRandom:
    """Random source that replays fixed values from random()"""

    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)

    def uniform(self, low, high):
        return low + (high - low) * self.random()


class NeverSpawn:
    """Random source that never passes the spawn check"""

    def random(self):
        return 0.999

    def uniform(self, low, high):
        return low


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def store(config):
    return EntityStore(Aircraft(
        x=config.aircraft_start_x,
        y=config.aircraft_y,
        width=config.aircraft_width,
        height=config.aircraft_height,
    ))


@pytest.fixture
def quiet_sim(config):
    """Simulation that never spawns bubbles on its own"""
    return Simulation(config, rng=NeverSpawn())


@pytest.fixture
def seeded_sim(config):
    return Simulation(config, rng=random.Random(1234))


@pytest.fixture
def scripted():
    return ScriptedRandom
