import random

import pytest

from game.horizon.config import make_config
from game.horizon.scheduler import ManualScheduler
from game.horizon.session import GameSession
from game.horizon.storage import MemoryStore
from game.horizon.utils import make_rng


class ScriptedRandom(random.Random):
    """random() returns the scripted values in order, then 0.5 forever"""

    def __init__(self, values=()):
        super().__init__(0)
        self._values = list(values)

    def random(self):
        if self._values:
            return self._values.pop(0)
        return 0.5


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


class RecordingRenderer:
    def __init__(self):
        self.snapshots = []

    def draw(self, snapshot):
        self.snapshots.append(snapshot)


@pytest.fixture
def quiet_config():
    """Default tunables with random spawning switched off"""
    return make_config(asteroid_spawn_rate=0.0, star_spawn_rate=0.0)


@pytest.fixture
def clock():
    return FakeClock(1000.0)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def session(quiet_config, clock, store):
    return GameSession(
        config=quiet_config,
        store=store,
        rng=make_rng(7),
        clock=clock,
        scheduler=ManualScheduler(),
        renderer=RecordingRenderer(),
    )


@pytest.fixture
def scripted():
    """Factory for a random source that replays the given values"""
    return ScriptedRandom
