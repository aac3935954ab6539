"""
Pytest fixtures for El Impostor tests.
"""

import random
import pytest
from unittest.mock import Mock
from typing import List

from impostor.core import GameSession, EffectsPort, RevealGestureController, Roster
from impostor.config.game_config import GameConfig


WORDS = ["SUN", "MOON", "STAR"]


class ScriptedRandom(random.Random):
    """Random source returning a fixed sequence from random()."""
    
    def __init__(self, values: List[float]):
        super().__init__(0)
        self.values = list(values)
    
    def random(self) -> float:
        return self.values.pop(0)


@pytest.fixture
def game_config():
    """Test game configuration."""
    return GameConfig(random_seed=1234)


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def effects():
    """Mock effects port recording every request."""
    return Mock(spec=EffectsPort)


@pytest.fixture
def session(game_config, rng, effects) -> GameSession:
    """Create a fresh session with the default three players."""
    return GameSession(game_config, words=WORDS, rng=rng, effects=effects)


@pytest.fixture
def big_session(game_config, rng, effects) -> GameSession:
    """Create a session with six players."""
    session = GameSession(game_config, words=WORDS, rng=rng, effects=effects)
    for name in ["Ana", "Luis", "Marta"]:
        session.add_player(name)
    return session


@pytest.fixture
def gestures(session) -> RevealGestureController:
    """Gesture controller bound to the session."""
    return RevealGestureController(session)


@pytest.fixture
def roster(rng) -> Roster:
    """Default three-player roster."""
    return Roster.default(rng=rng)
