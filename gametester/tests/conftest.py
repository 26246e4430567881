"""
Pytest configuration and shared fixtures for the game tester tests.
"""
import sys
from pathlib import Path

import pytest

from gametester.models.config import TestConfig
from gametester.models.player import PlayerIdentity

FAKE_GAME = Path(__file__).parent / "fake_game.py"

PLAYER_NAMES = ("alice", "bob", "carol", "dave")


@pytest.fixture
def fake_game_command():
    """argv prefix running the stand-in game with the current interpreter."""
    return (sys.executable, str(FAKE_GAME))


@pytest.fixture
def players():
    return tuple(PlayerIdentity(name) for name in PLAYER_NAMES)


@pytest.fixture
def make_config(players, fake_game_command):
    """Factory for TestConfig pointing at the stand-in game."""
    def _make(seed=0, instances=4, settings=b"", jobs=2, **kwargs):
        kwargs.setdefault("players", players)
        kwargs.setdefault("game_command", fake_game_command)
        return TestConfig(
            seed=seed,
            instances=instances,
            settings_blob=settings,
            jobs=jobs,
            **kwargs,
        )
    return _make
