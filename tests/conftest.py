"""Pytest configuration and shared fixtures."""

import os

# Ensure headless pygame for all tests
os.environ['SDL_VIDEODRIVER'] = 'dummy'

import pytest

from portal_platformer.config import GameConfig
from portal_platformer.world import WorldState


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def game_config():
    """Default game configuration."""
    return GameConfig()


@pytest.fixture
def world(game_config):
    """Seeded world at level 1."""
    return WorldState(game_config, seed=42)


@pytest.fixture
def empty_world(world):
    """Seeded world with obstacles and stars removed."""
    world.obstacles = []
    world.stars = []
    return world


@pytest.fixture
def fake_clock():
    return FakeClock()
