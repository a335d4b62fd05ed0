"""Pytest configuration and shared fixtures."""

import os
import random
import sys
from pathlib import Path

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config import GameConfig  # noqa: E402
from sim import Session  # noqa: E402


class FixedRandom:
    """Stand-in for random.Random that replays the given values in a loop."""

    def __init__(self, *values):
        self.values = list(values) or [0.5]
        self.i = 0
        self.calls = 0

    def random(self):
        v = self.values[self.i % len(self.values)]
        self.i += 1
        self.calls += 1
        return v

    def uniform(self, a, b):
        return a + (b - a) * self.random()

    def randint(self, a, b):
        return a


@pytest.fixture
def fixed_rng():
    return FixedRandom(0.75)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def classic_cfg():
    return GameConfig.from_variant("classic")


@pytest.fixture
def speedup_cfg():
    return GameConfig.from_variant("speedup")


@pytest.fixture
def classic_session(classic_cfg, fixed_rng):
    return Session(classic_cfg, rng=fixed_rng)


def place_ball(session, x, y, dx, dy):
    b = session.state.ball
    b.x, b.y, b.dx, b.dy = x, y, dx, dy
    return b
