"""Pytest configuration and shared fixtures."""

import os
import random

# pygame must see these before it is first imported
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from likeview.config import BurstConfig, ViewConfig
from likeview.engine import Particle


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def burst_config():
    return BurstConfig()


@pytest.fixture
def view_config():
    return ViewConfig(seed=42)


@pytest.fixture
def make_particle():
    def _make(target=65.0, angle=0.0, size=4.0, x=250.0, y=250.0, color=(228, 13, 86, 255)):
        return Particle(x=x, y=y, target_distance=target, size=size, angle=angle, color=color)
    return _make


class DummyImage:
    def __init__(self, handle, size=(150, 150)):
        self.handle = handle
        self._size = size

    def get_size(self):
        return self._size


@pytest.fixture
def dummy_loader():
    loaded = []

    def _load(handle):
        loaded.append(handle)
        return DummyImage(handle)

    _load.loaded = loaded
    return _load
