"""Shared fixtures for BrickBreaker tests."""
import copy
import os

# Headless pygame for skin and input tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from brickbreaker import logging as bb_logging
from brickbreaker.config import GameConfig
from brickbreaker.session import GameSession


class FakeArena:
    """Arena bounds plus a ball-lost counter."""

    def __init__(self, width: float = 800, height: float = 600):
        self._width = width
        self._height = height
        self.lost_count = 0

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def ball_lost(self) -> None:
        self.lost_count += 1


@pytest.fixture(autouse=True)
def isolated_logging():
    """Silence logs and restore logging config after each test."""
    saved = copy.deepcopy(bb_logging._config)
    bb_logging.disable_logging()
    yield
    bb_logging.close_all_sinks()
    bb_logging._config.clear()
    bb_logging._config.update(saved)


@pytest.fixture
def arena():
    return FakeArena()


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def session(config):
    return GameSession(config)
