"""
conftest.py
-----------
Shared pytest configuration and fixtures for Road Dodge tests.

Contains:
- Headless SDL environment so pygame never opens a window or audio device
- Registry/state builders used across system tests
- Collision event helpers and a seeded random source
"""

import os
import sys
import random

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Project root on the path so tests run without installing the package
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from road_dodge.core.debug.debug_logger import LoggerConfig  # noqa: E402
from road_dodge.core.runtime.frame import CollisionEvent, CollisionPhase  # noqa: E402
from road_dodge.core.runtime.game_settings import Health  # noqa: E402
from road_dodge.core.runtime.game_state import GameState  # noqa: E402
from road_dodge.entities.entity_registry import EntityRegistry  # noqa: E402
from road_dodge.entities.entity_types import Role  # noqa: E402

PLAYER = "player1"


# ===========================================================
# Session Setup
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Keep console output out of test reports."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


# ===========================================================
# Builders
# ===========================================================

@pytest.fixture
def registry():
    """Registry with a player, two road lines, two obstacles and the health text."""
    reg = EntityRegistry()
    reg.add_sprite(PLAYER, Role.PLAYER, "racing_car_blue", x=-500.0, collision=True)
    reg.add_sprite("roadline0", Role.ROAD_LINE, "racing_barrier_white", x=-600.0, scale=0.1)
    reg.add_sprite("roadline1", Role.ROAD_LINE, "racing_barrier_white", x=-450.0, scale=0.1)
    reg.add_sprite("obstacle0", Role.OBSTACLE, "racing_barrel_blue", x=900.0, y=100.0, collision=True)
    reg.add_sprite("obstacle1", Role.OBSTACLE, "racing_barrel_red", x=1200.0, y=-100.0, collision=True)
    reg.add_text(Health.MESSAGE_LABEL, "Health: 5")
    return reg


@pytest.fixture
def state():
    return GameState(PLAYER, initial_health=5)


@pytest.fixture
def rng():
    return random.Random(1234)


# ===========================================================
# Test Utilities
# ===========================================================

def begin(a, b):
    return CollisionEvent((a, b), CollisionPhase.BEGIN)


def end(a, b):
    return CollisionEvent((a, b), CollisionPhase.END)


def held(*actions):
    """is_held callable for the given set of actions."""
    active = set(actions)
    return lambda action: action in active


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Mark everything outside integration tests as a unit test."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
