"""
conftest.py
-----------
Shared pytest configuration and fixtures for the survival game tests.

Contains:
- Headless SDL setup so pygame never opens a real window
- A fake input source factory
- Deterministic RNG and a standard screen size
"""

import os

# Must be set before pygame is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random
from unittest.mock import MagicMock

import pytest

from survival.core.debug.debug_logger import LoggerConfig


SCREEN = (800.0, 600.0)


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def screen():
    """Default 800x600 viewport."""
    return SCREEN


@pytest.fixture
def rng():
    """Seeded RNG so spawn positions are reproducible."""
    return random.Random(1234)


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Keep console output off unless a test turns it back on."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)
    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(LoggerConfig, "CATEGORIES", dict(LoggerConfig.CATEGORIES))


@pytest.fixture
def make_input():
    """
    Factory for a fake input source.

    Usage:
        controls = make_input(held={"move_left"}, fire=2, pointer=(10, 20))
    """
    def _make(held=(), fire=0, pointer=(0.0, 0.0), pressed=()):
        held = set(held)
        pressed = set(pressed)
        source = MagicMock()
        source.action_held.side_effect = lambda name: name in held
        source.action_pressed.side_effect = lambda name: name in pressed
        source.fire_count.return_value = fire
        source.pointer_pos.return_value = pointer
        return source

    return _make


@pytest.fixture
def idle_input(make_input):
    """Input source with nothing pressed."""
    return make_input()


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests that start pygame")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Tag everything not marked integration as a unit test."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
