"""Pytest fixtures for Swarm tests."""
import pytest
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root():
    """Return the project root path."""
    return PROJECT_ROOT


@pytest.fixture
def data_dir():
    """Return the bundled data directory path."""
    from swarm.config import DATA_DIR
    return DATA_DIR


@pytest.fixture
def bus():
    """A fresh EventBus."""
    from swarm.core.events import EventBus
    return EventBus()


@pytest.fixture
def coordinator(bus):
    """A PackCoordinator publishing to the bus fixture."""
    from swarm.core.pack import PackCoordinator
    return PackCoordinator(bus=bus)


@pytest.fixture
def game():
    """An empty goblin Game."""
    from swarm.core.horde import Game
    return Game()
