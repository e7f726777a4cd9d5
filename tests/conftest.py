"""Pytest configuration and shared fixtures."""

from datetime import timezone
from pathlib import Path

import pytest

from sclogparser.data.friendly_names import FriendlyNames
from sclogparser.render.stream_renderer import EventStreamRenderer


@pytest.fixture
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_log_path(fixtures_dir):
    """Path to a small Game.log excerpt with every modelled event kind."""
    return fixtures_dir / "sample_game.log"


@pytest.fixture
def sample_log_text(sample_log_path):
    """Contents of the sample Game.log."""
    return sample_log_path.read_text(encoding="utf-8")


@pytest.fixture
def no_names():
    """Empty friendly-name table (only strips numeric id suffixes)."""
    return FriendlyNames.empty()


@pytest.fixture
def renderer(no_names):
    """Renderer with UTC timestamps so output doesn't depend on the host timezone."""
    return EventStreamRenderer(names=no_names, tz=timezone.utc)
