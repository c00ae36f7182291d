"""Shared pytest fixtures for all tests."""

import random
import sys
from unittest.mock import MagicMock

import pytest

# Mock hardware libraries BEFORE any flicker imports
# This must happen at module level, before pytest collects tests
mock_ws281x = MagicMock()
mock_ws281x.PixelStrip = MagicMock
mock_ws281x.Color = MagicMock(side_effect=lambda r, g, b: (r, g, b))
sys.modules['rpi_ws281x'] = mock_ws281x

from flicker.color import Color
from flicker.light import Light


@pytest.fixture
def rng():
    """Seeded random source for reproducible noise and intervals."""
    return random.Random(1234)


@pytest.fixture
def warm_light():
    """In-memory light with a warm color and intensity 2.0."""
    return Light(color=Color(1.0, 0.5, 0.25, 1.0), intensity=2.0)
