import os

# Headless pygame for the app tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from mandelzoom.config import ViewerConfig


@pytest.fixture
def small_config():
    return ViewerConfig(width=80, height=60, max_iter=64)
