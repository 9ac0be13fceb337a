import os

# pygame-backed modules import headless
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from delve.config import GameConfig
from delve.enemies import templates
from delve.state.grid import Grid
from tests.helpers import carve_box


@pytest.fixture
def open_room():
    """10x10 grid whose floor is (1,1)-(8,8) inside a one-cell wall border."""
    return carve_box(Grid(10, 10), 1, 1, 8, 8)


@pytest.fixture
def small_cfg():
    return GameConfig(map_width=40, map_height=24, room_min_size=4, room_max_size=8, max_rooms=12)


@pytest.fixture(autouse=True)
def default_templates():
    templates.load_enemy_templates()
    yield
    templates.load_enemy_templates()
