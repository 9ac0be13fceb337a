import pytest

from delve.config import GameConfig
from delve.errors import ConfigError, DelveError


def test_defaults_are_valid():
    cfg = GameConfig()
    assert cfg.validate() is cfg
    assert (cfg.map_width, cfg.map_height) == (80, 45)
    assert (cfg.room_min_size, cfg.room_max_size, cfg.max_rooms) == (6, 10, 30)
    assert cfg.max_monsters_per_room == 3
    assert cfg.torch_radius == 20 and cfg.fov_light_walls


@pytest.mark.parametrize("changes,field", [
    ({"map_width": 0}, "map size"),
    ({"room_min_size": 0}, "room_min_size"),
    ({"room_min_size": 1, "room_max_size": 1}, "room_min_size"),
    ({"room_min_size": 9, "room_max_size": 7}, "exceeds"),
    ({"room_max_size": 80}, "map_width"),
    ({"room_max_size": 45}, "map_height"),
    ({"max_rooms": -1}, "max_rooms"),
    ({"max_monsters_per_room": -2}, "max_monsters_per_room"),
    ({"torch_radius": -1}, "torch_radius"),
])
def test_invalid_bounds(changes, field):
    with pytest.raises(ConfigError, match=field):
        GameConfig().with_overrides(**changes)


def test_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        GameConfig(room_max_size=100).validate()
    assert issubclass(ConfigError, DelveError)


def test_with_overrides_returns_copy():
    base = GameConfig()
    small = base.with_overrides(map_width=30, map_height=20, room_max_size=8)
    assert small.map_width == 30
    assert base.map_width == 80
