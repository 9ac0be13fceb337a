from dataclasses import dataclass, replace
from typing import Optional

from delve.errors import ConfigError


@dataclass
class GameConfig:
    # window
    screen_width: int = 80   # cells
    screen_height: int = 50
    tile_size: int = 16      # pixels per cell
    limit_fps: int = 20
    # map
    map_width: int = 80
    map_height: int = 45
    room_min_size: int = 6
    room_max_size: int = 10
    max_rooms: int = 30
    max_monsters_per_room: int = 3
    # fov
    torch_radius: int = 20
    fov_light_walls: bool = True
    seed: Optional[int] = None

    def validate(self) -> "GameConfig":
        """Reject bounds that would place rooms outside the map."""
        if self.map_width <= 0 or self.map_height <= 0:
            raise ConfigError(f"map size must be positive, got {self.map_width}x{self.map_height}")
        # size 2 is the smallest room whose center is an interior cell
        if self.room_min_size < 2:
            raise ConfigError(f"room_min_size must be >= 2, got {self.room_min_size}")
        if self.room_min_size > self.room_max_size:
            raise ConfigError(
                f"room_min_size ({self.room_min_size}) exceeds room_max_size ({self.room_max_size})"
            )
        # a room of max size plus its far wall has to fit on both axes
        if self.room_max_size + 1 > self.map_width:
            raise ConfigError(
                f"room_max_size ({self.room_max_size}) does not fit map_width ({self.map_width})"
            )
        if self.room_max_size + 1 > self.map_height:
            raise ConfigError(
                f"room_max_size ({self.room_max_size}) does not fit map_height ({self.map_height})"
            )
        for name in ("max_rooms", "max_monsters_per_room", "torch_radius"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must be >= 0, got {getattr(self, name)}")
        return self

    def with_overrides(self, **changes) -> "GameConfig":
        return replace(self, **changes).validate()
