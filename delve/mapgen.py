"""Rooms-and-corridors dungeon generation."""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from delve.config import GameConfig
from delve.enemies import factory as enemy_factory
from delve.rng import RNG, new_rng
from delve.state.actors import PLAYER_INDEX, Actor, ActorRegistry, make_player
from delve.state.grid import Grid, new_grid

logger = logging.getLogger(__name__)

Pos = Tuple[int, int]


@dataclass(frozen=True)
class Rect:
    """Room footprint. The outer cells are its wall; the interior is floor."""
    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def new(cls, x: int, y: int, w: int, h: int) -> "Rect":
        if w <= 0 or h <= 0:
            raise ValueError(f"room size must be positive, got {w}x{h}")
        return cls(x, y, x + w, y + h)

    def center(self) -> Pos:
        return (self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2

    def intersects(self, other: "Rect") -> bool:
        # closed intervals: rooms that only share a border still collide
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )

    def interior(self) -> Iterator[Pos]:
        for y in range(self.y1 + 1, self.y2):
            for x in range(self.x1 + 1, self.x2):
                yield x, y

    def contains_interior(self, pos: Pos) -> bool:
        x, y = pos
        return self.x1 < x < self.x2 and self.y1 < y < self.y2


class Bend(enum.Enum):
    """Where an L-shaped tunnel turns."""
    AT_NEW = "at_new"    # horizontal first, corner at (new_x, prev_y)
    AT_PREV = "at_prev"  # vertical first, corner at (prev_x, new_y)


@dataclass
class Dungeon:
    grid: Grid
    actors: ActorRegistry
    rooms: List[Rect]
    spawn: Optional[Pos]


def carve_room(grid: Grid, room: Rect) -> None:
    for x, y in room.interior():
        grid.carve(x, y)


def carve_h_tunnel(grid: Grid, x1: int, x2: int, y: int) -> None:
    for x in range(min(x1, x2), max(x1, x2) + 1):
        grid.carve(x, y)


def carve_v_tunnel(grid: Grid, y1: int, y2: int, x: int) -> None:
    for y in range(min(y1, y2), max(y1, y2) + 1):
        grid.carve(x, y)


def tunnel_corner(prev: Pos, new: Pos, bend: Bend) -> Pos:
    if bend is Bend.AT_NEW:
        return new[0], prev[1]
    return prev[0], new[1]


def carve_tunnel(grid: Grid, prev: Pos, new: Pos, bend: Bend) -> None:
    """Connect two room centers with an L of floor cells."""
    (prev_x, prev_y), (new_x, new_y) = prev, new
    if bend is Bend.AT_NEW:
        carve_h_tunnel(grid, prev_x, new_x, prev_y)
        carve_v_tunnel(grid, prev_y, new_y, new_x)
    else:
        carve_v_tunnel(grid, prev_y, new_y, prev_x)
        carve_h_tunnel(grid, prev_x, new_x, new_y)


def choose_bend(rng: RNG) -> Bend:
    return Bend.AT_NEW if rng.coin_flip() else Bend.AT_PREV


def place_monsters(room: Rect, actors: ActorRegistry, rng: RNG, max_per_room: int) -> int:
    """Drop 0..max_per_room monsters on random interior cells of ``room``.

    Positions are not checked against other actors, so two monsters (or a
    monster and the player) can share a cell.
    """
    count = rng.randint(0, max_per_room)
    for _ in range(count):
        x = rng.randint(room.x1 + 1, room.x2 - 1)
        y = rng.randint(room.y1 + 1, room.y2 - 1)
        tmpl = enemy_factory.pick_template(rng)
        actors.add(enemy_factory.spawn_enemy(tmpl.id, (x, y)))
    return count


def _random_room(cfg: GameConfig, rng: RNG) -> Rect:
    w = rng.randint(cfg.room_min_size, cfg.room_max_size)
    h = rng.randint(cfg.room_min_size, cfg.room_max_size)
    # keep the far wall (x + w, y + h) inside the map
    x = rng.randint(0, cfg.map_width - w - 1)
    y = rng.randint(0, cfg.map_height - h - 1)
    return Rect.new(x, y, w, h)


def make_map(cfg: GameConfig, rng: RNG, actors: ActorRegistry) -> Dungeon:
    """Carve rooms and tunnels into a fresh grid and populate ``actors``.

    ``actors`` must already hold the player at PLAYER_INDEX; it gets moved to
    the first room's center.
    """
    cfg.validate()
    if len(actors) == 0:
        raise ValueError("actor registry needs the player at index 0 before generation")
    grid = new_grid(cfg.map_width, cfg.map_height)

    rooms: List[Rect] = []
    spawn: Optional[Pos] = None
    monsters = 0
    for attempt in range(cfg.max_rooms):
        new_room = _random_room(cfg, rng)
        if any(new_room.intersects(room) for room in rooms):
            logger.debug("room attempt %d rejected: %s overlaps", attempt, new_room)
            continue

        carve_room(grid, new_room)
        monsters += place_monsters(new_room, actors, rng, cfg.max_monsters_per_room)
        new_center = new_room.center()
        if not rooms:
            spawn = new_center
            actors[PLAYER_INDEX].move_to(*new_center)
        else:
            prev_center = rooms[-1].center()
            carve_tunnel(grid, prev_center, new_center, choose_bend(rng))
        rooms.append(new_room)

    logger.info(
        "generated %dx%d map: %d/%d rooms, %d monsters, spawn=%s",
        grid.width, grid.height, len(rooms), cfg.max_rooms, monsters, spawn,
    )
    return Dungeon(grid=grid, actors=actors, rooms=rooms, spawn=spawn)


def generate(
    cfg: GameConfig,
    rng: Optional[RNG] = None,
    player: Optional[Actor] = None,
) -> Tuple[Grid, ActorRegistry]:
    """One-shot startup entry point: returns the carved grid and actor registry."""
    if rng is None:
        rng = new_rng(cfg.seed)
        logger.info("map seed: %s", cfg.seed)
    actors = ActorRegistry([player if player is not None else make_player()])
    dungeon = make_map(cfg, rng, actors)
    return dungeon.grid, dungeon.actors
