from __future__ import annotations

import logging
from typing import Optional

from delve.config import GameConfig
from delve.mapgen import make_map
from delve.rng import RNG, new_rng
from delve.state.actors import PLAYER_INDEX, Actor, ActorRegistry, make_player
from delve.state.grid import Grid
from delve.systems.fov import FovTracker, VisibilityField
from delve.systems.movement import attempt_move

logger = logging.getLogger(__name__)


class Game:
    """One dungeon session: the grid, its actors and the player's view.

    The engine calls :meth:`player_move` once per directional key and
    :meth:`update_fov` once per frame; everything else is read-only access
    for the renderer.
    """

    def __init__(self, cfg: GameConfig, rng: Optional[RNG] = None, player: Optional[Actor] = None) -> None:
        self.cfg = cfg.validate()
        self.rng = rng if rng is not None else new_rng(cfg.seed)
        actors = ActorRegistry([player if player is not None else make_player()])
        dungeon = make_map(cfg, self.rng, actors)
        self.rooms = dungeon.rooms
        self.spawn = dungeon.spawn
        self.grid: Grid = dungeon.grid
        self.actors: ActorRegistry = dungeon.actors
        self.fov = FovTracker(self.grid, cfg.torch_radius, cfg.fov_light_walls)
        self.turn = 0
        logger.debug("session ready: %d rooms, %d actors, spawn %s", len(self.rooms), len(self.actors), self.spawn)

    @property
    def player(self) -> Actor:
        return self.actors[PLAYER_INDEX]

    @property
    def visibility(self) -> Optional[VisibilityField]:
        return self.fov.field

    def player_move(self, dx: int, dy: int) -> bool:
        moved = attempt_move(self.actors, self.grid, PLAYER_INDEX, dx, dy)
        if moved:
            self.turn += 1
        return moved

    def update_fov(self) -> bool:
        """Recompute the player's view if they changed cell since last time."""
        return self.fov.update(self.player.pos)

    def is_visible(self, x: int, y: int) -> bool:
        return self.fov.is_visible(x, y)
