from __future__ import annotations

import logging
from typing import Optional

from delve.state.actors import ActorRegistry
from delve.state.grid import Grid

logger = logging.getLogger(__name__)

_STEPS = (-1, 0, 1)


def position_is_blocked(
    registry: ActorRegistry,
    grid: Grid,
    x: int,
    y: int,
    mover: Optional[int] = None,
) -> bool:
    """True if (x, y) is off the map, a blocked tile, or held by a blocking actor.

    The actor at index ``mover`` is ignored so it never collides with itself.
    """
    if not grid.in_bounds(x, y):
        return True
    if grid.is_blocked(x, y):
        return True
    return registry.blocking_actor_at((x, y), exclude=mover) is not None


def attempt_move(registry: ActorRegistry, grid: Grid, actor_index: int, dx: int, dy: int) -> bool:
    """Step one actor by (dx, dy); returns False and changes nothing if blocked.

    A blocked move is an ordinary outcome, not an error. Deltas outside
    {-1, 0, 1} and unknown actor indices are caller bugs and raise.
    """
    if dx not in _STEPS or dy not in _STEPS:
        raise ValueError(f"step must be in -1..1 on each axis, got ({dx}, {dy})")
    actor = registry[actor_index]
    if dx == 0 and dy == 0:
        return False

    x, y = actor.pos
    nx, ny = x + dx, y + dy
    if position_is_blocked(registry, grid, nx, ny, mover=actor_index):
        logger.debug("%s blocked moving to (%d, %d)", actor.name, nx, ny)
        return False

    actor.move_to(nx, ny)
    return True
