"""Field of view over a Grid.

Visibility is a straight Bresenham ray test per cell inside a circular radius.
The ray is tried in both directions (observer to cell and cell to observer), so
within one computation a floor cell sees the observer exactly when the
observer sees it. Only the cells strictly between the two endpoints have to be
transparent: an opaque endpoint can still be lit when walls are lit.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Set, Tuple

from delve.errors import OutOfBoundsError
from delve.state.grid import Grid

logger = logging.getLogger(__name__)

Pos = Tuple[int, int]


def line_points(x0: int, y0: int, x1: int, y1: int) -> List[Pos]:
    points = []
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    x, y = x0, y0
    while True:
        points.append((x, y))
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy
    return points


class FovMap:
    """Per-cell ``transparent``/``walkable`` mirror of a Grid plus the last FOV."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.transparent: List[List[bool]] = [[False] * width for _ in range(height)]
        self.walkable: List[List[bool]] = [[False] * width for _ in range(height)]
        self._in_fov: Set[Pos] = set()

    @classmethod
    def from_grid(cls, grid: Grid) -> "FovMap":
        fov_map = cls(grid.width, grid.height)
        fov_map.sync(grid)
        return fov_map

    def sync(self, grid: Grid) -> None:
        if (grid.width, grid.height) != (self.width, self.height):
            raise ValueError(
                f"grid is {grid.width}x{grid.height}, fov map is {self.width}x{self.height}"
            )
        for x, y, tile in grid.cells():
            self.transparent[y][x] = not tile.blocks_sight
            self.walkable[y][x] = not tile.blocked

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _ray_clear(self, a: Pos, b: Pos) -> bool:
        for x, y in line_points(a[0], a[1], b[0], b[1])[1:-1]:
            if not self.transparent[y][x]:
                return False
        return True

    def compute_fov(self, ox: int, oy: int, radius: int, light_walls: bool = True) -> Set[Pos]:
        if not self.in_bounds(ox, oy):
            raise OutOfBoundsError(ox, oy, self.width, self.height)
        if radius < 0:
            raise ValueError(f"radius must be >= 0, got {radius}")
        origin = (ox, oy)
        visible: Set[Pos] = {origin}
        r2 = radius * radius
        for y in range(max(0, oy - radius), min(self.height, oy + radius + 1)):
            for x in range(max(0, ox - radius), min(self.width, ox + radius + 1)):
                dx = x - ox
                dy = y - oy
                if dx * dx + dy * dy > r2 or (x, y) == origin:
                    continue
                if not light_walls and not self.transparent[y][x]:
                    continue
                if self._ray_clear(origin, (x, y)) or self._ray_clear((x, y), origin):
                    visible.add((x, y))
        self._in_fov = visible
        return visible

    def is_in_fov(self, x: int, y: int) -> bool:
        return (x, y) in self._in_fov


@dataclass(frozen=True)
class VisibilityField:
    observer: Pos
    radius: int
    light_walls: bool
    visible: FrozenSet[Pos]

    def is_visible(self, x: int, y: int) -> bool:
        return (x, y) in self.visible

    def __contains__(self, pos: object) -> bool:
        return pos in self.visible

    def __len__(self) -> int:
        return len(self.visible)


def compute_visibility(
    grid: Grid,
    observer: Pos,
    radius: int,
    light_walls: bool,
    fov_map: Optional[FovMap] = None,
) -> VisibilityField:
    """Compute the cells visible from ``observer`` and latch them explored.

    Pass a prebuilt ``fov_map`` to skip re-mirroring the grid; it must be in
    sync with ``grid``.
    """
    if fov_map is None:
        fov_map = FovMap.from_grid(grid)
    visible = fov_map.compute_fov(observer[0], observer[1], radius, light_walls)
    for x, y in visible:
        grid.tile_at(x, y).mark_explored()
    return VisibilityField(
        observer=observer,
        radius=radius,
        light_walls=light_walls,
        visible=frozenset(visible),
    )


class FovTracker:
    """Recomputes visibility only when the observer changes cell."""

    def __init__(self, grid: Grid, radius: int, light_walls: bool) -> None:
        self.grid = grid
        self.radius = radius
        self.light_walls = light_walls
        self._fov_map: Optional[FovMap] = None
        self._last_observer: Optional[Pos] = None
        self.field: Optional[VisibilityField] = None
        self.recomputes = 0

    def invalidate(self) -> None:
        """Force the next update to re-mirror the grid and recompute."""
        self._fov_map = None
        self._last_observer = None

    def needs_recompute(self, observer: Pos) -> bool:
        return self.field is None or self._last_observer != tuple(observer)

    def update(self, observer: Pos) -> bool:
        """Refresh the field for ``observer``; returns True if it was recomputed."""
        observer = (int(observer[0]), int(observer[1]))
        if not self.needs_recompute(observer):
            return False
        if self._fov_map is None:
            self._fov_map = FovMap.from_grid(self.grid)
        self.field = compute_visibility(
            self.grid, observer, self.radius, self.light_walls, fov_map=self._fov_map
        )
        self._last_observer = observer
        self.recomputes += 1
        logger.debug("fov recomputed at %s: %d cells visible", observer, len(self.field))
        return True

    def is_visible(self, x: int, y: int) -> bool:
        return self.field is not None and self.field.is_visible(x, y)
