from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator, List, Tuple

from delve.errors import OutOfBoundsError

Pos = Tuple[int, int]


@dataclass
class Tile:
    blocked: bool
    blocks_sight: bool
    explored: bool = False

    @classmethod
    def floor(cls) -> "Tile":
        return cls(blocked=False, blocks_sight=False)

    @classmethod
    def wall(cls) -> "Tile":
        return cls(blocked=True, blocks_sight=True)

    @property
    def is_wall(self) -> bool:
        # renderer terrain kind
        return self.blocks_sight

    def mark_explored(self) -> None:
        """One-way latch; nothing in the package ever clears it."""
        self.explored = True


def _make_grid(width: int, height: int) -> List[List[Tile]]:
    return [[Tile.wall() for _ in range(width)] for _ in range(height)]


@dataclass
class Grid:
    """Fixed-size 2D tile map, closed (all walls) until generation carves it.

    Tiles are stored row-major as ``tiles[y][x]``. Every accessor that takes a
    coordinate raises :class:`OutOfBoundsError` instead of clamping, since all
    callers derive their coordinates from the grid's own bounds.
    """

    width: int
    height: int
    tiles: List[List[Tile]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid size must be positive, got {self.width}x{self.height}")
        self.tiles = _make_grid(self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)

    def tile_at(self, x: int, y: int) -> Tile:
        self._check(x, y)
        return self.tiles[y][x]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        self._check(x, y)
        # store a private copy so callers can't alias grid cells
        self.tiles[y][x] = replace(tile)

    def carve(self, x: int, y: int) -> None:
        """Open a cell to floor, keeping its explored flag."""
        tile = self.tile_at(x, y)
        tile.blocked = False
        tile.blocks_sight = False

    def is_blocked(self, x: int, y: int) -> bool:
        return self.tile_at(x, y).blocked

    def blocks_sight(self, x: int, y: int) -> bool:
        return self.tile_at(x, y).blocks_sight

    def cells(self) -> Iterator[Tuple[int, int, Tile]]:
        for y, row in enumerate(self.tiles):
            for x, tile in enumerate(row):
                yield x, y, tile

    def explored_cells(self) -> List[Pos]:
        return [(x, y) for x, y, tile in self.cells() if tile.explored]

    def floor_count(self) -> int:
        return sum(1 for _, _, tile in self.cells() if not tile.blocked)


def new_grid(width: int, height: int) -> Grid:
    return Grid(width=width, height=height)


def tile_at(grid: Grid, x: int, y: int) -> Tile:
    return grid.tile_at(x, y)
