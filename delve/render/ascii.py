"""Pygame-based ASCII renderer: map background colors plus actor glyphs."""
from typing import Dict, Optional, Tuple

import pygame

from delve.game import Game
from delve.state.grid import Grid, Tile

Color = Tuple[int, int, int]

COLOR_DARK_WALL: Color = (0, 0, 100)
COLOR_LIGHT_WALL: Color = (130, 110, 50)
COLOR_DARK_GROUND: Color = (50, 50, 150)
COLOR_LIGHT_GROUND: Color = (200, 180, 50)


def tile_color(tile: Tile, visible: bool) -> Optional[Color]:
    """Background for a cell, or None if it was never seen."""
    if not visible and not tile.explored:
        return None
    if tile.is_wall:
        return COLOR_LIGHT_WALL if visible else COLOR_DARK_WALL
    return COLOR_LIGHT_GROUND if visible else COLOR_DARK_GROUND


class AsciiRenderer:
    def __init__(self, width: int, height: int, tile: int, title: str = "delve") -> None:
        pygame.init()
        self.width = width
        self.height = height
        self.tile = tile
        self.surface_flags = pygame.RESIZABLE
        # render surface at native resolution; display may be larger in fullscreen
        self.surface = pygame.Surface((width, height))
        self.fullscreen = False
        self.display = pygame.display.set_mode((width, height), self.surface_flags)
        pygame.display.set_caption(title)
        self.map_font = pygame.font.SysFont("consolas", self.tile)
        self.bg = (0, 0, 0)
        self._glyph_cache: Dict[Tuple[str, Color], pygame.Surface] = {}

    def toggle_fullscreen(self) -> None:
        if self.fullscreen:
            self.display = pygame.display.set_mode((self.width, self.height), self.surface_flags)
            self.fullscreen = False
        else:
            self.display = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            self.fullscreen = True

    def _glyph(self, ch: str, color: Color) -> pygame.Surface:
        key = (ch, color)
        surf = self._glyph_cache.get(key)
        if surf is None:
            surf = self.map_font.render(ch, True, color)
            self._glyph_cache[key] = surf
        return surf

    def draw_world(self, grid: Grid, game: Game) -> None:
        self.surface.fill(self.bg)
        for x, y, tile in grid.cells():
            color = tile_color(tile, game.is_visible(x, y))
            if color is None:
                continue
            rect = pygame.Rect(x * self.tile, y * self.tile, self.tile, self.tile)
            self.surface.fill(color, rect)

    def draw_entities(self, game: Game) -> None:
        """Actors on visible cells only; the player (index 0) is drawn last."""
        for actor in list(game.actors)[1:] + [game.player]:
            x, y = actor.pos
            if not game.is_visible(x, y):
                continue
            self.surface.blit(self._glyph(actor.glyph, actor.color), (x * self.tile, y * self.tile))

    def draw_frame(self, game: Game) -> None:
        self.draw_world(game.grid, game)
        self.draw_entities(game)
        self._present()

    def _present(self) -> None:
        """Blit render surface to display with letterboxing (aspect preserved)."""
        dw, dh = self.display.get_size()
        sw, sh = self.surface.get_size()
        scale = min(dw / sw, dh / sh)
        new_w = int(sw * scale)
        new_h = int(sh * scale)
        ox = max(0, (dw - new_w) // 2)
        oy = max(0, (dh - new_h) // 2)
        self.display.fill((0, 0, 0))
        if scale != 1.0:
            panel = pygame.transform.smoothscale(self.surface, (new_w, new_h))
        else:
            panel = self.surface
        self.display.blit(panel, (ox, oy))
        pygame.display.flip()

    def teardown(self) -> None:
        pygame.quit()
