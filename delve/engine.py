from __future__ import annotations

"""
Engine: owns the pygame window and the frame loop.

Each frame recomputes the player's field of view (only when they moved),
draws, then applies at most one command per key press.
"""

import logging

import pygame

from delve.config import GameConfig
from delve.game import Game
from delve.input import GameCommand, GameInput
from delve.render.ascii import AsciiRenderer

logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, cfg: GameConfig, game: Game | None = None) -> None:
        self.cfg = cfg
        self.game = game if game is not None else Game(cfg)
        self.input = GameInput()
        self.renderer = AsciiRenderer(
            cfg.screen_width * cfg.tile_size,
            cfg.screen_height * cfg.tile_size,
            cfg.tile_size,
        )
        self.running = False

    def handle_command(self, cmd: GameCommand) -> None:
        if cmd.kind == "quit":
            self.running = False
        elif cmd.kind == "toggle_fullscreen":
            self.renderer.toggle_fullscreen()
        elif cmd.kind == "move" and cmd.vector is not None:
            self.game.player_move(*cmd.vector)

    def run(self) -> None:
        clock = pygame.time.Clock()
        self.running = True
        logger.info("starting at %s", self.game.player.pos)
        try:
            while self.running:
                clock.tick(self.cfg.limit_fps)
                self.game.update_fov()
                self.renderer.draw_frame(self.game)
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        self.handle_command(self.input.handle_keydown(event))
        finally:
            self.renderer.teardown()
        logger.info("goodbye after %d turns", self.game.turn)
