from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

import pygame

MOD_MASK = pygame.KMOD_SHIFT | pygame.KMOD_CTRL | pygame.KMOD_ALT


def _normalize_mods(mods: int) -> int:
    # fold left/right variants so Alt+Enter matches either Alt key
    out = 0
    for group in (pygame.KMOD_SHIFT, pygame.KMOD_CTRL, pygame.KMOD_ALT):
        if mods & group:
            out |= group
    return out


def encode_keybinding(keycode: int, mods: int = 0) -> int:
    """
    Encode a key + modifiers into a single int so bindings can distinguish combos.
    """
    return int(keycode) | ((_normalize_mods(int(mods)) & MOD_MASK) << 32)


# Single-key commands (non-movement).
DEFAULT_BINDINGS: Dict[str, List[int]] = {
    "quit": [encode_keybinding(pygame.K_ESCAPE)],
    "toggle_fullscreen": [
        encode_keybinding(pygame.K_RETURN, pygame.KMOD_ALT),
        encode_keybinding(pygame.K_F11),
    ],
}

# keycode -> (dx, dy); arrows are 4-way, the numpad covers diagonals
DEFAULT_MOVE_BINDINGS: Dict[int, Tuple[int, int]] = {
    encode_keybinding(pygame.K_UP): (0, -1),
    encode_keybinding(pygame.K_DOWN): (0, 1),
    encode_keybinding(pygame.K_LEFT): (-1, 0),
    encode_keybinding(pygame.K_RIGHT): (1, 0),
    encode_keybinding(pygame.K_KP1): (-1, 1),
    encode_keybinding(pygame.K_KP2): (0, 1),
    encode_keybinding(pygame.K_KP3): (1, 1),
    encode_keybinding(pygame.K_KP4): (-1, 0),
    encode_keybinding(pygame.K_KP6): (1, 0),
    encode_keybinding(pygame.K_KP7): (-1, -1),
    encode_keybinding(pygame.K_KP8): (0, -1),
    encode_keybinding(pygame.K_KP9): (1, -1),
}


@dataclass
class GameCommand:
    """Logical command produced from one key press."""
    kind: str
    vector: Optional[Tuple[int, int]] = None
    raw_key: Optional[int] = None


class GameInput:
    """
    Maps pygame key presses to GameCommands. It knows nothing about the map;
    Engine decides what a command does.
    """

    def __init__(
        self,
        *,
        bindings: Optional[Dict[str, Iterable[int]]] = None,
        move_bindings: Optional[Dict[int, Tuple[int, int]]] = None,
    ) -> None:
        self.bindings: Dict[str, List[int]] = deepcopy(DEFAULT_BINDINGS)
        self.move_bindings: Dict[int, Tuple[int, int]] = deepcopy(DEFAULT_MOVE_BINDINGS)
        if bindings:
            for name, codes in bindings.items():
                self.bindings[name] = list(codes)
        if move_bindings:
            for code, (dx, dy) in move_bindings.items():
                self.move_bindings[int(code)] = (int(dx), int(dy))

    def translate(self, key: int, mods: int = 0) -> GameCommand:
        combined = encode_keybinding(key, mods)
        for kind in ("quit", "toggle_fullscreen"):
            if combined in self.bindings.get(kind, []):
                return GameCommand(kind, raw_key=key)
        if combined in self.move_bindings:
            return GameCommand("move", vector=self.move_bindings[combined], raw_key=key)
        return GameCommand("none", raw_key=key)

    def handle_keydown(self, event: pygame.event.Event) -> GameCommand:
        return self.translate(event.key, getattr(event, "mod", 0))
