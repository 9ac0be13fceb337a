from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

Pos = Tuple[int, int]
Color = Tuple[int, int, int]

PLAYER_INDEX = 0


@dataclass
class Actor:
    """Anything with a position on the map, including the player.

    Actors are held by value in an :class:`ActorRegistry`; code that needs
    to refer to one keeps its index, not the object.
    """
    name: str
    pos: Pos

    # Visuals
    glyph: str = "?"
    color: Color = (255, 255, 255)
    kind: str = "monster"

    # Collision
    blocks_movement: bool = False
    alive: bool = True

    # Metadata
    template_id: Optional[str] = None
    tags: Dict[str, object] = field(default_factory=dict)

    @property
    def x(self) -> int:
        return self.pos[0]

    @property
    def y(self) -> int:
        return self.pos[1]

    def move_to(self, x: int, y: int) -> None:
        self.pos = (x, y)


def make_player(name: str = "player", pos: Pos = (0, 0)) -> Actor:
    return Actor(
        name=name,
        pos=pos,
        glyph="@",
        color=(255, 255, 255),
        kind="player",
        blocks_movement=True,
    )


class ActorRegistry:
    """Ordered, append-only actor collection.

    Index ``PLAYER_INDEX`` (0) always holds the player-controlled actor. There
    is no remove or insert, so indices handed out stay valid for the
    registry's lifetime.
    """

    def __init__(self, actors: Sequence[Actor] = ()) -> None:
        self._actors: List[Actor] = list(actors)

    def add(self, actor: Actor) -> int:
        self._actors.append(actor)
        return len(self._actors) - 1

    @property
    def player(self) -> Actor:
        return self._actors[PLAYER_INDEX]

    def __getitem__(self, index: int) -> Actor:
        return self._actors[index]

    def __len__(self) -> int:
        return len(self._actors)

    def __iter__(self) -> Iterator[Actor]:
        return iter(self._actors)

    def positions(self) -> List[Pos]:
        return [a.pos for a in self._actors]

    def actors_at(self, pos: Pos) -> List[Actor]:
        return [a for a in self._actors if a.pos == pos]

    def blocking_actor_at(self, pos: Pos, exclude: Optional[int] = None) -> Optional[Actor]:
        """First movement-blocking actor on ``pos``, skipping index ``exclude``."""
        for idx, actor in enumerate(self._actors):
            if idx == exclude:
                continue
            if actor.blocks_movement and actor.pos == pos:
                return actor
        return None
