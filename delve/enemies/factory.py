from __future__ import annotations

from typing import Tuple

from delve.rng import RNG
from delve.state.actors import Actor
from delve.enemies import templates


def pick_template(rng: RNG) -> templates.EnemyTemplate:
    """Weighted archetype draw over the loaded templates (file order)."""
    pool = list(templates.ensure_loaded().values())
    return rng.weighted_choice(pool, [t.weight for t in pool])


def spawn_enemy(tmpl_id: str, pos: Tuple[int, int]) -> Actor:
    """Create an Actor from a template id at the given position."""
    tmpl = templates.get_template(tmpl_id)
    return Actor(
        name=tmpl.name,
        pos=pos,
        glyph=tmpl.glyph,
        color=tmpl.color,
        kind="monster",
        blocks_movement=tmpl.blocks_movement,
        template_id=tmpl.id,
    )
