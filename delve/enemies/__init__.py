"""Monster templates and factories."""

from .templates import EnemyTemplate, ENEMY_TEMPLATES, load_enemy_templates, get_template
from .factory import spawn_enemy, pick_template

__all__ = [
    "EnemyTemplate",
    "ENEMY_TEMPLATES",
    "load_enemy_templates",
    "get_template",
    "spawn_enemy",
    "pick_template",
]
