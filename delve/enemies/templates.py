from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Tuple

import yaml

from delve.errors import TemplateError

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path(__file__).resolve().parent.parent / "content" / "monsters.yaml"


@dataclass(frozen=True)
class EnemyTemplate:
    id: str
    name: str
    glyph: str
    color: Tuple[int, int, int]
    weight: float
    blocks_movement: bool = True


ENEMY_TEMPLATES: Dict[str, EnemyTemplate] = {}


def _build_template(entry: dict) -> EnemyTemplate:
    try:
        color = tuple(int(c) for c in entry["color"])
        tmpl = EnemyTemplate(
            id=str(entry["id"]),
            name=str(entry["name"]),
            glyph=str(entry["glyph"]),
            color=color,  # type: ignore[arg-type]
            weight=float(entry.get("weight", 1)),
            blocks_movement=bool(entry.get("blocks_movement", True)),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise TemplateError(f"bad monster template entry {entry!r}: {exc}") from exc
    if len(tmpl.color) != 3:
        raise TemplateError(f"template '{tmpl.id}' color must have 3 channels")
    if len(tmpl.glyph) != 1:
        raise TemplateError(f"template '{tmpl.id}' glyph must be a single character")
    if tmpl.weight <= 0:
        raise TemplateError(f"template '{tmpl.id}' weight must be positive")
    return tmpl


def load_enemy_templates(path: Path | str | None = None) -> Dict[str, EnemyTemplate]:
    """Load monster templates from YAML and repopulate ENEMY_TEMPLATES."""
    path = Path(path) if path is not None else DEFAULT_PATH
    if not path.exists():
        raise FileNotFoundError(f"Monster template file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, list) or not data:
        raise TemplateError(f"Monster template file malformed or empty: {path}")
    loaded: Dict[str, EnemyTemplate] = {}
    for entry in data:
        if not isinstance(entry, dict):
            raise TemplateError(f"Monster template entry is not a mapping: {entry!r}")
        tmpl = _build_template(entry)
        if tmpl.id in loaded:
            raise TemplateError(f"duplicate monster template id '{tmpl.id}'")
        loaded[tmpl.id] = tmpl
    ENEMY_TEMPLATES.clear()
    ENEMY_TEMPLATES.update(loaded)
    logger.info("loaded %d monster templates from %s: %s", len(loaded), path, list(loaded))
    return ENEMY_TEMPLATES


def ensure_loaded() -> Dict[str, EnemyTemplate]:
    if not ENEMY_TEMPLATES:
        load_enemy_templates()
    return ENEMY_TEMPLATES


def get_template(tmpl_id: str) -> EnemyTemplate:
    templates = ensure_loaded()
    if tmpl_id not in templates:
        raise KeyError(f"unknown monster template '{tmpl_id}' (known: {list(templates)})")
    return templates[tmpl_id]
