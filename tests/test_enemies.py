import pytest

from delve.enemies import ENEMY_TEMPLATES, get_template, load_enemy_templates, pick_template, spawn_enemy
from delve.errors import TemplateError
from delve.rng import new_rng


def test_default_templates():
    assert list(ENEMY_TEMPLATES) == ["orc", "troll"]
    orc = get_template("orc")
    troll = get_template("troll")
    assert (orc.glyph, troll.glyph) == ("o", "T")
    assert orc.weight == 80 and troll.weight == 20
    assert orc.blocks_movement and troll.blocks_movement
    assert orc.color != troll.color


def test_spawn_enemy_builds_blocking_actor():
    troll = spawn_enemy("troll", (3, 4))
    assert troll.pos == (3, 4)
    assert troll.name == "troll"
    assert troll.kind == "monster"
    assert troll.blocks_movement and troll.alive
    assert troll.template_id == "troll"


def test_unknown_template_id():
    with pytest.raises(KeyError, match="goblin"):
        spawn_enemy("goblin", (0, 0))


def test_pick_template_is_mostly_weak():
    rng = new_rng(12)
    picks = [pick_template(rng).id for _ in range(2000)]
    assert 0.75 < picks.count("orc") / len(picks) < 0.85


def test_custom_template_file(tmp_path):
    path = tmp_path / "monsters.yaml"
    path.write_text(
        "- {id: rat, name: rat, glyph: r, color: [120, 90, 60], weight: 1, blocks_movement: false}\n"
    )
    load_enemy_templates(path)
    assert list(ENEMY_TEMPLATES) == ["rat"]
    assert not spawn_enemy("rat", (1, 1)).blocks_movement


@pytest.mark.parametrize("text", [
    "",
    "just a string\n",
    "- {id: rat, name: rat, glyph: r}\n",
    "- {id: rat, name: rat, glyph: rr, color: [1, 2, 3]}\n",
    "- {id: rat, name: rat, glyph: r, color: [1, 2]}\n",
    "- {id: rat, name: rat, glyph: r, color: [1, 2, 3], weight: 0}\n",
    "- {id: rat, name: rat, glyph: r, color: [1, 2, 3]}\n- {id: rat, name: rat, glyph: r, color: [1, 2, 3]}\n",
])
def test_malformed_template_file(tmp_path, text):
    path = tmp_path / "monsters.yaml"
    path.write_text(text)
    with pytest.raises(TemplateError):
        load_enemy_templates(path)
    # a failed load leaves the previous templates in place
    assert "orc" in ENEMY_TEMPLATES


def test_missing_template_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_enemy_templates(tmp_path / "nope.yaml")
