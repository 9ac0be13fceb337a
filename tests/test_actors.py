from delve.state.actors import PLAYER_INDEX, Actor, ActorRegistry, make_player


def test_player_defaults():
    player = make_player(pos=(3, 4))
    assert (player.x, player.y) == (3, 4)
    assert player.glyph == "@"
    assert player.kind == "player"
    assert player.blocks_movement and player.alive


def test_registry_is_ordered_and_append_only():
    registry = ActorRegistry([make_player()])
    idx = registry.add(Actor(name="orc", pos=(1, 1), blocks_movement=True))
    assert idx == 1
    assert len(registry) == 2
    assert registry[PLAYER_INDEX] is registry.player
    assert [a.name for a in registry] == ["player", "orc"]
    assert not hasattr(registry, "remove")


def test_occupancy_queries():
    registry = ActorRegistry([
        make_player(pos=(2, 2)),
        Actor(name="orc", pos=(2, 2), blocks_movement=True),
        Actor(name="ghost", pos=(5, 5)),
    ])
    assert [a.name for a in registry.actors_at((2, 2))] == ["player", "orc"]
    assert registry.blocking_actor_at((2, 2)).name == "player"
    assert registry.blocking_actor_at((2, 2), exclude=PLAYER_INDEX).name == "orc"
    assert registry.blocking_actor_at((5, 5)) is None
    assert registry.positions() == [(2, 2), (2, 2), (5, 5)]
