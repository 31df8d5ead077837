"""
test_game_logic.py
------------------
Frame-level tests for the full input -> movement -> health update.
"""

import pytest

from road_dodge.core.runtime.frame import FrameInput
from road_dodge.core.runtime.game_settings import Health
from road_dodge.core.services.event_manager import GameOverEvent, PlayerHitEvent
from road_dodge.systems.game_logic import GameLogic
from road_dodge.systems.kinematics import KinematicsUpdater
from conftest import PLAYER, begin, end, held


@pytest.fixture
def logic(rng):
    return GameLogic(KinematicsUpdater(rng))


def snapshot(registry):
    return {label: (s.x, s.y, s.rotation) for label, s in registry.sprites.items()}


def test_frame_moves_player_and_road(logic, registry, state):
    output = logic.update(state, registry, FrameInput(0.1, held("move_down")))

    player = registry.get_sprite(PLAYER)
    assert output.direction == -1
    assert player.y == pytest.approx(-25.0)
    assert player.rotation == pytest.approx(-0.15)
    assert registry.get_sprite("roadline0").x == pytest.approx(-640.0)
    assert state.health_amount == 5
    assert output.events == []


def test_both_keys_cancel(logic, registry, state):
    output = logic.update(state, registry, FrameInput(0.1, held("move_up", "move_down")))

    assert output.direction == 0
    assert registry.get_sprite(PLAYER).y == 0.0
    assert registry.get_sprite(PLAYER).rotation == 0.0


def test_collision_in_frame_costs_health(logic, registry, state):
    state.health_amount = 3
    frame = FrameInput(1 / 60, held(), [begin(PLAYER, "obstacle0"), end(PLAYER, "obstacle1")])

    output = logic.update(state, registry, frame)

    assert state.health_amount == 2
    assert registry.get_text(Health.MESSAGE_LABEL).value == "Health: 2"
    assert output.events == [PlayerHitEvent(2)]


def test_driving_off_the_road_ends_game(logic, registry, state):
    registry.get_sprite(PLAYER).y = 350.0

    output = logic.update(state, registry, FrameInput(0.1, held("move_up")))

    assert output.out_of_bounds is True
    assert state.health_amount == 0
    assert state.lost is True
    assert output.events == [GameOverEvent()]


def test_last_hit_then_frozen(logic, registry, state):
    """health 1 + one hit -> lost in the same call, and nothing moves afterwards."""
    state.health_amount = 1
    hits = [begin(PLAYER, "obstacle0"), begin(PLAYER, "obstacle1")]

    output = logic.update(state, registry, FrameInput(1 / 60, held(), hits))

    assert state.health_amount == 0
    assert state.lost is True
    assert output.events == [PlayerHitEvent(0), GameOverEvent()]

    frozen = snapshot(registry)
    texts = {label: t.value for label, t in registry.texts.items()}
    for _ in range(5):
        later = logic.update(state, registry, FrameInput(0.1, held("move_up"), hits))
        assert later.events == []
        assert later.direction == 0

    assert snapshot(registry) == frozen
    assert {label: t.value for label, t in registry.texts.items()} == texts
    assert state.health_amount == 0


def test_zero_dt_frame_changes_nothing_but_tilt(logic, registry, state):
    before = snapshot(registry)

    logic.update(state, registry, FrameInput(0.0, held("move_up")))

    after = snapshot(registry)
    for label, (x, y, _) in before.items():
        assert after[label][:2] == (x, y)
    assert after[PLAYER][2] == pytest.approx(0.15)


def test_negative_dt_rejected():
    with pytest.raises(ValueError):
        FrameInput(-0.01)
