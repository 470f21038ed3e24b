import pytest

from burrow.directions import Direction
from burrow.map.tiles import (
    LEVEL_CODES,
    CellKind,
    code_for,
    conveyor_direction,
    is_solid,
    kind_for_code,
    next_state,
    turnstile_arms,
)

TURNSTILES = [
    CellKind.TURNSTILE_UP_LEFT,
    CellKind.TURNSTILE_UP_RIGHT,
    CellKind.TURNSTILE_DOWN_RIGHT,
    CellKind.TURNSTILE_DOWN_LEFT,
]


def test_only_grass_and_fence_are_solid():
    solid = {kind for kind in CellKind if is_solid(kind)}
    assert solid == {CellKind.GRASS, CellKind.FENCE}
    assert CellKind.FENCE.is_solid is True
    assert CellKind.TRAP_SPRUNG.is_solid is False


def test_level_codes_are_stable_one_to_seventeen():
    assert sorted(LEVEL_CODES) == list(range(1, 18))
    assert LEVEL_CODES[1] is CellKind.GROUND
    assert LEVEL_CODES[4] is CellKind.TRAP_ARMED
    assert LEVEL_CODES[8] is CellKind.CONVEYOR_RIGHT
    assert LEVEL_CODES[11] is CellKind.TURNSTILE_UP_LEFT
    assert LEVEL_CODES[14] is CellKind.START
    assert LEVEL_CODES[15] is CellKind.END
    assert LEVEL_CODES[17] is CellKind.COLLECTIBLE_CONSUMED
    for kind in CellKind:
        assert kind_for_code(code_for(kind)) is kind
    assert kind_for_code(0) is None
    assert kind_for_code(18) is None


def test_trap_springs_once_and_stays_sprung():
    assert next_state(CellKind.TRAP_ARMED) is CellKind.TRAP_SPRUNG
    assert next_state(CellKind.TRAP_SPRUNG) is CellKind.TRAP_SPRUNG


def test_collectible_is_consumed_once():
    assert next_state(CellKind.COLLECTIBLE) is CellKind.COLLECTIBLE_CONSUMED
    assert next_state(CellKind.COLLECTIBLE_CONSUMED) is CellKind.COLLECTIBLE_CONSUMED


def test_turnstile_cycle_order():
    for current, expected in zip(TURNSTILES, TURNSTILES[1:] + TURNSTILES[:1]):
        assert next_state(current) is expected


@pytest.mark.parametrize("kind", TURNSTILES)
def test_turnstile_cycle_closes_after_four_steps(kind):
    k = kind
    for _ in range(4):
        k = next_state(k)
    assert k is kind


def test_static_kinds_are_fixed_points():
    static = [
        CellKind.GROUND,
        CellKind.GRASS,
        CellKind.FENCE,
        CellKind.CONVEYOR_UP,
        CellKind.CONVEYOR_DOWN,
        CellKind.CONVEYOR_LEFT,
        CellKind.CONVEYOR_RIGHT,
        CellKind.START,
        CellKind.END,
    ]
    for kind in static:
        assert next_state(kind) is kind


def test_conveyor_and_turnstile_helpers():
    assert conveyor_direction(CellKind.CONVEYOR_UP) is Direction.UP
    assert conveyor_direction(CellKind.CONVEYOR_LEFT) is Direction.LEFT
    assert conveyor_direction(CellKind.GROUND) is None
    assert CellKind.CONVEYOR_DOWN.is_conveyor
    assert turnstile_arms(CellKind.TURNSTILE_DOWN_LEFT) == (Direction.DOWN, Direction.LEFT)
    assert turnstile_arms(CellKind.END) is None
    assert all(kind.is_turnstile for kind in TURNSTILES)


def test_glyphs_are_unique():
    glyphs = [kind.glyph for kind in CellKind]
    assert len(set(glyphs)) == len(glyphs)
