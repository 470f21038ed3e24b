import logging

import pytest

from burrow.engine.session import LevelSession
from burrow.exceptions import InvalidDirectionError, MalformedLevelError
from burrow.map.grid import LevelGrid
from burrow.map.tiles import CellKind
from burrow.movement import MoveEvent


def test_start_fence_scenario():
    session = LevelSession([[14, 3]])
    outcome = session.move("RIGHT")
    assert outcome.event is MoveEvent.BLOCKED
    assert session.player_pos == (0, 0)
    assert session.grid.get(1, 0) is CellKind.FENCE


def test_start_trap_scenario():
    session = LevelSession([[14, 4]])
    assert session.move("RIGHT").event is MoveEvent.MOVED
    assert session.grid.get(1, 0) is CellKind.TRAP_SPRUNG
    assert session.move("LEFT").event is MoveEvent.MOVED
    assert session.move("RIGHT").event is MoveEvent.LOST
    assert session.lost and session.finished
    assert session.move("LEFT") is None


def test_listeners_receive_outcomes():
    session = LevelSession([[14, 16, 15]])
    seen = []
    session.add_listener(lambda outcome, s: seen.append(outcome.event))
    session.move("RIGHT")
    session.move("RIGHT")
    assert seen == [MoveEvent.COLLECTED, MoveEvent.WON]
    assert session.won


def test_removed_listener_is_not_called():
    session = LevelSession([[14, 1, 15]])
    seen = []

    def listener(outcome, s):
        seen.append(outcome)

    session.add_listener(listener)
    session.remove_listener(listener)
    session.move("RIGHT")
    assert seen == []


def test_dropped_input_is_not_broadcast():
    session = LevelSession([[14, 15]])
    seen = []
    session.add_listener(lambda outcome, s: seen.append(outcome))
    session.move("RIGHT")
    session.move("LEFT")
    assert len(seen) == 1


def test_restart_restores_pristine_level():
    session = LevelSession([[14, 4, 16, 15]])
    session.move("RIGHT")
    session.move("RIGHT")
    assert session.grid.get(1, 0) is CellKind.TRAP_SPRUNG

    session.restart()
    assert session.attempts == 2
    assert session.player_pos == (0, 0)
    assert session.accepts_input
    assert session.grid.get(1, 0) is CellKind.TRAP_ARMED
    assert session.grid.get(2, 0) is CellKind.COLLECTIBLE


def test_session_does_not_mutate_the_grid_it_was_given():
    level = LevelGrid.from_codes([[14, 16, 15]])
    session = LevelSession(level)
    session.move("RIGHT")
    assert level.get(1, 0) is CellKind.COLLECTIBLE


def test_invalid_direction_propagates():
    session = LevelSession([[14, 1]])
    with pytest.raises(InvalidDirectionError):
        session.move("sideways")


def test_malformed_level_propagates():
    with pytest.raises(MalformedLevelError):
        LevelSession([[1, 15]])


def test_winnable_hint():
    assert LevelSession([[14, 1, 15]]).is_winnable_hint() is True
    assert LevelSession([[14, 3, 15]]).is_winnable_hint() is False
    assert LevelSession([[14, 1]]).is_winnable_hint() is False


def test_listener_error_is_logged_not_raised(caplog):
    session = LevelSession([[14, 1, 15]])
    seen = []

    def broken(outcome, s):
        raise RuntimeError("renderer fell over")

    session.add_listener(broken)
    session.add_listener(lambda outcome, s: seen.append(outcome.event))
    with caplog.at_level(logging.ERROR, logger="burrow.engine.session"):
        outcome = session.move("RIGHT")

    assert outcome.event is MoveEvent.MOVED
    assert session.player_pos == (1, 0)
    assert seen == [MoveEvent.MOVED]
    assert any("Listener errored" in r.getMessage() for r in caplog.records)
