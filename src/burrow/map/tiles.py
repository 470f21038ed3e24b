from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

from ..directions import Direction


class CellKind(Enum):
    """Enumeration of every cell kind a level can contain.

    The values are the stable integer codes level data is authored against;
    renumbering a member breaks every existing level file.
    """

    GROUND = 1
    GRASS = 2
    FENCE = 3
    TRAP_ARMED = 4
    TRAP_SPRUNG = 5
    CONVEYOR_UP = 6
    CONVEYOR_DOWN = 7
    CONVEYOR_RIGHT = 8
    CONVEYOR_LEFT = 9
    TURNSTILE_UP_RIGHT = 10
    TURNSTILE_UP_LEFT = 11
    TURNSTILE_DOWN_RIGHT = 12
    TURNSTILE_DOWN_LEFT = 13
    START = 14
    END = 15
    COLLECTIBLE = 16
    COLLECTIBLE_CONSUMED = 17

    @property
    def is_solid(self) -> bool:
        return is_solid(self)

    @property
    def is_conveyor(self) -> bool:
        return self in _CONVEYORS

    @property
    def is_turnstile(self) -> bool:
        return self in _TURNSTILE_ARMS

    @property
    def glyph(self) -> str:
        """Single-character form used by ASCII levels and debug dumps."""
        return GLYPHS[self]


# Only these block entry; everything else is passable.
SOLID_KINDS: FrozenSet[CellKind] = frozenset({CellKind.GRASS, CellKind.FENCE})

_CONVEYORS: Dict[CellKind, Direction] = {
    CellKind.CONVEYOR_UP: Direction.UP,
    CellKind.CONVEYOR_DOWN: Direction.DOWN,
    CellKind.CONVEYOR_RIGHT: Direction.RIGHT,
    CellKind.CONVEYOR_LEFT: Direction.LEFT,
}

# (vertical arm, horizontal arm)
_TURNSTILE_ARMS: Dict[CellKind, Tuple[Direction, Direction]] = {
    CellKind.TURNSTILE_UP_RIGHT: (Direction.UP, Direction.RIGHT),
    CellKind.TURNSTILE_UP_LEFT: (Direction.UP, Direction.LEFT),
    CellKind.TURNSTILE_DOWN_RIGHT: (Direction.DOWN, Direction.RIGHT),
    CellKind.TURNSTILE_DOWN_LEFT: (Direction.DOWN, Direction.LEFT),
}

_NEXT_STATE: Dict[CellKind, CellKind] = {
    CellKind.TRAP_ARMED: CellKind.TRAP_SPRUNG,
    CellKind.TURNSTILE_UP_LEFT: CellKind.TURNSTILE_UP_RIGHT,
    CellKind.TURNSTILE_UP_RIGHT: CellKind.TURNSTILE_DOWN_RIGHT,
    CellKind.TURNSTILE_DOWN_RIGHT: CellKind.TURNSTILE_DOWN_LEFT,
    CellKind.TURNSTILE_DOWN_LEFT: CellKind.TURNSTILE_UP_LEFT,
    CellKind.COLLECTIBLE: CellKind.COLLECTIBLE_CONSUMED,
}

GLYPHS: Dict[CellKind, str] = {
    CellKind.GROUND: ".",
    CellKind.GRASS: '"',
    CellKind.FENCE: "#",
    CellKind.TRAP_ARMED: "^",
    CellKind.TRAP_SPRUNG: "x",
    CellKind.CONVEYOR_UP: "8",
    CellKind.CONVEYOR_DOWN: "2",
    CellKind.CONVEYOR_RIGHT: "6",
    CellKind.CONVEYOR_LEFT: "4",
    CellKind.TURNSTILE_UP_RIGHT: "9",
    CellKind.TURNSTILE_UP_LEFT: "7",
    CellKind.TURNSTILE_DOWN_RIGHT: "3",
    CellKind.TURNSTILE_DOWN_LEFT: "1",
    CellKind.START: "S",
    CellKind.END: "E",
    CellKind.COLLECTIBLE: "c",
    CellKind.COLLECTIBLE_CONSUMED: "o",
}

KINDS_BY_GLYPH: Dict[str, CellKind] = {glyph: kind for kind, glyph in GLYPHS.items()}

# Integer level code -> kind. Level files are authored against this table.
LEVEL_CODES: Dict[int, CellKind] = {kind.value: kind for kind in CellKind}


def is_solid(kind: CellKind) -> bool:
    """Return True if the kind blocks entry.

    Args:
        kind: A CellKind enum member.

    Returns:
        bool: Whether an actor is refused entry into the cell.
    """

    return kind in SOLID_KINDS


def next_state(kind: CellKind) -> CellKind:
    """Return the kind a cell becomes once an actor has entered it.

    Traps spring, collectibles are consumed and turnstiles rotate one step
    (UP_LEFT -> UP_RIGHT -> DOWN_RIGHT -> DOWN_LEFT -> UP_LEFT). Every other
    kind is a fixed point.
    """

    return _NEXT_STATE.get(kind, kind)


def conveyor_direction(kind: CellKind) -> Optional[Direction]:
    return _CONVEYORS.get(kind)


def turnstile_arms(kind: CellKind) -> Optional[Tuple[Direction, Direction]]:
    return _TURNSTILE_ARMS.get(kind)


def kind_for_code(code: int) -> Optional[CellKind]:
    return LEVEL_CODES.get(code)


def code_for(kind: CellKind) -> int:
    return kind.value


__all__ = [
    "CellKind",
    "SOLID_KINDS",
    "LEVEL_CODES",
    "GLYPHS",
    "KINDS_BY_GLYPH",
    "is_solid",
    "next_state",
    "conveyor_direction",
    "turnstile_arms",
    "kind_for_code",
    "code_for",
]
