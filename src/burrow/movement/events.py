from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple

from ..map.grid import Coord


class MoveEvent(Enum):
    """Outcome of one accepted (or refused) movement input."""

    MOVED = auto()
    BLOCKED = auto()
    COLLECTED = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (MoveEvent.WON, MoveEvent.LOST)


@dataclass(frozen=True)
class MoveOutcome:
    """Result of MovementResolver.attempt_move.

    Attributes:
        event: The event the UI should react to.
        position: Authoritative actor position after the move settled.
        path: Every cell entered during the call, in order (empty when blocked).
        events: Per-landing events, aligned with ``path``.
    """

    event: MoveEvent
    position: Coord
    path: Tuple[Coord, ...] = ()
    events: Tuple[MoveEvent, ...] = ()

    @property
    def moved(self) -> bool:
        return self.event is not MoveEvent.BLOCKED

    @property
    def pushes(self) -> int:
        """Number of cells entered beyond the first, through chained pushes."""
        return max(0, len(self.path) - 1)
