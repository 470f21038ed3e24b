from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Tuple

from .exceptions import ActorStateError

if TYPE_CHECKING:
    from .map.grid import LevelGrid

logger = logging.getLogger(__name__)


class ActorStatus(Enum):
    ACTIVE = auto()
    WON = auto()
    LOST = auto()


@dataclass
class Actor:
    """The player's piece on the grid.

    Position is only changed by the movement resolver. ``locked`` is held for
    the duration of one move resolution; a terminal status is set once and
    never cleared, so a new attempt needs a new Actor.
    """

    x: int
    y: int
    status: ActorStatus = ActorStatus.ACTIVE
    locked: bool = False
    moves: int = 0
    collected: int = 0

    @classmethod
    def spawn(cls, grid: "LevelGrid") -> "Actor":
        x, y = grid.start_location()
        return cls(x, y)

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def is_terminal(self) -> bool:
        return self.status is not ActorStatus.ACTIVE

    @property
    def is_movable(self) -> bool:
        return not self.locked and not self.is_terminal

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def mark_won(self) -> None:
        self._finish(ActorStatus.WON)

    def mark_lost(self) -> None:
        self._finish(ActorStatus.LOST)

    def _finish(self, status: ActorStatus) -> None:
        if self.is_terminal:
            raise ActorStateError(f"Actor already finished with status {self.status.name}")
        self.status = status
        logger.info("Actor %s at %s", status.name.lower(), self.pos)


__all__ = ["Actor", "ActorStatus"]
