from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, Optional, Protocol, Set

from ..directions import Direction
from .mapping import InputMapper

logger = logging.getLogger(__name__)

# Order in which held keys are consulted when several are down at once.
POLL_ORDER = (Direction.UP, Direction.DOWN, Direction.RIGHT, Direction.LEFT)


class InputSource(Protocol):
    """Something the loop driver can sample once per tick."""

    def poll(self) -> Optional[Direction]: ...


class KeyboardState:
    """Tracks held keys from window callbacks and reports one direction per poll."""

    def __init__(self, mapper: Optional[InputMapper] = None) -> None:
        self.mapper = mapper or InputMapper.default()
        self._held: Set[Direction] = set()

    def key_down(self, key: str | int) -> None:
        direction = self.mapper.translate_key(key)
        if direction is not None:
            self._held.add(direction)

    def key_up(self, key: str | int) -> None:
        direction = self.mapper.translate_key(key)
        if direction is not None:
            self._held.discard(direction)

    def release_all(self) -> None:
        self._held.clear()

    def poll(self) -> Optional[Direction]:
        for direction in POLL_ORDER:
            if direction in self._held:
                return direction
        return None


class ScriptedInput:
    """Replays a fixed sequence of directions, one per poll.

    Tokens may be Directions or strings accepted by Direction.parse; a
    single string such as "RRDL" is read one letter at a time.
    """

    def __init__(self, moves: Iterable[Direction | str] | str) -> None:
        if isinstance(moves, str):
            moves = list(moves.replace(" ", "").replace(",", ""))
        self._queue = deque(Direction.parse(m) for m in moves)

    @property
    def remaining(self) -> int:
        return len(self._queue)

    def poll(self) -> Optional[Direction]:
        if not self._queue:
            return None
        return self._queue.popleft()


__all__ = ["InputSource", "KeyboardState", "ScriptedInput", "POLL_ORDER"]
