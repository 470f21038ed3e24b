from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple, Union

from ..actor import Actor, ActorStatus
from ..directions import Direction
from ..map.grid import LevelGrid
from ..movement.events import MoveOutcome
from ..movement.resolver import MovementResolver, ResolverConfig

logger = logging.getLogger(__name__)

Listener = Callable[[MoveOutcome, "LevelSession"], None]


class LevelSession:
    """Holds one attempt at a level: the grid, the actor and the resolver.

    The session is what a loop driver keeps between ticks. It forwards
    movement input to the resolver, notifies listeners of every outcome and
    can restart the level from its pristine layout.
    """

    def __init__(
        self,
        level: Union[LevelGrid, Sequence[Sequence[int]]],
        config: Optional[ResolverConfig] = None,
        name: str = "level",
    ) -> None:
        pristine = level if isinstance(level, LevelGrid) else LevelGrid.from_codes(level)
        self.name = name
        self._pristine = pristine.copy()
        self._listeners: List[Listener] = []
        self.resolver = MovementResolver(config)
        self.grid: LevelGrid = pristine.copy()
        self.actor: Actor = Actor.spawn(self.grid)
        self.attempts = 1
        if not self.is_winnable_hint():
            logger.warning("Level %r: no end cell is reachable by walking from the start", name)
        logger.info("Initialized LevelSession %r (%dx%d), actor at %s", name, self.grid.width, self.grid.height, self.actor.pos)

    def add_listener(self, listener: Listener) -> None:
        """Subscribe to move outcomes."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, outcome: MoveOutcome) -> None:
        for l in list(self._listeners):
            try:
                l(outcome, self)
            except Exception as ex:
                logger.exception("Listener errored on %s: %s", outcome.event, ex)

    @property
    def player_pos(self) -> Tuple[int, int]:
        return self.actor.pos

    @property
    def won(self) -> bool:
        return self.actor.status is ActorStatus.WON

    @property
    def lost(self) -> bool:
        return self.actor.status is ActorStatus.LOST

    @property
    def finished(self) -> bool:
        return self.actor.is_terminal

    @property
    def accepts_input(self) -> bool:
        return self.actor.is_movable

    def move(self, direction: Direction | str) -> Optional[MoveOutcome]:
        """Forward one movement input to the resolver.

        Returns None when the input was dropped (actor locked or finished).

        Raises:
            InvalidDirectionError: if direction is not a cardinal direction.
        """
        outcome = self.resolver.attempt_move(self.grid, self.actor, direction)
        if outcome is None:
            return None
        self._emit(outcome)
        return outcome

    def restart(self) -> None:
        """Start a new attempt on a fresh copy of the level."""
        self.grid = self._pristine.copy()
        self.actor = Actor.spawn(self.grid)
        self.attempts += 1
        logger.info("Restarted level %r (attempt %d)", self.name, self.attempts)

    def is_winnable_hint(self) -> bool:
        """True if some end cell is reachable by plain walking from the start."""
        ends = self.grid.end_locations()
        if not ends:
            return False
        reachable = self.grid.reachable_from(self.grid.start_location())
        return any(end in reachable for end in ends)


__all__ = ["LevelSession"]
