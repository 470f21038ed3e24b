from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..actor import Actor
from ..directions import Direction
from ..exceptions import OutOfBoundsError
from ..map.grid import Coord, LevelGrid
from ..map.tiles import CellKind, conveyor_direction, is_solid, next_state, turnstile_arms
from .events import MoveEvent, MoveOutcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolverConfig:
    """Tunable movement rules.

    Attributes:
        turnstile_push: If True, turnstiles deflect the actor like a conveyor
            along the arm perpendicular to the crossing. If False they only
            rotate.
        max_chain: Maximum number of chained pushes per move. None means the
            grid diameter (width + height).
    """

    turnstile_push: bool = False
    max_chain: Optional[int] = None


class MovementResolver:
    """Reconciles a movement input with the cells it lands on.

    The resolver holds no state between calls: the grid and the actor are
    passed in on every attempt and mutated in place.
    """

    def __init__(self, config: Optional[ResolverConfig] = None) -> None:
        self.config = config or ResolverConfig()

    def attempt_move(self, grid: LevelGrid, actor: Actor, direction: Direction | str) -> Optional[MoveOutcome]:
        """Attempt to move the actor one cell and settle every chained push.

        Args:
            grid: Level grid; cells entered are transitioned in place.
            actor: Actor to move.
            direction: A Direction or a direction token ("UP", "r", ...).

        Returns:
            The MoveOutcome, or None when the input was dropped because the
            actor is locked or already finished.

        Raises:
            InvalidDirectionError: if direction is not a cardinal direction.
        """
        heading = Direction.parse(direction)
        if not actor.is_movable:
            logger.debug("Dropped %s input: actor locked=%s status=%s", heading.name, actor.locked, actor.status.name)
            return None

        actor.locked = True
        try:
            return self._resolve(grid, actor, heading)
        finally:
            actor.locked = False

    def _resolve(self, grid: LevelGrid, actor: Actor, heading: Direction) -> MoveOutcome:
        target = heading.step(actor.x, actor.y)
        if _is_blocked(grid, target):
            logger.debug("Blocked move %s from %s to %s", heading.name, actor.pos, target)
            return MoveOutcome(MoveEvent.BLOCKED, actor.pos)

        limit = self.config.max_chain if self.config.max_chain is not None else grid.diameter
        path: List[Coord] = []
        events: List[MoveEvent] = []
        while True:
            actor.move_to(*target)
            path.append(target)
            kind = grid.get(*target)
            event, push = self._land(actor, kind, heading)
            events.append(event)
            after = next_state(kind)
            if after is not kind:
                grid.set(target[0], target[1], after)
                logger.debug("Cell %s: %s -> %s", target, kind.name, after.name)

            if event.is_terminal or push is None:
                break
            if len(path) - 1 >= limit:
                logger.warning("Push chain from %s stopped after %d pushes; level may contain a conveyor loop", path[0], limit)
                break
            nxt = push.step(*target)
            if _is_blocked(grid, nxt):
                logger.debug("Push %s from %s blocked at %s", push.name, target, nxt)
                break
            target = nxt
            heading = push

        actor.moves += 1
        outcome = MoveOutcome(_summarize(events), actor.pos, tuple(path), tuple(events))
        logger.debug("Move settled: %s at %s via %s", outcome.event.name, outcome.position, outcome.path)
        return outcome

    def _land(self, actor: Actor, kind: CellKind, heading: Direction) -> Tuple[MoveEvent, Optional[Direction]]:
        """Apply the effect of the kind the actor just entered.

        ``kind`` is the value before this landing's transition, so a turnstile
        pushes along its current orientation.
        """
        if kind is CellKind.TRAP_SPRUNG:
            actor.mark_lost()
            return MoveEvent.LOST, None
        if kind is CellKind.END:
            actor.mark_won()
            return MoveEvent.WON, None
        if kind is CellKind.COLLECTIBLE:
            actor.collected += 1
            return MoveEvent.COLLECTED, None

        push = conveyor_direction(kind)
        if push is None and self.config.turnstile_push:
            arms = turnstile_arms(kind)
            if arms is not None:
                vertical, horizontal = arms
                push = vertical if heading.is_horizontal else horizontal
        return MoveEvent.MOVED, push


def _is_blocked(grid: LevelGrid, target: Coord) -> bool:
    try:
        kind = grid.get(*target)
    except OutOfBoundsError:
        return True
    return is_solid(kind)


def _summarize(events: Sequence[MoveEvent]) -> MoveEvent:
    last = events[-1]
    if last.is_terminal:
        return last
    if MoveEvent.COLLECTED in events:
        return MoveEvent.COLLECTED
    return MoveEvent.MOVED


__all__ = ["MovementResolver", "ResolverConfig"]
