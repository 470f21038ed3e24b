from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, Optional

from ..input.sources import InputSource
from ..movement.events import MoveOutcome
from .session import LevelSession

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    """Configuration for the fixed-tick loop.

    Attributes:
        tick_rate: Target updates per second for the loop. If 0 or None, updates as fast as possible.
        max_steps: If provided and > 0, the loop will automatically stop after this many updates.
        stop_when_finished: Stop as soon as the level is won or lost.
    """

    tick_rate: float = 60.0
    max_steps: Optional[int] = None
    stop_when_finished: bool = True


class GameEngine:
    """Headless fixed-tick driver around a LevelSession.

    Each tick samples the input source once, forwards the direction only if
    the actor is idle, then advances the grid's timer hook. Rendering
    backends call update() from their own frame callback instead of run().
    """

    def __init__(self, session: LevelSession, source: InputSource, config: Optional[GameConfig] = None) -> None:
        self.session = session
        self.source = source
        self.config = config or GameConfig()
        self.outcomes: List[MoveOutcome] = []
        self._running: bool = False
        self._step: int = 0
        self._last_time: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def step(self) -> int:
        return self._step

    def start(self) -> None:
        """Start the engine loop state.

        Safe to call multiple times; subsequent calls are no-ops.
        """
        if self._running:
            logger.debug("GameEngine.start() called while already running")
            return
        self._running = True
        self._step = 0
        self._last_time = time.perf_counter()
        logger.info("GameEngine started (tick_rate=%s, max_steps=%s)", self.config.tick_rate, self.config.max_steps)

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        logger.info("GameEngine stopped at step=%s", self._step)

    def update(self, dt: float) -> Optional[MoveOutcome]:
        """Perform a single update tick.

        Args:
            dt: Delta time in seconds since last update.

        Returns:
            The outcome of the input handled this tick, if any.
        """
        if not self._running:
            logger.debug("update() called while not running; ignored")
            return None
        self._step += 1

        outcome: Optional[MoveOutcome] = None
        direction = self.source.poll()
        if direction is not None:
            if self.session.accepts_input:
                outcome = self.session.move(direction)
            else:
                logger.debug("Tick #%d: %s input ignored, actor not idle", self._step, direction.name)
        if outcome is not None:
            self.outcomes.append(outcome)
        self.session.grid.update(dt)

        if self.config.stop_when_finished and self.session.finished:
            self.stop()
        elif self.config.max_steps is not None and self._step >= self.config.max_steps:
            self.stop()
        return outcome

    def run(self) -> None:
        """Run a blocking loop until stopped or max_steps reached."""
        self.start()
        target_dt = 0.0
        if self.config.tick_rate and self.config.tick_rate > 0:
            target_dt = 1.0 / float(self.config.tick_rate)

        while self._running:
            now = time.perf_counter()
            if self._last_time is None:
                dt = 0.0
            else:
                dt = now - self._last_time
            self._last_time = now

            self.update(dt)

            if target_dt > 0:
                elapsed = time.perf_counter() - now
                remaining = target_dt - elapsed
                if remaining > 0:
                    time.sleep(remaining)

        logger.info("Loop complete (steps=%d)", self._step)


__all__ = ["GameConfig", "GameEngine"]
