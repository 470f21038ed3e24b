from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from .config import BurrowConfig
from .engine.loop import GameEngine
from .engine.session import LevelSession
from .input.sources import KeyboardState, ScriptedInput
from .levels.loader import Level
from .map.tiles import CellKind

logger = logging.getLogger(__name__)

TILE_SIZE = 32
MARGIN = 2

# Flat colours for the Arcade view; sprites are out of scope.
KIND_COLORS: Dict[CellKind, Tuple[int, int, int]] = {
    CellKind.GROUND: (150, 120, 80),
    CellKind.GRASS: (60, 140, 60),
    CellKind.FENCE: (110, 80, 50),
    CellKind.TRAP_ARMED: (170, 170, 170),
    CellKind.TRAP_SPRUNG: (200, 40, 40),
    CellKind.CONVEYOR_UP: (80, 80, 160),
    CellKind.CONVEYOR_DOWN: (80, 80, 160),
    CellKind.CONVEYOR_RIGHT: (80, 80, 160),
    CellKind.CONVEYOR_LEFT: (80, 80, 160),
    CellKind.TURNSTILE_UP_RIGHT: (200, 160, 40),
    CellKind.TURNSTILE_UP_LEFT: (200, 160, 40),
    CellKind.TURNSTILE_DOWN_RIGHT: (200, 160, 40),
    CellKind.TURNSTILE_DOWN_LEFT: (200, 160, 40),
    CellKind.START: (220, 220, 220),
    CellKind.END: (40, 200, 200),
    CellKind.COLLECTIBLE: (240, 130, 20),
    CellKind.COLLECTIBLE_CONSUMED: (90, 70, 50),
}
ACTOR_COLOR = (255, 255, 255)


def render_lines(session: LevelSession) -> List[str]:
    """ASCII view of the session with '@' marking the actor."""
    lines = session.grid.to_lines()
    x, y = session.actor.pos
    row = lines[y]
    lines[y] = row[:x] + "@" + row[x + 1:]
    return lines


def status_line(session: LevelSession) -> str:
    actor = session.actor
    return f"status={actor.status.name} pos={actor.pos} moves={actor.moves} collected={actor.collected}"


def run_headless(level: Level, moves: str, config: Optional[BurrowConfig] = None) -> int:
    """Play a scripted move sequence on a level and print the final board.

    Returns:
        Process exit code (0 on success).
    """
    config = config or BurrowConfig()
    session = LevelSession(level.grid, config.resolver_config(), name=level.name)
    source = ScriptedInput(moves)
    steps = source.remaining
    if config.max_steps is not None:
        steps = min(steps, config.max_steps)
    engine = GameEngine(session, source, replace(config.game_config(), tick_rate=0, max_steps=steps))
    print(f"Burrow - {level.name} (headless)")
    if steps > 0:
        engine.run()
    for outcome in engine.outcomes:
        print(f"{outcome.event.name:<9} -> {outcome.position}")
    print("\n".join(render_lines(session)))
    print(status_line(session))
    return 0


def _arcade_available() -> bool:
    try:
        import arcade  # noqa: F401
        return True
    except Exception:
        return False


def run_gui(level: Level, config: Optional[BurrowConfig] = None) -> int:  # pragma: no cover - manual usage
    """Open an Arcade window on the level; arrows/WASD move, R restarts, ESC quits."""
    if not _arcade_available():
        logger.error("Arcade is not installed. Install the 'gui' extra to run the window.")
        return 1

    import arcade

    config = config or BurrowConfig()
    session = LevelSession(level.grid, config.resolver_config(), name=level.name)
    keyboard = KeyboardState()
    for name in ("UP", "DOWN", "LEFT", "RIGHT", "W", "A", "S", "D"):
        keyboard.mapper.set_alias(getattr(arcade.key, name), name)
    engine = GameEngine(session, keyboard, replace(config.game_config(), stop_when_finished=False))

    class BurrowWindow(arcade.Window):
        def __init__(self) -> None:
            super().__init__(session.grid.width * TILE_SIZE, session.grid.height * TILE_SIZE + TILE_SIZE, title=f"Burrow - {level.name}")
            arcade.set_background_color((20, 20, 20))
            engine.start()

        def _cell_box(self, x: int, y: int) -> Tuple[float, float, float, float]:
            left = x * TILE_SIZE + MARGIN / 2
            top = (session.grid.height - y) * TILE_SIZE + TILE_SIZE - MARGIN / 2
            return left, left + TILE_SIZE - MARGIN, top - TILE_SIZE + MARGIN, top

        def on_draw(self):
            self.clear()
            grid = session.grid
            for y in range(grid.height):
                for x in range(grid.width):
                    arcade.draw_lrbt_rectangle_filled(*self._cell_box(x, y), KIND_COLORS[grid.get(x, y)])
            arcade.draw_lrbt_rectangle_filled(*self._cell_box(*session.actor.pos), ACTOR_COLOR)
            arcade.draw_text(status_line(session), 4, 8, arcade.color.WHITE, 10)

        def on_update(self, delta_time: float):
            engine.update(delta_time)
            # One cell per key press, not per frame.
            keyboard.release_all()

        def on_key_press(self, symbol: int, modifiers: int):
            if symbol == arcade.key.ESCAPE:
                engine.stop()
                self.close()
            elif symbol == arcade.key.R:
                session.restart()
            else:
                keyboard.key_down(symbol)

        def on_key_release(self, symbol: int, modifiers: int):
            keyboard.key_up(symbol)

    BurrowWindow()
    try:
        logger.info("Launching Arcade window")
        arcade.run()
        return 0
    except Exception:
        logger.exception("Unhandled exception in GUI loop; exiting with code 1")
        return 1
