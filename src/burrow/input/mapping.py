from __future__ import annotations

import logging
from typing import Dict, Optional

from ..directions import Direction

logger = logging.getLogger(__name__)

DEFAULT_BINDINGS: Dict[str, Direction] = {
    "UP": Direction.UP,
    "W": Direction.UP,
    "DOWN": Direction.DOWN,
    "S": Direction.DOWN,
    "LEFT": Direction.LEFT,
    "A": Direction.LEFT,
    "RIGHT": Direction.RIGHT,
    "D": Direction.RIGHT,
}


def _key_name(key: str | int) -> Optional[str]:
    # Backend key codes are kept as their decimal string until aliased.
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return str(key)
    if isinstance(key, str) and key.strip():
        return key.strip().upper()
    return None


class InputMapper:
    """Maps key names (case-insensitive) or backend key codes to directions.

    Window backends register their integer codes with set_alias() so the
    bindings can stay in terms of readable names.
    """

    def __init__(self, bindings: Optional[Dict[str, Direction]] = None) -> None:
        self._bindings: Dict[str, Direction] = {}
        self._aliases: Dict[str, str] = {}
        for key, direction in (bindings or {}).items():
            self.bind(key, direction)

    @classmethod
    def default(cls) -> "InputMapper":
        """Arrow keys and WASD."""
        return cls(DEFAULT_BINDINGS)

    def bind(self, key: str | int, direction: Direction) -> None:
        name = _key_name(key)
        if name is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._bindings[name] = direction

    def set_alias(self, physical: str | int, canonical_name: str) -> None:
        """Register an alias, e.g. set_alias(65362, "UP")."""
        name = _key_name(physical)
        target = _key_name(canonical_name)
        if name and target:
            self._aliases[name] = target

    def translate_key(self, key: str | int) -> Optional[Direction]:
        """Translate a physical key into a Direction, or None if unbound."""
        name = _key_name(key)
        if name is None:
            return None
        return self._bindings.get(self._aliases.get(name, name))


__all__ = ["DEFAULT_BINDINGS", "InputMapper"]
