from __future__ import annotations

from enum import Enum
from typing import Tuple

from .exceptions import InvalidDirectionError


class Direction(Enum):
    """The four cardinal movement directions as (dx, dy) unit vectors.

    Rows grow downwards, so UP decreases y.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def is_horizontal(self) -> bool:
        return self.dy == 0

    def step(self, x: int, y: int) -> Tuple[int, int]:
        """Return the coordinate one cell away from (x, y) in this direction."""
        return x + self.dx, y + self.dy

    @classmethod
    def parse(cls, token: "Direction | str") -> "Direction":
        """Coerce a Direction or a token string ("up", "R", ...) into a Direction.

        Raises:
            InvalidDirectionError: for anything that is not a cardinal direction.
        """
        if isinstance(token, Direction):
            return token
        if not isinstance(token, str):
            raise InvalidDirectionError(f"Not a direction token: {token!r}")
        key = token.strip().upper()
        found = _TOKENS.get(key)
        if found is None:
            raise InvalidDirectionError(f"Unknown direction token: {token!r}")
        return found


_TOKENS = {
    "UP": Direction.UP,
    "U": Direction.UP,
    "DOWN": Direction.DOWN,
    "D": Direction.DOWN,
    "LEFT": Direction.LEFT,
    "L": Direction.LEFT,
    "RIGHT": Direction.RIGHT,
    "R": Direction.RIGHT,
}


__all__ = ["Direction"]
