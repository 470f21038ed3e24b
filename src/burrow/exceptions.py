class BurrowError(Exception):
    """Base exception for the Burrow project."""


class MalformedLevelError(BurrowError):
    """Raised when level data cannot be turned into a playable grid."""


class OutOfBoundsError(BurrowError, IndexError):
    """Raised when a grid coordinate lies outside the grid extent."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Coordinates out of bounds: ({x}, {y}) for grid {width}x{height}")
        self.x = x
        self.y = y


class InvalidDirectionError(BurrowError, ValueError):
    """Raised when a movement token is not one of the four cardinal directions."""


class ActorStateError(BurrowError):
    """Raised when an actor's terminal status would be overwritten."""
