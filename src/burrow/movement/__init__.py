from ..directions import Direction
from .events import MoveEvent, MoveOutcome
from .resolver import MovementResolver, ResolverConfig

__all__ = ["Direction", "MoveEvent", "MoveOutcome", "MovementResolver", "ResolverConfig"]
