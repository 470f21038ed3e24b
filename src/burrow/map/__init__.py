from .grid import Coord, LevelGrid, Size
from .tiles import LEVEL_CODES, CellKind, is_solid, next_state

__all__ = ["Coord", "LevelGrid", "Size", "LEVEL_CODES", "CellKind", "is_solid", "next_state"]
