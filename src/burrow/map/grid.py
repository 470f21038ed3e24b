from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Dict, FrozenSet, Generator, List, Optional, Sequence, Set, Tuple

from ..exceptions import MalformedLevelError, OutOfBoundsError
from .tiles import KINDS_BY_GLYPH, CellKind, is_solid, kind_for_code

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


@dataclass(frozen=True)
class Size:
    width: int
    height: int


class LevelGrid:
    """A bounds-checked 2D grid of cell kinds for one level.

    The size is fixed at construction; the content is mutated in place by the
    movement resolver only. Start and End locations are located once, when
    the grid is built from level data, and cached.
    """

    __slots__ = ("_w", "_h", "_cells", "_start", "_ends", "_elapsed")

    def __init__(self, width: int, height: int, default_kind: CellKind = CellKind.GROUND) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("LevelGrid dimensions must be positive")
        self._w = int(width)
        self._h = int(height)
        # cells[y][x]
        self._cells: List[List[CellKind]] = [[default_kind for _ in range(self._w)] for _ in range(self._h)]
        self._start: Optional[Coord] = None
        self._ends: FrozenSet[Coord] = frozenset()
        self._elapsed = 0.0
        logger.debug("Initialized LevelGrid %dx%d with default kind %s", self._w, self._h, default_kind.name)

    @property
    def size(self) -> Size:
        return Size(self._w, self._h)

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    @property
    def diameter(self) -> int:
        return self._w + self._h

    @property
    def elapsed(self) -> float:
        """Seconds accumulated through update()."""
        return self._elapsed

    def is_within(self, x: int, y: int) -> bool:
        """Check if coordinates are within the grid bounds. Never raises."""
        return 0 <= x < self._w and 0 <= y < self._h

    def get(self, x: int, y: int) -> CellKind:
        """Return the kind at (x, y).

        Raises:
            OutOfBoundsError: when (x, y) lies outside the grid.
        """
        if not self.is_within(x, y):
            raise OutOfBoundsError(x, y, self._w, self._h)
        return self._cells[y][x]

    def safe_get(self, x: int, y: int) -> Optional[CellKind]:
        """Return the kind at (x, y), or None when out-of-bounds."""
        if not self.is_within(x, y):
            return None
        return self._cells[y][x]

    def set(self, x: int, y: int, kind: CellKind) -> None:
        """Overwrite the kind at (x, y).

        Only the movement resolver's transition step writes cells during play.
        Start/End caches are not recomputed.
        """
        if not isinstance(kind, CellKind):
            raise TypeError("kind must be a CellKind enum member")
        if not self.is_within(x, y):
            raise OutOfBoundsError(x, y, self._w, self._h)
        self._cells[y][x] = kind

    def is_passable(self, x: int, y: int) -> bool:
        """Return True if (x, y) is in-bounds and not solid. Never raises."""
        kind = self.safe_get(x, y)
        if kind is None:
            return False
        return not is_solid(kind)

    def start_location(self) -> Coord:
        if self._start is None:
            raise MalformedLevelError("Grid has no start location")
        return self._start

    def end_locations(self) -> FrozenSet[Coord]:
        return self._ends

    def update(self, dt: float) -> None:
        """Per-tick hook for cells that change on a timer.

        No current kind is timed, so this only tracks elapsed time.
        """
        if dt < 0:
            raise ValueError("dt must be non-negative")
        self._elapsed += dt

    def neighbors(self, x: int, y: int) -> Generator[Coord, None, None]:
        """Yield in-bounds cardinal neighbours in a fixed order."""
        for dx, dy in ((0, -1), (1, 0), (0, 1), (-1, 0)):
            nx, ny = x + dx, y + dy
            if self.is_within(nx, ny):
                yield (nx, ny)

    def reachable_from(self, origin: Coord) -> Set[Coord]:
        """Return every passable cell reachable by plain walking from origin.

        Conveyors, turnstiles and traps are ignored; this is a static hint,
        not a solver.
        """
        if not self.is_passable(*origin):
            return set()
        seen: Set[Coord] = {origin}
        queue = deque([origin])
        while queue:
            x, y = queue.popleft()
            for n in self.neighbors(x, y):
                if n in seen or not self.is_passable(*n):
                    continue
                seen.add(n)
                queue.append(n)
        return seen

    def copy(self) -> "LevelGrid":
        clone = LevelGrid(self._w, self._h)
        clone._cells = [list(row) for row in self._cells]
        clone._start = self._start
        clone._ends = self._ends
        return clone

    def snapshot(self) -> Tuple[Tuple[int, ...], ...]:
        """Deterministic, hashable snapshot of the cell codes for equality tests."""
        return tuple(tuple(kind.value for kind in row) for row in self._cells)

    # ---- Level data ------------------------------------------------------
    def _locate_markers(self) -> None:
        starts: List[Coord] = []
        ends: Set[Coord] = set()
        for y, row in enumerate(self._cells):
            for x, kind in enumerate(row):
                if kind is CellKind.START:
                    starts.append((x, y))
                elif kind is CellKind.END:
                    ends.add((x, y))
        if not starts:
            raise MalformedLevelError("Level has no start cell")
        if len(starts) > 1:
            raise MalformedLevelError(f"Level has {len(starts)} start cells; exactly one is required")
        if not ends:
            logger.warning("Level has no end cell; it cannot be won")
        self._start = starts[0]
        self._ends = frozenset(ends)

    @classmethod
    def from_codes(cls, rows: Sequence[Sequence[int]]) -> "LevelGrid":
        """Create a LevelGrid from a rectangular table of integer level codes.

        Raises:
            MalformedLevelError: if the table is empty or ragged, contains a
                value outside the code table, or has no single start cell.
        """
        width = _check_rectangular(rows)
        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            for x, code in enumerate(row):
                kind = kind_for_code(code) if isinstance(code, int) and not isinstance(code, bool) else None
                if kind is None:
                    raise MalformedLevelError(f"Unknown cell code {code!r} at ({x}, {y})")
                grid._cells[y][x] = kind
        grid._locate_markers()
        logger.debug("Parsed level %dx%d: start=%s ends=%s", grid.width, grid.height, grid._start, sorted(grid._ends))
        return grid

    @classmethod
    def from_lines(cls, lines: Sequence[str], mapping: Optional[Dict[str, CellKind]] = None) -> "LevelGrid":
        """Create a LevelGrid from an ASCII representation (see CellKind.glyph)."""
        width = _check_rectangular(lines)
        mapping = mapping or KINDS_BY_GLYPH
        grid = cls(width, len(lines))
        for y, row in enumerate(lines):
            for x, ch in enumerate(row):
                kind = mapping.get(ch)
                if kind is None:
                    raise MalformedLevelError(f"Unknown cell glyph {ch!r} at ({x}, {y})")
                grid._cells[y][x] = kind
        grid._locate_markers()
        return grid

    def to_codes(self) -> List[List[int]]:
        return [[kind.value for kind in row] for row in self._cells]

    def to_lines(self) -> List[str]:
        """Convert the grid to an ASCII representation (for debugging/testing)."""
        return ["".join(kind.glyph for kind in row) for row in self._cells]

    def __repr__(self) -> str:
        return f"LevelGrid(width={self._w}, height={self._h})"


def _check_rectangular(rows: Sequence[Sequence]) -> int:
    if not rows:
        raise MalformedLevelError("Level must have at least one row")
    try:
        lengths = [len(row) for row in rows]
    except TypeError as e:
        raise MalformedLevelError("Level rows must be sequences") from e
    width = lengths[0]
    if width == 0:
        raise MalformedLevelError("Level rows must not be empty")
    for i, length in enumerate(lengths):
        if length != width:
            raise MalformedLevelError(f"All rows must have equal width; row 0 has {width}, row {i} has {length}")
    return width


__all__ = ["Coord", "LevelGrid", "Size"]
