from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Optional

import yaml

from ..exceptions import MalformedLevelError
from ..map.grid import LevelGrid

logger = logging.getLogger(__name__)

DEFAULT_LEVEL = "first_level.yaml"


@dataclass(frozen=True)
class Level:
    name: str
    grid: LevelGrid


def parse_level(data: Any, source: str = "<memory>") -> Level:
    """Build a Level from an already-parsed document.

    The document is a mapping with an optional ``name`` and a ``cells``
    table of integer level codes, rows top to bottom.
    """
    if not isinstance(data, dict):
        raise MalformedLevelError(f"{source}: level document must be a mapping")
    cells = data.get("cells")
    if not isinstance(cells, list) or not all(isinstance(row, list) for row in cells):
        raise MalformedLevelError(f"{source}: 'cells' must be a list of rows")
    try:
        grid = LevelGrid.from_codes(cells)
    except MalformedLevelError as e:
        raise MalformedLevelError(f"{source}: {e}") from e
    name = str(data.get("name") or Path(source).stem)
    logger.info("Loaded level %r (%dx%d) from %s", name, grid.width, grid.height, source)
    return Level(name=name, grid=grid)


def load_level(path: Optional[str | Path] = None) -> Level:
    """Load a level from YAML.

    If path is None, loads the bundled demo level.
    """
    if path is None:
        text = resources.files("burrow.levels").joinpath(DEFAULT_LEVEL).read_text(encoding="utf-8")
        source = DEFAULT_LEVEL
        logger.debug("Loaded embedded level resource %s", DEFAULT_LEVEL)
    else:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
        source = str(path)
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise MalformedLevelError(f"{source}: invalid YAML: {e}") from e
    return parse_level(data, source)


__all__ = ["Level", "load_level", "parse_level"]
