import logging
import os
from typing import Optional

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def level_from_name(name: Optional[str], default: int = logging.WARNING) -> int:
    """Map a level name such as "debug" to its logging constant."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def level_for_verbosity(verbosity: int, default: int = logging.WARNING) -> int:
    """-v gives INFO, -vv and beyond DEBUG; otherwise the default."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return default


def configure_logging(default_level: int = logging.INFO, env_override: bool = True) -> int:
    """Configure the root logger for the CLI.

    With env_override, BURROW_LOG_LEVEL (when a valid level name) wins over
    default_level. Callers pass env_override=False for an explicit -v flag.
    Returns the level that was applied.
    """
    level = default_level
    if env_override:
        level = level_from_name(os.getenv("BURROW_LOG_LEVEL"), default_level)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger(__name__).debug("Logging configured at %s", logging.getLevelName(level))
    return level
