from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

import yaml

from .engine.loop import GameConfig
from .movement.resolver import ResolverConfig

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(value, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        token = value.strip().lower()
        if token in _TRUE:
            return True
        if token in _FALSE:
            return False
    raise ValueError(f"{field} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class BurrowConfig:
    """Central runtime configuration.

    - tick_rate / max_steps: loop driver pacing (see GameConfig).
    - turnstile_push: whether turnstiles deflect the actor or only rotate.
    - max_chain: cap on chained pushes per move; None means grid diameter.
    - log_level: root log level name.
    """

    tick_rate: float = 60.0
    max_steps: Optional[int] = None
    turnstile_push: bool = False
    max_chain: Optional[int] = None
    log_level: str = "INFO"

    def resolver_config(self) -> ResolverConfig:
        return ResolverConfig(turnstile_push=self.turnstile_push, max_chain=self.max_chain)

    def game_config(self) -> GameConfig:
        return GameConfig(tick_rate=self.tick_rate, max_steps=self.max_steps)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "BurrowConfig":
        """Load configuration from a YAML file. Missing fields fallback to defaults."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        cfg = cls()
        if "tick_rate" in raw:
            cfg = replace(cfg, tick_rate=float(raw["tick_rate"]))
        if raw.get("max_steps") is not None:
            cfg = replace(cfg, max_steps=int(raw["max_steps"]))
        if "turnstile_push" in raw:
            cfg = replace(cfg, turnstile_push=_parse_bool(raw["turnstile_push"], "turnstile_push"))
        if raw.get("max_chain") is not None:
            cfg = replace(cfg, max_chain=int(raw["max_chain"]))
        if "log_level" in raw:
            cfg = replace(cfg, log_level=str(raw["log_level"]).upper())
        logger.debug("Loaded config from %s: %s", path, cfg)
        return cfg

    def with_env(self) -> "BurrowConfig":
        """Return a copy with BURROW_* environment overrides applied."""
        cfg = self
        push = os.getenv("BURROW_TURNSTILE_PUSH")
        if push is not None:
            cfg = replace(cfg, turnstile_push=push.strip().lower() in _TRUE)
        rate = os.getenv("BURROW_TICK_RATE")
        if rate:
            try:
                cfg = replace(cfg, tick_rate=float(rate))
            except ValueError:
                logger.warning("Ignoring invalid BURROW_TICK_RATE=%r", rate)
        level = os.getenv("BURROW_LOG_LEVEL")
        if level:
            cfg = replace(cfg, log_level=level.upper())
        return cfg

    @classmethod
    def from_env(cls) -> "BurrowConfig":
        return cls().with_env()
