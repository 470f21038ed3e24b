from .loop import GameConfig, GameEngine
from .session import LevelSession

__all__ = ["GameConfig", "GameEngine", "LevelSession"]
