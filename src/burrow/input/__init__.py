"""
Input layer: turns physical keys or scripts into movement directions.

Exposes:
- InputMapper: rebindable key name -> Direction mapping.
- KeyboardState: held-key tracker polled once per tick.
- ScriptedInput: replays a fixed move sequence (headless play, tests).
"""
from .mapping import InputMapper
from .sources import InputSource, KeyboardState, ScriptedInput

__all__ = [
    "InputMapper",
    "InputSource",
    "KeyboardState",
    "ScriptedInput",
]
