"""
Burrow package root.

The grid simulation core lives in ``map`` (cell model and grid), ``actor``
and ``movement`` (the resolver). ``engine``, ``input`` and ``levels`` are the
thin driver layer around it; rendering stays outside the core.
"""

__version__ = "0.1.0"

__all__ = [
    "actor",
    "map",
    "movement",
]
