from .loader import Level, load_level, parse_level

__all__ = ["Level", "load_level", "parse_level"]
