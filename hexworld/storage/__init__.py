"""Storage layer for generated locations."""

from .hex_map import HexMap

__all__ = ["HexMap"]
