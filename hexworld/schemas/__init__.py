"""Pydantic schemas for hexworld."""

from .base import SHAPE_COUNT, CubeCoord, HexCoord, Shape
from .location import CubeLocation, Location

__all__ = [
    # base
    "Shape",
    "SHAPE_COUNT",
    "HexCoord",
    "CubeCoord",
    # location
    "Location",
    "CubeLocation",
]
