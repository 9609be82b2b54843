"""Coordinate types and the shape enum."""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field

from hexworld.rng import INT32_MAX, INT32_MIN


class Shape(IntEnum):
    """Attribute drawn at each hex. EMPTY is the background."""

    EMPTY = 0
    CIRCLE = 1
    TRIANGLE = 2
    SQUARE = 3


SHAPE_COUNT = len(Shape)


class HexCoord(BaseModel):
    """Axial hex coordinates.

    Serialized as ``{"Q": .., "R": ..}``; lower-case names are accepted on input.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    q: int = Field(alias="Q", ge=INT32_MIN, le=INT32_MAX, strict=True)
    r: int = Field(alias="R", ge=INT32_MIN, le=INT32_MAX, strict=True)

    def distance_to(self, other: "HexCoord") -> int:
        """Calculate hex distance using axial coordinates."""
        dq = abs(self.q - other.q)
        dr = abs(self.r - other.r)
        ds = abs((self.q + self.r) - (other.q + other.r))
        return max(dq, dr, ds)

    def to_cube(self) -> "CubeCoord":
        """Convert to cubic coordinates. Fails validation if y leaves int32."""
        return CubeCoord(x=self.q, y=-self.q - self.r, z=self.r)


class CubeCoord(BaseModel):
    """Cubic hex coordinates (x + y + z == 0 on a regular grid)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    x: int = Field(alias="X", ge=INT32_MIN, le=INT32_MAX, strict=True)
    y: int = Field(alias="Y", ge=INT32_MIN, le=INT32_MAX, strict=True)
    z: int = Field(alias="Z", ge=INT32_MIN, le=INT32_MAX, strict=True)

    def to_axial(self) -> HexCoord:
        return HexCoord(q=self.x, r=self.z)
