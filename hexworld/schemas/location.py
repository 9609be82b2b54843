"""Generated location records."""

from pydantic import BaseModel, ConfigDict, Field

from .base import CubeCoord, HexCoord, Shape


class Location(BaseModel):
    """A generated hex: its axial coordinate and the shape drawn there."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    q: int = Field(alias="Q")
    r: int = Field(alias="R")
    shape: Shape = Field(alias="Shape")

    @property
    def coord(self) -> HexCoord:
        return HexCoord(q=self.q, r=self.r)


class CubeLocation(BaseModel):
    """A generated hex in cubic coordinates carrying an opaque derived seed."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    x: int = Field(alias="X")
    y: int = Field(alias="Y")
    z: int = Field(alias="Z")
    seed: int = Field(alias="Seed", ge=0)

    @property
    def coord(self) -> CubeCoord:
        return CubeCoord(x=self.x, y=self.y, z=self.z)
