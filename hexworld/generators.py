"""Deterministic coordinate-to-location generation.

A location is derived from three independent SplitMix64 streams, one per
axis plus one for the world seed. The first 63-bit draw of each stream is
XORed into a combined seed, and a fresh stream seeded with that value decides
the shape. The R axis is bit-reversed before seeding so that neighbouring
rows do not start from neighbouring PRNG states.

Shape tests are sequential and each consumes a fresh draw:

    draw 1 % 19 == 0  -> CIRCLE
    draw 2 % 41 == 0  -> TRIANGLE
    draw 3 % 97 == 0  -> SQUARE
    otherwise         -> EMPTY
"""

from typing import Protocol

from hexworld.rng import (
    INT64_MAX,
    INT64_MIN,
    SplitMix64,
    first_int63,
    reverse64,
    sign_extend,
    zero_extend32,
)
from hexworld.schemas import CubeCoord, CubeLocation, HexCoord, Location, Shape


# (modulus, shape) in the order they are tested
SHAPE_RULES: list[tuple[int, Shape]] = [
    (19, Shape.CIRCLE),
    (41, Shape.TRIANGLE),
    (97, Shape.SQUARE),
]


def expected_frequencies() -> dict[Shape, float]:
    """Marginal probability of each shape under SHAPE_RULES."""
    frequencies: dict[Shape, float] = {}
    remaining = 1.0
    for modulus, shape in SHAPE_RULES:
        frequencies[shape] = remaining / modulus
        remaining -= frequencies[shape]
    frequencies[Shape.EMPTY] = remaining
    return frequencies


def _check_world_seed(seed: int) -> int:
    if not INT64_MIN <= seed <= INT64_MAX:
        raise ValueError(f"World seed must be a signed 64-bit integer, got {seed}")
    return seed


def pick_shape(combined_seed: int) -> Shape:
    """Resolve the shape for a combined seed."""
    stream = SplitMix64(combined_seed)
    for modulus, shape in SHAPE_RULES:
        if stream.int63() % modulus == 0:
            return shape
    return Shape.EMPTY


class Generator(Protocol):
    seed: int

    def generate(self, coord): ...


class BasicGenerator:
    """Shape generator over axial coordinates.

    Holds only the world seed and its precomputed stream draw, so a single
    instance can be shared between threads.
    """

    def __init__(self, seed: int = 0):
        self.seed = _check_world_seed(seed)
        self._world_draw = first_int63(sign_extend(seed))

    def combined_seed(self, coord: HexCoord) -> int:
        """XOR of the Q, R and world stream draws for ``coord``."""
        q_draw = first_int63(sign_extend(coord.q))
        r_draw = first_int63(reverse64(zero_extend32(coord.r)))
        return q_draw ^ r_draw ^ self._world_draw

    def generate(self, coord: HexCoord) -> Location:
        """Generate the location at ``coord``."""
        shape = pick_shape(self.combined_seed(coord))
        return Location(q=coord.q, r=coord.r, shape=shape)


class CubeGenerator:
    """Seed generator over cubic coordinates.

    The Y axis is bit-reversed like R in BasicGenerator. The location seed is
    the first draw of a stream seeded with the combined value, so the origin
    under world seed 0 does not collapse to zero.
    """

    def __init__(self, seed: int = 0):
        self.seed = _check_world_seed(seed)
        self._world_draw = first_int63(sign_extend(seed))

    def generate(self, coord: CubeCoord) -> CubeLocation:
        """Generate the location at ``coord``."""
        combined = (
            first_int63(sign_extend(coord.x))
            ^ first_int63(reverse64(zero_extend32(coord.y)))
            ^ first_int63(sign_extend(coord.z))
            ^ self._world_draw
        )
        return CubeLocation(
            x=coord.x,
            y=coord.y,
            z=coord.z,
            seed=first_int63(combined),
        )
