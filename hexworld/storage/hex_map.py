"""Memoizing hex map in front of a generator."""

import logging
import threading
from typing import Iterable, Optional, Union

from hexworld.generators import BasicGenerator, CubeGenerator, Generator
from hexworld.schemas import CubeCoord, CubeLocation, HexCoord, Location

logger = logging.getLogger(__name__)

Coord = Union[HexCoord, CubeCoord]
AnyLocation = Union[Location, CubeLocation]


class HexMap:
    """Coordinate -> location cache backed by a generator.

    Misses are generated and inserted (insert-on-miss). Entries are never
    removed or replaced by a different value. Generation happens outside the
    lock; when two threads race on the same coordinate the later insert wins,
    which is harmless since both computed the same location.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        generator: Optional[Generator] = None,
        cache: bool = True,
    ):
        if generator is None:
            generator = BasicGenerator(0 if seed is None else seed)
        elif seed is not None and seed != generator.seed:
            raise ValueError(
                f"Seed {seed} does not match generator seed {generator.seed}"
            )
        self.generator = generator
        self.seed = generator.seed
        self.cache = cache
        self._locations: dict[Coord, AnyLocation] = {}
        self._lock = threading.Lock()

    @classmethod
    def cubic(cls, seed: int = 0, cache: bool = True) -> "HexMap":
        """Build a map over cubic coordinates."""
        return cls(seed, generator=CubeGenerator(seed), cache=cache)

    def get(self, coord: Coord) -> AnyLocation:
        """Return the location at ``coord``, generating it on a miss."""
        with self._lock:
            loc = self._locations.get(coord)
        if loc is not None:
            return loc

        loc = self.generator.generate(coord)
        logger.debug(f"Generated {loc!r}")
        if self.cache:
            with self._lock:
                self._locations[coord] = loc
        return loc

    def get_many(self, coords: Iterable[Coord]) -> list[AnyLocation]:
        """Resolve a batch of coordinates, preserving request order."""
        return [self.get(coord) for coord in coords]

    def __contains__(self, coord: object) -> bool:
        with self._lock:
            return coord in self._locations

    def __len__(self) -> int:
        with self._lock:
            return len(self._locations)
