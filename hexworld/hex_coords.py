"""Axial hex coordinate utilities.

Hex edge numbering (clockwise from East):
    Edge 0: E   (+1,  0)
    Edge 1: NE  (+1, -1)
    Edge 2: NW  ( 0, -1)
    Edge 3: W   (-1,  0)
    Edge 4: SW  (-1, +1)
    Edge 5: SE  ( 0, +1)
"""

from typing import Iterator, NamedTuple

from hexworld.schemas import HexCoord


class HexOffset(NamedTuple):
    """Offset for hex neighbor lookup."""
    dq: int
    dr: int


# Neighbor offsets indexed by edge number (clockwise from E)
HEX_NEIGHBOR_OFFSETS: list[HexOffset] = [
    HexOffset(+1,  0),  # Edge 0: E
    HexOffset(+1, -1),  # Edge 1: NE
    HexOffset( 0, -1),  # Edge 2: NW
    HexOffset(-1,  0),  # Edge 3: W
    HexOffset(-1, +1),  # Edge 4: SW
    HexOffset( 0, +1),  # Edge 5: SE
]


def get_neighbor(coord: HexCoord, edge: int) -> HexCoord:
    """Get the hex across ``edge`` (0-5, clockwise from E)."""
    offset = HEX_NEIGHBOR_OFFSETS[edge]
    return HexCoord(q=coord.q + offset.dq, r=coord.r + offset.dr)


def get_all_neighbors(coord: HexCoord) -> list[HexCoord]:
    """All 6 neighbors in edge order."""
    return [get_neighbor(coord, edge) for edge in range(6)]


def hexes_in_radius(center: HexCoord, radius: int) -> Iterator[HexCoord]:
    """Yield every hex within ``radius`` of ``center``, row by row.

    Yields 3 * radius * (radius + 1) + 1 hexes.
    """
    if radius < 0:
        raise ValueError(f"Radius must be non-negative, got {radius}")
    for dr in range(-radius, radius + 1):
        q_min = max(-radius, -dr - radius)
        q_max = min(radius, -dr + radius)
        for dq in range(q_min, q_max + 1):
            yield HexCoord(q=center.q + dq, r=center.r + dr)


def coords_to_key(coord: HexCoord) -> str:
    """Convert coordinates to a "q,r" string."""
    return f"{coord.q},{coord.r}"


def key_to_coords(key: str) -> HexCoord:
    """Parse a "q,r" string back to coordinates."""
    q, r = key.split(",")
    return HexCoord(q=int(q), r=int(r))
