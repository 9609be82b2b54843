"""Seeded pseudo-random streams for coordinate hashing.

All generation goes through SplitMix64 so output is identical on every
Python version and platform. ``random.Random`` makes no such promise for
integer draws across releases.

Reference constants are from Vigna's ``splitmix64.c``.
"""

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

GOLDEN_GAMMA = 0x9E3779B97F4A7C15


def sign_extend(value: int) -> int:
    """Reinterpret a signed integer as an unsigned 64-bit seed."""
    return value & MASK64


def zero_extend32(value: int) -> int:
    """Reinterpret a signed 32-bit integer as its unsigned bit pattern."""
    return value & MASK32


def reverse64(value: int) -> int:
    """Reverse the bit order of a 64-bit unsigned integer."""
    return int(f"{value & MASK64:064b}"[::-1], 2)


class SplitMix64:
    """SplitMix64 generator.

    Every seed, zero included, yields a full-entropy stream because the
    state is advanced by the golden gamma before mixing.
    """

    __slots__ = ("state",)

    def __init__(self, seed: int):
        self.state = seed & MASK64

    def next64(self) -> int:
        """Next unsigned 64-bit value."""
        self.state = (self.state + GOLDEN_GAMMA) & MASK64
        z = self.state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
        return z ^ (z >> 31)

    def int63(self) -> int:
        """Next non-negative 63-bit value."""
        return self.next64() >> 1


def first_int63(seed: int) -> int:
    """First 63-bit draw of a fresh stream seeded with ``seed``."""
    return SplitMix64(seed).int63()
