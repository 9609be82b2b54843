"""Tests for SplitMix64 streams and seed reinterpretation."""

from hexworld.rng import (
    MASK64,
    SplitMix64,
    first_int63,
    reverse64,
    sign_extend,
    zero_extend32,
)


class TestSplitMix64:
    def test_reference_vectors(self):
        """Seed 1234567 must match the published reference outputs."""
        stream = SplitMix64(1234567)
        assert stream.next64() == 6457827717110365317
        assert stream.next64() == 3203168211198807973
        assert stream.next64() == 9817491932198370423

    def test_zero_seed_is_not_degenerate(self):
        """Seed 0 produces a full-entropy value, not zero."""
        assert SplitMix64(0).next64() == 0xE220A8397B1DCDAF

    def test_int63_is_top_63_bits(self):
        assert SplitMix64(0).int63() == 0xE220A8397B1DCDAF >> 1

    def test_int63_non_negative_and_bounded(self):
        stream = SplitMix64(-42)
        for _ in range(1000):
            value = stream.int63()
            assert 0 <= value < 2**63

    def test_negative_seed_matches_twos_complement(self):
        """A negative seed is the same stream as its 64-bit bit pattern."""
        assert first_int63(-1) == first_int63(MASK64)

    def test_same_seed_same_stream(self):
        a = SplitMix64(99)
        b = SplitMix64(99)
        assert [a.next64() for _ in range(5)] == [b.next64() for _ in range(5)]


class TestReinterpretation:
    def test_sign_extend_negative(self):
        assert sign_extend(-1) == MASK64
        assert sign_extend(-(2**31)) == 0xFFFFFFFF80000000

    def test_sign_extend_positive_unchanged(self):
        assert sign_extend(2**31 - 1) == 2**31 - 1

    def test_zero_extend32(self):
        assert zero_extend32(-1) == 0xFFFFFFFF
        assert zero_extend32(-(2**31)) == 0x80000000
        assert zero_extend32(5) == 5


class TestReverse64:
    def test_low_bit_becomes_high_bit(self):
        assert reverse64(1) == 1 << 63

    def test_zero(self):
        assert reverse64(0) == 0

    def test_involution(self):
        for value in (3, 0xDEADBEEF, MASK64, 0x8000000000000001):
            assert reverse64(reverse64(value)) == value

    def test_adjacent_values_land_far_apart(self):
        """Small increments flip high bits after reversal."""
        assert reverse64(zero_extend32(1)) - reverse64(zero_extend32(0)) == 1 << 63
        assert reverse64(zero_extend32(2)) == 1 << 62
