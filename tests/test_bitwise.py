"""Tests for fixed-width bitwise operators."""

import pytest

from listops import bitwise
from listops.bitwise import Bitwise
from listops.utils import BitwiseConfig


def test_and_or_xor():
    assert bitwise.and_(0b1100, 0b1010) == 0b1000
    assert bitwise.or_(0b1100, 0b1010) == 0b1110
    assert bitwise.xor(0b1100, 0b1010) == 0b0110


def test_operands_wrap_to_32_bits():
    assert bitwise.and_(2**32 + 5, 7) == 5
    assert bitwise.or_(2**31, 0) == -(2**31)


def test_complement():
    assert bitwise.complement(0) == -1
    assert bitwise.complement(-1) == 0
    assert bitwise.complement(5) == -6


def test_shift_left_overflows_into_sign_bit():
    assert bitwise.shift_left_by(31, 1) == -(2**31)
    assert bitwise.shiftLeftBy(1, 2**31) == 0


def test_shift_right_by_propagates_sign():
    assert bitwise.shift_right_by(1, 32) == 16
    assert bitwise.shiftRightBy(1, -32) == -16
    assert bitwise.shift_right_by(31, -1) == -1


def test_shift_right_zf_by_fills_zeros():
    assert bitwise.shift_right_zf_by(1, 32) == 16
    assert bitwise.shiftRightZfBy(1, -32) == 2147483632
    assert bitwise.shift_right_zf_by(0, -1) == 4294967295


def test_shift_offset_wraps_at_width():
    assert bitwise.shift_left_by(32, 1) == 1
    assert bitwise.shift_left_by(33, 1) == 2


@pytest.mark.parametrize("bad", [1.0, "1", True, None])
def test_rejects_non_integers(bad):
    with pytest.raises(TypeError, match="must be an integer"):
        bitwise.and_(bad, 1)


class TestConfiguredWidth:
    """Operators bound to a non-default width."""

    def test_eight_bit(self):
        ops = Bitwise(BitwiseConfig(width=8))
        assert ops.shift_left_by(7, 1) == -128
        assert ops.shift_right_zf_by(0, -1) == 255
        assert ops.complement(0) == -1

    def test_sixty_four_bit(self):
        ops = Bitwise(BitwiseConfig(width=64))
        assert ops.shift_left_by(40, 1) == 2**40
        assert ops.shift_right_zf_by(0, -1) == 2**64 - 1
        assert ops.shift_right_by(63, -1) == -1

    def test_default_is_32_bits(self):
        assert Bitwise().config.width == 32
