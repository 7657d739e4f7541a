"""Fixed-width bitwise operators.

Python integers are unbounded, while the source runtime's bitwise operators
work on 32-bit two's-complement integers. Operands here are reduced modulo
``2 ** width`` and handled as numpy fixed-width integers, so overflow wraps
exactly as it does there::

    >>> shift_left_by(31, 1)
    -2147483648
    >>> shift_right_zf_by(0, -1)
    4294967295

Shift offsets are taken modulo the width. ``Bitwise(BitwiseConfig(width=64))``
gives the same operators at another width.
"""

from __future__ import annotations

import numpy as np

from listops.utils.config import BitwiseConfig
from listops.utils.validation import ensure_int


class Bitwise:
    """Bitwise operators bound to a :class:`BitwiseConfig`."""

    def __init__(self, config: BitwiseConfig | None = None) -> None:
        self.config = config or BitwiseConfig()

    def _unsigned(self, value: int, name: str = "value") -> np.ndarray:
        raw = ensure_int(value, name) & self.config.mask
        return np.array([raw], dtype=self.config.unsigned_dtype)

    def _signed(self, value: int, name: str = "value") -> np.ndarray:
        return self._unsigned(value, name).view(self.config.signed_dtype)

    def _offset(self, offset: int) -> np.ndarray:
        count = ensure_int(offset, "offset") & self.config.shift_mask
        return np.array([count], dtype=self.config.unsigned_dtype)

    def and_(self, a: int, b: int) -> int:
        return int(np.bitwise_and(self._signed(a, "a"), self._signed(b, "b"))[0])

    def or_(self, a: int, b: int) -> int:
        return int(np.bitwise_or(self._signed(a, "a"), self._signed(b, "b"))[0])

    def xor(self, a: int, b: int) -> int:
        return int(np.bitwise_xor(self._signed(a, "a"), self._signed(b, "b"))[0])

    def complement(self, value: int) -> int:
        return int(np.invert(self._signed(value))[0])

    def shift_left_by(self, offset: int, value: int) -> int:
        # shift unsigned so bits pushed past the sign are dropped, then reinterpret
        shifted = np.left_shift(self._unsigned(value), self._offset(offset))
        return int(shifted.view(self.config.signed_dtype)[0])

    def shift_right_by(self, offset: int, value: int) -> int:
        """Arithmetic shift; the sign bit is copied in from the left."""
        count = self._offset(offset).view(self.config.signed_dtype)
        return int(np.right_shift(self._signed(value), count)[0])

    def shift_right_zf_by(self, offset: int, value: int) -> int:
        """Logical shift; zeros are filled in and the result is unsigned."""
        return int(np.right_shift(self._unsigned(value), self._offset(offset))[0])


_DEFAULT = Bitwise()


def and_(a: int, b: int) -> int:
    return _DEFAULT.and_(a, b)


def or_(a: int, b: int) -> int:
    return _DEFAULT.or_(a, b)


def xor(a: int, b: int) -> int:
    return _DEFAULT.xor(a, b)


def complement(value: int) -> int:
    return _DEFAULT.complement(value)


def shift_left_by(offset: int, value: int) -> int:
    return _DEFAULT.shift_left_by(offset, value)


def shift_right_by(offset: int, value: int) -> int:
    return _DEFAULT.shift_right_by(offset, value)


def shift_right_zf_by(offset: int, value: int) -> int:
    return _DEFAULT.shift_right_zf_by(offset, value)


shiftLeftBy = shift_left_by
shiftRightBy = shift_right_by
shiftRightZfBy = shift_right_zf_by

__all__ = [
    "Bitwise",
    "and_",
    "complement",
    "or_",
    "shift_left_by",
    "shift_right_by",
    "shift_right_zf_by",
    "shiftLeftBy",
    "shiftRightBy",
    "shiftRightZfBy",
    "xor",
]
