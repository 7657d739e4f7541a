"""Configuration utilities."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from listops.utils.validation import ensure_int

SUPPORTED_WIDTHS = (8, 16, 32, 64)

_DTYPES: dict[int, tuple[type[np.signedinteger], type[np.unsignedinteger]]] = {
    8: (np.int8, np.uint8),
    16: (np.int16, np.uint16),
    32: (np.int32, np.uint32),
    64: (np.int64, np.uint64),
}


@dataclass(frozen=True, slots=True)
class BitwiseConfig:
    """Integer width used by the bitwise operators.

    ``width`` defaults to 32, the width of the source runtime's bitwise
    integers.
    """

    width: int = 32

    def __post_init__(self) -> None:
        width = ensure_int(self.width, "width")
        if width not in SUPPORTED_WIDTHS:
            msg = f"width must be one of {SUPPORTED_WIDTHS}, got {self.width!r}"
            raise ValueError(msg)
        object.__setattr__(self, "width", width)

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    @property
    def shift_mask(self) -> int:
        return self.width - 1

    @property
    def signed_dtype(self) -> type[np.signedinteger]:
        return _DTYPES[self.width][0]

    @property
    def unsigned_dtype(self) -> type[np.unsignedinteger]:
        return _DTYPES[self.width][1]

    def as_dict(self) -> dict[str, int | str]:
        return {
            "width": self.width,
            "signed_dtype": np.dtype(self.signed_dtype).name,
            "unsigned_dtype": np.dtype(self.unsigned_dtype).name,
        }
