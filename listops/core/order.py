"""Three-way ordering primitive."""

from __future__ import annotations

from enum import Enum
from typing import Any


class Order(Enum):
    """Result of comparing two values."""

    LT = -1
    EQ = 0
    GT = 1

    @classmethod
    def from_int(cls, value: int) -> Order:
        """Map a ``cmp``-style integer onto an ``Order`` by its sign."""
        if value < 0:
            return cls.LT
        if value > 0:
            return cls.GT
        return cls.EQ

    def to_int(self) -> int:
        return self.value


def compare(a: Any, b: Any) -> Order:
    """Compare two values with Python's ``<`` and ``>``.

    Incomparable operands raise whatever the comparison itself raises
    (usually ``TypeError``).
    """
    if a < b:
        return Order.LT
    if a > b:
        return Order.GT
    return Order.EQ


__all__ = ["Order", "compare"]
