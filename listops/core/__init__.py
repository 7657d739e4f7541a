"""Core primitives.

Low-level, stable types used across the package: the ordering primitive that
the sort functions build on and the value types returned by list operations.
"""

from .order import Order, compare
from .types import Partition, Seq

__all__ = ["Order", "Partition", "Seq", "compare"]
