"""listops public interface.

List operations live under ``listops.lists`` and fixed-width bitwise
operators under ``listops.bitwise``. The ordering primitive and result types
are re-exported here.
"""

from __future__ import annotations

from . import bitwise, lists
from .core import Order, Partition, compare

__all__ = [
    "Order",
    "Partition",
    "bitwise",
    "compare",
    "lists",
]

__version__ = "0.1.0"
