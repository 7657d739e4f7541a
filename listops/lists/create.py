"""Sequence constructors."""

from __future__ import annotations

import builtins
import itertools
import logging
from collections.abc import Iterable
from typing import TypeVar

from listops.utils.validation import ensure_int, ensure_sequence

T = TypeVar("T")

_LOGGER = logging.getLogger(__name__)


def singleton(value: T) -> tuple[T]:
    return (value,)


def repeat(n: int, value: T) -> tuple[T, ...]:
    """Return ``n`` copies of ``value``; ``n <= 0`` gives an empty tuple."""
    n = ensure_int(n, "n")
    if n <= 0:
        return ()
    return tuple(itertools.repeat(value, n))


def range(low: int, high: int) -> tuple[int, ...]:
    """Return the integers from ``low`` to ``high`` inclusive.

    Unlike descending-capable ranges, ``low > high`` yields an empty tuple.
    """
    low = ensure_int(low, "low")
    high = ensure_int(high, "high")
    if low > high:
        _LOGGER.debug("range(%d, %d) is empty: low exceeds high", low, high)
        return ()
    return tuple(builtins.range(low, high + 1))


def cons(value: T, values: Iterable[T]) -> tuple[T, ...]:
    """Prepend ``value`` to ``values``."""
    return (value, *ensure_sequence(values))


__all__ = ["cons", "range", "repeat", "singleton"]
