"""Stable sorting.

All three functions sort ascending and keep the input order of elements that
compare equal. ``sort_by(key, xs)`` is the same as
``sort_with(lambda a, b: compare(key(a), key(b)), xs)``.
"""

from __future__ import annotations

import functools
import numbers
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from listops.core.order import Order, compare
from listops.utils.validation import ensure_callable, ensure_sequence

T = TypeVar("T")

Comparator = Callable[[T, T], "Order | int"]


def _as_int(result: Any) -> int:
    if isinstance(result, Order):
        return result.to_int()
    if isinstance(result, numbers.Integral) and not isinstance(result, bool):
        return Order.from_int(int(result)).to_int()
    msg = f"Comparator must return an Order or an int, got {type(result).__name__}"
    raise TypeError(msg)


def sort(values: Iterable[T]) -> tuple[T, ...]:
    return sort_with(compare, values)


def sort_by(key: Callable[[T], Any], values: Iterable[T]) -> tuple[T, ...]:
    """Sort by ``compare(key(a), key(b))``; ``key`` runs once per element."""
    key = ensure_callable(key, "key")
    items = ensure_sequence(values)
    keyed = [(key(item), item) for item in items]
    ordered = sorted(
        keyed, key=functools.cmp_to_key(lambda a, b: compare(a[0], b[0]).to_int())
    )
    return tuple(item for _, item in ordered)


def sort_with(comparator: Comparator[T], values: Iterable[T]) -> tuple[T, ...]:
    """Sort with a three-way ``comparator`` returning ``Order`` or a signed int."""
    comparator = ensure_callable(comparator, "comparator")
    items = ensure_sequence(values)
    return tuple(
        sorted(items, key=functools.cmp_to_key(lambda a, b: _as_int(comparator(a, b))))
    )


sortBy = sort_by
sortWith = sort_with

__all__ = ["Comparator", "sort", "sort_by", "sortBy", "sort_with", "sortWith"]
