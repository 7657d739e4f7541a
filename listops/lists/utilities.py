"""Whole-sequence queries and reductions."""

from __future__ import annotations

import builtins
import math
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from listops.utils.validation import ensure_callable, ensure_iterator, ensure_sequence

T = TypeVar("T")


def length(values: Iterable[Any]) -> int:
    return len(ensure_sequence(values))


def reverse(values: Iterable[T]) -> tuple[T, ...]:
    return ensure_sequence(values)[::-1]


def member(value: Any, values: Iterable[Any]) -> bool:
    """Return True if some element equals ``value``.

    Scans left to right and stops at the first match, so ``values`` may be an
    unbounded iterator as long as it contains ``value``.
    """
    return builtins.any(item == value for item in ensure_iterator(values))


def all(predicate: Callable[[T], bool], values: Iterable[T]) -> bool:
    predicate = ensure_callable(predicate, "predicate")
    return builtins.all(predicate(item) for item in ensure_iterator(values))


def any(predicate: Callable[[T], bool], values: Iterable[T]) -> bool:
    predicate = ensure_callable(predicate, "predicate")
    return builtins.any(predicate(item) for item in ensure_iterator(values))


def maximum(values: Iterable[T]) -> T | None:
    """Largest element, or ``None`` for an empty input."""
    return builtins.max(ensure_sequence(values), default=None)


def minimum(values: Iterable[T]) -> T | None:
    """Smallest element, or ``None`` for an empty input."""
    return builtins.min(ensure_sequence(values), default=None)


def sum(values: Iterable[Any]) -> Any:
    return builtins.sum(ensure_sequence(values))


def product(values: Iterable[Any]) -> Any:
    return math.prod(ensure_sequence(values))


__all__ = [
    "all",
    "any",
    "length",
    "maximum",
    "member",
    "minimum",
    "product",
    "reverse",
    "sum",
]
