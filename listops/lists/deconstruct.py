"""Taking sequences apart."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from listops.core.types import Partition
from listops.utils.validation import (
    ensure_callable,
    ensure_int,
    ensure_iterator,
    ensure_sequence,
)

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")


def is_empty(values: Iterable[Any]) -> bool:
    return not ensure_sequence(values)


def head(values: Iterable[T]) -> T | None:
    """First element, or ``None`` for an empty input."""
    return next(ensure_iterator(values), None)


def tail(values: Iterable[T]) -> tuple[T, ...] | None:
    """Everything after the first element, or ``None`` for an empty input."""
    items = ensure_sequence(values)
    if not items:
        return None
    return items[1:]


def take(n: int, values: Iterable[T]) -> tuple[T, ...]:
    n = ensure_int(n, "n")
    if n <= 0:
        return ()
    return ensure_sequence(values)[:n]


def drop(n: int, values: Iterable[T]) -> tuple[T, ...]:
    n = ensure_int(n, "n")
    items = ensure_sequence(values)
    if n <= 0:
        return items
    return items[n:]


def partition(predicate: Callable[[T], bool], values: Iterable[T]) -> Partition[T]:
    """Split ``values`` in a single pass; each output keeps input order."""
    predicate = ensure_callable(predicate, "predicate")
    trues: list[T] = []
    falses: list[T] = []
    for item in ensure_sequence(values):
        if predicate(item):
            trues.append(item)
        else:
            falses.append(item)
    return Partition(trues=tuple(trues), falses=tuple(falses))


def unzip(pairs: Iterable[tuple[A, B]]) -> tuple[tuple[A, ...], tuple[B, ...]]:
    """Split a sequence of pairs into a pair of sequences."""
    firsts: list[A] = []
    seconds: list[B] = []
    for first, second in ensure_sequence(pairs, "pairs"):
        firsts.append(first)
        seconds.append(second)
    return tuple(firsts), tuple(seconds)


isEmpty = is_empty

__all__ = [
    "drop",
    "head",
    "is_empty",
    "isEmpty",
    "partition",
    "tail",
    "take",
    "unzip",
]
