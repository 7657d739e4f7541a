"""Element-wise transforms and folds.

Every callback is invoked exactly once per element, left to right, except
``foldr`` which walks from the right. Fold callbacks take the element first
and the accumulator second: ``f(element, acc)``.
"""

from __future__ import annotations

import builtins
import functools
import itertools
from collections.abc import Callable, Iterable
from typing import TypeVar

from listops.utils.validation import ensure_callable, ensure_sequence

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")


def map(fn: Callable[[T], U], values: Iterable[T]) -> tuple[U, ...]:
    fn = ensure_callable(fn)
    return tuple(builtins.map(fn, ensure_sequence(values)))


def indexed_map(fn: Callable[[int, T], U], values: Iterable[T]) -> tuple[U, ...]:
    """Apply ``fn(index, element)`` with indices counting up from zero."""
    fn = ensure_callable(fn)
    return tuple(fn(idx, item) for idx, item in enumerate(ensure_sequence(values)))


def foldl(fn: Callable[[T, A], A], initial: A, values: Iterable[T]) -> A:
    """Reduce from the left."""
    fn = ensure_callable(fn)
    return functools.reduce(lambda acc, item: fn(item, acc), ensure_sequence(values), initial)


def foldr(fn: Callable[[T, A], A], initial: A, values: Iterable[T]) -> A:
    """Reduce from the right."""
    fn = ensure_callable(fn)
    return functools.reduce(
        lambda acc, item: fn(item, acc), reversed(ensure_sequence(values)), initial
    )


def scanl(fn: Callable[[T, A], A], initial: A, values: Iterable[T]) -> tuple[A, ...]:
    """Left fold that keeps every intermediate accumulator.

    The result starts with ``initial`` and has one more element than
    ``values``::

        scanl(operator.add, 0, [1, 2, 3]) == (0, 1, 3, 6)
    """
    fn = ensure_callable(fn)
    return tuple(
        itertools.accumulate(
            ensure_sequence(values), lambda acc, item: fn(item, acc), initial=initial
        )
    )


def filter(predicate: Callable[[T], bool], values: Iterable[T]) -> tuple[T, ...]:
    predicate = ensure_callable(predicate, "predicate")
    return tuple(builtins.filter(predicate, ensure_sequence(values)))


def filter_map(fn: Callable[[T], U | None], values: Iterable[T]) -> tuple[U, ...]:
    """Apply ``fn`` and keep the results that are not ``None``."""
    fn = ensure_callable(fn)
    results = (fn(item) for item in ensure_sequence(values))
    return tuple(result for result in results if result is not None)


indexedMap = indexed_map
filterMap = filter_map

__all__ = [
    "filter",
    "filter_map",
    "filterMap",
    "foldl",
    "foldr",
    "indexed_map",
    "indexedMap",
    "map",
    "scanl",
]
