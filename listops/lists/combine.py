"""Combining several sequences into one.

``map2`` through ``map5`` pair elements by position and stop at the shortest
input; mismatched lengths are never an error.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from listops.utils.validation import ensure_callable, ensure_sequence

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

_LOGGER = logging.getLogger(__name__)


def append(first: Iterable[T], second: Iterable[T]) -> tuple[T, ...]:
    return ensure_sequence(first, "first") + ensure_sequence(second, "second")


def concat(sequences: Iterable[Iterable[T]]) -> tuple[T, ...]:
    """Flatten one level of nesting."""
    return tuple(itertools.chain.from_iterable(ensure_sequence(sequences, "sequences")))


def concat_map(fn: Callable[[T], Iterable[U]], values: Iterable[T]) -> tuple[U, ...]:
    fn = ensure_callable(fn)
    return tuple(
        itertools.chain.from_iterable(fn(item) for item in ensure_sequence(values))
    )


def intersperse(separator: T, values: Iterable[T]) -> tuple[T, ...]:
    """Place ``separator`` between each pair of adjacent elements."""
    items = ensure_sequence(values)
    if len(items) < 2:
        return items
    result: list[T] = [items[0]]
    for item in items[1:]:
        result.append(separator)
        result.append(item)
    return tuple(result)


def _map_n(fn: Callable[..., R], sequences: tuple[Iterable[Any], ...]) -> tuple[R, ...]:
    fn = ensure_callable(fn)
    columns = [ensure_sequence(seq, f"sequence {idx + 1}") for idx, seq in enumerate(sequences)]
    lengths = {len(column) for column in columns}
    if len(lengths) > 1:
        _LOGGER.debug(
            "map%d truncating inputs of lengths %s to %d",
            len(columns),
            [len(column) for column in columns],
            min(lengths),
        )
    return tuple(itertools.starmap(fn, zip(*columns)))


def map2(fn: Callable[[Any, Any], R], a: Iterable[Any], b: Iterable[Any]) -> tuple[R, ...]:
    return _map_n(fn, (a, b))


def map3(
    fn: Callable[[Any, Any, Any], R],
    a: Iterable[Any],
    b: Iterable[Any],
    c: Iterable[Any],
) -> tuple[R, ...]:
    return _map_n(fn, (a, b, c))


def map4(
    fn: Callable[[Any, Any, Any, Any], R],
    a: Iterable[Any],
    b: Iterable[Any],
    c: Iterable[Any],
    d: Iterable[Any],
) -> tuple[R, ...]:
    return _map_n(fn, (a, b, c, d))


def map5(
    fn: Callable[[Any, Any, Any, Any, Any], R],
    a: Iterable[Any],
    b: Iterable[Any],
    c: Iterable[Any],
    d: Iterable[Any],
    e: Iterable[Any],
) -> tuple[R, ...]:
    return _map_n(fn, (a, b, c, d, e))


concatMap = concat_map

__all__ = [
    "append",
    "concat",
    "concat_map",
    "concatMap",
    "intersperse",
    "map2",
    "map3",
    "map4",
    "map5",
]
