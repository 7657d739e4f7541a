"""Validation helpers for list and bitwise arguments."""

from __future__ import annotations

import numbers
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

T = TypeVar("T")


def ensure_iterator(values: Iterable[T], name: str = "values") -> Iterator[T]:
    """Return an iterator over ``values`` without consuming it."""
    try:
        return iter(values)
    except TypeError:
        msg = f"{name} must be iterable, got {type(values).__name__}"
        raise TypeError(msg) from None


def ensure_sequence(values: Iterable[T], name: str = "values") -> tuple[T, ...]:
    """Materialize ``values`` into a tuple, rejecting non-iterables."""
    if isinstance(values, tuple):
        return values
    return tuple(ensure_iterator(values, name))


def ensure_callable(fn: Any, name: str = "fn") -> Callable[..., Any]:
    if not callable(fn):
        msg = f"{name} must be callable, got {type(fn).__name__}"
        raise TypeError(msg)
    return fn


def ensure_int(value: Any, name: str = "value") -> int:
    """Return ``value`` as a Python int; bools and non-integers are rejected."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        msg = f"{name} must be an integer, got {type(value).__name__}"
        raise TypeError(msg)
    return int(value)
