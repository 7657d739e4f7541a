"""Shared value types."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, Tuple, TypeVar

T = TypeVar("T")

Seq = Tuple[T, ...]


@dataclass(frozen=True, slots=True)
class Partition(Generic[T]):
    """Elements split by a predicate.

    - ``trues``: elements the predicate accepted, in input order
    - ``falses``: the rest, in input order

    Unpacks like a pair: ``trues, falses = partition(pred, values)``.
    """

    trues: tuple[T, ...]
    falses: tuple[T, ...]

    def __iter__(self) -> Iterator[tuple[T, ...]]:
        yield self.trues
        yield self.falses


__all__ = ["Partition", "Seq"]
