"""
Three-way comparison wrapper.

A comparator returns a negative number when the first argument precedes the
second, zero when both rank equally, and a positive number otherwise.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lambdakit.types.function import coerce


def _natural_order(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _none_aware(comparator: Comparator[Any], none_rank: int) -> Callable[[Any, Any], int]:
    def compare(a: Any, b: Any) -> int:
        if a is not None and b is not None:
            return comparator.compare(a, b)
        if a is None and b is None:
            return 0
        return none_rank if a is None else -none_rank

    return compare


@dataclass(frozen=True)
class Comparator[T]:
    """Wraps a ``(T, T) -> int`` ordering function."""

    comparator: Callable[[T, T], int]

    @classmethod
    def of(cls, func: Callable[[T, T], int] | Comparator[T]) -> Comparator[T]:
        return coerce(cls, func, 2)

    @classmethod
    def natural(cls) -> Comparator[T]:
        """Order by the elements' own ``<`` and ``>``."""
        return cls(_natural_order)

    @classmethod
    def none_first(cls, func: Callable[[T, T], int] | Comparator[T]) -> Comparator[T]:
        """Rank None before every other value; ``func`` orders the rest."""
        return cls(_none_aware(Comparator.of(func), -1))

    @classmethod
    def none_last(cls, func: Callable[[T, T], int] | Comparator[T]) -> Comparator[T]:
        """Rank None after every other value; ``func`` orders the rest."""
        return cls(_none_aware(Comparator.of(func), 1))

    def compare(self, a: T, b: T) -> int:
        return self.comparator(a, b)

    def reversed(self) -> Comparator[T]:
        """Return a new comparator imposing the reverse ordering."""
        return Comparator(lambda a, b: -self.compare(a, b))

    def as_key(self) -> Callable[[T], Any]:
        """Adapt this comparator to the ``key=`` argument of ``sorted``."""
        return functools.cmp_to_key(self.compare)

    def __call__(self, a: T, b: T) -> int:
        return self.compare(a, b)
