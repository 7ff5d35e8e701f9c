"""
Operators: functions whose arguments and result share one type.

``BinaryOperator`` is the reduction step of ``reduce`` and
``group_map_reduce``. The engine relies on it being associative but never
checks it.
"""

from __future__ import annotations

from collections.abc import Callable

from lambdakit.types.comparator import Comparator
from lambdakit.types.function import Function1, Function2


class UnaryOperator[T](Function1[T, T]):
    """A ``Function1`` whose argument and result have the same type."""


class BinaryOperator[T](Function2[T, T, T]):
    """A ``Function2`` whose two arguments and result have the same type."""

    @classmethod
    def min_by(cls, comparator: Callable[[T, T], int] | Comparator[T]) -> BinaryOperator[T]:
        """
        Return the lesser of two elements under ``comparator``.

        Ties keep the first (left) argument.
        """
        final_comparator = Comparator.of(comparator)
        return cls(lambda a, b: b if final_comparator.compare(b, a) < 0 else a)

    @classmethod
    def max_by(cls, comparator: Callable[[T, T], int] | Comparator[T]) -> BinaryOperator[T]:
        """
        Return the greater of two elements under ``comparator``.

        Ties keep the first (left) argument.
        """
        final_comparator = Comparator.of(comparator)
        return cls(lambda a, b: b if final_comparator.compare(b, a) > 0 else a)
