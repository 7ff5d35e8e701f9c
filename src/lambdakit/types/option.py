"""
A container that may or may not hold a non-None value.

Returned by the ``*_optional`` variants of the collection engine and by
``PartialFunction.lift``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from lambdakit.types.function import Function0, Function1
from lambdakit.types.predicate import Predicate1
from lambdakit.utils import assertions
from lambdakit.utils.errors import NoSuchElementError
from lambdakit.utils.objects import equals, get_or_else


@dataclass(frozen=True, eq=False)
class Option[T]:
    """Holds a value, or nothing when ``value`` is None."""

    value: T | None = None

    @classmethod
    def empty(cls) -> Option[T]:
        return cls()

    @classmethod
    def of(cls, value: T) -> Option[T]:
        """
        Wrap a value that must be present.

        Raises:
            IllegalArgumentError: If ``value`` is None
        """
        assertions.not_none(value, "value must be not None")
        return cls(value)

    @classmethod
    def of_nullable(cls, value: T | None) -> Option[T]:
        return cls(value)

    def is_present(self) -> bool:
        return self.value is not None

    def is_empty(self) -> bool:
        return self.value is None

    def get(self) -> T:
        """
        Return the held value.

        Raises:
            NoSuchElementError: If the option is empty
        """
        if self.value is None:
            raise NoSuchElementError("No value present")
        return self.value

    def get_or_else(self, other: T | Callable[[], T] | Function0[T]) -> T:
        """Return the held value, or ``other`` (a literal or a supplier)."""
        return get_or_else(self.value, other)

    def map[U](self, func: Callable[[T], U] | Function1[T, U]) -> Option[U]:
        if self.value is None:
            return Option()
        return Option(Function1.of(func).apply(self.value))

    def filter(self, predicate: Callable[[T], bool] | Predicate1[T]) -> Option[T]:
        if self.value is None or Predicate1.of(predicate).apply(self.value):
            return self
        return Option()

    def or_else(self, other: Option[T]) -> Option[T]:
        return self if self.is_present() else other

    def if_present(self, consumer: Callable[[T], object]) -> None:
        if self.value is not None:
            consumer(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if self.is_present() != other.is_present():
            return False
        return not self.is_present() or equals(self.value, other.value)

    def __hash__(self) -> int:
        return hash(self.value) if self.value is not None else 0
