"""
Partial functions: a transform paired with the predicate defining its domain.

``apply`` is only meaningful where ``is_defined_at`` holds; callers guard.
The collection engine builds one partial function per call out of its
``(predicate, mapper)`` or ``(predicate, key_mapper, value_mapper)``
arguments and then makes a single pass over the source:

    even_squares = PartialFunction.of(lambda n: n % 2 == 0, lambda n: n * n)
    even_squares.is_defined_at(3) -> False
    even_squares.apply(4) -> 16
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lambdakit.types.function import Function1, Function2
from lambdakit.types.option import Option
from lambdakit.types.predicate import Predicate1, Predicate2
from lambdakit.utils import assertions


def _domain[T](verifier: Callable[[T], bool] | Predicate1[T] | None) -> Predicate1[T]:
    if verifier is None:
        return Predicate1.always_true()
    return Predicate1.of(verifier)


def _entry_domain(verifier: Any) -> Predicate1[tuple[Any, Any]]:
    if verifier is None:
        return Predicate1.always_true()
    final_verifier = Predicate2.of(verifier)
    return Predicate1(lambda entry: final_verifier.apply(entry[0], entry[1]))


@dataclass(frozen=True)
class PartialFunction[T, R]:
    """A ``Function1`` defined only where ``verifier`` holds."""

    verifier: Predicate1[T]
    mapper: Function1[T, R]

    @classmethod
    def identity(cls) -> PartialFunction[T, T]:
        """Return a partial function defined everywhere that returns its input."""
        return cls(Predicate1.always_true(), Function1.identity())

    @classmethod
    def of(
        cls,
        verifier: Callable[[T], bool] | Predicate1[T] | None,
        mapper: Callable[[T], R] | Function1[T, R],
    ) -> PartialFunction[T, R]:
        """
        Build a partial function from a domain predicate and a transform.

        Args:
            verifier: Domain predicate; None means "defined everywhere"
            mapper: Transform applied inside the domain

        Raises:
            IllegalArgumentError: If ``mapper`` is None
        """
        assertions.not_none(mapper, "mapper must be not None")
        return cls(_domain(verifier), Function1.of(mapper))

    @classmethod
    def of_to_tuple[K, V](
        cls,
        verifier: Callable[[T], bool] | Predicate1[T] | None,
        key_mapper: Callable[[T], K] | Function1[T, K],
        value_mapper: Callable[[T], V] | Function1[T, V],
    ) -> PartialFunction[T, tuple[K, V]]:
        """
        Build a partial function producing ``(key, value)`` pairs.

        This is how every grouping algorithm turns its arguments into a
        one-shot "filter + produce (key, value)" step.

        Raises:
            IllegalArgumentError: If ``key_mapper`` or ``value_mapper`` is None
        """
        assertions.not_none(key_mapper, "key_mapper must be not None")
        assertions.not_none(value_mapper, "value_mapper must be not None")
        final_key_mapper = Function1.of(key_mapper)
        final_value_mapper = Function1.of(value_mapper)
        return cls(
            _domain(verifier),
            Function1(lambda t: (final_key_mapper.apply(t), final_value_mapper.apply(t))),
        )

    @classmethod
    def of2[K1, V1, K2, V2](
        cls,
        verifier: Callable[[K1, V1], bool] | Predicate2[K1, V1] | None,
        mapper: Callable[[K1, V1], tuple[K2, V2]] | Function2[K1, V1, tuple[K2, V2]],
    ) -> PartialFunction[tuple[K1, V1], tuple[K2, V2]]:
        """
        Build a partial function over ``(key, value)`` entries from 2-argument parts.

        Raises:
            IllegalArgumentError: If ``mapper`` is None
        """
        assertions.not_none(mapper, "mapper must be not None")
        final_mapper = Function2.of(mapper)
        return cls(
            _entry_domain(verifier),
            Function1(lambda entry: tuple(final_mapper.apply(entry[0], entry[1]))),
        )

    @classmethod
    def of2_to_tuple[K1, V1, K2, V2](
        cls,
        verifier: Callable[[K1, V1], bool] | Predicate2[K1, V1] | None,
        key_mapper: Callable[[K1, V1], K2] | Function2[K1, V1, K2],
        value_mapper: Callable[[K1, V1], V2] | Function2[K1, V1, V2],
    ) -> PartialFunction[tuple[K1, V1], tuple[K2, V2]]:
        assertions.not_none(key_mapper, "key_mapper must be not None")
        assertions.not_none(value_mapper, "value_mapper must be not None")
        final_key_mapper = Function2.of(key_mapper)
        final_value_mapper = Function2.of(value_mapper)
        return cls(
            _entry_domain(verifier),
            Function1(
                lambda entry: (
                    final_key_mapper.apply(entry[0], entry[1]),
                    final_value_mapper.apply(entry[0], entry[1]),
                )
            ),
        )

    def is_defined_at(self, t: T) -> bool:
        return self.verifier.apply(t)

    def apply(self, t: T) -> R:
        return self.mapper.apply(t)

    def apply_or_else(self, t: T, default: Callable[[T], R] | Function1[T, R]) -> R:
        """
        Apply this partial function inside its domain, ``default`` outside it.

        Raises:
            IllegalArgumentError: If ``t`` is outside the domain and ``default`` is None
        """
        if self.is_defined_at(t):
            return self.apply(t)
        assertions.not_none(default, "default must be not None")
        return Function1.of(default).apply(t)

    def and_then[V](
        self, after: Callable[[R], V] | Function1[R, V] | PartialFunction[R, V]
    ) -> PartialFunction[T, V]:
        """
        Chain ``after`` onto the result of this partial function.

        A plain function keeps this domain. Another partial function narrows
        it: the result is defined where this one is and ``after`` accepts its
        output.
        """
        assertions.not_none(after, "after must be not None")
        if isinstance(after, PartialFunction):
            return PartialFunction(
                Predicate1(
                    lambda t: self.verifier.apply(t)
                    and after.verifier.apply(self.mapper.apply(t))
                ),
                self.mapper.and_then(after.mapper),
            )
        return PartialFunction(self.verifier, self.mapper.and_then(after))

    def compose[V](
        self, before: Callable[[V], T] | Function1[V, T] | PartialFunction[V, T]
    ) -> PartialFunction[V, R]:
        """
        Run ``before`` first, then this partial function.

        The domain test applies ``before`` and checks its output against this
        domain; a partial ``before`` must also be defined at the input.
        """
        assertions.not_none(before, "before must be not None")
        if isinstance(before, PartialFunction):
            return PartialFunction(
                Predicate1(
                    lambda v: before.is_defined_at(v) and self.verifier.apply(before.apply(v))
                ),
                self.mapper.compose(before.mapper),
            )
        before_function = Function1.of(before)
        return PartialFunction(
            Predicate1(lambda v: self.verifier.apply(before_function.apply(v))),
            self.mapper.compose(before_function),
        )

    def lift(self) -> Function1[T, Option[R]]:
        """Turn this partial function into a total one returning ``Option``."""
        return Function1(
            lambda t: Option.of_nullable(self.apply(t)) if self.is_defined_at(t) else Option.empty()
        )

    def or_else(self, other: PartialFunction[T, R] | None) -> PartialFunction[T, R]:
        """
        Combine with ``other`` into a left-biased union of both domains.

        Where both are defined this partial function wins.
        """
        if other is None:
            return PartialFunction(self.verifier, Function1(self.apply))
        return PartialFunction(
            self.verifier.or_(other.verifier),
            Function1(lambda t: self.apply_or_else(t, other.mapper)),
        )

    def __call__(self, t: T) -> R:
        return self.apply(t)
