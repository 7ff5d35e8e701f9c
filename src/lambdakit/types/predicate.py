"""
Boolean-valued function wrappers with a small boolean algebra.

``and_`` and ``or_`` short-circuit left to right; ``not_`` negates. The
operators ``&``, ``|`` and ``~`` are aliases:

    is_even = Predicate1.of(lambda n: n % 2 == 0)
    (is_even & (lambda n: n > 2))(4) -> True
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from lambdakit.types.function import Function1, Function2


def _always_true(*_args: object) -> bool:
    return True


def _always_false(*_args: object) -> bool:
    return False


class Predicate1[T](Function1[T, bool]):
    """A predicate (boolean-valued function) of one argument."""

    @classmethod
    def always_true(cls) -> Predicate1[T]:
        return cls(_always_true)

    @classmethod
    def always_false(cls) -> Predicate1[T]:
        return cls(_always_false)

    @classmethod
    def all_of(
        cls, predicates: Iterable[Callable[[T], bool] | Predicate1[T]] | None
    ) -> Predicate1[T]:
        """
        Return a predicate satisfied when every one of ``predicates`` holds.

        An empty or None collection gives ``always_true``.
        """
        finals = [cls.of(p) for p in predicates or ()]
        if not finals:
            return cls.always_true()
        return cls(lambda t: all(p.apply(t) for p in finals))

    @classmethod
    def any_of(
        cls, predicates: Iterable[Callable[[T], bool] | Predicate1[T]] | None
    ) -> Predicate1[T]:
        """
        Return a predicate satisfied when at least one of ``predicates`` holds.

        An empty or None collection gives ``always_false``.
        """
        finals = [cls.of(p) for p in predicates or ()]
        if not finals:
            return cls.always_false()
        return cls(lambda t: any(p.apply(t) for p in finals))

    def and_(self, other: Callable[[T], bool] | Predicate1[T] | None) -> Predicate1[T]:
        """Short-circuiting logical AND; a None ``other`` is ignored."""
        if other is None:
            return Predicate1(self.apply)
        other_predicate = Predicate1.of(other)
        return Predicate1(lambda t: self.apply(t) and other_predicate.apply(t))

    def or_(self, other: Callable[[T], bool] | Predicate1[T] | None) -> Predicate1[T]:
        """Short-circuiting logical OR; a None ``other`` is ignored."""
        if other is None:
            return Predicate1(self.apply)
        other_predicate = Predicate1.of(other)
        return Predicate1(lambda t: self.apply(t) or other_predicate.apply(t))

    def not_(self) -> Predicate1[T]:
        return Predicate1(lambda t: not self.apply(t))

    def apply(self, t: T) -> bool:
        return bool(self.mapper(t))

    __and__ = and_
    __or__ = or_
    __invert__ = not_


class Predicate2[T1, T2](Function2[T1, T2, bool]):
    """A predicate (boolean-valued function) of two arguments."""

    @classmethod
    def always_true(cls) -> Predicate2[T1, T2]:
        return cls(_always_true)

    @classmethod
    def always_false(cls) -> Predicate2[T1, T2]:
        return cls(_always_false)

    @classmethod
    def is_none(cls) -> Predicate2[T1, T2]:
        """Satisfied when both arguments are None."""
        return cls(lambda t1, t2: t1 is None and t2 is None)

    @classmethod
    def non_none(cls) -> Predicate2[T1, T2]:
        """Satisfied when neither argument is None."""
        return cls(lambda t1, t2: t1 is not None and t2 is not None)

    @classmethod
    def all_of(
        cls, predicates: Iterable[Callable[[T1, T2], bool] | Predicate2[T1, T2]] | None
    ) -> Predicate2[T1, T2]:
        finals = [cls.of(p) for p in predicates or ()]
        if not finals:
            return cls.always_true()
        return cls(lambda t1, t2: all(p.apply(t1, t2) for p in finals))

    @classmethod
    def any_of(
        cls, predicates: Iterable[Callable[[T1, T2], bool] | Predicate2[T1, T2]] | None
    ) -> Predicate2[T1, T2]:
        finals = [cls.of(p) for p in predicates or ()]
        if not finals:
            return cls.always_false()
        return cls(lambda t1, t2: any(p.apply(t1, t2) for p in finals))

    def and_(
        self, other: Callable[[T1, T2], bool] | Predicate2[T1, T2] | None
    ) -> Predicate2[T1, T2]:
        if other is None:
            return Predicate2(self.apply)
        other_predicate = Predicate2.of(other)
        return Predicate2(lambda t1, t2: self.apply(t1, t2) and other_predicate.apply(t1, t2))

    def or_(
        self, other: Callable[[T1, T2], bool] | Predicate2[T1, T2] | None
    ) -> Predicate2[T1, T2]:
        if other is None:
            return Predicate2(self.apply)
        other_predicate = Predicate2.of(other)
        return Predicate2(lambda t1, t2: self.apply(t1, t2) or other_predicate.apply(t1, t2))

    def not_(self) -> Predicate2[T1, T2]:
        return Predicate2(lambda t1, t2: not self.apply(t1, t2))

    def apply(self, t1: T1, t2: T2) -> bool:
        return bool(self.mapper(t1, t2))

    __and__ = and_
    __or__ = or_
    __invert__ = not_
