"""
Function wrappers of arity 0 to 3.

Each wrapper holds a raw callable and exposes ``apply`` plus composition.
Every public entry point of lambdakit accepts either a raw callable or one of
these wrappers; ``of`` normalises both to a wrapper exactly once:

    Function1.of(lambda x: x + 1)        # wraps
    Function1.of(Function1.of(str))      # returned unchanged

Wrappers are frozen dataclasses, so the wrapped callable is never replaced
after construction, and they are callable themselves.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lambdakit.config import get_settings
from lambdakit.types.arity import accepts_arity
from lambdakit.utils import assertions


def coerce[W](wrapper_type: type[W], func: Any, arity: int, name: str = "func") -> W:
    """
    Normalise ``func`` to an instance of ``wrapper_type``.

    Args:
        wrapper_type: Wrapper class to produce
        func: Raw callable or an existing wrapper
        arity: Number of positional arguments the raw callable will receive
        name: Argument name used in error messages

    Returns:
        ``func`` itself when it already is a ``wrapper_type``, a new wrapper
        around it otherwise

    Raises:
        IllegalArgumentError: If ``func`` is None, not callable, or (with
            ``strict_arity`` enabled) cannot take ``arity`` positional arguments
    """
    if isinstance(func, wrapper_type):
        return func
    assertions.callable_or_fail(func, name)
    if get_settings().strict_arity:
        assertions.is_true(
            accepts_arity(func, arity),
            f"{name} must accept {arity} positional argument(s)",
        )
    return wrapper_type(func)


def _identity(t):
    return t


@dataclass(frozen=True)
class Function0[R]:
    """A supplier: takes no argument and produces a result."""

    mapper: Callable[[], R]

    @classmethod
    def of(cls, func: Callable[[], R] | Function0[R]) -> Function0[R]:
        return coerce(cls, func, 0)

    def apply(self) -> R:
        return self.mapper()

    def and_then[V](self, after: Callable[[R], V] | Function1[R, V]) -> Function0[V]:
        """Return a supplier that feeds this result into ``after``."""
        after_function = coerce(Function1, after, 1, "after")
        return Function0(lambda: after_function.apply(self.apply()))

    def __call__(self) -> R:
        return self.apply()


@dataclass(frozen=True)
class Function1[T, R]:
    """A function that accepts one argument and produces a result."""

    mapper: Callable[[T], R]

    @classmethod
    def identity(cls) -> Function1[T, T]:
        """Return a function that always returns its input argument."""
        return cls(_identity)

    @classmethod
    def of(cls, func: Callable[[T], R] | Function1[T, R]) -> Function1[T, R]:
        return coerce(cls, func, 1)

    def apply(self, t: T) -> R:
        return self.mapper(t)

    def and_then[V](self, after: Callable[[R], V] | Function1[R, V]) -> Function1[T, V]:
        """
        Compose this function with ``after``: first this, then ``after``.

        Raises:
            IllegalArgumentError: If ``after`` is None or not callable
        """
        after_function = coerce(Function1, after, 1, "after")
        return Function1(lambda t: after_function.apply(self.apply(t)))

    def compose[V](self, before: Callable[[V], T] | Function1[V, T]) -> Function1[V, R]:
        """
        Compose ``before`` with this function: first ``before``, then this.

        Raises:
            IllegalArgumentError: If ``before`` is None or not callable
        """
        before_function = coerce(Function1, before, 1, "before")
        return Function1(lambda v: self.apply(before_function.apply(v)))

    def __call__(self, t: T) -> R:
        return self.apply(t)


@dataclass(frozen=True)
class Function2[T1, T2, R]:
    """A function that accepts two arguments and produces a result."""

    mapper: Callable[[T1, T2], R]

    @classmethod
    def of(cls, func: Callable[[T1, T2], R] | Function2[T1, T2, R]) -> Function2[T1, T2, R]:
        return coerce(cls, func, 2)

    def apply(self, t1: T1, t2: T2) -> R:
        return self.mapper(t1, t2)

    def and_then[V](self, after: Callable[[R], V] | Function1[R, V]) -> Function2[T1, T2, V]:
        after_function = coerce(Function1, after, 1, "after")
        return Function2(lambda t1, t2: after_function.apply(self.apply(t1, t2)))

    def __call__(self, t1: T1, t2: T2) -> R:
        return self.apply(t1, t2)


@dataclass(frozen=True)
class Function3[T1, T2, T3, R]:
    """A function that accepts three arguments and produces a result."""

    mapper: Callable[[T1, T2, T3], R]

    @classmethod
    def of(
        cls, func: Callable[[T1, T2, T3], R] | Function3[T1, T2, T3, R]
    ) -> Function3[T1, T2, T3, R]:
        return coerce(cls, func, 3)

    def apply(self, t1: T1, t2: T2, t3: T3) -> R:
        return self.mapper(t1, t2, t3)

    def and_then[V](
        self, after: Callable[[R], V] | Function1[R, V]
    ) -> Function3[T1, T2, T3, V]:
        after_function = coerce(Function1, after, 1, "after")
        return Function3(lambda t1, t2, t3: after_function.apply(self.apply(t1, t2, t3)))

    def __call__(self, t1: T1, t2: T2, t3: T3) -> R:
        return self.apply(t1, t2, t3)
