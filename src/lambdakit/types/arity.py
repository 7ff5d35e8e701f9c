"""
Arity inspection for raw callables.

``declared_arity`` reports how many positional parameters a callable requires,
which is what a "parameter count" check looks at. Counting alone cannot tell a
genuine 2-ary callable from ``lambda a, b, c=None: ...``, so the ``is_*``
guards ask a different question: can the callable be bound to exactly ``n``
positional arguments? Defaults and ``*args`` are honoured by that check.
"""

from __future__ import annotations

import inspect
from typing import Any

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def _signature(value: Any) -> inspect.Signature | None:
    try:
        return inspect.signature(value)
    except (TypeError, ValueError):
        # Some builtins and C extensions expose no signature
        return None


def declared_arity(value: Any) -> int | None:
    """
    Count the required positional parameters of ``value``.

    Returns:
        The count, or None when ``value`` is not callable or has no
        introspectable signature

    Example:
        declared_arity(lambda a, b=1: a) -> 1
    """
    if not callable(value):
        return None
    signature = _signature(value)
    if signature is None:
        return None
    return sum(
        1
        for parameter in signature.parameters.values()
        if parameter.kind in _POSITIONAL and parameter.default is inspect.Parameter.empty
    )


def accepts_arity(value: Any, n: int) -> bool:
    """
    Check whether ``value`` is callable with exactly ``n`` positional arguments.

    Callables without an introspectable signature are assumed to accept.

    Example:
        accepts_arity(lambda a, b=1: a, 2) -> True
        accepts_arity(lambda a, b: a, 1) -> False
    """
    if not callable(value):
        return False
    signature = _signature(value)
    if signature is None:
        return True
    try:
        signature.bind(*([None] * n))
    except TypeError:
        return False
    return True


def is_function0(value: Any) -> bool:
    """Check whether ``value`` can act as a zero-argument supplier."""
    return accepts_arity(value, 0)


def is_function1(value: Any) -> bool:
    return accepts_arity(value, 1)


def is_function2(value: Any) -> bool:
    return accepts_arity(value, 2)


def is_function3(value: Any) -> bool:
    return accepts_arity(value, 3)


# Predicates and comparators only differ from functions by their result type,
# which is invisible at runtime.
is_predicate1 = is_function1
is_predicate2 = is_function2
is_comparator = is_function2
