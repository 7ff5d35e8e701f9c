"""
Object helpers used as collaborators by the collection engine.

``equals`` is the default equality of ``remove_all``/``retain_all``;
``get_or_else`` resolves a default given either as a literal or as a
zero-argument supplier.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np

from lambdakit.types.arity import is_function0
from lambdakit.types.function import Function0


def equals(a: Any, b: Any) -> bool:
    """
    Structural equality tolerant of None.

    Two Nones are equal, a None never equals a non-None value. Numpy
    arrays compare by shape and elements. Objects exposing an ``equals``
    method decide for themselves; everything else uses ``==``, which is
    already structural for lists, dicts, tuples and dataclasses.

    Example:
        equals([1, {"a": 2}], [1, {"a": 2}]) -> True
        equals(None, 0) -> False
    """
    if a is None or b is None:
        return a is None and b is None
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    custom = getattr(a, "equals", None)
    if callable(custom):
        return bool(custom(b))
    return bool(a == b)


def get_or_else[T](value: T | None, default: T | Callable[[], T] | Function0[T]) -> T:
    """
    Return ``value`` unless it is None, otherwise resolve ``default``.

    ``default`` is called when it is a ``Function0`` or a callable accepting
    no arguments, and returned as-is otherwise.

    Example:
        get_or_else(None, 5) -> 5
        get_or_else(None, list) -> []
    """
    if value is not None:
        return value
    if isinstance(default, Function0):
        return default.apply()
    if callable(default) and is_function0(default):
        return default()
    return default
