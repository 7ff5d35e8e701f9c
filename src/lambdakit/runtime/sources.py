"""
Source normalisation shared by the collection engines.

Every engine entry point accepts a possibly-None source. These helpers turn
it into a fresh list (of items, ``(key, value)`` entries or characters) so
that the algorithms never touch the caller's container and never rely on
the truthiness of array-likes.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sized
from typing import Any

import numpy as np

from lambdakit.types.predicate import Predicate1, Predicate2


def to_list[T](source: Iterable[T] | None) -> list[T]:
    """
    Materialise ``source`` as a new list.

    None gives an empty list; a numpy array is split along its first axis
    with ``tolist`` so elements come back as plain Python values.
    """
    if source is None:
        return []
    if isinstance(source, np.ndarray):
        return source.tolist()
    return list(source)


def to_entries[K, V](source: Mapping[K, V] | None) -> list[tuple[K, V]]:
    """Materialise the ``(key, value)`` entries of ``source`` in iteration order."""
    if source is None:
        return []
    return list(source.items())


def to_chars(source: str | None) -> list[str]:
    """Split ``source`` into single characters."""
    if source is None:
        return []
    return list(source)


def is_empty(source: Any) -> bool:
    """
    Check whether ``source`` is None or holds no element.

    Sources without a length (plain iterators) are reported as non-empty;
    engines materialise those before deciding.
    """
    if source is None:
        return True
    if isinstance(source, np.ndarray):
        return source.size == 0
    if isinstance(source, Sized):
        return len(source) == 0
    return False


def predicate_or_true[T](
    predicate: Callable[[T], bool] | Predicate1[T] | None,
) -> Predicate1[T]:
    """Coerce an optional filter, defaulting to "accept everything"."""
    if predicate is None:
        return Predicate1.always_true()
    return Predicate1.of(predicate)


def entry_predicate[K, V](
    predicate: Callable[[K, V], bool] | Predicate2[K, V] | None,
) -> Predicate1[tuple[K, V]] | None:
    """Adapt an optional ``(key, value)`` predicate to one over entry tuples."""
    if predicate is None:
        return None
    final_predicate = Predicate2.of(predicate)
    return Predicate1(lambda entry: final_predicate.apply(entry[0], entry[1]))


def string_key(element: Any) -> str:
    """Sort key of the fallback ordering: the element's string form."""
    return str(element)


def entry_string_key(entry: tuple[Any, Any]) -> str:
    """
    Sort key of the fallback ordering for ``(key, value)`` entries.

    The entry is read as the single string ``"key,value"``, so a key that is
    a prefix of another is compared through the separator.

    Example:
        entry_string_key(("New", 2)) -> "New,2"
    """
    return f"{entry[0]},{entry[1]}"
