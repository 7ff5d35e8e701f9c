"""
lambdakit Sequence Engine.

Functional collection algorithms over ordered sequences: lists, tuples,
numpy arrays, generators, or None (treated as empty). Every function returns
a fresh result and leaves the source untouched.

Function-like arguments accept either a raw callable or the matching
``lambdakit.types`` wrapper. Required arguments are only checked when the
source holds at least one element; an empty source always resolves to an
empty result (or the documented default) without raising.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from lambdakit.runtime import sources
from lambdakit.types.comparator import Comparator
from lambdakit.types.function import Function1, Function2, coerce
from lambdakit.types.operator import BinaryOperator
from lambdakit.types.option import Option
from lambdakit.types.partial_function import PartialFunction
from lambdakit.types.predicate import Predicate1, Predicate2
from lambdakit.utils import assertions
from lambdakit.utils.objects import equals

logger = logging.getLogger(__name__)


def _partial_function(
    partial_function_or_mapper: Any,
    predicate: Any,
    name: str,
) -> PartialFunction[Any, Any]:
    assertions.not_none(partial_function_or_mapper, f"{name} must be not None")
    if isinstance(partial_function_or_mapper, PartialFunction):
        return partial_function_or_mapper
    return PartialFunction.of(predicate, partial_function_or_mapper)


def _key_value_function(
    partial_function_or_key: Any,
    value_mapper: Any,
    predicate: Any,
) -> PartialFunction[Any, tuple[Any, Any]]:
    assertions.not_none(
        partial_function_or_key,
        "partial_function_or_discriminator_key must be not None",
    )
    if isinstance(partial_function_or_key, PartialFunction):
        return partial_function_or_key
    return PartialFunction.of_to_tuple(predicate, partial_function_or_key, value_mapper)


def _check_size(size: int) -> None:
    assertions.is_true(size > 0, f"size must be greater than 0, got {size}")


# =============================================================================
# Filtering
# =============================================================================


def filter[T](
    source: Iterable[T] | None,
    predicate: Callable[[T], bool] | Predicate1[T] | None = None,
) -> list[T]:
    """
    Keep the elements satisfying ``predicate``.

    An absent predicate returns a copy of the source.

    Example:
        filter([1, 2, 3, 4], lambda x: x % 2 == 0) -> [2, 4]
    """
    items = sources.to_list(source)
    if not items or predicate is None:
        return items
    final_predicate = Predicate1.of(predicate)
    return [item for item in items if final_predicate.apply(item)]


def filter_not[T](
    source: Iterable[T] | None,
    predicate: Callable[[T], bool] | Predicate1[T] | None = None,
) -> list[T]:
    """
    Drop the elements satisfying ``predicate``.

    An absent predicate returns a copy of the source.

    Example:
        filter_not([1, 2, 3, 4], lambda x: x % 2 == 0) -> [1, 3]
    """
    if predicate is None:
        return sources.to_list(source)
    return filter(source, Predicate1.of(predicate).not_())


def take_while[T](
    source: Iterable[T] | None,
    predicate: Callable[[T], bool] | Predicate1[T] | None = None,
) -> list[T]:
    """
    Return the longest prefix whose elements all satisfy ``predicate``.

    Example:
        take_while([2, 4, 5, 6], lambda x: x % 2 == 0) -> [2, 4]
    """
    items = sources.to_list(source)
    if not items or predicate is None:
        return items
    final_predicate = Predicate1.of(predicate)
    result: list[T] = []
    for item in items:
        if not final_predicate.apply(item):
            break
        result.append(item)
    return result


def drop_while[T](
    source: Iterable[T] | None,
    predicate: Callable[[T], bool] | Predicate1[T] | None = None,
) -> list[T]:
    """
    Return everything from the first element failing ``predicate`` onward.

    Example:
        drop_while([2, 4, 5, 6], lambda x: x % 2 == 0) -> [5, 6]
    """
    items = sources.to_list(source)
    if not items or predicate is None:
        return items
    final_predicate = Predicate1.of(predicate)
    for index, item in enumerate(items):
        if not final_predicate.apply(item):
            return items[index:]
    return []


def remove_all[T](
    source: Iterable[T] | None,
    to_remove: Iterable[T] | None,
    equality: Callable[[T, T], bool] | Predicate2[T, T] | None = None,
) -> list[T]:
    """
    Return the elements of ``source`` not contained in ``to_remove``.

    ``equality`` defaults to ``lambdakit.utils.objects.equals``. Order and
    identity of the kept elements come from ``source``.

    Example:
        remove_all([1, 2, 3], [1, 3, 4]) -> [2]
    """
    items = sources.to_list(source)
    others = sources.to_list(to_remove)
    if not items or not others:
        return items
    final_equality = Predicate2.of(equality) if equality is not None else Predicate2(equals)
    return [
        item for item in items if not any(final_equality.apply(item, other) for other in others)
    ]


def retain_all[T](
    source: Iterable[T] | None,
    to_keep: Iterable[T] | None,
    equality: Callable[[T, T], bool] | Predicate2[T, T] | None = None,
) -> list[T]:
    """
    Return the elements of ``source`` also contained in ``to_keep``.

    Example:
        retain_all([1, 2, 3], [1, 3, 4]) -> [1, 3]
    """
    items = sources.to_list(source)
    others = sources.to_list(to_keep)
    if not items or not others:
        return []
    final_equality = Predicate2.of(equality) if equality is not None else Predicate2(equals)
    return [item for item in items if any(final_equality.apply(item, other) for other in others)]


# =============================================================================
# Transformation
# =============================================================================


def map[T, R](
    source: Iterable[T] | None,
    mapper: Callable[[T], R] | Function1[T, R],
) -> list[R]:
    """
    Apply ``mapper`` to every element.

    Raises:
        IllegalArgumentError: If the source is not empty and ``mapper`` is None

    Example:
        map([1, 2, 3], lambda x: x * 2) -> [2, 4, 6]
    """
    items = sources.to_list(source)
    if not items:
        return []
    final_mapper = coerce(Function1, mapper, 1, "mapper")
    return [final_mapper.apply(item) for item in items]


def collect[T, R](
    source: Iterable[T] | None,
    partial_function_or_mapper: PartialFunction[T, R] | Callable[[T], R] | Function1[T, R],
    predicate: Callable[[T], bool] | Predicate1[T] | None = None,
) -> list[R]:
    """
    Apply a partial function to the elements inside its domain, dropping the rest.

    Either pass a ``PartialFunction``, or a mapper plus an optional
    ``predicate`` (absent means every element is inside the domain).
    Equivalent to ``map(filter(source, predicate), mapper)`` in one pass.

    Example:
        collect([1, 2, 3, 4], lambda x: x * 10, lambda x: x > 2) -> [30, 40]
    """
    items = sources.to_list(source)
    if not items:
        return []
    partial_function = _partial_function(
        partial_function_or_mapper, predicate, "partial_function_or_mapper"
    )
    return [
        partial_function.apply(item) for item in items if partial_function.is_defined_at(item)
    ]


def apply_or_else[T, R](
    source: Iterable[T] | None,
    partial_function_or_default_mapper: (
        PartialFunction[T, R] | Callable[[T], R] | Function1[T, R]
    ),
    or_else_mapper: Callable[[T], R] | Function1[T, R],
    predicate: Callable[[T], bool] | Predicate1[T] | None = None,
) -> list[R]:
    """
    Map every element: inside the partial function's domain with it, elsewhere with ``or_else_mapper``.

    Never drops an element.

    Example:
        apply_or_else([1, 2, 3], lambda x: x + 1, lambda x: x * 10, lambda x: x % 2 == 1)
            -> [2, 20, 4]
    """
    items = sources.to_list(source)
    if not items:
        return []
    partial_function = _partial_function(
        partial_function_or_default_mapper, predicate, "partial_function_or_default_mapper"
    )
    final_or_else = coerce(Function1, or_else_mapper, 1, "or_else_mapper")
    return [partial_function.apply_or_else(item, final_or_else) for item in items]


def sliding[T](source: Iterable[T] | None, size: int) -> list[list[T]]:
    """
    Return overlapping windows of ``size`` elements, advancing one at a time.

    A size at least as large as the source gives a single window.

    Raises:
        IllegalArgumentError: If the source is not empty and ``size`` <= 0

    Example:
        sliding([7, 8, 9], 2) -> [[7, 8], [8, 9]]
    """
    items = sources.to_list(source)
    if not items:
        return []
    _check_size(size)
    if size >= len(items):
        return [items]
    return [items[start : start + size] for start in range(len(items) - size + 1)]


def split[T](source: Iterable[T] | None, size: int) -> list[list[T]]:
    """
    Split into consecutive chunks of ``size`` elements; the last may be shorter.

    Raises:
        IllegalArgumentError: If the source is not empty and ``size`` <= 0

    Example:
        split([1, 2, 3, 4, 5], 2) -> [[1, 2], [3, 4], [5]]
    """
    items = sources.to_list(source)
    if not items:
        return []
    _check_size(size)
    return [items[start : start + size] for start in range(0, len(items), size)]


def sort[T](
    source: Iterable[T] | None,
    comparator: Callable[[T, T], int] | Comparator[T] | None = None,
) -> list[T]:
    """
    Return a sorted copy of the source.

    Without ``comparator`` elements are ordered by their string form, so
    numbers sort lexicographically.

    Example:
        sort([1, 10, 21, 2]) -> [1, 10, 2, 21]
        sort([1, 10, 21, 2], lambda a, b: a - b) -> [1, 2, 10, 21]
    """
    items = sources.to_list(source)
    if len(items) < 2:
        return items
    if comparator is None:
        logger.debug("No comparator given, sorting %d elements by string form", len(items))
        return sorted(items, key=sources.string_key)
    return sorted(items, key=Comparator.of(comparator).as_key())


def to_map[T, K, V](
    source: Iterable[T] | None,
    partial_function_or_key_mapper: (
        PartialFunction[T, tuple[K, V]] | Callable[[T], K] | Function1[T, K]
    ),
    value_mapper: Callable[[T], V] | Function1[T, V] | None = None,
    predicate: Callable[[T], bool] | Predicate1[T] | None = None,
) -> dict[K, V]:
    """
    Build a dict from the elements, one entry per accepted element.

    ``value_mapper`` defaults to the element itself. On duplicate keys the
    last element wins.

    Example:
        to_map(["a", "bb", "cc"], len) -> {1: "a", 2: "cc"}
    """
    items = sources.to_list(source)
    if not items:
        return {}
    final_value_mapper = value_mapper if value_mapper is not None else Function1.identity()
    partial_function = _key_value_function(
        partial_function_or_key_mapper, final_value_mapper, predicate
    )
    result: dict[K, V] = {}
    for item in items:
        if partial_function.is_defined_at(item):
            key, value = partial_function.apply(item)
            result[key] = value
    return result


# =============================================================================
# Accumulation
# =============================================================================


def fold_left[T, R](
    source: Iterable[T] | None,
    initial: R,
    accumulator: Callable[[R, T], R] | Function2[R, T, R] | None,
    predicate: Callable[[T], bool] | Predicate1[T] | None = None,
) -> R:
    """
    Accumulate left to right, starting from ``initial``.

    Elements failing ``predicate`` are skipped. An empty source or an absent
    accumulator returns ``initial`` unchanged.

    Example:
        fold_left([1, 2, 3], 10, lambda acc, x: acc + x) -> 16
    """
    items = sources.to_list(source)
    if not items or accumulator is None:
        return initial
    final_accumulator = coerce(Function2, accumulator, 2, "accumulator")
    final_predicate = sources.predicate_or_true(predicate)
    result = initial
    for item in items:
        if final_predicate.apply(item):
            result = final_accumulator.apply(result, item)
    return result


def reduce[T](
    source: Iterable[T] | None,
    accumulator: Callable[[T, T], T] | BinaryOperator[T],
) -> T | None:
    """
    Combine the elements left to right, seeded with the first one.

    Returns:
        The combined value, or None for an empty source

    Raises:
        IllegalArgumentError: If the source is not empty and ``accumulator`` is None

    Example:
        reduce([5, 7, 9], lambda a, b: a * b) -> 315
    """
    items = sources.to_list(source)
    if not items:
        return None
    final_accumulator = coerce(BinaryOperator, accumulator, 2, "accumulator")
    result = items[0]
    for item in items[1:]:
        result = final_accumulator.apply(result, item)
    return result


def count[T](
    source: Iterable[T] | None,
    predicate: Callable[[T], bool] | Predicate1[T] | None = None,
) -> int:
    """
    Count the elements satisfying ``predicate`` (all of them when absent).

    Example:
        count([1, 2, 3, 4], lambda x: x > 1) -> 3
    """
    items = sources.to_list(source)
    if not items:
        return 0
    final_predicate = sources.predicate_or_true(predicate)
    return sum(1 for item in items if final_predicate.apply(item))


def is_empty(source: Iterable[Any] | None) -> bool:
    """
    Check whether the source is None or holds no element.

    Example:
        is_empty(None) -> True
        is_empty(numpy.array([])) -> True
    """
    if sources.is_empty(source):
        return True
    return not sources.to_list(source)


# =============================================================================
# Search
# =============================================================================


def find[T](
    source: Iterable[T] | None,
    predicate: Callable[[T], bool] | Predicate1[T] | None,
) -> T | None:
    """
    Return the first element satisfying ``predicate``.

    Returns:
        The element, or None when nothing matches or ``predicate`` is absent

    Example:
        find([1, 2, 3, 4], lambda x: x > 2) -> 3
    """
    items = sources.to_list(source)
    if not items or predicate is None:
        return None
    final_predicate = Predicate1.of(predicate)
    for item in items:
        if final_predicate.apply(item):
            return item
    return None


def find_optional[T](
    source: Iterable[T] | None,
    predicate: Callable[[T], bool] | Predicate1[T] | None,
) -> Option[T]:
    """Like ``find``, wrapping the outcome in an ``Option``."""
    return Option.of_nullable(find(source, predicate))


def max[T](
    source: Iterable[T] | None,
    comparator: Callable[[T, T], int] | Comparator[T],
) -> T | None:
    """
    Return the first element ranking highest under ``comparator``.

    Returns:
        The element, or None for an empty source

    Raises:
        IllegalArgumentError: If the source is not empty and ``comparator`` is None

    Example:
        max(["a", "ccc", "bbb"], lambda a, b: len(a) - len(b)) -> "ccc"
    """
    items = sources.to_list(source)
    if not items:
        return None
    final_comparator = coerce(Comparator, comparator, 2, "comparator")
    return reduce(items, BinaryOperator.max_by(final_comparator))


def max_optional[T](
    source: Iterable[T] | None,
    comparator: Callable[[T, T], int] | Comparator[T],
) -> Option[T]:
    return Option.of_nullable(max(source, comparator))


def min[T](
    source: Iterable[T] | None,
    comparator: Callable[[T, T], int] | Comparator[T],
) -> T | None:
    """
    Return the first element ranking lowest under ``comparator``.

    Example:
        min(["bb", "a", "c"], lambda a, b: len(a) - len(b)) -> "a"
    """
    items = sources.to_list(source)
    if not items:
        return None
    final_comparator = coerce(Comparator, comparator, 2, "comparator")
    return reduce(items, BinaryOperator.min_by(final_comparator))


def min_optional[T](
    source: Iterable[T] | None,
    comparator: Callable[[T, T], int] | Comparator[T],
) -> Option[T]:
    return Option.of_nullable(min(source, comparator))


# =============================================================================
# Grouping
# =============================================================================


def group_by[T, K](
    source: Iterable[T] | None,
    discriminator_key: Callable[[T], K] | Function1[T, K],
    predicate: Callable[[T], bool] | Predicate1[T] | None = None,
) -> dict[K, list[T]]:
    """
    Group the accepted elements by ``discriminator_key``.

    Groups appear in first-seen key order; elements keep source order.

    Example:
        group_by([1, 2, 3, 6, 11], lambda n: n % 2) -> {1: [1, 3, 11], 0: [2, 6]}
    """
    items = sources.to_list(source)
    if not items:
        return {}
    final_key = coerce(Function1, discriminator_key, 1, "discriminator_key")
    return group_map(items, final_key, Function1.identity(), predicate)


def group_by_multi_key[T, K](
    source: Iterable[T] | None,
    discriminator_keys: Callable[[T], Iterable[K] | None] | Function1[T, Iterable[K] | None],
    predicate: Callable[[T], bool] | Predicate1[T] | None = None,
) -> dict[K, list[T]]:
    """
    Group the accepted elements under every key ``discriminator_keys`` returns.

    An element whose key collection is empty (or None) joins no group.

    Example:
        group_by_multi_key(["ab", "b"], list) -> {"a": ["ab"], "b": ["ab", "b"]}
    """
    items = sources.to_list(source)
    if not items:
        return {}
    final_keys = coerce(Function1, discriminator_keys, 1, "discriminator_keys")
    return group_map_multi_key(items, final_keys, Function1.identity(), predicate)


def group_map[T, K, V](
    source: Iterable[T] | None,
    partial_function_or_discriminator_key: (
        PartialFunction[T, tuple[K, V]] | Callable[[T], K] | Function1[T, K]
    ),
    value_mapper: Callable[[T], V] | Function1[T, V] | None = None,
    predicate: Callable[[T], bool] | Predicate1[T] | None = None,
) -> dict[K, list[V]]:
    """
    Group like ``group_by`` but store ``value_mapper(element)`` in each group.

    Either pass a ``PartialFunction`` producing ``(key, value)`` tuples, or a
    discriminator key, a value mapper and an optional predicate.

    Example:
        group_map([1, 2, 3], lambda n: n % 2, lambda n: n * 10) -> {1: [10, 30], 0: [20]}
    """
    items = sources.to_list(source)
    if not items:
        return {}
    partial_function = _key_value_function(
        partial_function_or_discriminator_key, value_mapper, predicate
    )
    result: dict[K, list[V]] = {}
    for item in items:
        if partial_function.is_defined_at(item):
            key, value = partial_function.apply(item)
            result.setdefault(key, []).append(value)
    return result


def group_map_multi_key[T, K, V](
    source: Iterable[T] | None,
    partial_function_or_discriminator_keys: Any,
    value_mapper: Callable[[T], V] | Function1[T, V] | None = None,
    predicate: Callable[[T], bool] | Predicate1[T] | None = None,
) -> dict[K, list[V]]:
    """
    Group like ``group_map``, inserting each value under several keys.

    A ``PartialFunction`` argument must produce ``(keys, value)`` tuples.

    Example:
        group_map_multi_key(["ab"], list, str.upper) -> {"a": ["AB"], "b": ["AB"]}
    """
    items = sources.to_list(source)
    if not items:
        return {}
    partial_function = _key_value_function(
        partial_function_or_discriminator_keys, value_mapper, predicate
    )
    result: dict[K, list[V]] = {}
    for item in items:
        if not partial_function.is_defined_at(item):
            continue
        keys, value = partial_function.apply(item)
        if keys is None:
            logger.debug("Discriminator returned no keys for %r", item)
            continue
        for key in keys:
            result.setdefault(key, []).append(value)
    return result


def group_map_reduce[T, K, V](
    source: Iterable[T] | None,
    reduce_values: Callable[[V, V], V] | BinaryOperator[V],
    partial_function_or_discriminator_key: (
        PartialFunction[T, tuple[K, V]] | Callable[[T], K] | Function1[T, K]
    ),
    value_mapper: Callable[[T], V] | Function1[T, V] | None = None,
    predicate: Callable[[T], bool] | Predicate1[T] | None = None,
) -> dict[K, V]:
    """
    Group like ``group_map``, then reduce every group to a single value.

    Values are combined in source order; ``reduce_values`` should be
    associative.

    Example:
        group_map_reduce([1, 2, 3, 4], lambda a, b: a + b, lambda n: n % 2, lambda n: n)
            -> {1: 4, 0: 6}
    """
    items = sources.to_list(source)
    if not items:
        return {}
    final_reduce = coerce(BinaryOperator, reduce_values, 2, "reduce_values")
    partial_function = _key_value_function(
        partial_function_or_discriminator_key, value_mapper, predicate
    )
    result: dict[K, V] = {}
    for item in items:
        if partial_function.is_defined_at(item):
            key, value = partial_function.apply(item)
            result[key] = final_reduce.apply(result[key], value) if key in result else value
    return result


def partition[T](
    source: Iterable[T] | None,
    discriminator: Callable[[T], bool] | Predicate1[T],
    predicate: Callable[[T], bool] | Predicate1[T] | None = None,
) -> dict[bool, list[T]]:
    """
    Split the accepted elements by ``discriminator``.

    Both the True and the False key are always present.

    Example:
        partition([1, 2, 3], lambda x: x > 1) -> {True: [2, 3], False: [1]}
    """
    result: dict[bool, list[T]] = {True: [], False: []}
    items = sources.to_list(source)
    if not items:
        return result
    final_discriminator = coerce(Predicate1, discriminator, 1, "discriminator")
    final_predicate = sources.predicate_or_true(predicate)
    for item in items:
        if final_predicate.apply(item):
            result[final_discriminator.apply(item)].append(item)
    return result
