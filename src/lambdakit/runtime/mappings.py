"""
lambdakit Mapping Engine.

The sequence algorithms applied to the ``(key, value)`` entries of a mapping.
Predicates and mappers take two arguments, ``(key, value)``; fold
accumulators take three, ``(accumulator, key, value)``. Results that keep the
entry shape are new dicts in entry order.

A ``PartialFunction`` argument works on entry tuples; build one with
``PartialFunction.of2`` or ``PartialFunction.of2_to_tuple``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any

from lambdakit.runtime import sequences, sources
from lambdakit.types.comparator import Comparator
from lambdakit.types.function import Function0, Function1, Function2, Function3, coerce
from lambdakit.types.operator import BinaryOperator
from lambdakit.types.option import Option
from lambdakit.types.partial_function import PartialFunction
from lambdakit.types.predicate import Predicate2
from lambdakit.utils import assertions
from lambdakit.utils.objects import get_or_else as resolve_default

logger = logging.getLogger(__name__)

Entry = tuple[Any, Any]


def _entry_function(func: Any, name: str) -> Function1[Entry, Any]:
    final_function = coerce(Function2, func, 2, name)
    return Function1(lambda entry: final_function.apply(entry[0], entry[1]))


def _entry_equality(equality: Any) -> Predicate2[Entry, Entry] | None:
    if equality is None:
        return None
    return Predicate2.of(equality)


def _partial_function(
    partial_function_or_mapper: Any,
    predicate: Any,
    name: str,
) -> PartialFunction[Entry, Any]:
    assertions.not_none(partial_function_or_mapper, f"{name} must be not None")
    if isinstance(partial_function_or_mapper, PartialFunction):
        return partial_function_or_mapper
    final_mapper = coerce(Function2, partial_function_or_mapper, 2, name)
    return PartialFunction.of(
        sources.entry_predicate(predicate),
        Function1(lambda entry: final_mapper.apply(entry[0], entry[1])),
    )


def _key_value_function(
    partial_function_or_key: Any,
    value_mapper: Any,
    predicate: Any,
) -> PartialFunction[Entry, tuple[Any, Any]]:
    assertions.not_none(
        partial_function_or_key,
        "partial_function_or_discriminator_key must be not None",
    )
    if isinstance(partial_function_or_key, PartialFunction):
        return partial_function_or_key
    return PartialFunction.of2_to_tuple(predicate, partial_function_or_key, value_mapper)


def _entry_value(key: Any, value: Any) -> Any:
    return value


def _entry(key: Any, value: Any) -> Entry:
    return key, value


# =============================================================================
# Entry Access
# =============================================================================


def get_or_else[K, V](
    source: Mapping[K, V] | None,
    key: K,
    default: V | Callable[[], V] | Function0[V],
) -> V:
    """
    Return the value stored under ``key``, or resolve ``default``.

    ``default`` may be a literal or a zero-argument supplier, only called
    when needed. A key mapped to None counts as missing.

    Example:
        get_or_else({"a": 1}, "b", lambda: 0) -> 0
    """
    value = source.get(key) if source is not None else None
    return resolve_default(value, default)


def put_if_absent[K, V](target: MutableMapping[K, V] | None, key: K, value: V) -> V | None:
    """
    Store ``value`` under ``key`` unless a non-None value is already there.

    This is the only operation that writes into its argument.

    Returns:
        The existing value, or None when ``value`` was stored

    Raises:
        IllegalArgumentError: If ``target`` is None
    """
    assertions.not_none(target, "target must be not None")
    existing = target.get(key)
    if existing is None:
        target[key] = value
    return existing


def is_empty(source: Mapping[Any, Any] | None) -> bool:
    return source is None or len(source) == 0


def count[K, V](
    source: Mapping[K, V] | None,
    predicate: Callable[[K, V], bool] | Predicate2[K, V] | None = None,
) -> int:
    """
    Count the entries satisfying ``predicate`` (all of them when absent).

    Example:
        count({"a": 1, "b": 2}, lambda k, v: v > 1) -> 1
    """
    return sequences.count(sources.to_entries(source), sources.entry_predicate(predicate))


def find[K, V](
    source: Mapping[K, V] | None,
    predicate: Callable[[K, V], bool] | Predicate2[K, V] | None,
) -> tuple[K, V] | None:
    """
    Return the first entry satisfying ``predicate``, or None.

    Example:
        find({"a": 1, "b": 2}, lambda k, v: v > 1) -> ("b", 2)
    """
    return sequences.find(sources.to_entries(source), sources.entry_predicate(predicate))


def find_optional[K, V](
    source: Mapping[K, V] | None,
    predicate: Callable[[K, V], bool] | Predicate2[K, V] | None,
) -> Option[tuple[K, V]]:
    return Option.of_nullable(find(source, predicate))


# =============================================================================
# Filtering
# =============================================================================


def filter[K, V](
    source: Mapping[K, V] | None,
    predicate: Callable[[K, V], bool] | Predicate2[K, V] | None = None,
) -> dict[K, V]:
    """
    Keep the entries satisfying ``predicate``; a copy when it is absent.

    Example:
        filter({"a": 1, "b": 2}, lambda k, v: v > 1) -> {"b": 2}
    """
    return dict(
        sequences.filter(sources.to_entries(source), sources.entry_predicate(predicate))
    )


def filter_not[K, V](
    source: Mapping[K, V] | None,
    predicate: Callable[[K, V], bool] | Predicate2[K, V] | None = None,
) -> dict[K, V]:
    return dict(
        sequences.filter_not(sources.to_entries(source), sources.entry_predicate(predicate))
    )


def take_while[K, V](
    source: Mapping[K, V] | None,
    predicate: Callable[[K, V], bool] | Predicate2[K, V] | None = None,
) -> dict[K, V]:
    """Keep the longest leading run of entries satisfying ``predicate``."""
    return dict(
        sequences.take_while(sources.to_entries(source), sources.entry_predicate(predicate))
    )


def drop_while[K, V](
    source: Mapping[K, V] | None,
    predicate: Callable[[K, V], bool] | Predicate2[K, V] | None = None,
) -> dict[K, V]:
    """Keep the entries from the first one failing ``predicate`` onward."""
    return dict(
        sequences.drop_while(sources.to_entries(source), sources.entry_predicate(predicate))
    )


def remove_all[K, V](
    source: Mapping[K, V] | None,
    to_remove: Mapping[K, V] | None,
    equality: Callable[[Entry, Entry], bool] | Predicate2[Entry, Entry] | None = None,
) -> dict[K, V]:
    """
    Drop the entries of ``source`` also present in ``to_remove``.

    Entries are compared as ``(key, value)`` tuples, by ``equality`` or by
    ``lambdakit.utils.objects.equals``.

    Example:
        remove_all({"a": 1, "b": 2}, {"a": 1, "b": 3}) -> {"b": 2}
    """
    return dict(
        sequences.remove_all(
            sources.to_entries(source), sources.to_entries(to_remove), _entry_equality(equality)
        )
    )


def retain_all[K, V](
    source: Mapping[K, V] | None,
    to_keep: Mapping[K, V] | None,
    equality: Callable[[Entry, Entry], bool] | Predicate2[Entry, Entry] | None = None,
) -> dict[K, V]:
    return dict(
        sequences.retain_all(
            sources.to_entries(source), sources.to_entries(to_keep), _entry_equality(equality)
        )
    )


# =============================================================================
# Transformation
# =============================================================================


def map[K, V, K2, V2](
    source: Mapping[K, V] | None,
    mapper: Callable[[K, V], tuple[K2, V2]] | Function2[K, V, tuple[K2, V2]],
) -> dict[K2, V2]:
    """
    Map every entry to a new ``(key, value)`` tuple.

    Example:
        map({"a": 1}, lambda k, v: (k.upper(), v + 1)) -> {"A": 2}
    """
    entries = sources.to_entries(source)
    if not entries:
        return {}
    return dict(sequences.map(entries, _entry_function(mapper, "mapper")))


def map_values[K, V, V2](
    source: Mapping[K, V] | None,
    mapper: Callable[[V], V2] | Function1[V, V2],
) -> dict[K, V2]:
    """
    Map every value, keeping the keys.

    Example:
        map_values({"a": 1, "b": 2}, lambda v: v * 10) -> {"a": 10, "b": 20}
    """
    entries = sources.to_entries(source)
    if not entries:
        return {}
    final_mapper = coerce(Function1, mapper, 1, "mapper")
    return {key: final_mapper.apply(value) for key, value in entries}


def collect[K, V, K2, V2](
    source: Mapping[K, V] | None,
    partial_function_or_mapper: Any,
    predicate: Callable[[K, V], bool] | Predicate2[K, V] | None = None,
) -> dict[K2, V2]:
    """
    Map the entries inside the partial function's domain, dropping the others.

    Pass a ``PartialFunction`` over entries, or a ``(key, value)`` mapper
    returning the new entry plus an optional ``(key, value)`` predicate.

    Example:
        collect({"a": 1, "b": 2}, lambda k, v: (v, k), lambda k, v: v > 1) -> {2: "b"}
    """
    entries = sources.to_entries(source)
    if not entries:
        return {}
    partial_function = _partial_function(
        partial_function_or_mapper, predicate, "partial_function_or_mapper"
    )
    return dict(sequences.collect(entries, partial_function))


def apply_or_else[K, V, K2, V2](
    source: Mapping[K, V] | None,
    partial_function_or_default_mapper: Any,
    or_else_mapper: Callable[[K, V], tuple[K2, V2]] | Function2[K, V, tuple[K2, V2]],
    predicate: Callable[[K, V], bool] | Predicate2[K, V] | None = None,
) -> dict[K2, V2]:
    """
    Map every entry, inside the domain with the partial function and elsewhere with ``or_else_mapper``.

    Example:
        apply_or_else({"a": 1, "b": 2}, lambda k, v: (k, v * 10), lambda k, v: (k, 0),
                      lambda k, v: v > 1) -> {"a": 0, "b": 20}
    """
    entries = sources.to_entries(source)
    if not entries:
        return {}
    partial_function = _partial_function(
        partial_function_or_default_mapper, predicate, "partial_function_or_default_mapper"
    )
    return dict(
        sequences.apply_or_else(
            entries, partial_function, _entry_function(or_else_mapper, "or_else_mapper")
        )
    )


def to_list[K, V, R](
    source: Mapping[K, V] | None,
    partial_function_or_mapper: Any,
    predicate: Callable[[K, V], bool] | Predicate2[K, V] | None = None,
) -> list[R]:
    """
    Turn the accepted entries into a list of mapped values.

    Example:
        to_list({"a": 1, "b": 2}, lambda k, v: f"{k}={v}") -> ["a=1", "b=2"]
    """
    entries = sources.to_entries(source)
    if not entries:
        return []
    partial_function = _partial_function(
        partial_function_or_mapper, predicate, "partial_function_or_mapper"
    )
    return sequences.collect(entries, partial_function)


def to_map[K, V, K2, V2](
    source: Mapping[K, V] | None,
    partial_function_or_key_mapper: Any,
    value_mapper: Callable[[K, V], V2] | Function2[K, V, V2] | None = None,
    predicate: Callable[[K, V], bool] | Predicate2[K, V] | None = None,
) -> dict[K2, V2]:
    """
    Re-key the accepted entries; ``value_mapper`` defaults to the entry's value.

    On duplicate keys the last entry wins.

    Example:
        to_map({"a": 1, "b": 1}, lambda k, v: v) -> {1: 1}
    """
    entries = sources.to_entries(source)
    if not entries:
        return {}
    final_value_mapper = value_mapper if value_mapper is not None else _entry_value
    return sequences.to_map(
        entries,
        _key_value_function(partial_function_or_key_mapper, final_value_mapper, predicate),
    )


def sliding[K, V](source: Mapping[K, V] | None, size: int) -> list[dict[K, V]]:
    """
    Return overlapping windows of ``size`` entries, each as a dict.

    Example:
        sliding({"a": 1, "b": 2, "c": 3}, 2) -> [{"a": 1, "b": 2}, {"b": 2, "c": 3}]
    """
    return [dict(window) for window in sequences.sliding(sources.to_entries(source), size)]


def split[K, V](source: Mapping[K, V] | None, size: int) -> list[dict[K, V]]:
    """Split the entries into consecutive dicts of at most ``size`` entries."""
    return [dict(chunk) for chunk in sequences.split(sources.to_entries(source), size)]


def sort[K, V](
    source: Mapping[K, V] | None,
    comparator: Callable[[Entry, Entry], int] | Comparator[Entry] | None = None,
) -> dict[K, V]:
    """
    Return a new dict with the entries in sorted order.

    ``comparator`` compares ``(key, value)`` tuples. Without it entries are
    ordered by their ``"key,value"`` string form.

    Example:
        sort({"b": 1, "a": 2}) -> {"a": 2, "b": 1}
        sort({"New": 2, "New York": 1}) -> {"New York": 1, "New": 2}
    """
    entries = sources.to_entries(source)
    if comparator is None:
        logger.debug("No comparator given, sorting %d entries by string form", len(entries))
        return dict(sorted(entries, key=sources.entry_string_key))
    return dict(sequences.sort(entries, comparator))


# =============================================================================
# Accumulation
# =============================================================================


def fold_left[K, V, R](
    source: Mapping[K, V] | None,
    initial: R,
    accumulator: Callable[[R, K, V], R] | Function3[R, K, V, R] | None,
    predicate: Callable[[K, V], bool] | Predicate2[K, V] | None = None,
) -> R:
    """
    Accumulate over the entries with an ``(accumulator, key, value)`` function.

    Example:
        fold_left({"a": 1, "b": 2}, 0, lambda acc, k, v: acc + v) -> 3
    """
    entries = sources.to_entries(source)
    if not entries or accumulator is None:
        return initial
    final_accumulator = coerce(Function3, accumulator, 3, "accumulator")
    return sequences.fold_left(
        entries,
        initial,
        Function2(lambda result, entry: final_accumulator.apply(result, entry[0], entry[1])),
        sources.entry_predicate(predicate),
    )


def reduce[K, V](
    source: Mapping[K, V] | None,
    accumulator: Callable[[Entry, Entry], Entry] | BinaryOperator[Entry],
) -> tuple[K, V] | None:
    """
    Combine the entries left to right, seeded with the first one.

    Example:
        reduce({"a": 1, "b": 2}, lambda e1, e2: (e1[0] + e2[0], e1[1] + e2[1])) -> ("ab", 3)
    """
    return sequences.reduce(sources.to_entries(source), accumulator)


def max[K, V](
    source: Mapping[K, V] | None,
    comparator: Callable[[Entry, Entry], int] | Comparator[Entry],
) -> tuple[K, V] | None:
    """
    Return the first entry ranking highest under ``comparator``.

    Example:
        max({"a": 3, "b": 1}, lambda e1, e2: e1[1] - e2[1]) -> ("a", 3)
    """
    return sequences.max(sources.to_entries(source), comparator)


def max_optional[K, V](
    source: Mapping[K, V] | None,
    comparator: Callable[[Entry, Entry], int] | Comparator[Entry],
) -> Option[tuple[K, V]]:
    return Option.of_nullable(max(source, comparator))


def min[K, V](
    source: Mapping[K, V] | None,
    comparator: Callable[[Entry, Entry], int] | Comparator[Entry],
) -> tuple[K, V] | None:
    return sequences.min(sources.to_entries(source), comparator)


def min_optional[K, V](
    source: Mapping[K, V] | None,
    comparator: Callable[[Entry, Entry], int] | Comparator[Entry],
) -> Option[tuple[K, V]]:
    return Option.of_nullable(min(source, comparator))


# =============================================================================
# Grouping
# =============================================================================


def group_by[K, V, K2](
    source: Mapping[K, V] | None,
    discriminator_key: Callable[[K, V], K2] | Function2[K, V, K2],
    predicate: Callable[[K, V], bool] | Predicate2[K, V] | None = None,
) -> dict[K2, dict[K, V]]:
    """
    Group the accepted entries into sub-dicts keyed by ``discriminator_key``.

    Example:
        group_by({"a": 1, "b": 2, "c": 3}, lambda k, v: v % 2)
            -> {1: {"a": 1, "c": 3}, 0: {"b": 2}}
    """
    entries = sources.to_entries(source)
    if not entries:
        return {}
    assertions.not_none(discriminator_key, "discriminator_key must be not None")
    groups = sequences.group_map(
        entries, PartialFunction.of2_to_tuple(predicate, discriminator_key, _entry)
    )
    return {key: dict(group) for key, group in groups.items()}


def group_by_multi_key[K, V, K2](
    source: Mapping[K, V] | None,
    discriminator_keys: Any,
    predicate: Callable[[K, V], bool] | Predicate2[K, V] | None = None,
) -> dict[K2, dict[K, V]]:
    """
    Group the accepted entries under every key ``discriminator_keys`` returns.

    Example:
        group_by_multi_key({"ab": 1}, lambda k, v: list(k)) -> {"a": {"ab": 1}, "b": {"ab": 1}}
    """
    entries = sources.to_entries(source)
    if not entries:
        return {}
    assertions.not_none(discriminator_keys, "discriminator_keys must be not None")
    groups = sequences.group_map_multi_key(
        entries, PartialFunction.of2_to_tuple(predicate, discriminator_keys, _entry)
    )
    return {key: dict(group) for key, group in groups.items()}


def group_map[K, V, K2, V2](
    source: Mapping[K, V] | None,
    partial_function_or_discriminator_key: Any,
    value_mapper: Callable[[K, V], V2] | Function2[K, V, V2] | None = None,
    predicate: Callable[[K, V], bool] | Predicate2[K, V] | None = None,
) -> dict[K2, list[V2]]:
    """
    Group the accepted entries, storing ``value_mapper(key, value)`` in each group.

    Example:
        group_map({"a": 1, "b": 2, "c": 3}, lambda k, v: v % 2, lambda k, v: k)
            -> {1: ["a", "c"], 0: ["b"]}
    """
    entries = sources.to_entries(source)
    if not entries:
        return {}
    return sequences.group_map(
        entries,
        _key_value_function(partial_function_or_discriminator_key, value_mapper, predicate),
    )


def group_map_multi_key[K, V, K2, V2](
    source: Mapping[K, V] | None,
    partial_function_or_discriminator_keys: Any,
    value_mapper: Callable[[K, V], V2] | Function2[K, V, V2] | None = None,
    predicate: Callable[[K, V], bool] | Predicate2[K, V] | None = None,
) -> dict[K2, list[V2]]:
    entries = sources.to_entries(source)
    if not entries:
        return {}
    return sequences.group_map_multi_key(
        entries,
        _key_value_function(partial_function_or_discriminator_keys, value_mapper, predicate),
    )


def group_map_reduce[K, V, K2, V2](
    source: Mapping[K, V] | None,
    reduce_values: Callable[[V2, V2], V2] | BinaryOperator[V2],
    partial_function_or_discriminator_key: Any,
    value_mapper: Callable[[K, V], V2] | Function2[K, V, V2] | None = None,
    predicate: Callable[[K, V], bool] | Predicate2[K, V] | None = None,
) -> dict[K2, V2]:
    """
    Group like ``group_map``, then reduce each group to one value.

    Example:
        group_map_reduce({"a": 1, "b": 2, "c": 3}, lambda x, y: x + y,
                         lambda k, v: v % 2, lambda k, v: v) -> {1: 4, 0: 2}
    """
    entries = sources.to_entries(source)
    if not entries:
        return {}
    final_reduce = coerce(BinaryOperator, reduce_values, 2, "reduce_values")
    return sequences.group_map_reduce(
        entries,
        final_reduce,
        _key_value_function(partial_function_or_discriminator_key, value_mapper, predicate),
    )


def partition[K, V](
    source: Mapping[K, V] | None,
    discriminator: Callable[[K, V], bool] | Predicate2[K, V],
    predicate: Callable[[K, V], bool] | Predicate2[K, V] | None = None,
) -> dict[bool, dict[K, V]]:
    """
    Split the accepted entries into two dicts by ``discriminator``.

    Example:
        partition({"a": 1, "b": 2}, lambda k, v: v > 1) -> {True: {"b": 2}, False: {"a": 1}}
    """
    entries = sources.to_entries(source)
    if not entries:
        return {True: {}, False: {}}
    assertions.not_none(discriminator, "discriminator must be not None")
    groups = sequences.partition(
        entries, sources.entry_predicate(discriminator), sources.entry_predicate(predicate)
    )
    return {key: dict(group) for key, group in groups.items()}
