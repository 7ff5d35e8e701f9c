"""
lambdakit String Engine.

The sequence algorithms applied to a string read as its ordered characters.
Operations that keep the element shape return strings (mapped values are
joined through ``str``); grouping returns one string per group.

A handful of cosmetic helpers (blank checks, abbreviation, substring
extraction) live at the end of the module.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from lambdakit.runtime import sequences, sources
from lambdakit.types.comparator import Comparator
from lambdakit.types.function import Function1, Function2
from lambdakit.types.operator import BinaryOperator
from lambdakit.types.option import Option
from lambdakit.types.partial_function import PartialFunction
from lambdakit.types.predicate import Predicate1, Predicate2
from lambdakit.utils import assertions

logger = logging.getLogger(__name__)

CharPredicate = Callable[[str], bool] | Predicate1[str]


def _join(values: Iterable[Any]) -> str:
    return "".join(str(value) for value in values)


# =============================================================================
# Filtering
# =============================================================================


def filter(source: str | None, predicate: CharPredicate | None = None) -> str:
    """
    Keep the characters satisfying ``predicate``.

    Example:
        filter("a1b2", str.isdigit) -> "12"
    """
    return _join(sequences.filter(sources.to_chars(source), predicate))


def filter_not(source: str | None, predicate: CharPredicate | None = None) -> str:
    return _join(sequences.filter_not(sources.to_chars(source), predicate))


def take_while(source: str | None, predicate: CharPredicate | None = None) -> str:
    """
    Return the longest prefix of characters satisfying ``predicate``.

    Example:
        take_while("aEibc12", lambda c: c.lower() in "aeiou") -> "aEi"
    """
    return _join(sequences.take_while(sources.to_chars(source), predicate))


def drop_while(source: str | None, predicate: CharPredicate | None = None) -> str:
    """
    Return the text from the first character failing ``predicate`` onward.

    Example:
        drop_while("aEibc12", lambda c: c.lower() in "aeiou") -> "bc12"
    """
    return _join(sequences.drop_while(sources.to_chars(source), predicate))


def remove_all(
    source: str | None,
    to_remove: str | None,
    equality: Callable[[str, str], bool] | Predicate2[str, str] | None = None,
) -> str:
    """
    Drop every character of ``source`` that also occurs in ``to_remove``.

    Example:
        remove_all("abcab", "ac") -> "bb"
    """
    return _join(
        sequences.remove_all(sources.to_chars(source), sources.to_chars(to_remove), equality)
    )


def retain_all(
    source: str | None,
    to_keep: str | None,
    equality: Callable[[str, str], bool] | Predicate2[str, str] | None = None,
) -> str:
    """
    Keep only the characters of ``source`` that also occur in ``to_keep``.

    Example:
        retain_all("abcab", "ac") -> "aca"
    """
    return _join(
        sequences.retain_all(sources.to_chars(source), sources.to_chars(to_keep), equality)
    )


# =============================================================================
# Transformation
# =============================================================================


def map(source: str | None, mapper: Callable[[str], Any] | Function1[str, Any]) -> str:
    """
    Map every character and join the results.

    Example:
        map("abc", str.upper) -> "ABC"
    """
    return _join(sequences.map(sources.to_chars(source), mapper))


def collect(
    source: str | None,
    partial_function_or_mapper: PartialFunction[str, Any] | Callable[[str], Any],
    predicate: CharPredicate | None = None,
) -> str:
    """
    Map the characters inside the partial function's domain, dropping the others.

    Example:
        collect("a1b2", lambda c: int(c) * 2, str.isdigit) -> "24"
    """
    return _join(
        sequences.collect(sources.to_chars(source), partial_function_or_mapper, predicate)
    )


def apply_or_else(
    source: str | None,
    partial_function_or_default_mapper: PartialFunction[str, Any] | Callable[[str], Any],
    or_else_mapper: Callable[[str], Any] | Function1[str, Any],
    predicate: CharPredicate | None = None,
) -> str:
    """
    Map every character, inside the domain with the partial function, elsewhere with ``or_else_mapper``.

    Example:
        apply_or_else("a1", str.upper, lambda c: "#", str.isalpha) -> "A#"
    """
    return _join(
        sequences.apply_or_else(
            sources.to_chars(source),
            partial_function_or_default_mapper,
            or_else_mapper,
            predicate,
        )
    )


def sliding(source: str | None, size: int) -> list[str]:
    """
    Return overlapping substrings of ``size`` characters.

    Example:
        sliding("abcd", 3) -> ["abc", "bcd"]
    """
    return [_join(window) for window in sequences.sliding(sources.to_chars(source), size)]


def split(source: str | None, size: int) -> list[str]:
    """
    Cut the text into consecutive chunks of ``size`` characters.

    Example:
        split("abcde", 2) -> ["ab", "cd", "e"]
    """
    return [_join(chunk) for chunk in sequences.split(sources.to_chars(source), size)]


def sort(
    source: str | None,
    comparator: Callable[[str, str], int] | Comparator[str] | None = None,
) -> str:
    """
    Return the characters in sorted order, by code point when ``comparator`` is absent.

    Example:
        sort("cab") -> "abc"
    """
    return _join(sequences.sort(sources.to_chars(source), comparator))


def to_map(
    source: str | None,
    partial_function_or_key_mapper: Any,
    value_mapper: Callable[[str], Any] | Function1[str, Any] | None = None,
    predicate: CharPredicate | None = None,
) -> dict[Any, Any]:
    """
    Build a dict from the characters; the last character wins on duplicate keys.

    Example:
        to_map("ab", str.upper) -> {"A": "a", "B": "b"}
    """
    return sequences.to_map(
        sources.to_chars(source), partial_function_or_key_mapper, value_mapper, predicate
    )


# =============================================================================
# Accumulation
# =============================================================================


def fold_left[R](
    source: str | None,
    initial: R,
    accumulator: Callable[[R, str], R] | Function2[R, str, R] | None,
    predicate: CharPredicate | None = None,
) -> R:
    """
    Accumulate over the characters left to right.

    Example:
        fold_left("abc", 0, lambda acc, c: acc + ord(c)) -> 294
    """
    return sequences.fold_left(sources.to_chars(source), initial, accumulator, predicate)


def reduce(
    source: str | None,
    accumulator: Callable[[str, str], str] | BinaryOperator[str],
) -> str | None:
    """
    Combine the characters left to right, seeded with the first one.

    Example:
        reduce("abc", lambda a, b: b + a) -> "cba"
    """
    return sequences.reduce(sources.to_chars(source), accumulator)


def count(source: str | None, predicate: CharPredicate | None = None) -> int:
    """
    Count the characters satisfying ``predicate`` (all of them when absent).

    Example:
        count("a1b2", str.isdigit) -> 2
    """
    return sequences.count(sources.to_chars(source), predicate)


def find(source: str | None, predicate: CharPredicate | None) -> str | None:
    return sequences.find(sources.to_chars(source), predicate)


def find_optional(source: str | None, predicate: CharPredicate | None) -> Option[str]:
    return Option.of_nullable(find(source, predicate))


def max(
    source: str | None,
    comparator: Callable[[str, str], int] | Comparator[str],
) -> str | None:
    """
    Return the first character ranking highest under ``comparator``.

    Example:
        max("abca", Comparator.natural()) -> "c"
    """
    return sequences.max(sources.to_chars(source), comparator)


def max_optional(
    source: str | None,
    comparator: Callable[[str, str], int] | Comparator[str],
) -> Option[str]:
    return Option.of_nullable(max(source, comparator))


def min(
    source: str | None,
    comparator: Callable[[str, str], int] | Comparator[str],
) -> str | None:
    return sequences.min(sources.to_chars(source), comparator)


def min_optional(
    source: str | None,
    comparator: Callable[[str, str], int] | Comparator[str],
) -> Option[str]:
    return Option.of_nullable(min(source, comparator))


# =============================================================================
# Grouping
# =============================================================================


def group_by[K](
    source: str | None,
    discriminator_key: Callable[[str], K] | Function1[str, K],
    predicate: CharPredicate | None = None,
) -> dict[K, str]:
    """
    Group the accepted characters into substrings keyed by ``discriminator_key``.

    Example:
        group_by("a1b2", str.isdigit) -> {False: "ab", True: "12"}
    """
    groups = sequences.group_by(sources.to_chars(source), discriminator_key, predicate)
    return {key: _join(group) for key, group in groups.items()}


def group_by_multi_key[K](
    source: str | None,
    discriminator_keys: Callable[[str], Iterable[K] | None] | Function1[str, Iterable[K] | None],
    predicate: CharPredicate | None = None,
) -> dict[K, str]:
    """
    Group the accepted characters under every key ``discriminator_keys`` returns.

    Example:
        group_by_multi_key("ab", lambda c: ["all", c]) -> {"all": "ab", "a": "a", "b": "b"}
    """
    groups = sequences.group_by_multi_key(
        sources.to_chars(source), discriminator_keys, predicate
    )
    return {key: _join(group) for key, group in groups.items()}


def group_map[K, V](
    source: str | None,
    partial_function_or_discriminator_key: Any,
    value_mapper: Callable[[str], V] | Function1[str, V] | None = None,
    predicate: CharPredicate | None = None,
) -> dict[K, list[V]]:
    """
    Group the accepted characters, storing ``value_mapper(char)`` in each group.

    Example:
        group_map("aAb", str.lower, ord) -> {"a": [97, 65], "b": [98]}
    """
    return sequences.group_map(
        sources.to_chars(source), partial_function_or_discriminator_key, value_mapper, predicate
    )


def group_map_multi_key[K, V](
    source: str | None,
    partial_function_or_discriminator_keys: Any,
    value_mapper: Callable[[str], V] | Function1[str, V] | None = None,
    predicate: CharPredicate | None = None,
) -> dict[K, list[V]]:
    return sequences.group_map_multi_key(
        sources.to_chars(source), partial_function_or_discriminator_keys, value_mapper, predicate
    )


def group_map_reduce[K, V](
    source: str | None,
    reduce_values: Callable[[V, V], V] | BinaryOperator[V],
    partial_function_or_discriminator_key: Any,
    value_mapper: Callable[[str], V] | Function1[str, V] | None = None,
    predicate: CharPredicate | None = None,
) -> dict[K, V]:
    """
    Group like ``group_map``, then reduce each group to one value.

    Example:
        group_map_reduce("aAb", lambda x, y: x + y, str.lower, lambda c: 1) -> {"a": 2, "b": 1}
    """
    return sequences.group_map_reduce(
        sources.to_chars(source),
        reduce_values,
        partial_function_or_discriminator_key,
        value_mapper,
        predicate,
    )


def partition(
    source: str | None,
    discriminator: CharPredicate,
    predicate: CharPredicate | None = None,
) -> dict[bool, str]:
    """
    Split the accepted characters into two substrings by ``discriminator``.

    Example:
        partition("a1b2", str.isdigit) -> {True: "12", False: "ab"}
    """
    groups = sequences.partition(sources.to_chars(source), discriminator, predicate)
    return {key: _join(group) for key, group in groups.items()}


# =============================================================================
# Cosmetic Helpers
# =============================================================================


def is_empty(source: str | None) -> bool:
    """Check whether ``source`` is None or has no character."""
    return source is None or len(source) == 0


def is_blank(source: str | None) -> bool:
    """
    Check whether ``source`` is None or holds only whitespace.

    Example:
        is_blank("  \\t") -> True
    """
    return source is None or not source.strip()


def abbreviate(source: str | None, max_width: int, marker: str = "...") -> str:
    """
    Shorten ``source`` to at most ``max_width`` characters, ending with ``marker``.

    Raises:
        IllegalArgumentError: If ``max_width`` leaves no room for a character
            besides ``marker``

    Example:
        abbreviate("abcdefg", 6) -> "abc..."
    """
    if source is None:
        return ""
    if len(source) <= max_width:
        return source
    assertions.is_true(
        max_width > len(marker),
        f"max_width must be greater than the marker length ({len(marker)}), got {max_width}",
    )
    logger.debug("Abbreviating %d characters to %d", len(source), max_width)
    return source[: max_width - len(marker)] + marker


def substring_before(source: str | None, separator: str | None) -> str:
    """
    Return the text before the first occurrence of ``separator``.

    A missing separator (or None) gives the whole text.

    Example:
        substring_before("a.b.c", ".") -> "a"
    """
    if not source:
        return ""
    if separator is None:
        return source
    index = source.find(separator)
    return source if index < 0 else source[:index]


def substring_after(source: str | None, separator: str | None) -> str:
    """
    Return the text after the first occurrence of ``separator``.

    A missing separator (or None) gives an empty string.

    Example:
        substring_after("a.b.c", ".") -> "b.c"
    """
    if not source or separator is None:
        return ""
    index = source.find(separator)
    return "" if index < 0 else source[index + len(separator) :]
