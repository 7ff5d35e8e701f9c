"""
Unit tests for the mapping engine.
"""

import logging

import pytest

from lambdakit.runtime import mappings
from lambdakit.types import Comparator, Option, PartialFunction
from lambdakit.utils.errors import IllegalArgumentError


@pytest.fixture
def scores():
    return {"a": 1, "b": 2, "c": 3}


def _by_value(entry1, entry2):
    return entry1[1] - entry2[1]


class TestEntryAccess:
    """Tests for get_or_else, put_if_absent and is_empty."""

    def test_get_or_else(self, scores):
        assert mappings.get_or_else(scores, "a", 0) == 1
        assert mappings.get_or_else(scores, "z", 0) == 0
        assert mappings.get_or_else(scores, "z", lambda: 9) == 9
        assert mappings.get_or_else(None, "a", 0) == 0

    def test_put_if_absent_inserts(self):
        target = {}
        assert mappings.put_if_absent(target, "a", 1) is None
        assert target == {"a": 1}

    def test_put_if_absent_keeps_existing(self):
        target = {"a": 1}
        assert mappings.put_if_absent(target, "a", 2) == 1
        assert target == {"a": 1}

    def test_put_if_absent_none_target_raises(self):
        with pytest.raises(IllegalArgumentError, match="target must be not None"):
            mappings.put_if_absent(None, "a", 1)

    def test_is_empty(self):
        assert mappings.is_empty(None)
        assert mappings.is_empty({})
        assert not mappings.is_empty({"a": None})


class TestFiltering:
    """Tests for entry filters."""

    def test_filter(self, scores):
        assert mappings.filter(scores, lambda k, v: v > 1) == {"b": 2, "c": 3}

    def test_filter_without_predicate_copies(self, scores):
        result = mappings.filter(scores)
        assert result == scores
        assert result is not scores

    def test_filter_not(self, scores):
        assert mappings.filter_not(scores, lambda k, v: v > 1) == {"a": 1}

    def test_take_while_and_drop_while(self, scores):
        assert mappings.take_while(scores, lambda k, v: v < 2) == {"a": 1}
        assert mappings.drop_while(scores, lambda k, v: v < 2) == {"b": 2, "c": 3}

    def test_remove_all_compares_entries(self, scores):
        assert mappings.remove_all(scores, {"a": 1, "b": 5}) == {"b": 2, "c": 3}

    def test_retain_all(self, scores):
        assert mappings.retain_all(scores, {"a": 1, "c": 3}) == {"a": 1, "c": 3}

    def test_retain_all_custom_equality(self, scores):
        same_key = lambda e1, e2: e1[0] == e2[0]  # noqa: E731
        assert mappings.retain_all(scores, {"b": 0}, same_key) == {"b": 2}

    def test_none_source(self):
        assert mappings.filter(None, lambda k, v: True) == {}


class TestTransformation:
    """Tests for map, map_values, collect, apply_or_else, to_list, to_map."""

    def test_map(self):
        assert mappings.map({"a": 1}, lambda k, v: (k.upper(), v + 1)) == {"A": 2}

    def test_map_missing_mapper_raises(self):
        with pytest.raises(IllegalArgumentError, match="mapper must be not None"):
            mappings.map({"a": 1}, None)

    def test_map_values(self, scores):
        assert mappings.map_values(scores, lambda v: v * 10) == {"a": 10, "b": 20, "c": 30}

    def test_collect(self, scores):
        assert mappings.collect(scores, lambda k, v: (v, k), lambda k, v: v > 1) == {
            2: "b",
            3: "c",
        }

    def test_collect_with_partial_function(self, scores):
        swap_odd = PartialFunction.of2(lambda k, v: v % 2 == 1, lambda k, v: (v, k))
        assert mappings.collect(scores, swap_odd) == {1: "a", 3: "c"}

    def test_apply_or_else(self):
        result = mappings.apply_or_else(
            {"a": 1, "b": 2}, lambda k, v: (k, v * 10), lambda k, v: (k, 0), lambda k, v: v > 1
        )
        assert result == {"a": 0, "b": 20}

    def test_apply_or_else_keeps_every_entry(self, scores):
        result = mappings.apply_or_else(scores, lambda k, v: (k, v), lambda k, v: (k, -v))
        assert len(result) == len(scores)

    def test_to_list(self):
        assert mappings.to_list({"a": 1, "b": 2}, lambda k, v: f"{k}={v}") == ["a=1", "b=2"]

    def test_to_list_with_predicate(self, scores):
        assert mappings.to_list(scores, lambda k, v: k, lambda k, v: v != 2) == ["a", "c"]

    def test_to_map(self):
        assert mappings.to_map({"a": 1, "b": 1}, lambda k, v: v) == {1: 1}

    def test_to_map_with_value_mapper(self, scores):
        assert mappings.to_map(scores, lambda k, v: v, lambda k, v: k) == {
            1: "a",
            2: "b",
            3: "c",
        }


class TestWindowsAndOrder:
    """Tests for sliding, split and sort."""

    def test_sliding(self, scores):
        assert mappings.sliding(scores, 2) == [{"a": 1, "b": 2}, {"b": 2, "c": 3}]

    def test_split(self, scores):
        assert mappings.split(scores, 2) == [{"a": 1, "b": 2}, {"c": 3}]

    def test_split_invalid_size(self, scores):
        with pytest.raises(IllegalArgumentError):
            mappings.split(scores, 0)

    def test_sort_fallback(self):
        result = mappings.sort({"b": 1, "a": 2, "10": 0, "9": 0})
        assert list(result) == ["10", "9", "a", "b"]

    def test_sort_fallback_compares_key_and_value_together(self):
        """Test that a key prefixing another sorts through the separator."""
        result = mappings.sort({"New": 2, "New York": 1})
        assert list(result.items()) == [("New York", 1), ("New", 2)]

    def test_sort_fallback_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="lambdakit.runtime.mappings"):
            mappings.sort({"b": 1, "a": 2})
        assert "sorting 2 entries by string form" in caplog.text

    def test_sort_with_comparator(self, scores):
        result = mappings.sort(scores, Comparator.of(_by_value).reversed())
        assert list(result.items()) == [("c", 3), ("b", 2), ("a", 1)]


class TestAccumulation:
    """Tests for fold_left, reduce, count, find, min and max."""

    def test_fold_left(self, scores):
        assert mappings.fold_left(scores, 0, lambda acc, k, v: acc + v) == 6

    def test_fold_left_with_predicate(self, scores):
        assert mappings.fold_left(scores, "", lambda acc, k, v: acc + k, lambda k, v: v != 2) == "ac"

    def test_fold_left_without_accumulator(self, scores):
        assert mappings.fold_left(scores, 7, None) == 7

    def test_reduce(self):
        result = mappings.reduce({"a": 1, "b": 2}, lambda e1, e2: (e1[0] + e2[0], e1[1] + e2[1]))
        assert result == ("ab", 3)

    def test_reduce_empty(self):
        assert mappings.reduce({}, lambda e1, e2: e1) is None

    def test_count(self, scores):
        assert mappings.count(scores, lambda k, v: v > 1) == 2
        assert mappings.count(scores) == 3

    def test_find(self, scores):
        assert mappings.find(scores, lambda k, v: v > 1) == ("b", 2)
        assert mappings.find_optional(scores, lambda k, v: v > 5) == Option.empty()

    def test_max_and_min(self):
        source = {"a": 3, "b": 1, "c": 3}
        assert mappings.max(source, _by_value) == ("a", 3)
        assert mappings.min(source, _by_value) == ("b", 1)
        assert mappings.max_optional({}, _by_value).is_empty()
        assert mappings.min_optional(source, _by_value).get() == ("b", 1)


class TestGrouping:
    """Tests for the grouping family and partition."""

    def test_group_by(self, scores):
        assert mappings.group_by(scores, lambda k, v: v % 2) == {
            1: {"a": 1, "c": 3},
            0: {"b": 2},
        }

    def test_group_by_multi_key(self):
        assert mappings.group_by_multi_key({"ab": 1}, lambda k, v: list(k)) == {
            "a": {"ab": 1},
            "b": {"ab": 1},
        }

    def test_group_map(self, scores):
        assert mappings.group_map(scores, lambda k, v: v % 2, lambda k, v: k) == {
            1: ["a", "c"],
            0: ["b"],
        }

    def test_group_map_with_partial_function(self, scores):
        pairs = PartialFunction.of2_to_tuple(lambda k, v: v > 1, lambda k, v: "big", lambda k, v: v)
        assert mappings.group_map(scores, pairs) == {"big": [2, 3]}

    def test_group_map_multi_key(self):
        result = mappings.group_map_multi_key(
            {"x": [1, 2], "y": [2]}, lambda k, v: v, lambda k, v: k
        )
        assert result == {1: ["x"], 2: ["x", "y"]}

    def test_group_map_reduce(self, scores):
        result = mappings.group_map_reduce(
            scores, lambda x, y: x + y, lambda k, v: v % 2, lambda k, v: v
        )
        assert result == {1: 4, 0: 2}

    def test_partition(self):
        assert mappings.partition({"a": 1, "b": 2}, lambda k, v: v > 1) == {
            True: {"b": 2},
            False: {"a": 1},
        }

    def test_partition_empty(self):
        assert mappings.partition(None, lambda k, v: True) == {True: {}, False: {}}

    def test_partition_missing_discriminator_raises(self, scores):
        with pytest.raises(IllegalArgumentError, match="discriminator must be not None"):
            mappings.partition(scores, None)

    def test_missing_argument_rejected_before_any_callback(self, scores):
        calls = []

        def record(key, value):
            calls.append((key, value))
            return key, value

        with pytest.raises(IllegalArgumentError, match="or_else_mapper"):
            mappings.apply_or_else(scores, record, None)
        with pytest.raises(IllegalArgumentError, match="value_mapper must be not None"):
            mappings.group_map(scores, record, None)
        with pytest.raises(IllegalArgumentError, match="reduce_values must be not None"):
            mappings.group_map_reduce(scores, None, record, record)
        assert calls == []
