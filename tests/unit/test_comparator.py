"""
Unit tests for Comparator, UnaryOperator and BinaryOperator.
"""

import pytest

from lambdakit.types import BinaryOperator, Comparator, Function2, UnaryOperator
from lambdakit.utils.errors import IllegalArgumentError


class TestComparator:
    """Tests for the three-way comparison wrapper."""

    def test_compare(self, by_value):
        assert by_value.compare(1, 2) < 0
        assert by_value.compare(2, 2) == 0
        assert by_value.compare(3, 2) > 0

    def test_of_returns_wrapper_unchanged(self, by_value):
        assert Comparator.of(by_value) is by_value

    def test_of_none_raises(self):
        with pytest.raises(IllegalArgumentError):
            Comparator.of(None)

    def test_reversed(self, by_value):
        """Test that reversed builds a new comparator with the opposite order."""
        reverse = by_value.reversed()
        assert reverse is not by_value
        assert reverse.compare(1, 2) > 0
        assert by_value.compare(1, 2) < 0

    def test_natural(self):
        natural = Comparator.natural()
        assert natural.compare("a", "b") == -1
        assert natural.compare("b", "b") == 0
        assert natural.compare(3, 1) == 1

    def test_none_first(self, by_value):
        comparator = Comparator.none_first(by_value)
        assert sorted([3, None, 1], key=comparator.as_key()) == [None, 1, 3]

    def test_none_last(self, by_value):
        comparator = Comparator.none_last(by_value)
        assert sorted([3, None, 1], key=comparator.as_key()) == [1, 3, None]

    def test_as_key_sorts(self, by_length):
        assert sorted(["ccc", "a", "bb"], key=by_length.as_key()) == ["a", "bb", "ccc"]

    def test_callable(self, by_value):
        assert by_value(5, 2) == 3


class TestOperators:
    """Tests for UnaryOperator and BinaryOperator."""

    def test_unary_operator_identity(self):
        identity = UnaryOperator.identity()
        assert isinstance(identity, UnaryOperator)
        assert identity.apply(5) == 5

    def test_binary_operator_is_function2(self):
        add = BinaryOperator.of(lambda a, b: a + b)
        assert isinstance(add, Function2)
        assert add.apply(2, 3) == 5

    def test_min_by_and_max_by(self, by_value):
        assert BinaryOperator.min_by(by_value).apply(3, 1) == 1
        assert BinaryOperator.max_by(by_value).apply(3, 1) == 3

    def test_ties_keep_left_argument(self, by_length):
        """Test that equal-ranked arguments resolve to the first one."""
        assert BinaryOperator.min_by(by_length).apply("ab", "cd") == "ab"
        assert BinaryOperator.max_by(by_length).apply("ab", "cd") == "ab"
