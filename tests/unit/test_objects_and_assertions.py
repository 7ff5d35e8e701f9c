"""
Unit tests for the object helpers, argument assertions and error kinds.
"""

import logging
from dataclasses import dataclass

import numpy as np
import pytest

from lambdakit.types import Function0
from lambdakit.utils import assertions
from lambdakit.utils.errors import IllegalArgumentError, LambdakitError, NoSuchElementError
from lambdakit.utils.objects import equals, get_or_else


@dataclass
class Point:
    x: int
    y: int


class CaseInsensitive:
    def __init__(self, text):
        self.text = text

    def equals(self, other):
        return isinstance(other, CaseInsensitive) and self.text.lower() == other.text.lower()


class TestEquals:
    """Tests for the None-tolerant structural equality."""

    def test_none_handling(self):
        assert equals(None, None)
        assert not equals(None, 0)
        assert not equals(0, None)

    def test_structural(self):
        assert equals([1, {"a": Point(1, 2)}], [1, {"a": Point(1, 2)}])
        assert not equals(Point(1, 2), Point(2, 1))

    def test_custom_equals_method(self):
        assert equals(CaseInsensitive("Abc"), CaseInsensitive("aBC"))

    def test_numpy_arrays(self):
        """Test that arrays compare as a whole instead of element-wise."""
        assert equals(np.array([1, 2]), np.array([1, 2]))
        assert not equals(np.array([1, 2]), np.array([1, 3]))
        assert not equals(np.array([1, 2]), np.array([1, 2, 3]))
        assert not equals(np.array([1]), "1")


class TestGetOrElse:
    """Tests for the literal-or-supplier default."""

    def test_present_value_wins(self):
        assert get_or_else(0, 5) == 0

    def test_literal_default(self):
        assert get_or_else(None, 5) == 5

    def test_supplier_default(self):
        assert get_or_else(None, list) == []
        assert get_or_else(None, Function0.of(lambda: "x")) == "x"

    def test_one_argument_callable_is_returned(self):
        """Test that a callable needing arguments is treated as a literal."""
        assert get_or_else(None, len) is len


class TestAssertions:
    """Tests for not_none, is_true and callable_or_fail."""

    def test_not_none_passes(self):
        assert assertions.not_none(0)

    def test_not_none_message(self):
        with pytest.raises(IllegalArgumentError, match="source must be not None"):
            assertions.not_none(None, "source must be not None")

    def test_not_none_custom_exception(self):
        with pytest.raises(KeyError):
            assertions.not_none(None, lambda: KeyError("missing"))

    def test_is_true(self):
        assert assertions.is_true(1 < 2)
        with pytest.raises(IllegalArgumentError, match="condition must be true"):
            assertions.is_true(False)

    def test_callable_or_fail(self):
        assert assertions.callable_or_fail(len, "mapper") is len
        with pytest.raises(IllegalArgumentError, match="mapper must be callable, got str"):
            assertions.callable_or_fail("len", "mapper")

    def test_rejection_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="lambdakit.utils.assertions"):
            with pytest.raises(IllegalArgumentError):
                assertions.not_none(None, "value missing")
        assert "value missing" in caplog.text


class TestErrors:
    """Tests for the error hierarchy."""

    def test_hierarchy(self):
        assert issubclass(IllegalArgumentError, LambdakitError)
        assert issubclass(IllegalArgumentError, ValueError)
        assert issubclass(NoSuchElementError, LambdakitError)
        assert issubclass(NoSuchElementError, LookupError)

    def test_message(self):
        error = IllegalArgumentError("bad size")
        assert error.message == "bad size"
        assert str(error) == "bad size"
