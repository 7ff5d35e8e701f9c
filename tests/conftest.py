"""
Pytest configuration and shared fixtures for lambdakit tests.
"""

import pytest

from lambdakit.config import override
from lambdakit.types import Comparator


@pytest.fixture
def restore_settings():
    """Restore the active settings once the test is over."""
    with override() as settings:
        yield settings


@pytest.fixture
def strict_arity():
    """Enable arity verification of raw callables for one test."""
    with override(strict_arity=True) as settings:
        yield settings


@pytest.fixture
def is_vowel():
    """Case-insensitive vowel test used by the character scenarios."""

    def _is_vowel(char: str) -> bool:
        return char.lower() in "aeiou"

    return _is_vowel


@pytest.fixture
def by_value():
    """Numeric ascending comparator."""
    return Comparator.of(lambda a, b: a - b)


@pytest.fixture
def by_length():
    """Comparator ordering sized values by their length only."""
    return Comparator.of(lambda a, b: len(a) - len(b))
