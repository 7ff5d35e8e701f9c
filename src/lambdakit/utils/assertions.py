"""
Argument assertions shared by the combinator layer and the collection engine.

Both helpers raise ``IllegalArgumentError`` unless told otherwise, and log the
rejected argument at DEBUG level first.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from lambdakit.utils.errors import IllegalArgumentError

logger = logging.getLogger(__name__)

ErrorSource = str | Callable[[], BaseException] | None


def _build_error(error_source: ErrorSource, fallback: str) -> BaseException:
    if error_source is None:
        return IllegalArgumentError(fallback)
    if isinstance(error_source, str):
        return IllegalArgumentError(error_source)
    return error_source()


def not_none(value: Any, error_source: ErrorSource = None) -> bool:
    """
    Verify that ``value`` is not None.

    Args:
        value: Value to verify
        error_source: Message for the raised ``IllegalArgumentError``, or a
            zero-argument supplier returning the exception to raise

    Returns:
        True when ``value`` is not None

    Raises:
        IllegalArgumentError: If ``value`` is None and no supplier is given
    """
    if value is not None:
        return True
    error = _build_error(error_source, "value must be not None")
    logger.debug("Rejected None argument: %s", error)
    raise error


def is_true(condition: bool, error_source: ErrorSource = None) -> bool:
    """
    Verify that ``condition`` holds.

    Raises:
        IllegalArgumentError: If ``condition`` is false and no supplier is given
    """
    if condition:
        return True
    error = _build_error(error_source, "condition must be true")
    logger.debug("Rejected argument: %s", error)
    raise error


def callable_or_fail(value: Any, name: str) -> Any:
    """Verify that ``value`` is a non-None callable and return it unchanged."""
    not_none(value, f"{name} must be not None")
    is_true(callable(value), f"{name} must be callable, got {type(value).__name__}")
    return value
