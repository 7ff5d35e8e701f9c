"""
lambdakit Engine Settings.

Process-wide switches read by the combinator factories. Settings are an
immutable dataclass; ``configure`` swaps the active instance and ``override``
scopes a change to a ``with`` block.

Example:
    with override(strict_arity=True):
        Function2.of(lambda x: x)  # raises IllegalArgumentError
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace

logger = logging.getLogger(__name__)

STRICT_ARITY_ENV = "LAMBDAKIT_STRICT_ARITY"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Configuration for combinator coercion."""

    # Reject raw callables that cannot be bound to the arity of the wrapper
    strict_arity: bool = False

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``LAMBDAKIT_*`` environment variables."""
        raw = os.environ.get(STRICT_ARITY_ENV, "")
        return cls(strict_arity=raw.strip().lower() in _TRUTHY)


_active = Settings.from_env()


def get_settings() -> Settings:
    """Return the active settings."""
    return _active


def configure(**changes: object) -> Settings:
    """
    Replace the active settings with a copy carrying ``changes``.

    Raises:
        TypeError: If a change names an unknown setting
    """
    global _active
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise TypeError(f"Unknown setting(s): {', '.join(unknown)}")
    _active = replace(_active, **changes)
    logger.info("lambdakit settings updated: %s", _active)
    return _active


@contextmanager
def override(**changes: object) -> Iterator[Settings]:
    """Apply ``changes`` for the duration of a ``with`` block."""
    global _active
    previous = _active
    try:
        yield configure(**changes)
    finally:
        _active = previous
        logger.info("lambdakit settings restored: %s", _active)
