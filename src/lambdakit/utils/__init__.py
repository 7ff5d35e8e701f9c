"""
lambdakit Utilities Package.

Error kinds and argument assertions. ``lambdakit.utils.objects`` depends on
the combinator types and is imported by its full path.
"""

from lambdakit.utils.assertions import callable_or_fail, is_true, not_none
from lambdakit.utils.errors import IllegalArgumentError, LambdakitError, NoSuchElementError

__all__ = [
    "LambdakitError",
    "IllegalArgumentError",
    "NoSuchElementError",
    "callable_or_fail",
    "is_true",
    "not_none",
]
